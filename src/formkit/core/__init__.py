"""
Core reflection: record walking, field error indexing and select options.
"""

__all__ = [
    "TAG_KEY",
    "FieldError",
    "FieldValidationError",
    "SelectionRegistry",
    "field_errors",
    "form_field",
    "walk_fields",
]

from .field_errors import FieldError, FieldValidationError, field_errors
from .selection import SelectionRegistry
from .walker import TAG_KEY, form_field, walk_fields
