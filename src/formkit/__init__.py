from .version import __version__ as __version__

__title__ = "formkit"
__description__ = "Build HTML form inputs from dataclass records."
__license__ = "Apache-2.0"

__all__ = [
    "FieldDescriptor",
    "FieldError",
    "FieldValidationError",
    "FormBuilder",
    "FormError",
    "InvalidInputKind",
    "JinjaRenderer",
    "SelectionRegistry",
    "TemplateExecutionError",
    "field_errors",
    "form_field",
    "walk_fields",
]

from .core import (
    FieldError,
    FieldValidationError,
    SelectionRegistry,
    field_errors,
    form_field,
    walk_fields,
)
from .errors import FormError, InvalidInputKind, TemplateExecutionError
from .render import FormBuilder, JinjaRenderer
from .schemas import FieldDescriptor
