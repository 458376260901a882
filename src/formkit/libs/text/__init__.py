"""
Text utilities for turning field identifiers and tags into form metadata.
"""

__all__ = [
    "IGNORE_KEY",
    "from_camel_case",
    "is_ignored",
    "parse_tags",
]

from .naming import from_camel_case
from .tags import IGNORE_KEY, is_ignored, parse_tags
