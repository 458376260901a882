"""
Data contracts and type definitions.
"""

__all__ = [
    "BuilderConfig",
    "FieldDescriptor",
]

from .config import BuilderConfig
from .field import FieldDescriptor
