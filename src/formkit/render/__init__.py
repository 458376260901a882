"""
Rendering of field descriptors into HTML through an injected renderer.
"""

__all__ = [
    "FormBuilder",
    "JinjaRenderer",
    "Renderer",
    "errors_stub",
    "func_map",
]

from .builder import FormBuilder, Renderer
from .jinja import JinjaRenderer, errors_stub, func_map
