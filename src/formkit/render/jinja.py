"""
Jinja2-backed renderer for a single form input.

Templates receive two names: ``field`` (a
:class:`~formkit.schemas.FieldDescriptor`) and ``errors``, a zero-argument
function returning the messages for that field::

    <input type="{{ field.type }}" name="{{ field.name }}">
    {% for msg in errors() %}<p class="error">{{ msg }}</p>{% endfor %}
"""

from __future__ import annotations

__all__ = ["JinjaRenderer", "errors_stub", "func_map", "make_environment"]

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import Environment, Template

from formkit.infra.paths import DEFAULT_TEMPLATE_FILE
from formkit.schemas import FieldDescriptor

logger = logging.getLogger(__name__)


def errors_stub() -> list[str]:
    """Stand-in ``errors`` function for templates rendered outside a builder."""
    return []


def func_map() -> dict[str, Callable[..., Any]]:
    """Return the template globals every input template can rely on."""
    return {"errors": errors_stub}


def make_environment(autoescape: bool = True) -> Environment:
    """Create a Jinja2 environment with the ``errors`` stub installed."""
    env = Environment(autoescape=autoescape)
    env.globals.update(func_map())
    return env


class JinjaRenderer:
    """Render one field descriptor with a Jinja2 template.

    Args:
        template: Compiled input template.
    """

    def __init__(self, template: Template) -> None:
        self.template = template

    def __call__(
        self,
        field: FieldDescriptor,
        errors: Callable[[], list[str]],
    ) -> str:
        return self.template.render(field=field, errors=errors)

    @classmethod
    def from_string(cls, source: str, *, autoescape: bool = True) -> JinjaRenderer:
        """Compile a renderer from template source text."""
        return cls(make_environment(autoescape).from_string(source))

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        autoescape: bool = True,
    ) -> JinjaRenderer:
        """Compile a renderer from a template file.

        The bundled Bootstrap template is used if the file cannot be read.
        """
        try:
            source = Path(path).expanduser().read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot read template %s (%s), using default", path, e)
            return cls.default(autoescape=autoescape)
        return cls.from_string(source, autoescape=autoescape)

    @classmethod
    def default(cls, *, autoescape: bool = True) -> JinjaRenderer:
        """Renderer using the bundled Bootstrap input template."""
        source = DEFAULT_TEMPLATE_FILE.read_text(encoding="utf-8")
        return cls.from_string(source, autoescape=autoescape)
