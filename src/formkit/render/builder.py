"""
Form builder: walks a record and renders every field through a renderer.

Basic usage::

    fb = FormBuilder(JinjaRenderer.from_string(
        '<input type="{{ field.type }}" name="{{ field.name }}">'
    ))
    html = fb.inputs(Signup(name="Michael Scott"))

The builder is most useful as a helper inside page templates::

    env = Environment(autoescape=True)
    fb.install(env)
    # <form>{{ inputs_and_errors_for(form, errors) }}</form>
"""

from __future__ import annotations

__all__ = ["FormBuilder", "Renderer"]

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from jinja2 import Environment
from markupsafe import Markup

from formkit.core import SelectionRegistry, field_errors, walk_fields
from formkit.errors import TemplateExecutionError
from formkit.schemas import BuilderConfig, FieldDescriptor

from .jinja import JinjaRenderer

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Turns one descriptor into markup.

    ``errors`` returns the messages recorded for the descriptor's name.
    """

    def __call__(
        self,
        field: FieldDescriptor,
        errors: Callable[[], list[str]],
    ) -> str: ...


class FormBuilder:
    """Builds HTML inputs for dataclass records.

    Args:
        renderer: Callable rendering a single descriptor. Defaults to the
            bundled Bootstrap Jinja2 template.
        registry: Options and skip-list owned by this builder.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        registry: SelectionRegistry | None = None,
    ) -> None:
        self.renderer: Renderer = renderer or JinjaRenderer.default()
        self.registry = registry or SelectionRegistry()

    @classmethod
    def from_config(cls, config: BuilderConfig) -> FormBuilder:
        """Create a builder with the template, skip-list and options of a config."""
        if config.template_path:
            renderer = JinjaRenderer.from_path(
                config.template_path, autoescape=config.autoescape
            )
        else:
            renderer = JinjaRenderer.default(autoescape=config.autoescape)

        builder = cls(renderer)
        for name, options in config.selects.items():
            builder.select(name, options)
        for name in config.skip:
            builder.skip(name)
        return builder

    def select(self, name: str, options: Mapping[str, Any]) -> None:
        """Register label -> value options for a select/checkbox field."""
        self.registry.register(name, options)

    def skip(self, name: str) -> None:
        """Never render the field with this name."""
        self.registry.skip(name)

    def fields(self, record: Any) -> list[FieldDescriptor]:
        """Return the descriptors that would be rendered for a record.

        Skipped fields are left out; select/checkbox fields carry their
        registered options.

        Raises:
            InvalidInputKind: If ``record`` is not a dataclass.
        """
        result: list[FieldDescriptor] = []
        for fd in walk_fields(record):
            if self.registry.is_skipped(fd.name):
                continue
            if fd.is_choice:
                options = self.registry.get(fd.name)
                if options is not None:
                    fd = fd.with_options(options)
            result.append(fd)
        return result

    def inputs(self, record: Any, *errors: BaseException) -> Markup:
        """Render every field of a record and concatenate the results.

        Errors exposing ``field_error()`` are made available to the template
        of the matching field through ``errors()``; other errors are ignored.

        Args:
            record: A dataclass instance or type.
            *errors: Errors to show next to their fields.

        Returns:
            The combined markup, in field order.

        Raises:
            InvalidInputKind: If ``record`` is not a dataclass.
            TemplateExecutionError: If rendering any field fails. Nothing is
                returned in that case.
        """
        index = field_errors(errors)
        parts: list[str] = []
        for fd in self.fields(record):
            try:
                parts.append(self.renderer(fd, _bind_errors(index, fd.name)))
            except Exception as e:
                raise TemplateExecutionError(fd.name, str(e)) from e
        logger.debug("Rendered %d fields for %s", len(parts), type(record).__name__)
        return Markup("".join(parts))

    def func_map(self) -> dict[str, Callable[..., Markup]]:
        """Return page-template helpers bound to this builder.

        * ``inputs_for(record)``
        * ``inputs_and_errors_for(record, errors)``
        """

        def inputs_and_errors_for(
            record: Any, errors: Iterable[BaseException] | None = None
        ) -> Markup:
            return self.inputs(record, *(errors or ()))

        return {
            "inputs_for": self.inputs,
            "inputs_and_errors_for": inputs_and_errors_for,
        }

    def install(self, env: Environment) -> None:
        """Add the helpers from :meth:`func_map` to a page environment."""
        env.globals.update(self.func_map())


def _bind_errors(index: Mapping[str, list[str]], name: str) -> Callable[[], list[str]]:
    def errors() -> list[str]:
        return list(index.get(name, ()))

    return errors
