from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from markupsafe import Markup


@dataclass
class FieldDescriptor:
    """Renderable description of one leaf field of a record.

    Attributes:
        name: Dotted path of the field (``Address.City``) or a tag override.
        label: Human-readable caption.
        placeholder: Input placeholder text.
        type: Logical input kind ("text", "email", "password", "textarea",
            "checkbox", "select", "hidden" or any custom token).
        id: Optional HTML id.
        value: Current value taken from the record.
        select_value: Label of the registered option whose value equals
            ``value`` (select/checkbox only).
        items: Enumerated choices, label -> stored value.
        footer: Pre-escaped helper text shown below the input.
        css_class: CSS class override.
        select_type: Raw attribute text for ``<select>`` (e.g. ``multiple``).
        attrs: Raw extra attributes built from unrecognized tag keys.
    """

    name: str
    label: str
    placeholder: str
    type: str = "text"
    id: str = ""
    value: Any = None
    select_value: Any = None
    items: dict[str, Any] = field(default_factory=dict)
    footer: Markup = field(default_factory=Markup)
    css_class: str = ""
    select_type: Markup = field(default_factory=Markup)
    attrs: Markup = field(default_factory=Markup)

    @property
    def is_choice(self) -> bool:
        """Whether this field takes its choices from a selection registry."""
        return self.type in ("select", "checkbox")

    def with_options(self, options: Mapping[str, Any]) -> FieldDescriptor:
        """Return a copy populated with the given label -> value options.

        The first label whose value equals the current value becomes
        ``select_value``. Booleans and numbers only match values of the
        same type, so ``True`` never selects an option stored as ``1``.
        """
        items = dict(options)
        selected = next((k for k, v in items.items() if _matches(v, self.value)), None)
        return replace(self, items=items, select_value=selected)


_STRICT_TYPES = (bool, int, float)


def _matches(option: Any, value: Any) -> bool:
    if isinstance(option, _STRICT_TYPES) or isinstance(value, _STRICT_TYPES):
        if type(option) is not type(value):
            return False
    return option == value
