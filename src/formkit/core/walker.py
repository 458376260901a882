"""
Flattening of (possibly nested) dataclass records into field descriptors.

Tags are read from the ``"form"`` key of a field's metadata::

    @dataclass
    class Signup:
        name: str = form_field("label=Full Name")
        email: str = form_field("type=email")
        token: str = form_field("-")
"""

from __future__ import annotations

import dataclasses
import logging
import sys
import types
from collections.abc import Mapping
from typing import Any, Union, get_args, get_origin, get_type_hints

from markupsafe import Markup

from formkit.errors import InvalidInputKind
from formkit.libs.text import from_camel_case, is_ignored, parse_tags
from formkit.schemas import FieldDescriptor

logger = logging.getLogger(__name__)

TAG_KEY = "form"

_RESERVED_TAGS = frozenset(
    {"name", "label", "placeholder", "type", "id", "footer", "class", "select"}
)

_MISSING = object()

_ZERO_VALUES: dict[Any, Any] = {
    str: "",
    int: 0,
    float: 0.0,
    bool: False,
    bytes: b"",
}


def form_field(tags: str = "", **kwargs: Any) -> Any:
    """Declare a dataclass field carrying a ``form`` tag.

    Accepts the same keyword arguments as :func:`dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tags
    return dataclasses.field(metadata=metadata, **kwargs)


def walk_fields(
    record: Any,
    prefix: tuple[str, ...] = (),
) -> list[FieldDescriptor]:
    """Build the ordered field descriptors for a record.

    Nested records are flattened in place with their field name added to the
    dotted path. A ``None`` value annotated with a dataclass type (directly or
    as ``X | None``) is walked as if it were an empty instance of that type.
    Passing a dataclass class instead of an instance behaves the same way.

    Args:
        record: A dataclass instance or dataclass type.
        prefix: Names of the enclosing fields.

    Returns:
        A new list of descriptors in declaration order, depth first.

    Raises:
        InvalidInputKind: If ``record`` is not a dataclass instance or type,
            or if it nests itself (a recursive type reached through ``None``
            or an instance that contains itself).
    """
    return _walk(record, prefix, ())


def _walk(
    record: Any,
    prefix: tuple[str, ...],
    active: tuple[Any, ...],
) -> list[FieldDescriptor]:
    if not dataclasses.is_dataclass(record):
        raise InvalidInputKind(
            f"invalid value; only dataclasses are supported, got {type(record).__name__}"
        )

    if isinstance(record, type):
        cls, instance = record, None
    else:
        cls, instance = type(record), record

    # Types stand for empty instances, so meeting one again never terminates.
    if any(record is seen for seen in active):
        raise InvalidInputKind(
            f"recursive record {cls.__qualname__} at {'.'.join(prefix) or '<root>'}"
        )
    active = (*active, record)

    hints = _type_hints(cls)
    result: list[FieldDescriptor] = []

    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            continue

        tags = parse_tags(f.metadata.get(TAG_KEY))
        if is_ignored(tags):
            continue

        hint = hints.get(f.name)
        value = _MISSING
        if instance is not None:
            value = getattr(instance, f.name, _MISSING)
        if value is _MISSING:
            value = _zero_value(f, hint)

        path = (*prefix, f.name)
        if value is None and isinstance(hint, str):
            logger.warning(
                "Cannot resolve annotation %r of %s; walking it as a plain field",
                hint,
                ".".join(path),
            )

        nested = _nested_record(value, hint)
        if nested is not None:
            logger.debug("Descending into nested record %s", ".".join(path))
            result.extend(_walk(nested, path, active))
            continue

        fd = FieldDescriptor(
            name=".".join(path),
            label=from_camel_case(f.name),
            placeholder=from_camel_case(f.name),
            type="text",
            value=value,
        )
        _apply_tags(fd, tags)
        result.append(fd)

    return result


def _apply_tags(fd: FieldDescriptor, tags: Mapping[str, str]) -> None:
    if "name" in tags:
        fd.name = tags["name"]
    if "label" in tags:
        fd.label = tags["label"]
        # Must stay ahead of the placeholder override below.
        fd.placeholder = tags["label"]
    if "placeholder" in tags:
        fd.placeholder = tags["placeholder"]
    if "type" in tags:
        fd.type = tags["type"]
    if "id" in tags:
        fd.id = tags["id"]
    if "footer" in tags:
        fd.footer = Markup(tags["footer"])
    if "class" in tags:
        fd.css_class = tags["class"]
    if "select" in tags and fd.is_choice:
        fd.select_type = Markup(tags["select"])

    extra = [(k, v) for k, v in tags.items() if k not in _RESERVED_TAGS]
    if extra:
        fd.attrs = Markup(" ").join(Markup('{}="{}"').format(k, v) for k, v in extra)


def _nested_record(value: Any, hint: Any) -> Any:
    """Return what to recurse into for a field, or None for a leaf."""
    if dataclasses.is_dataclass(value):
        return value
    if value is None:
        return _record_type(hint)
    return None


def _record_type(hint: Any) -> type | None:
    """Resolve a dataclass type from ``X`` or ``X | None`` annotations."""
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return hint
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return _record_type(args[0])
    return None


def _zero_value(f: dataclasses.Field[Any], hint: Any) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return _ZERO_VALUES.get(hint)


def _type_hints(cls: type) -> dict[str, Any]:
    """Resolve field annotations, one field at a time if needed.

    Annotations that cannot be evaluated stay as their source string.
    """
    try:
        return get_type_hints(cls)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Cannot resolve all annotations of %s: %s", cls.__qualname__, exc)

    namespaces = [
        vars(sys.modules[base.__module__])
        for base in cls.__mro__
        if dataclasses.is_dataclass(base) and base.__module__ in sys.modules
    ]
    localns = {cls.__name__: cls}
    return {
        f.name: _eval_annotation(f.type, namespaces, localns)
        for f in dataclasses.fields(cls)
    }


def _eval_annotation(
    annotation: Any,
    namespaces: list[dict[str, Any]],
    localns: dict[str, Any],
) -> Any:
    if not isinstance(annotation, str):
        return annotation
    for globalns in namespaces:
        try:
            return eval(annotation, globalns, localns)
        except (NameError, TypeError, AttributeError, SyntaxError):
            continue
    return annotation
