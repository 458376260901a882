"""
Parser for the compact per-field ``form`` tag syntax.

A tag looks like ``"label=Full Name;type=email;data-x=1"``. A bare ``-``
segment excludes the field entirely.
"""

__all__ = ["IGNORE_KEY", "is_ignored", "parse_tags"]

from collections.abc import Mapping

IGNORE_KEY = "-"


def parse_tags(raw: str | None) -> dict[str, str]:
    """Parse a tag string into an ordered option mapping.

    Supports input such as:

    - ``"name=full-name; label=Full Name"``
    - ``"-"`` (exclude this field)

    Segments without ``=`` are ignored unless they are exactly ``-``, in
    which case parsing stops and only the exclusion marker is returned.

    Args:
        raw: The tag string attached to a field, or None.

    Returns:
        A mapping of option name to option value.
    """
    if raw is None or not raw.strip():
        return {}

    result: dict[str, str] = {}
    for part in raw.split(";"):
        if "=" not in part:
            if part.strip() == IGNORE_KEY:
                return {IGNORE_KEY: "this field is ignored"}
            continue
        key, value = part.split("=", 1)
        key, value = key.strip(), value.strip()
        if not key:
            continue
        result[key] = value
    return result


def is_ignored(tags: Mapping[str, str]) -> bool:
    """Return True if the parsed tags exclude the field."""
    return IGNORE_KEY in tags
