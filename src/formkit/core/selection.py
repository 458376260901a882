"""
Options for ``select`` and ``checkbox`` fields, keyed by field name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class SelectionRegistry:
    """Per-builder table of field options and skipped fields.

    Options map a display label to the stored value, e.g.
    ``{"California": "CA"}``. The registry is meant to be populated up front
    and only read while rendering; concurrent writes during a render must be
    serialized by the caller.
    """

    def __init__(self) -> None:
        self._options: dict[str, dict[str, Any]] = {}
        self._skipped: set[str] = set()

    def register(self, name: str, options: Mapping[str, Any]) -> None:
        """Register (or replace) the options for a field name."""
        self._options[name] = dict(options)

    def get(self, name: str) -> dict[str, Any] | None:
        """Return the options for a field name, or None if unregistered."""
        return self._options.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def skip(self, name: str) -> None:
        """Exclude a field name from rendering."""
        self._skipped.add(name)

    def unskip(self, name: str) -> None:
        self._skipped.discard(name)

    def is_skipped(self, name: str) -> bool:
        return name in self._skipped

    @property
    def skipped(self) -> frozenset[str]:
        return frozenset(self._skipped)
