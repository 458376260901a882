"""
Association of caller-supplied errors with individual form fields.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldError(Protocol):
    """An error that belongs to a particular field.

    ``field_error`` returns ``(field_name, message)``. The field name must
    match the descriptor name used when rendering, i.e. the dotted path
    (``Address.Street1``) or the ``name`` tag override.
    """

    def field_error(self) -> tuple[str, str]: ...


class FieldValidationError(ValueError):
    """Ready-made :class:`FieldError` implementation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def field_error(self) -> tuple[str, str]:
        return self.field, self.message


def field_errors(errors: Iterable[BaseException]) -> dict[str, list[str]]:
    """Group field error messages by field name.

    Each error is checked for the :class:`FieldError` capability, first on
    itself and then along its ``__cause__``/``__context__`` chain. Errors
    without it are ignored. Members of exception groups are considered
    individually.

    Args:
        errors: Errors in the order they should be displayed.

    Returns:
        A mapping of field name to messages, in supplied order, duplicates
        preserved.
    """
    result: dict[str, list[str]] = {}
    for err in _flatten(errors):
        fe = _find_field_error(err)
        if fe is None:
            continue
        field, message = fe.field_error()
        result.setdefault(field, []).append(message)
    return result


def _flatten(errors: Iterable[BaseException]) -> Iterator[BaseException]:
    for err in errors:
        if isinstance(err, BaseExceptionGroup):
            yield from _flatten(err.exceptions)
        else:
            yield err


def _find_field_error(err: BaseException) -> FieldError | None:
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        if isinstance(current, FieldError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None
