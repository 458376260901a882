class FormError(Exception):
    """Base class for form building failures."""


class InvalidInputKind(FormError, TypeError):
    """Indicates that a value passed for reflection is not a record."""


class TemplateExecutionError(FormError):
    """Indicates that rendering a single field failed.

    The underlying engine error is available as ``__cause__``.
    """

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"Failed to render field {field_name!r}: {message}")
        self.field_name = field_name
