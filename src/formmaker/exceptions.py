"""Form maker exceptions.

Validation failures are never raised; they are returned as FieldError values.
These exceptions signal programmer or configuration mistakes only.
"""


class FormMakerError(Exception):
    """Base class for all formmaker errors."""


class DuplicateFieldKeyError(FormMakerError, ValueError):
    """Raised when two field specs in one form share the same key."""

    def __init__(self, key: str):
        super().__init__(f"Duplicate field key in form: {key!r}")
        self.key = key


class SelectionError(FormMakerError, ValueError):
    """Raised when a picker-style selection could not have come from a picker.

    Examples: an option not in the dropdown list, or a date outside the
    field's first/last date range.
    """


class DispatchConfigurationError(FormMakerError):
    """Raised when a dispatch service is missing handlers for its enum."""
