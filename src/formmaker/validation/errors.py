"""
Structured validation results.

A field either validates (``None``) or yields a FieldError. The message is
what a UI shows next to the field; ``kind`` lets programmatic consumers
branch without matching on message text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Cause of a validation failure."""
    REQUIRED = "required"        # empty value in a required field
    FORMAT = "format"            # email/url/number/decimal shape mismatch
    LENGTH = "length"            # password, credit card, phone length bounds
    CHECKSUM = "checksum"        # credit card Luhn
    MEMBERSHIP = "membership"    # dropdown option or placeholder
    CUSTOM = "custom"            # caller-supplied validator


@dataclass(frozen=True)
class FieldError:
    """Immutable failure report for one field."""
    field_key: str
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


# Alias used in signatures: None means the value is valid.
ValidationResult = Optional[FieldError]


def required_message(label: str) -> str:
    return f"{label} is required"
