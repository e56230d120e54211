"""
Built-in field rules.

Each rule takes the field key and a non-empty raw value and returns a
FieldError or None. Rules never raise on malformed input; reporting
malformed input is their whole job.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from formmaker.validation.errors import ErrorKind, FieldError

EMAIL_PATTERN = re.compile(r"^[\w\-.]+@([\w\-]+\.)+[\w\-]{2,4}$", re.ASCII)
URL_PATTERN = re.compile(
    r"^https?://[\w\-]+(\.[\w\-]+)+([\w\-.,@?^=%&:/~+#]*[\w\-@?^=%&/~+#])?$",
    re.ASCII,
)
# Integer literal: optional sign, decimal digits or 0x-prefixed hex.
INTEGER_PATTERN = re.compile(r"^\s*[+-]?(0[xX][0-9a-fA-F]+|[0-9]+)\s*$")
# Floating-point literal: no digit separators, NaN/Infinity spelled out.
DECIMAL_PATTERN = re.compile(
    r"^\s*[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)\s*$"
)

EMAIL_MESSAGE = "Please enter a valid email address"
URL_MESSAGE = "Please enter a valid URL (starting with http:// or https://)"
NUMBER_MESSAGE = "Please enter a valid number"
DECIMAL_MESSAGE = "Please enter a valid decimal number"
CARD_LENGTH_MESSAGE = "Credit card number must be 13-19 digits"
CARD_INVALID_MESSAGE = "Please enter a valid credit card number"
PASSWORD_MESSAGE = "Password must be at least 6 characters long"
OPTION_MESSAGE = "Please select a valid option"

CARD_MIN_LENGTH = 13
CARD_MAX_LENGTH = 19
PASSWORD_MIN_LENGTH = 6


@dataclass(frozen=True)
class PhoneRule:
    """
    Length policy for phone fields.

    Two policies exist in the wild: an upper bound of 16 characters and a
    lower bound of 10 digits. Either bound (or both) may be set.
    """
    min_length: Optional[int] = None
    max_length: Optional[int] = 16

    @classmethod
    def at_most(cls, max_length: int = 16) -> "PhoneRule":
        return cls(min_length=None, max_length=max_length)

    @classmethod
    def at_least(cls, min_length: int = 10) -> "PhoneRule":
        return cls(min_length=min_length, max_length=None)

    def check(self, key: str, value: str) -> Optional[FieldError]:
        if self.min_length is not None and len(value) < self.min_length:
            return FieldError(
                key, ErrorKind.LENGTH,
                f"Phone number must be at least {self.min_length} digits",
            )
        if self.max_length is not None and len(value) > self.max_length:
            return FieldError(key, ErrorKind.LENGTH, "Please provide a valid phone number")
        return None


def luhn_check(card_number: str) -> bool:
    """
    Luhn checksum over a string of ASCII digits.

    Returns False for anything containing a non-digit character.
    """
    if not card_number or not (card_number.isascii() and card_number.isdigit()):
        return False

    total = 0
    for index, char in enumerate(reversed(card_number)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def check_email(key: str, value: str) -> Optional[FieldError]:
    if EMAIL_PATTERN.fullmatch(value) is None:
        return FieldError(key, ErrorKind.FORMAT, EMAIL_MESSAGE)
    return None


def check_url(key: str, value: str) -> Optional[FieldError]:
    if URL_PATTERN.fullmatch(value) is None:
        return FieldError(key, ErrorKind.FORMAT, URL_MESSAGE)
    return None


def check_number(key: str, value: str) -> Optional[FieldError]:
    if INTEGER_PATTERN.fullmatch(value) is None:
        return FieldError(key, ErrorKind.FORMAT, NUMBER_MESSAGE)
    return None


def check_decimal(key: str, value: str) -> Optional[FieldError]:
    if DECIMAL_PATTERN.fullmatch(value) is None:
        return FieldError(key, ErrorKind.FORMAT, DECIMAL_MESSAGE)
    return None


def check_credit_card(key: str, value: str) -> Optional[FieldError]:
    # Order matters: length first, then digits-only, then checksum.
    if not CARD_MIN_LENGTH <= len(value) <= CARD_MAX_LENGTH:
        return FieldError(key, ErrorKind.LENGTH, CARD_LENGTH_MESSAGE)
    if not (value.isascii() and value.isdigit()):
        return FieldError(key, ErrorKind.FORMAT, CARD_INVALID_MESSAGE)
    if not luhn_check(value):
        return FieldError(key, ErrorKind.CHECKSUM, CARD_INVALID_MESSAGE)
    return None


def check_password(key: str, value: str) -> Optional[FieldError]:
    if len(value) < PASSWORD_MIN_LENGTH:
        return FieldError(key, ErrorKind.LENGTH, PASSWORD_MESSAGE)
    return None


def check_dropdown(
    key: str,
    label: str,
    value: str,
    options: Optional[Sequence[str]],
    placeholders: Iterable[str] = (),
) -> Optional[FieldError]:
    """Membership rule. ``options=None`` means no constraint."""
    if value in placeholders:
        noun = label.lower()
        article = "an" if noun and noun[0] in "aeiou" else "a"
        return FieldError(key, ErrorKind.MEMBERSHIP, f"Please select {article} {noun}")
    if options is not None and value not in options:
        return FieldError(key, ErrorKind.MEMBERSHIP, OPTION_MESSAGE)
    return None
