"""
Field type enumerations.

FieldType is the closed set of field semantics a form supports. The other
enums here are pure classifications derived from a FieldType and are consumed
by whatever UI layer renders the form.
"""

from enum import Enum
from typing import Dict, Optional


class FieldType(Enum):
    """Supported field semantics. Selects the validation rule for a field."""
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    PHONE = "phone"
    URL = "url"
    MULTILINE = "multiline"
    DECIMAL = "decimal"
    CREDIT_CARD = "credit_card"
    NAME = "name"
    DROPDOWN = "dropdown"
    DATE = "date"
    DATE_TIME = "date_time"
    TIME = "time"

    @property
    def is_temporal(self) -> bool:
        return self in (FieldType.DATE, FieldType.DATE_TIME, FieldType.TIME)

    @property
    def is_picker(self) -> bool:
        """True for fields whose value comes from a picker rather than typing."""
        return self is FieldType.DROPDOWN or self.is_temporal


class KeyboardType(Enum):
    """Soft keyboard / input hint a text widget should request."""
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    PHONE = "phone"
    URL = "url"
    MULTILINE = "multiline"
    DECIMAL = "decimal"
    NAME = "name"
    NONE = "none"


class TextCapitalization(Enum):
    NONE = "none"
    WORDS = "words"
    SENTENCES = "sentences"


KEYBOARD_TYPES: Dict[FieldType, KeyboardType] = {
    FieldType.TEXT: KeyboardType.TEXT,
    FieldType.PASSWORD: KeyboardType.TEXT,
    FieldType.EMAIL: KeyboardType.EMAIL,
    FieldType.NUMBER: KeyboardType.NUMBER,
    FieldType.PHONE: KeyboardType.PHONE,
    FieldType.URL: KeyboardType.URL,
    FieldType.MULTILINE: KeyboardType.MULTILINE,
    FieldType.DECIMAL: KeyboardType.DECIMAL,
    FieldType.CREDIT_CARD: KeyboardType.NUMBER,
    FieldType.NAME: KeyboardType.NAME,
    FieldType.DROPDOWN: KeyboardType.NONE,
    FieldType.DATE: KeyboardType.NONE,
    FieldType.DATE_TIME: KeyboardType.NONE,
    FieldType.TIME: KeyboardType.NONE,
}

# Types without an entry have no default hint.
DEFAULT_HINTS: Dict[FieldType, str] = {
    FieldType.EMAIL: "Enter your email address",
    FieldType.PASSWORD: "Enter your password",
    FieldType.PHONE: "Enter your phone number",
    FieldType.URL: "https://example.com",
    FieldType.NUMBER: "Enter a number",
    FieldType.DECIMAL: "Enter a decimal number",
    FieldType.CREDIT_CARD: "Enter credit card number",
    FieldType.NAME: "Enter your name",
    FieldType.MULTILINE: "Enter your message",
    FieldType.DROPDOWN: "Select an option",
    FieldType.DATE: "Select a date",
    FieldType.DATE_TIME: "Select date and time",
    FieldType.TIME: "Select a time",
}


def default_hint_for(field_type: FieldType) -> Optional[str]:
    return DEFAULT_HINTS.get(field_type)


def capitalization_for(field_type: FieldType) -> TextCapitalization:
    if field_type is FieldType.NAME:
        return TextCapitalization.WORDS
    if field_type is FieldType.MULTILINE:
        return TextCapitalization.SENTENCES
    return TextCapitalization.NONE
