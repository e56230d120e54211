"""
Entry-time input filtering.

Typed text is coerced before it reaches the form state: numeric fields keep
digits only, names keep letters and whitespace, and so on. Programmatic
writes (FormState.set_value) bypass these filters; only simulated typing
(FormState.enter_text) goes through them.
"""

import re
import logging
from typing import Optional

from formmaker.models.field_spec import FieldSpec
from formmaker.models.field_type import FieldType
from formmaker.services.enum_dispatch_service import EnumDispatchService

logger = logging.getLogger(__name__)

DECIMAL_PREFIX = re.compile(r"\d*\.?\d*", re.ASCII)
NAME_CHARS = re.compile(r"[a-zA-Z\s]")
CARD_INPUT_MAX_LENGTH = 16


def _digits_only(text: str) -> str:
    return "".join(ch for ch in text if "0" <= ch <= "9")


class InputFormatterService(EnumDispatchService[FieldType]):
    """Per-type input filters, followed by max_length truncation."""

    _instance = None

    @classmethod
    def instance(cls) -> 'InputFormatterService':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        super().__init__()
        self._register_handlers({
            FieldType.NUMBER: self._filter_digits,
            FieldType.PHONE: self._filter_digits,
            FieldType.DECIMAL: self._filter_decimal,
            FieldType.CREDIT_CARD: self._filter_card,
            FieldType.NAME: self._filter_name,
            FieldType.TEXT: self._passthrough,
            FieldType.EMAIL: self._passthrough,
            FieldType.PASSWORD: self._passthrough,
            FieldType.URL: self._passthrough,
            FieldType.MULTILINE: self._passthrough,
            FieldType.DROPDOWN: self._passthrough,
            FieldType.DATE: self._passthrough,
            FieldType.DATE_TIME: self._passthrough,
            FieldType.TIME: self._passthrough,
        }, exhaustive_for=FieldType)

    def _determine_strategy(self, spec: FieldSpec, text: str) -> FieldType:
        return spec.field_type

    def filter(self, spec: FieldSpec, text: Optional[str]) -> str:
        if not text:
            return ""
        filtered = self.dispatch(spec, text)
        if spec.max_length is not None:
            filtered = filtered[:spec.max_length]
        if filtered != text:
            logger.debug(f"Filtered input for '{spec.key}': {text!r} -> {filtered!r}")
        return filtered

    def _filter_digits(self, spec: FieldSpec, text: str) -> str:
        return _digits_only(text)

    def _filter_decimal(self, spec: FieldSpec, text: str) -> str:
        return DECIMAL_PREFIX.match(text).group(0)

    def _filter_card(self, spec: FieldSpec, text: str) -> str:
        return _digits_only(text)[:CARD_INPUT_MAX_LENGTH]

    def _filter_name(self, spec: FieldSpec, text: str) -> str:
        return "".join(NAME_CHARS.findall(text))

    def _passthrough(self, spec: FieldSpec, text: str) -> str:
        return text


def filter_input(spec: FieldSpec, text: Optional[str]) -> str:
    """Apply the field's entry-time filter to typed text."""
    return InputFormatterService.instance().filter(spec, text)
