"""
Field validator.

Validation is a pure function of (FieldSpec, raw value), evaluated in a fixed
order:

1. Required-empty check. A missing or whitespace-only value is an error for a
   required field and valid for an optional one; type rules never see it.
2. Type rule, dispatched on ``spec.field_type``. One handler per FieldType;
   the dispatcher refuses to construct unless every member is covered.
3. Custom validator, only when the built-in checks passed.

Malformed values are reported, never raised.
"""

from __future__ import annotations

import logging
from typing import Optional

from formmaker.models.field_spec import FieldSpec
from formmaker.models.field_type import FieldType
from formmaker.protocols import get_form_config
from formmaker.services.enum_dispatch_service import EnumDispatchService
from formmaker.validation import rules
from formmaker.validation.errors import ErrorKind, FieldError, required_message

logger = logging.getLogger(__name__)


class FieldValidator(EnumDispatchService[FieldType]):
    """Per-type rule table with required/custom composition. Stateless."""

    _instance = None

    @classmethod
    def instance(cls) -> 'FieldValidator':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        super().__init__()
        self._register_handlers({
            FieldType.EMAIL: self._check_email,
            FieldType.PHONE: self._check_phone,
            FieldType.URL: self._check_url,
            FieldType.NUMBER: self._check_number,
            FieldType.DECIMAL: self._check_decimal,
            FieldType.CREDIT_CARD: self._check_credit_card,
            FieldType.PASSWORD: self._check_password,
            FieldType.DROPDOWN: self._check_dropdown,
            FieldType.DATE: self._no_rule,
            FieldType.DATE_TIME: self._no_rule,
            FieldType.TIME: self._no_rule,
            FieldType.TEXT: self._no_rule,
            FieldType.MULTILINE: self._no_rule,
            FieldType.NAME: self._no_rule,
        }, exhaustive_for=FieldType)

    def _determine_strategy(self, spec: FieldSpec, value: str) -> FieldType:
        return spec.field_type

    # ==================== PUBLIC API ====================

    def check(self, spec: FieldSpec, value: Optional[str]) -> Optional[FieldError]:
        """Validate one raw value against its spec; None means valid."""
        error = self._check_builtin(spec, value)
        if error is None and spec.custom_validator is not None:
            message = spec.custom_validator(value)
            if message is not None:
                error = FieldError(spec.key, ErrorKind.CUSTOM, message)

        if get_form_config().debug_dispatch:
            outcome = "ok" if error is None else f"{error.kind.value}: {error.message}"
            logger.info(f"VALIDATE {spec.key} ({spec.field_type.value}) = {value!r:.50} -> {outcome}")
        return error

    def validate(self, spec: FieldSpec, value: Optional[str]) -> Optional[str]:
        """Message-only form of check()."""
        error = self.check(spec, value)
        return None if error is None else error.message

    # ==================== BUILT-IN RULES ====================

    def _check_builtin(self, spec: FieldSpec, value: Optional[str]) -> Optional[FieldError]:
        if value is None or not value.strip():
            if spec.is_required:
                return FieldError(spec.key, ErrorKind.REQUIRED, required_message(spec.label))
            return None
        return self.dispatch(spec, value)

    def _check_email(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_email(spec.key, value)

    def _check_phone(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        phone_rule = spec.phone_rule or get_form_config().phone_rule
        return phone_rule.check(spec.key, value)

    def _check_url(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_url(spec.key, value)

    def _check_number(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_number(spec.key, value)

    def _check_decimal(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_decimal(spec.key, value)

    def _check_credit_card(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_credit_card(spec.key, value)

    def _check_password(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        return rules.check_password(spec.key, value)

    def _check_dropdown(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        placeholders = set(get_form_config().reserved_placeholders)
        if spec.dropdown_placeholder is not None:
            placeholders.add(spec.dropdown_placeholder)
        if spec.dropdown_options is None:
            logger.debug(f"Dropdown '{spec.key}' declares no options; accepting {value!r}")
        return rules.check_dropdown(
            spec.key, spec.label, value, spec.dropdown_options, placeholders
        )

    def _no_rule(self, spec: FieldSpec, value: str) -> Optional[FieldError]:
        # Temporal values are formatted by the picker collaborator; only
        # presence is checked.
        return None


def check(spec: FieldSpec, value: Optional[str]) -> Optional[FieldError]:
    """Validate ``value`` against ``spec``, returning a FieldError or None."""
    return FieldValidator.instance().check(spec, value)


def validate(spec: FieldSpec, value: Optional[str]) -> Optional[str]:
    """Validate ``value`` against ``spec``, returning an error message or None."""
    return FieldValidator.instance().validate(spec, value)
