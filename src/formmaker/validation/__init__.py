"""
Field validation engine.

Per-type rule table, required/custom composition and structured results.
Exports resolve lazily so the rule module can be imported by configuration
without pulling in the validator.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ErrorKind, FieldError, ValidationResult
    from .rules import PhoneRule, luhn_check
    from .validator import FieldValidator, check, validate

_EXPORTS = {
    "ErrorKind": ("formmaker.validation.errors", "ErrorKind"),
    "FieldError": ("formmaker.validation.errors", "FieldError"),
    "ValidationResult": ("formmaker.validation.errors", "ValidationResult"),
    "PhoneRule": ("formmaker.validation.rules", "PhoneRule"),
    "luhn_check": ("formmaker.validation.rules", "luhn_check"),
    "FieldValidator": ("formmaker.validation.validator", "FieldValidator"),
    "check": ("formmaker.validation.validator", "check"),
    "validate": ("formmaker.validation.validator", "validate"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
