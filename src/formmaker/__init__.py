"""
formmaker: declarative form fields with a pure validation engine.

A form is a list of FieldSpec declarations. The engine decides whether a raw
string value is acceptable for a field; FormState holds one value per field
and exposes get/set/clear/reset/validate/submit for whatever UI renders it.

Architecture:
- Models: FieldSpec, FieldType and derived classifications
- Validation: per-type rule table, Luhn check, structured FieldError results
- Services: enum dispatch, change dispatching, flag management
- Forms: FormState and entry-time input formatters
- Qt (optional): QValidator bridge for PyQt6 widgets
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FieldSpec, FieldType, KeyboardType, TextCapitalization
    from .validation import ErrorKind, FieldError, PhoneRule, check, luhn_check, validate
    from .forms import AutoValidateMode, FormState, filter_input
    from .protocols import FormMakerConfig, get_form_config, set_form_config

__version__ = "0.1.0"

_EXPORTS = {
    "FieldSpec": ("formmaker.models", "FieldSpec"),
    "FieldType": ("formmaker.models", "FieldType"),
    "KeyboardType": ("formmaker.models", "KeyboardType"),
    "TextCapitalization": ("formmaker.models", "TextCapitalization"),
    "ErrorKind": ("formmaker.validation.errors", "ErrorKind"),
    "FieldError": ("formmaker.validation.errors", "FieldError"),
    "PhoneRule": ("formmaker.validation.rules", "PhoneRule"),
    "luhn_check": ("formmaker.validation.rules", "luhn_check"),
    "check": ("formmaker.validation.validator", "check"),
    "validate": ("formmaker.validation.validator", "validate"),
    "AutoValidateMode": ("formmaker.forms", "AutoValidateMode"),
    "FormState": ("formmaker.forms", "FormState"),
    "filter_input": ("formmaker.forms", "filter_input"),
    "FormMakerConfig": ("formmaker.protocols", "FormMakerConfig"),
    "get_form_config": ("formmaker.protocols", "get_form_config"),
    "set_form_config": ("formmaker.protocols", "set_form_config"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__"] + list(_EXPORTS.keys())
