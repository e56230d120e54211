"""
Form state and input handling.

FormState holds the raw values of a declared form and runs validation;
input formatters coerce typed text before it is stored.
"""

from .form_state import AutoValidateMode, FormState
from .input_formatters import InputFormatterService, filter_input

__all__ = [
    "AutoValidateMode",
    "FormState",
    "InputFormatterService",
    "filter_input",
]
