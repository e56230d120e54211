"""
QValidator bridge for PyQt6 line edits.

Lets a QLineEdit (or any widget that accepts a QValidator) enforce a
FieldSpec while the user types:

- Invalid: the field's input filter would change the text (e.g. a letter in
  a number field), so Qt rejects the keystroke
- Acceptable: the engine accepts the value
- Intermediate: the text may still become valid (e.g. a partial email)

Usage:
    line_edit.setValidator(FieldInputValidator(spec, line_edit))
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject
from PyQt6.QtGui import QValidator

from formmaker.forms.input_formatters import filter_input
from formmaker.models.field_spec import FieldSpec
from formmaker.validation.validator import validate

logger = logging.getLogger(__name__)


class FieldInputValidator(QValidator):
    """QValidator that defers to the formmaker validation engine."""

    def __init__(self, spec: FieldSpec, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._spec = spec

    @property
    def spec(self) -> FieldSpec:
        return self._spec

    def validate(self, text: str, pos: int):
        if filter_input(self._spec, text) != text:
            return QValidator.State.Invalid, text, pos
        if validate(self._spec, text) is None:
            return QValidator.State.Acceptable, text, pos
        return QValidator.State.Intermediate, text, pos

    def fixup(self, text: str) -> str:
        return filter_input(self._spec, text)

    def error_message(self, text: str) -> Optional[str]:
        """Message to display next to the widget, or None when valid."""
        return validate(self._spec, text)
