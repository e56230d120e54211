"""
PyQt6 bindings.

Imported separately from the core so validation works without Qt.
"""

from .field_validator import FieldInputValidator

__all__ = [
    "FieldInputValidator",
]
