"""
Field declarations.

FieldSpec and the FieldType enumeration, plus the pure classifications
(keyboard type, capitalization, default hint) derived from a field type.
"""

from .field_type import FieldType, KeyboardType, TextCapitalization
from .field_spec import FieldSpec, CustomValidator

__all__ = [
    "FieldType",
    "KeyboardType",
    "TextCapitalization",
    "FieldSpec",
    "CustomValidator",
]
