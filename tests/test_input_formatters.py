"""Tests for entry-time input filters."""

import pytest

from formmaker.forms import filter_input
from formmaker.models import FieldSpec, FieldType


def spec_of(field_type, **kwargs):
    return FieldSpec(key="k", label="K", field_type=field_type, **kwargs)


@pytest.mark.parametrize("field_type,typed,expected", [
    (FieldType.NUMBER, "1a2b3", "123"),
    (FieldType.PHONE, "+1 (555) 010-9999", "15550109999"),
    (FieldType.DECIMAL, "3.14abc", "3.14"),
    (FieldType.DECIMAL, "1.2.3", "1.2"),
    (FieldType.DECIMAL, "abc", ""),
    (FieldType.CREDIT_CARD, "4111 1111 1111 1111 999", "4111111111111111"),
    (FieldType.NAME, "Ada L0velace!", "Ada Lvelace"),
    (FieldType.EMAIL, "Mixed@Case.io", "Mixed@Case.io"),
    (FieldType.TEXT, "anything 123", "anything 123"),
])
def test_filters(field_type, typed, expected):
    assert filter_input(spec_of(field_type), typed) == expected


def test_max_length_truncates_after_filtering():
    assert filter_input(spec_of(FieldType.NUMBER, max_length=3), "1x2345") == "123"


def test_empty_input():
    assert filter_input(spec_of(FieldType.NUMBER), "") == ""
    assert filter_input(spec_of(FieldType.NUMBER), None) == ""
