"""Tests for the field validator."""

import pytest

from formmaker.models import FieldSpec, FieldType
from formmaker.protocols import FormMakerConfig, set_form_config
from formmaker.validation import ErrorKind, FieldValidator, PhoneRule, check, validate


def spec_of(field_type, **kwargs):
    kwargs.setdefault("key", field_type.value)
    kwargs.setdefault("label", field_type.value.title())
    return FieldSpec(field_type=field_type, **kwargs)


@pytest.mark.parametrize("field_type", list(FieldType))
@pytest.mark.parametrize("empty", ["", None, "   "])
def test_required_empty_is_reported_for_every_type(field_type, empty):
    """Required fields reject empty values with the label-based message."""
    spec = spec_of(field_type, label="Thing", is_required=True)
    assert validate(spec, empty) == "Thing is required"
    assert check(spec, empty).kind is ErrorKind.REQUIRED


@pytest.mark.parametrize("field_type", list(FieldType))
def test_optional_empty_skips_type_rules(field_type):
    """Optional empty fields are valid whatever their type."""
    spec = spec_of(field_type)
    assert validate(spec, "") is None
    assert validate(spec, None) is None


@pytest.mark.parametrize("field_type", [FieldType.TEXT, FieldType.NAME, FieldType.MULTILINE])
def test_untyped_fields_accept_anything(field_type):
    spec = spec_of(field_type)
    assert validate(spec, "anything at all 123 !?") is None


def test_validation_is_repeatable():
    spec = spec_of(FieldType.EMAIL)
    assert validate(spec, "bad") == validate(spec, "bad")
    assert check(spec, "bad") == check(spec, "bad")


@pytest.mark.parametrize("value", ["a@b.co", "john.doe@mail.example.com", "x-y_z@a-b.info"])
def test_email_valid(value):
    assert validate(spec_of(FieldType.EMAIL), value) is None


@pytest.mark.parametrize("value", ["not-an-email", "a@b", "a@b.c", "a@b.toolong", "a b@c.com"])
def test_email_invalid(value):
    assert validate(spec_of(FieldType.EMAIL), value) == "Please enter a valid email address"


def test_email_rejects_trailing_newline():
    assert validate(spec_of(FieldType.EMAIL), "a@b.co\n") is not None


@pytest.mark.parametrize("value", ["http://example.com", "https://sub.example.org/path?q=1"])
def test_url_valid(value):
    assert validate(spec_of(FieldType.URL), value) is None


@pytest.mark.parametrize("value", ["example.com", "ftp://example.com", "https://localhost"])
def test_url_invalid(value):
    error = check(spec_of(FieldType.URL), value)
    assert error.kind is ErrorKind.FORMAT
    assert "http://" in error.message


@pytest.mark.parametrize("value", ["42", "-7", "+3", " 12 ", "0x1F"])
def test_number_valid(value):
    assert validate(spec_of(FieldType.NUMBER), value) is None


@pytest.mark.parametrize("value", ["4.2", "abc", "1_000", "12a"])
def test_number_invalid(value):
    assert validate(spec_of(FieldType.NUMBER), value) == "Please enter a valid number"


@pytest.mark.parametrize("value", ["3.14", "-0.5", ".5", "5.", "1e10", "42", "NaN", "Infinity"])
def test_decimal_valid(value):
    assert validate(spec_of(FieldType.DECIMAL), value) is None


@pytest.mark.parametrize("value", ["abc", "1.2.3", "1_0.5", "inf"])
def test_decimal_invalid(value):
    assert validate(spec_of(FieldType.DECIMAL), value) == "Please enter a valid decimal number"


def test_credit_card_valid():
    assert validate(spec_of(FieldType.CREDIT_CARD), "4111111111111111") is None


def test_credit_card_checksum_failure():
    error = check(spec_of(FieldType.CREDIT_CARD), "4111111111111112")
    assert error.kind is ErrorKind.CHECKSUM
    assert error.message == "Please enter a valid credit card number"


@pytest.mark.parametrize("value", ["123", "4" * 20])
def test_credit_card_length(value):
    error = check(spec_of(FieldType.CREDIT_CARD), value)
    assert error.kind is ErrorKind.LENGTH
    assert error.message == "Credit card number must be 13-19 digits"


def test_credit_card_non_digits_rejected_before_checksum():
    error = check(spec_of(FieldType.CREDIT_CARD), "4111-1111-1111-1111")
    assert error.kind is ErrorKind.FORMAT


def test_password_boundary():
    spec = spec_of(FieldType.PASSWORD)
    assert validate(spec, "12345") == "Password must be at least 6 characters long"
    assert validate(spec, "123456") is None


def test_dropdown_membership():
    spec = FieldSpec.dropdown(key="grade", label="Grade", options=["A", "B"])
    assert validate(spec, "A") is None
    error = check(spec, "C")
    assert error.kind is ErrorKind.MEMBERSHIP
    assert error.message == "Please select a valid option"


def test_dropdown_placeholder_is_no_selection():
    spec = FieldSpec.dropdown(
        key="status", label="Status", options=["Open", "Closed"],
        placeholder="Select a Status",
    )
    assert validate(spec, "Select a Status") == "Please select a status"


def test_dropdown_reserved_placeholders_from_config():
    set_form_config(FormMakerConfig(reserved_placeholders=("Choose...",)))
    spec = FieldSpec(key="size", label="Size", field_type=FieldType.DROPDOWN)
    assert validate(spec, "Choose...") == "Please select a size"


def test_dropdown_without_options_accepts_any_value():
    spec = FieldSpec(key="free", label="Free", field_type=FieldType.DROPDOWN)
    assert validate(spec, "whatever") is None


@pytest.mark.parametrize("field_type", [FieldType.DATE, FieldType.DATE_TIME, FieldType.TIME])
def test_temporal_fields_only_check_presence(field_type):
    assert validate(spec_of(field_type), "not really a date") is None


# Phone length: two policies exist (at most 16 characters, at least 10
# digits). The default is the upper bound; both are covered here so a change
# of default is caught.

def test_phone_default_policy_is_upper_bound():
    spec = spec_of(FieldType.PHONE)
    assert validate(spec, "123") is None
    assert validate(spec, "1" * 16) is None
    assert validate(spec, "1" * 17) == "Please provide a valid phone number"


def test_phone_lower_bound_policy_per_field():
    spec = spec_of(FieldType.PHONE, phone_rule=PhoneRule.at_least(10))
    assert validate(spec, "123456789") == "Phone number must be at least 10 digits"
    assert validate(spec, "1234567890") is None
    assert validate(spec, "1" * 30) is None


def test_phone_policy_from_config():
    set_form_config(FormMakerConfig(phone_rule=PhoneRule(min_length=10, max_length=16)))
    spec = spec_of(FieldType.PHONE)
    assert check(spec, "123").kind is ErrorKind.LENGTH
    assert validate(spec, "1234567890") is None
    assert validate(spec, "1" * 17) is not None


def test_custom_validator_not_called_when_required_empty():
    calls = []

    def always_fails(value):
        calls.append(value)
        return "custom failure"

    spec = spec_of(FieldType.TEXT, label="Name", is_required=True, custom_validator=always_fails)
    assert validate(spec, "") == "Name is required"
    assert calls == []


def test_custom_validator_not_called_when_type_rule_fails():
    calls = []
    spec = spec_of(FieldType.EMAIL, custom_validator=lambda v: calls.append(v) or "custom")
    assert validate(spec, "bad") == "Please enter a valid email address"
    assert calls == []


def test_custom_validator_runs_after_builtins_pass():
    spec = spec_of(
        FieldType.EMAIL,
        custom_validator=lambda v: None if v.endswith(".org") else "Use an .org address",
    )
    assert validate(spec, "a@b.org") is None
    error = check(spec, "a@b.com")
    assert error.kind is ErrorKind.CUSTOM
    assert error.message == "Use an .org address"
    assert error.field_key == "email"


def test_custom_validator_on_optional_empty_field():
    """Optional empty fields still reach the custom validator."""
    spec = spec_of(FieldType.TEXT, custom_validator=lambda v: "needed" if not v else None)
    assert validate(spec, "") == "needed"


def test_validator_covers_every_field_type():
    validator = FieldValidator()
    assert set(validator.get_registered_strategies()) == set(FieldType)


@pytest.mark.parametrize("label,expected", [
    ("Status", "Please select a status"),
    ("Option", "Please select an option"),
    ("Email type", "Please select an email type"),
])
def test_dropdown_placeholder_message_article(label, expected):
    spec = FieldSpec.dropdown(key="d", label=label, options=["x"], placeholder="--")
    assert validate(spec, "--") == expected
