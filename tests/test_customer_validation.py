"""
Unit tests for customer payload validation helpers.

Tests cover:
- Email format check
- Independent (non short-circuited) field validation
- Normalization for storage
- Path id parsing
"""

import pytest

from app.customer_api.modules.customers.validation import (
    EMAIL_ERROR,
    NAME_ERROR,
    PHONE_ERROR,
    normalize_customer_payload,
    parse_customer_id,
    validate_customer_payload,
    validate_email_format,
)

VALID = {"name": "Carlos Silva", "email": "carlos@mail.com", "phone": "11999999999"}


class TestValidateEmailFormat:
    def test_accepts_simple_address(self):
        assert validate_email_format("user@domain.tld")
        assert validate_email_format("first.last+tag@sub.example.com.br")

    @pytest.mark.parametrize("value", ["user@", "@domain.com", "no-at-sign", "user@domain", "a b@c.com", ""])
    def test_rejects_malformed(self, value):
        assert not validate_email_format(value)

    def test_rejects_trailing_newline(self):
        assert not validate_email_format("user@domain.tld\n")

    def test_rejects_non_strings(self):
        assert not validate_email_format(None)
        assert not validate_email_format(42)


class TestValidateCustomerPayload:
    def test_valid_payload_has_no_errors(self):
        assert validate_customer_payload(VALID) == []

    def test_surrounding_whitespace_is_ignored(self):
        payload = {"name": "  Ana  ", "email": "  ANA@Mail.com ", "phone": " 1199999999 "}
        assert validate_customer_payload(payload) == []

    def test_all_violations_reported_together(self):
        assert validate_customer_payload({}) == [NAME_ERROR, EMAIL_ERROR, PHONE_ERROR]

    def test_each_failure_reported_regardless_of_others(self):
        assert validate_customer_payload({**VALID, "name": " a "}) == [NAME_ERROR]
        assert validate_customer_payload({**VALID, "email": "nope"}) == [EMAIL_ERROR]
        assert validate_customer_payload({**VALID, "phone": "123456789"}) == [PHONE_ERROR]
        assert validate_customer_payload({**VALID, "name": "", "phone": ""}) == [NAME_ERROR, PHONE_ERROR]

    def test_minimum_lengths_are_inclusive(self):
        assert validate_customer_payload({**VALID, "name": "Al"}) == []
        assert validate_customer_payload({**VALID, "phone": "1234567890"}) == []

    def test_non_string_fields_count_as_missing(self):
        errors = validate_customer_payload({"name": 12, "email": ["x@y.com"], "phone": 11999999999})
        assert errors == [NAME_ERROR, EMAIL_ERROR, PHONE_ERROR]

    def test_non_object_payload(self):
        assert validate_customer_payload(None) == [NAME_ERROR, EMAIL_ERROR, PHONE_ERROR]
        assert validate_customer_payload(["name"]) == [NAME_ERROR, EMAIL_ERROR, PHONE_ERROR]


class TestNormalizeCustomerPayload:
    def test_trims_and_lowercases_email(self):
        out = normalize_customer_payload({"name": " Carlos Silva ", "email": " Carlos@Mail.com ", "phone": " 11999999999 "})
        assert out == {"name": "Carlos Silva", "email": "carlos@mail.com", "phone": "11999999999"}

    def test_ignores_extra_fields(self):
        out = normalize_customer_payload({**VALID, "id": 99, "created_at": "x"})
        assert set(out) == {"name", "email", "phone"}


class TestParseCustomerId:
    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), (" 7 ", 7), (5, 5)])
    def test_accepts_positive_integers(self, raw, expected):
        assert parse_customer_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "-1", "0", "1.5", "", "12abc", None, 0, -3, True, "١٢"])
    def test_rejects_everything_else(self, raw):
        assert parse_customer_id(raw) is None
