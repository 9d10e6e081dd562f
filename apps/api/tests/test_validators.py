"""Tests for the employee field validator."""

import pytest

from employee_api.services.validators import (
    BLANK_MESSAGE,
    EMAIL_MESSAGE,
    NAME_SIZE_MESSAGE,
    PHONE_MESSAGE,
    validate_employee,
)

VALID = {"name": "Jane Doe", "email": "jane@example.com", "phone": "1234567890"}


def _with(**overrides):
    payload = dict(VALID)
    payload.update(overrides)
    return payload


class TestValidPayload:
    def test_valid_payload_has_no_errors(self):
        assert validate_employee(VALID) == {}

    @pytest.mark.parametrize("name", ["Jo", "A" * 40, "Ana María"])
    def test_name_length_bounds_accepted(self, name):
        assert validate_employee(_with(name=name)) == {}

    def test_extra_keys_are_ignored(self):
        assert validate_employee(_with(id="client-id")) == {}


class TestName:
    @pytest.mark.parametrize("name", ["J", "A" * 41, "B" * 100])
    def test_length_outside_range(self, name):
        assert validate_employee(_with(name=name)) == {"name": NAME_SIZE_MESSAGE}

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank(self, name):
        assert validate_employee(_with(name=name)) == {"name": BLANK_MESSAGE}

    def test_unicode_whitespace_is_blank(self):
        assert validate_employee(_with(name="\u00a0\u00a0\u3000")) == {"name": BLANK_MESSAGE}


class TestEmail:
    @pytest.mark.parametrize("email", ["jane@example", "jane@example.test", "jane@example.com"])
    def test_well_formed_accepted(self, email):
        assert validate_employee(_with(email=email)) == {}

    @pytest.mark.parametrize("email", ["jane@localhost", "jane@corp.local"])
    def test_reserved_domains_rejected(self, email):
        assert validate_employee(_with(email=email)) == {"email": EMAIL_MESSAGE}

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "jane@", "@example.com", "jane doe@example.com", "jane@@example.com"],
    )
    def test_malformed(self, email):
        assert validate_employee(_with(email=email)) == {"email": EMAIL_MESSAGE}

    @pytest.mark.parametrize("email", [None, "", "  "])
    def test_blank(self, email):
        assert validate_employee(_with(email=email)) == {"email": BLANK_MESSAGE}


class TestPhone:
    @pytest.mark.parametrize(
        "phone",
        ["12345", "12345678901", "123456789a", "123-456-7890", " 1234567890", "١٢٣٤٥٦٧٨٩٠"],
    )
    def test_not_ten_digits(self, phone):
        assert validate_employee(_with(phone=phone)) == {"phone": PHONE_MESSAGE}

    @pytest.mark.parametrize("phone", [None, "", "   "])
    def test_blank(self, phone):
        assert validate_employee(_with(phone=phone)) == {"phone": BLANK_MESSAGE}


def test_every_bad_field_is_reported():
    errors = validate_employee({"name": "", "email": "nope", "phone": "12"})
    assert errors == {
        "name": BLANK_MESSAGE,
        "email": EMAIL_MESSAGE,
        "phone": PHONE_MESSAGE,
    }
