"""Tests for checkout field and form validation."""

import pytest

from storefront.models.checkout import CheckoutField
from storefront.services.validation import (
    CARD_MESSAGE,
    EMAIL_MESSAGE,
    REQUIRED_MESSAGE,
    format_card_number,
    is_valid_card_number,
    is_valid_email,
    validate_field,
    validate_form,
)


class TestCardNumber:
    @pytest.mark.parametrize(
        "number, expected",
        [
            ("4111111111111111", True),
            ("4111111111111112", False),
            ("4111 1111 1111 1111", True),
            ("4111-1111-1111-1111", True),
            ("5555555555554444", True),
            ("378282246310005", True),
            ("4222222222222", True),
            ("1234567890", False),
            ("0000000000", False),
            ("00000000000000000000", False),
            ("", False),
        ],
    )
    def test_luhn(self, number, expected):
        assert is_valid_card_number(number) is expected

    def test_format_groups_of_four(self):
        assert format_card_number("4111111111111111") == "4111 1111 1111 1111"
        assert format_card_number("3782-822463-10005") == "3782 8224 6310 005"
        assert format_card_number("") == ""


class TestEmail:
    @pytest.mark.parametrize(
        "email, expected",
        [
            ("jane@example.com", True),
            ("a.b+c@mail.co.uk", True),
            ("jane@example", False),
            ("jane example@x.com", False),
            ("@example.com", False),
            ("jane@@example.com", False),
        ],
    )
    def test_shape(self, email, expected):
        assert is_valid_email(email) is expected


class TestValidateField:
    def test_required_empty(self):
        result = validate_field("first-name", "   ", required=True)
        assert result.valid is False
        assert result.error == REQUIRED_MESSAGE

    def test_optional_empty_is_valid(self):
        assert validate_field("apartment", "", required=False).valid is True

    def test_required_wins_over_format_rules(self):
        result = validate_field("email", "", required=True, field_type="email")
        assert result.error == REQUIRED_MESSAGE

    def test_email_shape(self):
        result = validate_field("email", "not-an-email", required=True, field_type="email")
        assert result.error == EMAIL_MESSAGE
        assert validate_field("email", " jane@example.com ", True, "email").valid

    def test_card_number_checksum(self):
        result = validate_field("card-number", "4111111111111112", required=True)
        assert result.error == CARD_MESSAGE
        assert validate_field("card-number", "4111 1111 1111 1111", True).valid

    def test_luhn_only_applies_to_card_field(self):
        assert validate_field("zip", "4111111111111112", required=True).valid


class TestValidateForm:
    def fields(self, **overrides):
        values = {
            "email": "jane@example.com",
            "first-name": "Jane",
            "card-number": "4111111111111111",
        }
        values.update(overrides)
        return [
            CheckoutField(field_id="email", value=values["email"], required=True, field_type="email"),
            CheckoutField(field_id="first-name", value=values["first-name"], required=True),
            CheckoutField(field_id="card-number", value=values["card-number"], required=True),
            CheckoutField(field_id="apartment", value=values.get("apartment", "")),
        ]

    def test_valid_form(self):
        result = validate_form(self.fields())
        assert result.valid is True
        assert result.errors == {}

    def test_reports_every_invalid_field(self):
        result = validate_form(self.fields(**{"email": "bad", "first-name": "", "card-number": "123"}))

        assert result.valid is False
        assert result.errors == {
            "email": EMAIL_MESSAGE,
            "first-name": REQUIRED_MESSAGE,
            "card-number": CARD_MESSAGE,
        }

    def test_empty_form_is_valid(self):
        assert validate_form([]).valid is True
