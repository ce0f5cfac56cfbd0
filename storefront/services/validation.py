"""Checkout form validation"""

import re
from typing import Iterable

from ..models.checkout import CheckoutField, FieldValidation, FormValidation

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NON_DIGITS = re.compile(r"[^0-9]")
CARD_NUMBER_FIELD = "card-number"

REQUIRED_MESSAGE = "This field is required"
EMAIL_MESSAGE = "Please enter a valid email"
CARD_MESSAGE = "Please enter a valid card number"


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_card_number(card_number: str) -> bool:
    """
    Luhn mod-10 check on the digits of a card number.

    Non-digits are ignored. Numbers with fewer than 13 or more than 19 digits
    are rejected before the checksum is computed.
    """
    digits = [int(c) for c in NON_DIGITS.sub("", card_number)]
    if len(digits) < 13 or len(digits) > 19:
        return False

    total = 0
    for i, digit in enumerate(reversed(digits)):
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def format_card_number(card_number: str) -> str:
    """Group the digits of a card number in fours"""
    digits = NON_DIGITS.sub("", card_number)
    return " ".join(digits[i:i + 4] for i in range(0, len(digits), 4))


def validate_field(
    field_id: str,
    value: str,
    required: bool = False,
    field_type: str = "text",
) -> FieldValidation:
    """Validate one input; the first failing rule wins"""
    value = (value or "").strip()
    error = None

    if required and not value:
        error = REQUIRED_MESSAGE
    elif field_type == "email" and value and not is_valid_email(value):
        error = EMAIL_MESSAGE
    elif field_id == CARD_NUMBER_FIELD and value and not is_valid_card_number(value):
        error = CARD_MESSAGE

    return FieldValidation(field_id=field_id, valid=error is None, error=error)


def validate_form(fields: Iterable[CheckoutField]) -> FormValidation:
    """
    Validate every field without stopping at the first failure.

    The form is valid iff every required field validates. Optional fields
    that were filled in are checked as well so their errors are reported.
    """
    errors: dict[str, str] = {}
    valid = True

    for field in fields:
        if not field.required and not field.value.strip():
            continue
        result = validate_field(field.field_id, field.value, field.required, field.field_type)
        if result.valid:
            continue
        errors[field.field_id] = result.error
        if field.required:
            valid = False

    return FormValidation(valid=valid, errors=errors)
