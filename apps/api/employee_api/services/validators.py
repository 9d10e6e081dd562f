import re
from typing import Mapping, Optional

from email_validator import EmailNotValidError, validate_email

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 40

BLANK_MESSAGE = "must not be blank"
NAME_SIZE_MESSAGE = "Name must contain between 2 to 40 characters"
EMAIL_MESSAGE = "must be a well-formed email address"
PHONE_MESSAGE = "Telephone number should be 10 numbers"

_PHONE_RE = re.compile(r"[0-9]{10}")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _name_error(name: Optional[str]) -> Optional[str]:
    if _is_blank(name):
        return BLANK_MESSAGE
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return NAME_SIZE_MESSAGE
    return None


def _email_error(email: Optional[str]) -> Optional[str]:
    if _is_blank(email):
        return BLANK_MESSAGE
    try:
        # Grammar only: dotless and .test domains pass; localhost, .local,
        # .invalid, .onion and .arpa stay rejected by email-validator
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return EMAIL_MESSAGE
    return None


def _phone_error(phone: Optional[str]) -> Optional[str]:
    if _is_blank(phone):
        return BLANK_MESSAGE
    if not _PHONE_RE.fullmatch(phone):
        return PHONE_MESSAGE
    return None


_FIELD_CHECKS = {
    "name": _name_error,
    "email": _email_error,
    "phone": _phone_error,
}


def validate_employee(payload: Mapping[str, Optional[str]]) -> dict[str, str]:
    """Check an employee payload field by field.

    Returns a mapping of field name to message for every field that
    breaks its rule; an empty dict means the payload can be stored.
    """
    errors: dict[str, str] = {}
    for field, check in _FIELD_CHECKS.items():
        message = check(payload.get(field))
        if message:
            errors[field] = message
    return errors
