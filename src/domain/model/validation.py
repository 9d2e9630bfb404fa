"""Validation rules for user input.

Each rule returns a ``(is_valid, error_message)`` tuple and never mutates
its input. The error message is empty when the rule passes.
"""

import re

EMAIL_PATTERN = re.compile(r'^[\w\-.]+@([\w-]+\.)+[\w-]{2,4}$')

REQUIRED_FIELDS_MESSAGE = "Name and Email are required"
INVALID_EMAIL_MESSAGE = "Invalid email format"


def validate_required_fields(name: str | None, email: str | None) -> tuple[bool, str]:
    """Check that both name and email are present and non-empty.

    Args:
        name: User name, may be None when absent from the request body
        email: User email, may be None when absent from the request body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not name or not email:
        return False, REQUIRED_FIELDS_MESSAGE
    return True, ""


def validate_email_format(email: str | None) -> tuple[bool, str]:
    """Check that email looks like ``local@domain.tld``.

    The domain needs at least one dot and a top-level segment of
    2 to 4 word characters.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not EMAIL_PATTERN.match(email):
        return False, INVALID_EMAIL_MESSAGE
    return True, ""
