"""
Credential format validation.

Syntactic checks run before any network call.

Example:
    from common.utils import is_valid_email

    if not is_valid_email(email):
        print("Please enter a valid email address.")
"""

import re

# local@domain.tld, no whitespace and a single "@" per part
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    """
    Check that a string has the local@domain.tld shape.

    Args:
        email: Candidate email address

    Returns:
        True if the string looks like an email address

    Examples:
        >>> is_valid_email("a@b.com")
        True
        >>> is_valid_email("a@b")
        False
    """
    if not isinstance(email, str) or not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None

