"""
Password strength rules applied at registration.
"""

from __future__ import annotations

import re
from typing import List

MIN_LENGTH = 7
MAX_LENGTH = 12

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,./"

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

LENGTH_MESSAGE = f"Must be between {MIN_LENGTH} and {MAX_LENGTH} characters long"
LOWERCASE_MESSAGE = "Must contain at least one lowercase letter"
UPPERCASE_MESSAGE = "Must contain at least one uppercase letter"
DIGIT_MESSAGE = "Must contain at least one number"
SPECIAL_MESSAGE = "Must contain at least one special character (!@#$%&)"


def validate_password(password: str) -> List[str]:
    """Return every rule the password breaks, in rule order.

    An empty list means the password is acceptable.
    """
    errors: List[str] = []

    if len(password) < MIN_LENGTH or len(password) > MAX_LENGTH:
        errors.append(LENGTH_MESSAGE)
    if not _LOWERCASE.search(password):
        errors.append(LOWERCASE_MESSAGE)
    if not _UPPERCASE.search(password):
        errors.append(UPPERCASE_MESSAGE)
    if not _DIGIT.search(password):
        errors.append(DIGIT_MESSAGE)
    if not _SPECIAL.search(password):
        errors.append(SPECIAL_MESSAGE)

    return errors
