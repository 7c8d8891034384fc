"""Pure field rules — containment, email format, character classes.

None of these know about policies or outcomes; the validator composes them.
"""

from __future__ import annotations

import re

EMAIL_PATTERN = r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}"
_EMAIL_RE = re.compile(EMAIL_PATTERN)


def contains(haystack: str, needle: str) -> bool:
    """Case-sensitive substring test.

    An empty *needle* never matches.

    Examples:
        >>> contains("bob@gmail.com", "bob")
        True
        >>> contains("bob@gmail.com", "BOB")
        False
        >>> contains("bob", "")
        False
    """
    return bool(needle) and needle in haystack


def is_valid_email(email: str) -> bool:
    """Whole-string match against :data:`EMAIL_PATTERN`."""
    return _EMAIL_RE.fullmatch(email) is not None


def has_digit(value: str) -> bool:
    """True if any character is a decimal digit (Unicode category Nd)."""
    return any(ch.isdecimal() for ch in value)


def has_letter(value: str) -> bool:
    """True if any character is a letter (Unicode category L*)."""
    return any(ch.isalpha() for ch in value)
