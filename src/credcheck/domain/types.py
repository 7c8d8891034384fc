"""Field identifiers and the error taxonomy.

Every rule violation maps to exactly one ErrorKind; each kind belongs to one
ErrorCategory and implicates a fixed, ordered set of fields.
"""

from __future__ import annotations

from enum import StrEnum


class Field(StrEnum):
    """Input fields a failure can point at."""

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"


class ErrorCategory(StrEnum):
    """Which part of the input an error concerns."""

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    GENERAL = "general"


class ErrorKind(StrEnum):
    """A single violated rule."""

    USERNAME_EMPTY = "username_empty"

    EMAIL_EMPTY = "email_empty"
    EMAIL_INVALID_FORMAT = "email_invalid_format"

    PASSWORD_EMPTY = "password_empty"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_MISSING_DIGIT = "password_missing_digit"
    PASSWORD_MISSING_LETTER = "password_missing_letter"

    USERNAME_CONTAINS_EMAIL = "username_contains_email"
    USERNAME_CONTAINS_PASSWORD = "username_contains_password"
    EMAIL_CONTAINS_PASSWORD = "email_contains_password"
    PASSWORD_CONTAINS_USERNAME = "password_contains_username"
    PASSWORD_CONTAINS_EMAIL = "password_contains_email"
    PASSWORD_MISMATCH = "password_mismatch"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]

    @property
    def fields(self) -> tuple[Field, ...]:
        """Offending fields, in highlight order."""
        return _FIELDS[self]


_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.USERNAME_EMPTY: ErrorCategory.USERNAME,
    ErrorKind.EMAIL_EMPTY: ErrorCategory.EMAIL,
    ErrorKind.EMAIL_INVALID_FORMAT: ErrorCategory.EMAIL,
    ErrorKind.PASSWORD_EMPTY: ErrorCategory.PASSWORD,
    ErrorKind.PASSWORD_TOO_SHORT: ErrorCategory.PASSWORD,
    ErrorKind.PASSWORD_TOO_LONG: ErrorCategory.PASSWORD,
    ErrorKind.PASSWORD_MISSING_DIGIT: ErrorCategory.PASSWORD,
    ErrorKind.PASSWORD_MISSING_LETTER: ErrorCategory.PASSWORD,
    ErrorKind.USERNAME_CONTAINS_EMAIL: ErrorCategory.GENERAL,
    ErrorKind.USERNAME_CONTAINS_PASSWORD: ErrorCategory.GENERAL,
    ErrorKind.EMAIL_CONTAINS_PASSWORD: ErrorCategory.GENERAL,
    ErrorKind.PASSWORD_CONTAINS_USERNAME: ErrorCategory.GENERAL,
    ErrorKind.PASSWORD_CONTAINS_EMAIL: ErrorCategory.GENERAL,
    ErrorKind.PASSWORD_MISMATCH: ErrorCategory.GENERAL,
}

_FIELDS: dict[ErrorKind, tuple[Field, ...]] = {
    ErrorKind.USERNAME_EMPTY: (Field.USERNAME,),
    ErrorKind.EMAIL_EMPTY: (Field.EMAIL,),
    ErrorKind.EMAIL_INVALID_FORMAT: (Field.EMAIL,),
    ErrorKind.PASSWORD_EMPTY: (Field.PASSWORD,),
    ErrorKind.PASSWORD_TOO_SHORT: (Field.PASSWORD,),
    ErrorKind.PASSWORD_TOO_LONG: (Field.PASSWORD,),
    ErrorKind.PASSWORD_MISSING_DIGIT: (Field.PASSWORD,),
    ErrorKind.PASSWORD_MISSING_LETTER: (Field.PASSWORD,),
    ErrorKind.USERNAME_CONTAINS_EMAIL: (Field.USERNAME, Field.EMAIL),
    ErrorKind.USERNAME_CONTAINS_PASSWORD: (Field.USERNAME, Field.PASSWORD),
    ErrorKind.EMAIL_CONTAINS_PASSWORD: (Field.EMAIL, Field.PASSWORD),
    ErrorKind.PASSWORD_CONTAINS_USERNAME: (Field.PASSWORD, Field.USERNAME),
    ErrorKind.PASSWORD_CONTAINS_EMAIL: (Field.PASSWORD, Field.EMAIL),
    ErrorKind.PASSWORD_MISMATCH: (Field.PASSWORD, Field.CONFIRM_PASSWORD),
}
