"""Human-readable messages for validation outcomes.

Presentation layers show these next to the highlighted fields; the
validator itself never produces text.
"""

from __future__ import annotations

from credcheck.config.models import PolicyConfig
from credcheck.domain.outcome import Invalid, ValidationOutcome
from credcheck.domain.types import ErrorKind

VALID_MESSAGE = "Credentials accepted"

_STATIC_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.USERNAME_EMPTY: "Please enter a username",
    ErrorKind.EMAIL_EMPTY: "Please enter an email",
    ErrorKind.EMAIL_INVALID_FORMAT: "Please enter a valid email",
    ErrorKind.PASSWORD_EMPTY: "Please enter a password",
    ErrorKind.PASSWORD_MISSING_DIGIT: "At least 1 number is required in the password",
    ErrorKind.PASSWORD_MISSING_LETTER: "At least 1 letter is required in the password",
    ErrorKind.USERNAME_CONTAINS_EMAIL: "Username contains email",
    ErrorKind.USERNAME_CONTAINS_PASSWORD: "Username contains password",
    ErrorKind.EMAIL_CONTAINS_PASSWORD: "Email contains password",
    ErrorKind.PASSWORD_CONTAINS_USERNAME: "Password contains username",
    ErrorKind.PASSWORD_CONTAINS_EMAIL: "Password contains email",
    ErrorKind.PASSWORD_MISMATCH: "Password does not match confirm password",
}


def message_for(kind: ErrorKind, policy: PolicyConfig | None = None) -> str:
    """Message for a single error kind; length messages quote *policy*'s bounds."""
    policy = policy if policy is not None else PolicyConfig.defaults()
    if kind is ErrorKind.PASSWORD_TOO_SHORT:
        return f"The password must include at least {policy.min_length} characters"
    if kind is ErrorKind.PASSWORD_TOO_LONG:
        return f"The password cannot exceed {policy.max_length} characters in length"
    return _STATIC_MESSAGES[kind]


def describe(outcome: ValidationOutcome, policy: PolicyConfig | None = None) -> str:
    """One-line message for *outcome*."""
    if isinstance(outcome, Invalid):
        return message_for(outcome.kind, policy)
    return VALID_MESSAGE
