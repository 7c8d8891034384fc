"""Credential evaluation against a password policy.

Rule precedence is fixed and evaluation stops at the first failure:

1. policy sanity (raises :class:`ConfigurationError`)
2. cross-field containment and confirmation checks
3. per-field checks: username, email, password

The functions here are pure; they read only their arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from credcheck.config.models import PolicyConfig
from credcheck.domain.models import CredentialInput
from credcheck.domain.outcome import Invalid, Valid, ValidationOutcome
from credcheck.domain.rules import contains, has_digit, has_letter, is_valid_email
from credcheck.domain.types import ErrorKind

logger = logging.getLogger(__name__)


def evaluate(
    credentials: CredentialInput,
    policy: PolicyConfig | None = None,
) -> ValidationOutcome:
    """Evaluate *credentials* against *policy* (default policy when None).

    Returns ``Valid()`` or ``Invalid`` carrying the first violated rule.

    Lengths are counted in code points (``len``), not grapheme clusters, so
    a letter followed by a combining mark counts as two characters.

    Raises:
        ConfigurationError: the policy's length bounds are inconsistent.
            Raised before any field is looked at.
    """
    if policy is None:
        policy = PolicyConfig.defaults()
    policy.check()

    kind = next(_violations(credentials, policy), None)
    outcome: ValidationOutcome = Valid() if kind is None else Invalid.of(kind)

    logger.debug(
        "Evaluated credentials: ok=%s kind=%s has_username=%s",
        outcome.ok,
        kind,
        credentials.has_username,
    )
    return outcome


def evaluate_fields(
    email: str,
    password: str,
    confirm_password: str,
    *,
    username: str | None = None,
    policy: PolicyConfig | None = None,
) -> ValidationOutcome:
    """Flat form of :func:`evaluate`; leave *username* as None to skip username rules."""
    credentials = CredentialInput(
        username=username,
        email=email,
        password=password,
        confirm_password=confirm_password,
    )
    return evaluate(credentials, policy)


def _violations(creds: CredentialInput, policy: PolicyConfig) -> Iterator[ErrorKind]:
    """Yield violated rules in precedence order. Callers take the first."""
    yield from _cross_field_violations(creds)
    if creds.username is not None and not creds.username:
        yield ErrorKind.USERNAME_EMPTY
    yield from _email_violations(creds.email)
    yield from _password_violations(creds.password, policy)


def _cross_field_violations(creds: CredentialInput) -> Iterator[ErrorKind]:
    username, email, password = creds.username, creds.email, creds.password

    if username is not None:
        if contains(username, email):
            yield ErrorKind.USERNAME_CONTAINS_EMAIL
        if contains(username, password):
            yield ErrorKind.USERNAME_CONTAINS_PASSWORD
    if contains(email, password):
        yield ErrorKind.EMAIL_CONTAINS_PASSWORD
    if username is not None and contains(password, username):
        yield ErrorKind.PASSWORD_CONTAINS_USERNAME
    if contains(password, email):
        yield ErrorKind.PASSWORD_CONTAINS_EMAIL
    if password != creds.confirm_password:
        yield ErrorKind.PASSWORD_MISMATCH


def _email_violations(email: str) -> Iterator[ErrorKind]:
    if not email:
        yield ErrorKind.EMAIL_EMPTY
    elif not is_valid_email(email):
        yield ErrorKind.EMAIL_INVALID_FORMAT


def _password_violations(password: str, policy: PolicyConfig) -> Iterator[ErrorKind]:
    if not password:
        yield ErrorKind.PASSWORD_EMPTY
        return
    if len(password) < policy.min_length:
        yield ErrorKind.PASSWORD_TOO_SHORT
    if policy.require_digit and not has_digit(password):
        yield ErrorKind.PASSWORD_MISSING_DIGIT
    if policy.require_letter and not has_letter(password):
        yield ErrorKind.PASSWORD_MISSING_LETTER
    if len(password) > policy.max_length:
        yield ErrorKind.PASSWORD_TOO_LONG
