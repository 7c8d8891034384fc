"""credcheck — credential policy validation.

Evaluates a username (optional), email, password and confirmation against a
configurable password policy and reports the first violated rule.
"""

from __future__ import annotations

from credcheck.config.models import PolicyConfig
from credcheck.domain.errors import ConfigurationError
from credcheck.domain.models import CredentialInput
from credcheck.domain.outcome import Invalid, Valid, ValidationOutcome
from credcheck.domain.types import ErrorCategory, ErrorKind, Field
from credcheck.output.messages import describe
from credcheck.services.validator import evaluate, evaluate_fields

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CredentialInput",
    "ErrorCategory",
    "ErrorKind",
    "Field",
    "Invalid",
    "PolicyConfig",
    "Valid",
    "ValidationOutcome",
    "__version__",
    "describe",
    "evaluate",
    "evaluate_fields",
]
