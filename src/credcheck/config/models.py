"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, credcheck.toml only contains
overrides. A policy with no overrides is the standard policy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from credcheck.domain.errors import ConfigurationError

# --- credcheck.toml sections ---


class PolicyConfig(BaseModel):
    """[policy] section, and each [layouts.<name>] table.

    Construction accepts any integers so a broken file can still be loaded
    and reported; :meth:`check` enforces the invariant.
    """

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    require_digit: bool = True
    require_letter: bool = True
    min_length: int = 8
    max_length: int = 100

    @classmethod
    def defaults(cls) -> PolicyConfig:
        """The standard policy: digit and letter required, 8 to 100 characters."""
        return cls()

    def with_overrides(self, **changes: Any) -> PolicyConfig:
        """Return a copy with every non-None value in *changes* applied."""
        update = {k: v for k, v in changes.items() if v is not None}
        if not update:
            return self
        return type(self).model_validate({**self.model_dump(), **update})

    def check(self) -> None:
        """Raise ConfigurationError if the length bounds are inconsistent."""
        if self.min_length <= 0:
            msg = f"Password minimum length must be positive, got {self.min_length}"
            raise ConfigurationError(msg)
        if self.max_length <= 0:
            msg = f"Password maximum length must be positive, got {self.max_length}"
            raise ConfigurationError(msg)
        if self.min_length >= self.max_length:
            msg = (
                f"Conflicting password length bounds: minimum {self.min_length} "
                f"must be less than maximum {self.max_length}"
            )
            raise ConfigurationError(msg)
