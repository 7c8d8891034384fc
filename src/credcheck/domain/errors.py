"""Exceptions for programmer errors.

User-input problems are never raised; they come back as ``Invalid`` outcomes.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """The password policy is internally inconsistent."""


class UnknownLayoutError(LookupError):
    """A named policy layout was requested but is not configured."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        known = ", ".join(self.available) or "none"
        super().__init__(f"Unknown policy layout '{name}' (configured: {known})")
