"""Credential input value."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CredentialInput(BaseModel):
    """Raw field values as typed by the user.

    ``username=None`` selects the email-only shape, where every username rule
    is skipped. An empty string is still a username and must not be empty.
    """

    model_config = {"frozen": True}

    username: str | None = None
    email: str
    password: str = Field(repr=False)
    confirm_password: str = Field(repr=False)

    @property
    def has_username(self) -> bool:
        return self.username is not None
