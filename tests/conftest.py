"""Shared pytest fixtures and test helpers for credcheck tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from credcheck.config.models import PolicyConfig
from credcheck.domain.models import CredentialInput


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_policy() -> PolicyConfig:
    return PolicyConfig.defaults()


@pytest.fixture
def bob() -> CredentialInput:
    """Credentials that pass the default policy."""
    return CredentialInput(
        username="bob",
        email="bob@gmail.com",
        password="12345678a",
        confirm_password="12345678a",
    )


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir so no credcheck.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CREDCHECK_CONFIG", raising=False)
    return tmp_path
