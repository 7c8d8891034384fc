"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CREDCHECK_*`` prefix, ``__`` for nesting
  3. TOML file    — ``credcheck.toml`` discovered via walk-up
  4. Code defaults — baked into :class:`PolicyConfig`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from credcheck.config.discovery import find_config
from credcheck.config.models import PolicyConfig
from credcheck.domain.errors import UnknownLayoutError


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``credcheck.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class CredcheckSettings(BaseSettings):
    """Unified settings for the credcheck CLI.

    Stored on the click context by the root group. ``policy`` is the
    ``[policy]`` section; ``layouts`` holds every ``[layouts.<name>]`` table.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CREDCHECK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    layouts: dict[str, PolicyConfig] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CredcheckSettings:
        """Construct settings from CLI invocation.

        Uses *config_path* when given, otherwise discovers ``credcheck.toml``
        by walking up from *start* (default: cwd). CLI flags win over
        everything else.

        Raises:
            pydantic.ValidationError: the file or environment holds an unknown
                key or a value of the wrong type.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def layout_names(self) -> list[str]:
        return sorted(self.layouts)

    def resolve_policy(self, layout: str | None = None) -> PolicyConfig:
        """Return the named layout, or the ``[policy]`` section when *layout* is None.

        Raises:
            UnknownLayoutError: *layout* is not configured.
        """
        if layout is None:
            return self.policy
        try:
            return self.layouts[layout]
        except KeyError:
            raise UnknownLayoutError(layout, list(self.layouts)) from None
