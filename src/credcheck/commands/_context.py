"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns policy resolution and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from credcheck.domain.errors import ConfigurationError, UnknownLayoutError
from credcheck.output.formatters import OutputSettings, format_outcome

if TYPE_CHECKING:
    from credcheck.config.models import PolicyConfig
    from credcheck.config.settings import CredcheckSettings
    from credcheck.domain.outcome import ValidationOutcome


class PolicyError(click.ClickException):
    """Misconfigured or unknown policy; aborts with exit code 2."""

    exit_code = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CredcheckSettings) -> None:
        self.settings = settings

        from credcheck.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def policy(self, layout: str | None = None, **overrides: object) -> PolicyConfig:
        """Resolve the policy for *layout*, apply CLI *overrides*, and check it.

        Raises:
            PolicyError: unknown layout or inconsistent bounds.
        """
        try:
            resolved = self.settings.resolve_policy(layout).with_overrides(**overrides)
            resolved.check()
        except (UnknownLayoutError, ConfigurationError) as exc:
            raise PolicyError(str(exc)) from exc
        return resolved

    def emit(self, outcome: ValidationOutcome, policy: PolicyConfig) -> None:
        """Format and output an outcome with correct exit semantics.

        * Valid: writes to stdout, returns normally.
        * Invalid: writes to stderr, exits with code 1.
        """
        output = format_outcome(outcome, policy=policy, settings=self.output_settings)
        if outcome.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def echo(self, output: str) -> None:
        click.echo(output)
