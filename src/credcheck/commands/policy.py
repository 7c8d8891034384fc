"""Command group: inspect the configured password policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from credcheck.commands._base import CredGroup

if TYPE_CHECKING:
    from credcheck.commands._context import AppContext


@click.group(
    cls=CredGroup,
    examples="""\
  credcheck policy show
  credcheck policy show --layout strict
  credcheck policy list""",
)
def policy() -> None:
    """Inspect password policies and layouts."""


@policy.command(
    examples="""\
  credcheck policy show
  credcheck --json policy show --layout strict""",
)
@click.option("-l", "--layout", default=None, help="Named layout (default: [policy] section).")
@click.pass_obj
def show(app: AppContext, layout: str | None) -> None:
    """Show the resolved policy."""
    from credcheck.output.formatters import format_policy

    resolved = app.policy(layout)
    app.echo(format_policy(resolved, name=layout, settings=app.output_settings))


@policy.command(name="list", examples="  credcheck policy list")
@click.pass_obj
def list_layouts(app: AppContext) -> None:
    """List the default policy and every configured layout."""
    from credcheck.output.formatters import format_layouts

    app.echo(
        format_layouts(
            app.settings.policy,
            app.settings.layouts,
            settings=app.output_settings,
        )
    )
