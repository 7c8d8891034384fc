"""Subcommand modules for credcheck.

Provides register_commands() which uses deferred imports to keep
``credcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from credcheck.commands.policy import policy

    cli.add_command(policy)

    # --- Standalone commands ---
    from credcheck.commands.evaluate import evaluate

    cli.add_command(evaluate)
