"""Command: evaluate a set of credentials against the policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from credcheck.commands._base import CredCommand

if TYPE_CHECKING:
    from credcheck.commands._context import AppContext


@click.command(
    cls=CredCommand,
    examples="""\
  credcheck evaluate --email bob@gmail.com --password 12345678a --confirm-password 12345678a
  credcheck evaluate --username bob --email bob@gmail.com
  credcheck evaluate --layout strict --email a@b.io -p s3cretpass -C s3cretpass
  credcheck --json evaluate --min-length 12 --no-require-digit --email a@b.io""",
)
@click.option("-u", "--username", default=None, help="Username (omit to skip username rules).")
@click.option("-e", "--email", required=True, help="Email address.")
@click.option("-p", "--password", prompt=True, hide_input=True, help="Password.")
@click.option(
    "-C",
    "--confirm-password",
    prompt="Confirm password",
    hide_input=True,
    help="Password confirmation.",
)
@click.option("-l", "--layout", default=None, help="Named policy layout from credcheck.toml.")
@click.option("--min-length", type=int, default=None, help="Override minimum password length.")
@click.option("--max-length", type=int, default=None, help="Override maximum password length.")
@click.option(
    "--require-digit/--no-require-digit",
    default=None,
    help="Override whether a digit is required.",
)
@click.option(
    "--require-letter/--no-require-letter",
    default=None,
    help="Override whether a letter is required.",
)
@click.pass_obj
def evaluate(
    app: AppContext,
    username: str | None,
    email: str,
    password: str,
    confirm_password: str,
    layout: str | None,
    min_length: int | None,
    max_length: int | None,
    require_digit: bool | None,
    require_letter: bool | None,
) -> None:
    """Check credentials and report the first violated rule."""
    from credcheck.domain.models import CredentialInput
    from credcheck.services.validator import evaluate as run_evaluate

    policy = app.policy(
        layout,
        min_length=min_length,
        max_length=max_length,
        require_digit=require_digit,
        require_letter=require_letter,
    )
    credentials = CredentialInput(
        username=username,
        email=email,
        password=password,
        confirm_password=confirm_password,
    )
    app.emit(run_evaluate(credentials, policy), policy)
