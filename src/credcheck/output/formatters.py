"""Rich/JSON output for validation outcomes and policies.

The CLI renders results for humans (Rich, colors) or machines (--json).
Quiet mode reduces an outcome to its status line.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from credcheck.config.models import PolicyConfig
from credcheck.domain.outcome import Invalid, ValidationOutcome
from credcheck.output.console import create_console, get_output
from credcheck.output.messages import describe

if TYPE_CHECKING:
    from rich.console import Console


class OutputSettings(BaseModel):
    """How results should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def outcome_payload(
    outcome: ValidationOutcome,
    policy: PolicyConfig | None = None,
    *,
    op: str = "evaluate",
) -> dict[str, Any]:
    """Flatten *outcome* into the JSON payload shape."""
    if isinstance(outcome, Invalid):
        return {
            "ok": False,
            "op": op,
            "kind": outcome.kind.value,
            "category": outcome.kind.category.value,
            "fields": [f.value for f in outcome.fields],
            "message": describe(outcome, policy),
        }
    return {
        "ok": True,
        "op": op,
        "kind": None,
        "category": None,
        "fields": [],
        "message": describe(outcome, policy),
    }


def format_outcome(
    outcome: ValidationOutcome,
    *,
    policy: PolicyConfig | None = None,
    settings: OutputSettings | None = None,
    op: str = "evaluate",
) -> str:
    """Format an outcome for display."""
    settings = settings or OutputSettings()
    payload = outcome_payload(outcome, policy, op=op)

    if settings.json_output:
        if settings.verbose and policy is not None:
            payload["policy"] = policy.model_dump()
        return _json.dumps(payload, indent=2)

    if settings.quiet:
        if payload["ok"]:
            return f"OK: {op}"
        return f"ERROR: {op} — {payload['kind']}"

    console = create_console()
    if payload["ok"]:
        console.print(Text("OK", style="cc.ok"), Text(f"  {op}", style="cc.op"))
        console.print(f"  {payload['message']}")
    else:
        console.print(
            Text("ERROR", style="cc.error"),
            Text(f"  {op}", style="cc.op"),
            Text(f"  {payload['kind']}", style="cc.kind"),
        )
        console.print(f"  {payload['message']}")
        fields = Text("  fields: ", style="cc.key")
        fields.append(", ".join(payload["fields"]), style="cc.field")
        console.print(fields)

    if settings.verbose and policy is not None:
        console.print()
        _print_policy_fields(console, policy, indent=2)

    return get_output(console).rstrip("\n")


def format_policy(
    policy: PolicyConfig,
    *,
    name: str | None = None,
    settings: OutputSettings | None = None,
) -> str:
    """Format a single policy, labelled with its layout *name*."""
    settings = settings or OutputSettings()
    label = name or "default"

    if settings.json_output:
        return _json.dumps({"layout": label, "policy": policy.model_dump()}, indent=2)

    console = create_console()
    console.print(Text("layout: ", style="cc.key"), Text(label, style="cc.layout"), sep="")
    _print_policy_fields(console, policy, indent=2)
    return get_output(console).rstrip("\n")


def format_layouts(
    default: PolicyConfig,
    layouts: dict[str, PolicyConfig],
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format the default policy plus every named layout."""
    settings = settings or OutputSettings()
    rows = {"default": default, **dict(sorted(layouts.items()))}

    if settings.json_output:
        return _json.dumps({name: p.model_dump() for name, p in rows.items()}, indent=2)

    if settings.quiet:
        return "\n".join(rows)

    table = Table(show_edge=False)
    table.add_column("layout", style="cc.layout")
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")
    table.add_column("digit")
    table.add_column("letter")
    for name, p in rows.items():
        table.add_row(
            name,
            str(p.min_length),
            str(p.max_length),
            _yes_no(p.require_digit),
            _yes_no(p.require_letter),
        )
    console = create_console()
    console.print(table)
    return get_output(console).rstrip("\n")


def _print_policy_fields(console: Console, policy: PolicyConfig, *, indent: int) -> None:
    pad = " " * indent
    for key, value in policy.model_dump().items():
        console.print(Text(f"{pad}{key}: ", style="cc.key"), Text(str(value)), sep="")


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"
