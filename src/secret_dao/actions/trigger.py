from __future__ import annotations

import json
import sys
from typing import Any

import click

from ..bridge import TRIGGERS
from ..models import ProposalRequest
from .common import finish, open_bridge


def _parse_params(raw: tuple[str, ...]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for item in raw:
        if "=" not in item:
            click.secho(f"ERROR: Expected KEY=VALUE, got {item!r}", fg="red", err=True)
            sys.exit(1)
        key, value = item.split("=", 1)
        try:
            params[key] = json.loads(value)
        except json.JSONDecodeError:
            params[key] = value

    proposal = params.get("proposal")
    if isinstance(proposal, dict):
        try:
            params["proposal"] = ProposalRequest.from_dict(proposal)
        except (KeyError, TypeError, ValueError) as exc:
            click.secho(f"ERROR: Invalid proposal: {exc}", fg="red", err=True)
            sys.exit(1)
    return params


@click.command()
@click.argument("element_id", type=click.Choice(sorted(TRIGGERS)))
@click.option("--param", "params", multiple=True, help="Action parameter as KEY=VALUE (repeatable)")
@click.pass_context
def trigger(ctx: click.Context, element_id: str, params: tuple[str, ...]) -> None:
    """Run the action bound to a UI element id."""
    bridge = open_bridge(ctx)
    try:
        result = bridge.trigger(element_id, **_parse_params(params))
    except TypeError as exc:
        click.secho(f"ERROR: Invalid parameters for {element_id}: {exc}", fg="red", err=True)
        sys.exit(1)
    finish(result)
