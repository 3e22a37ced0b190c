"""
Propose - submit a secret proposal.

Proposals start with zero votes and a deadline one week from now unless
--deadline is given. Instructions are JSON objects:

    {"contract_id": "0x<32 bytes>", "function_name": "...", "arguments": ["0x..."]}
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from ..models import HiddenInstruction, ProposalRequest
from .common import finish, open_bridge


def _parse_instructions(raw: tuple[str, ...]) -> tuple[HiddenInstruction, ...]:
    instructions = []
    for item in raw:
        try:
            data = json.loads(item)
            if not isinstance(data, dict):
                raise ValueError("Instruction must be a JSON object")
            instructions.append(HiddenInstruction.from_dict(data))
        except (json.JSONDecodeError, KeyError, ValueError) as exc:
            click.secho(f"ERROR: Invalid instruction: {exc}", fg="red", err=True)
            sys.exit(1)
    return tuple(instructions)


@click.command()
@click.option("--deadline", default=None, type=int, help="Unix timestamp (default: one week from now)")
@click.option("--instruction", "instructions", multiple=True, help="Instruction as a JSON object (repeatable)")
@click.pass_context
def propose(ctx: click.Context, deadline: Optional[int], instructions: tuple[str, ...]) -> None:
    """Create a secret proposal."""
    parsed = _parse_instructions(instructions)
    bridge = open_bridge(ctx)

    if deadline is None:
        proposal = ProposalRequest.one_week_out(now=bridge.clock(), instructions=parsed)
    else:
        proposal = ProposalRequest(deadline=deadline, instructions=parsed)

    finish(bridge.create_proposal(proposal))
