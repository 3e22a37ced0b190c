"""
Ballot - vote on and execute proposals.

A ballot adds the voter's concealed assets to the proposal's vote count.
Execution succeeds once before the deadline, and only with a majority of
all concealed assets.
"""

from __future__ import annotations

import click

from .common import finish, open_bridge


@click.command()
@click.option("--proposal-id", required=True, type=int, help="Proposal ID")
@click.pass_context
def vote(ctx: click.Context, proposal_id: int) -> None:
    """Cast a secret ballot on a proposal."""
    finish(open_bridge(ctx).cast_ballot(proposal_id))


@click.command()
@click.option("--proposal-id", required=True, type=int, help="Proposal ID")
@click.pass_context
def execute(ctx: click.Context, proposal_id: int) -> None:
    """Attempt to execute a proposal's instructions."""
    finish(open_bridge(ctx).attempt_execution(proposal_id))
