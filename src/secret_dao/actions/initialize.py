"""
Initialize - make the caller the contract administrator.

The contract grants the caller one concealed asset and opens a one-week
bootstrap window for administrator transfers.
"""

from __future__ import annotations

import click

from .common import finish, open_bridge


@click.command()
@click.pass_context
def initialize(ctx: click.Context) -> None:
    """Initialize the Secret DAO contract."""
    bridge = open_bridge(ctx)
    finish(bridge.initialize())
