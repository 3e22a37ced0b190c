from __future__ import annotations

import click

from .common import finish, open_bridge


@click.command()
@click.option("--amount", default=10, type=int, show_default=True, help="Number of concealed assets")
@click.option("--recipient", required=True, help="Recipient address")
@click.pass_context
def transfer(ctx: click.Context, amount: int, recipient: str) -> None:
    """
    Transfer hidden assets to a recipient.

    Only the administrator may transfer, and only during the bootstrap
    week; the contract rejects anything else.
    """
    bridge = open_bridge(ctx)
    finish(bridge.transfer_assets(amount, recipient))
