from __future__ import annotations

from typing import Optional

import click

from .common import finish, open_bridge


@click.command()
@click.option("--owner", default=None, help="Address to query (default: active account)")
@click.pass_context
def assets(ctx: click.Context, owner: Optional[str]) -> None:
    """Show concealed assets held by an address."""
    finish(open_bridge(ctx).check_user_assets(owner))


@click.command()
@click.pass_context
def supply(ctx: click.Context) -> None:
    """Show the total supply of concealed assets."""
    finish(open_bridge(ctx).total_concealed_assets())
