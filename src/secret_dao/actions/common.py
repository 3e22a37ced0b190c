from __future__ import annotations

import sys

import click

from ..bridge import ContractBridge
from ..config import BridgeConfig
from ..errors import ConfigError
from ..models import ActionResult


def open_bridge(ctx: click.Context) -> ContractBridge:
    """Build a bridge from the group options stored on the context."""
    options = ctx.find_object(dict) or {}
    try:
        config = BridgeConfig.from_env(
            contract_address=options.get("contract"),
            abi_path=options.get("abi"),
            rpc_url=options.get("rpc_url"),
            chain_id=options.get("chain_id"),
            provider=options.get("provider"),
        )
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
    return ContractBridge.from_config(config)


def finish(result: ActionResult) -> None:
    if not result.ok:
        sys.exit(result.exit_code)
