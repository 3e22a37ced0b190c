"""
Secret DAO CLI

Command-line interface for a deployed Secret DAO contract.

Commands:
  initialize - Become the contract administrator
  transfer   - Transfer hidden assets
  propose    - Create a secret proposal
  vote       - Cast a secret ballot
  execute    - Attempt proposal execution
  assets     - Show an address's concealed assets
  supply     - Show total concealed assets
  trigger    - Run the action bound to a UI element id
  keygen     - Create a local signing key
  whoami     - Show the active account
  info       - Show configuration
"""

from __future__ import annotations

import os
import sys
from typing import Optional

import click

from .errors import NoAccountAuthorized, RemoteCallFailure
from .ledger.rpc import DEFAULT_RPC_URL
from .wallet.eth import SECRET_DAO_ENV, generate_eoa, save_private_key
from .wallet.provider import PROVIDER_KINDS, build_provider


# ============ Constants ============

VERSION = "1.0.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="secret-dao")
@click.option("--rpc-url", envvar="SECRET_DAO_RPC", default=None, help=f"JSON-RPC URL [default: {DEFAULT_RPC_URL}]")
@click.option("--chain-id", envvar="CHAIN_ID", default=None, type=int, help="Chain ID")
@click.option("--contract", envvar="SECRET_DAO_ADDRESS", default=None, help="Secret DAO contract address")
@click.option("--abi", envvar="SECRET_DAO_ABI", default=None, help="ABI or artifact JSON file")
@click.option(
    "--provider",
    envvar="SECRET_DAO_PROVIDER",
    default=None,
    type=click.Choice(PROVIDER_KINDS),
    help="Wallet provider: local key or node-managed accounts",
)
@click.pass_context
def cli(
    ctx: click.Context,
    rpc_url: Optional[str],
    chain_id: Optional[int],
    contract: Optional[str],
    abi: Optional[str],
    provider: Optional[str],
) -> None:
    """Secret DAO — hidden assets and secret proposals."""
    ctx.obj = {
        "rpc_url": rpc_url,
        "chain_id": chain_id,
        "contract": contract,
        "abi": abi,
        "provider": provider,
    }
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Action Commands ============

from .actions.initialize import initialize
from .actions.transfer import transfer
from .actions.propose import propose
from .actions.ballot import execute, vote
from .actions.assets import assets, supply
from .actions.trigger import trigger

cli.add_command(initialize)
cli.add_command(transfer)
cli.add_command(propose)
cli.add_command(vote)
cli.add_command(execute)
cli.add_command(assets)
cli.add_command(supply)
cli.add_command(trigger)


# ============ Identity ============


@cli.command()
@click.option("--force", is_flag=True, help="Replace an existing key")
def keygen(force: bool) -> None:
    """Create a local signing key in ~/.secret-dao/.env."""
    if SECRET_DAO_ENV.exists() and "PRIVATE_KEY=" in SECRET_DAO_ENV.read_text(encoding="utf-8") and not force:
        click.echo(f"A key already exists in {SECRET_DAO_ENV}. Use --force to replace it.")
        sys.exit(1)

    private_key, address = generate_eoa()
    path = save_private_key(private_key, SECRET_DAO_ENV)
    click.echo(f"Address: {address}")
    click.echo(f"Saved to: {path}")


@cli.command()
@click.pass_context
def whoami(ctx: click.Context) -> None:
    """Show the active account."""
    options = ctx.find_object(dict) or {}
    provider = build_provider(
        options.get("provider") or os.environ.get("SECRET_DAO_PROVIDER", "local"),
        rpc_url=options.get("rpc_url"),
    )
    try:
        accounts = provider.request_accounts()
    except (NoAccountAuthorized, RemoteCallFailure) as exc:
        click.echo(f"No account available: {exc}")
        sys.exit(exc.exit_code)
    click.echo(f"Address: {accounts[0]}")


# ============ Info ============


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show configuration."""
    options = ctx.find_object(dict) or {}

    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("S E C R E T   D A O", fg="bright_white", bold=True)
        + click.style(f"  v{VERSION}", dim=True)
    )
    click.echo()

    rows = [
        ("RPC URL:  ", options.get("rpc_url") or os.environ.get("SECRET_DAO_RPC", DEFAULT_RPC_URL)),
        ("Contract: ", options.get("contract") or "not set"),
        ("ABI:      ", options.get("abi") or "bundled"),
        ("Provider: ", options.get("provider") or os.environ.get("SECRET_DAO_PROVIDER", "local")),
        ("Key file: ", str(SECRET_DAO_ENV)),
    ]
    for label, value in rows:
        click.echo(click.style(f"  {label}", dim=True) + click.style(str(value), fg="bright_white"))


# ============ Entry Points ============


def main() -> None:
    """Secret DAO CLI entry point."""
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
