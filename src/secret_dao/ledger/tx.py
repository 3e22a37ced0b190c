"""
Transaction Builder - Fill, sign, and send Ethereum transactions.

Uses eth-account for signing and httpx-based JSON-RPC for sending.
Gas is a fixed limit; no estimation is performed.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_account.signers.local import LocalAccount

from .rpc import (
    _keccak256,
    get_chain_id,
    get_gas_price,
    get_nonce,
    send_raw_transaction,
)

DEFAULT_GAS_LIMIT = 500_000


def _to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format.

    eth-account requires checksummed addresses in transaction fields.
    """
    addr = address.lower().replace("0x", "")
    addr_hash = _keccak256(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


def build_transaction(
    to: str,
    data: str,
    sender: str,
    value: int = 0,
    gas_limit: Optional[int] = None,
    chain_id: Optional[int] = None,
    rpc_url: Optional[str] = None,
) -> dict:
    """
    Build an unsigned legacy transaction for a local signer.

    Args:
        to: 0x-prefixed target address
        data: 0x-prefixed calldata
        sender: Address whose nonce is used
        value: Native value in wei
        gas_limit: Gas limit (default: DEFAULT_GAS_LIMIT)
        chain_id: Chain id (default: from environment)
        rpc_url: RPC endpoint URL

    Returns:
        Unsigned transaction dict
    """
    return {
        "to": _to_checksum_address(to),
        "data": data,
        "value": value,
        "nonce": get_nonce(sender, rpc_url=rpc_url),
        "gas": gas_limit or DEFAULT_GAS_LIMIT,
        "gasPrice": get_gas_price(rpc_url=rpc_url),
        "chainId": chain_id if chain_id is not None else get_chain_id(),
    }


def sign_and_send(tx: dict, account: LocalAccount, rpc_url: Optional[str] = None) -> str:
    """
    Sign a transaction and send it.

    Returns:
        Transaction hash
    """
    signed = account.sign_transaction(tx)
    raw_tx = signed.raw_transaction.hex()
    if not raw_tx.startswith("0x"):
        raw_tx = "0x" + raw_tx

    return send_raw_transaction(raw_tx, rpc_url=rpc_url)


def node_transaction(tx: dict[str, Any]) -> dict[str, Any]:
    """Hex-encode the numeric fields of a transaction for eth_sendTransaction."""
    encoded: dict[str, Any] = {}
    for key, value in tx.items():
        encoded[key] = hex(value) if isinstance(value, int) else value
    return encoded
