"""
JSON-RPC Client for the Secret DAO chain.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Supports read-only contract calls, account requests and transaction submission.
"""

from __future__ import annotations

import os
from typing import Any, Optional

import httpx
from eth_abi import decode, encode
from eth_hash.auto import keccak

from ..errors import RemoteCallFailure
from .abi import find_function, input_types, output_types

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_CHAIN_ID = 31337


def _keccak256(data: bytes) -> bytes:
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return keccak(data)


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    return os.environ.get("SECRET_DAO_RPC", DEFAULT_RPC_URL)


def get_chain_id() -> int:
    """Get the chain ID from environment or default."""
    return int(os.environ.get("CHAIN_ID", str(DEFAULT_CHAIN_ID)))


def _rpc_call(method: str, params: list, rpc_url: Optional[str] = None) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters
        rpc_url: RPC endpoint URL

    Returns:
        Result field from the RPC response

    Raises:
        RemoteCallFailure: If the request fails or the node returns an error
    """
    url = rpc_url or get_rpc_url()
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }

    try:
        with httpx.Client(timeout=30) as client:
            response = client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as exc:
        raise RemoteCallFailure(f"{method} failed: {exc}") from exc
    except ValueError as exc:
        raise RemoteCallFailure(f"{method} returned a non-JSON reply: {exc}") from exc

    if "error" in data:
        error = data["error"]
        message = error.get("message", error) if isinstance(error, dict) else error
        raise RemoteCallFailure(f"RPC error: {message}")

    return data.get("result")


def encode_function_call(abi: Any, function_name: str, args: list) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function name to call
        args: Function arguments

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = find_function(abi, function_name)
    types = input_types(func)
    sig = f"{function_name}({','.join(types)})"

    selector = _keccak256(sig.encode("utf-8"))[:4]

    if types:
        encoded_args = encode(types, list(args))
    else:
        encoded_args = b""

    return "0x" + selector.hex() + encoded_args.hex()


def decode_function_result(abi: Any, function_name: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        Decoded result (single value or tuple), None for functions without outputs
    """
    types = output_types(find_function(abi, function_name))
    if not types:
        return None

    raw = bytes.fromhex(data[2:]) if data.startswith("0x") else bytes.fromhex(data)
    decoded = decode(types, raw)

    if len(decoded) == 1:
        return decoded[0]
    return decoded


def read_contract(
    contract_address: str,
    function_name: str,
    args: Optional[list] = None,
    abi: Any = None,
    sender: Optional[str] = None,
    rpc_url: Optional[str] = None,
) -> Any:
    """
    Read from (or simulate a call to) a smart contract via eth_call.

    Args:
        contract_address: 0x-prefixed contract address
        function_name: Function to call
        args: Function arguments (default: [])
        abi: Contract ABI
        sender: Address the call is simulated from
        rpc_url: RPC endpoint URL

    Returns:
        Decoded return value(s)
    """
    calldata = encode_function_call(abi, function_name, args or [])

    call: dict[str, Any] = {"to": contract_address, "data": calldata}
    if sender:
        call["from"] = sender

    result = _rpc_call("eth_call", [call, "latest"], rpc_url=rpc_url)

    if result is None or result == "0x":
        return None

    return decode_function_result(abi, function_name, result)


def get_nonce(address: str, rpc_url: Optional[str] = None) -> int:
    result = _rpc_call("eth_getTransactionCount", [address, "latest"], rpc_url=rpc_url)
    return int(result, 16)


def get_gas_price(rpc_url: Optional[str] = None) -> int:
    result = _rpc_call("eth_gasPrice", [], rpc_url=rpc_url)
    return int(result, 16)


def request_accounts(method: str = "eth_requestAccounts", rpc_url: Optional[str] = None) -> list[str]:
    """Ask the node for the accounts it is authorized to sign for."""
    return _rpc_call(method, [], rpc_url=rpc_url) or []


def send_transaction(tx: dict, rpc_url: Optional[str] = None) -> str:
    """Submit an unsigned transaction for the node to sign (eth_sendTransaction)."""
    return _rpc_call("eth_sendTransaction", [tx], rpc_url=rpc_url)


def send_raw_transaction(raw_tx: str, rpc_url: Optional[str] = None) -> str:
    """
    Send a signed raw transaction.

    Args:
        raw_tx: 0x-prefixed hex encoded signed transaction

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    return _rpc_call("eth_sendRawTransaction", [raw_tx], rpc_url=rpc_url)
