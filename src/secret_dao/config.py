"""
Bridge configuration.

Values come from explicit arguments first, then the environment, which may
be seeded from ~/.secret-dao/.env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .ledger.abi import load_abi
from .ledger.rpc import DEFAULT_CHAIN_ID, DEFAULT_RPC_URL
from .ledger.tx import DEFAULT_GAS_LIMIT
from .models import ContractEndpoint
from .wallet import eth
from .wallet.provider import PROVIDER_KINDS


@dataclass(frozen=True)
class BridgeConfig:
    endpoint: ContractEndpoint
    rpc_url: str = DEFAULT_RPC_URL
    chain_id: int = DEFAULT_CHAIN_ID
    provider: str = "local"
    gas_limit: int = DEFAULT_GAS_LIMIT

    @classmethod
    def from_env(
        cls,
        contract_address: Optional[str] = None,
        abi_path: Optional[str] = None,
        rpc_url: Optional[str] = None,
        chain_id: Optional[int] = None,
        provider: Optional[str] = None,
        env_path: Optional[Path] = None,
    ) -> "BridgeConfig":
        env_path = env_path or eth.SECRET_DAO_ENV
        if env_path.exists():
            load_dotenv(env_path, override=False)

        address = contract_address or os.environ.get("SECRET_DAO_ADDRESS")
        if not address:
            raise ConfigError("SECRET_DAO_ADDRESS must be set (or pass --contract).")

        try:
            abi = load_abi(abi_path or os.environ.get("SECRET_DAO_ABI") or None)
        except (FileNotFoundError, ValueError) as exc:
            raise ConfigError(str(exc)) from exc

        try:
            resolved_chain_id = (
                chain_id if chain_id is not None
                else int(os.environ.get("CHAIN_ID", str(DEFAULT_CHAIN_ID)))
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid CHAIN_ID: {exc}") from exc

        provider_kind = provider or os.environ.get("SECRET_DAO_PROVIDER", "local")
        if provider_kind not in PROVIDER_KINDS:
            raise ConfigError(
                f"Unknown wallet provider {provider_kind!r}; expected one of: {', '.join(PROVIDER_KINDS)}"
            )

        return cls(
            endpoint=ContractEndpoint(address=address, abi=abi),
            rpc_url=rpc_url or os.environ.get("SECRET_DAO_RPC", DEFAULT_RPC_URL),
            chain_id=resolved_chain_id,
            provider=provider_kind,
        )
