from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .rpc import encode_function_call, read_contract
from .tx import DEFAULT_GAS_LIMIT

if TYPE_CHECKING:
    from ..models import ContractEndpoint
    from ..wallet.provider import WalletProvider


class ContractClient:
    """Calls methods of one contract endpoint, sending transactions through a wallet provider."""

    def __init__(
        self,
        endpoint: "ContractEndpoint",
        provider: "WalletProvider",
        rpc_url: Optional[str] = None,
        gas_limit: int = DEFAULT_GAS_LIMIT,
    ) -> None:
        self.endpoint = endpoint
        self.provider = provider
        self.rpc_url = rpc_url
        self.gas_limit = gas_limit

    def call(self, function_name: str, args: list, sender: Optional[str] = None) -> Any:
        """Run ``function_name`` with eth_call and decode its return value."""
        return read_contract(
            self.endpoint.address,
            function_name,
            args,
            abi=self.endpoint.abi,
            sender=sender,
            rpc_url=self.rpc_url,
        )

    def transact(self, function_name: str, args: list, sender: str) -> str:
        """Send a state-changing call from ``sender``. Returns the transaction hash."""
        tx = {
            "from": sender,
            "to": self.endpoint.address,
            "data": encode_function_call(self.endpoint.abi, function_name, args),
            "value": 0,
            "gas": self.gas_limit,
        }
        return self.provider.send_transaction(tx)
