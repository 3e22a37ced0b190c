"""
Wallet providers - account access and transaction signing.

Two providers are available:
- LocalKeyProvider: signs with a local eth-account key (PRIVATE_KEY)
- NodeProvider: lets a node that holds the keys sign (eth_requestAccounts /
  eth_sendTransaction), the way a browser wallet does
"""

from __future__ import annotations

from typing import Optional, Protocol

from eth_account.signers.local import LocalAccount

from ..errors import NoAccountAuthorized, RemoteCallFailure
from ..ledger import rpc
from ..ledger.tx import build_transaction, node_transaction, sign_and_send
from .eth import get_account


PROVIDER_KINDS = ("local", "node")


class WalletProvider(Protocol):
    def request_accounts(self) -> list[str]:
        ...

    def send_transaction(self, tx: dict) -> str:
        ...


class LocalKeyProvider:
    def __init__(
        self,
        private_key: Optional[str] = None,
        rpc_url: Optional[str] = None,
        chain_id: Optional[int] = None,
    ) -> None:
        self.private_key = private_key
        self.rpc_url = rpc_url
        self.chain_id = chain_id

    def _account(self) -> LocalAccount:
        try:
            return get_account(self.private_key)
        except ValueError as exc:
            raise NoAccountAuthorized(str(exc)) from exc

    def request_accounts(self) -> list[str]:
        return [self._account().address]

    def send_transaction(self, tx: dict) -> str:
        account = self._account()
        sender = tx.get("from")
        if sender and sender.lower() != account.address.lower():
            raise NoAccountAuthorized(f"{sender} is not managed by the local key")

        unsigned = build_transaction(
            to=tx["to"],
            data=tx["data"],
            sender=account.address,
            value=tx.get("value", 0),
            gas_limit=tx.get("gas"),
            chain_id=self.chain_id,
            rpc_url=self.rpc_url,
        )
        return sign_and_send(unsigned, account, rpc_url=self.rpc_url)


class NodeProvider:
    def __init__(self, rpc_url: Optional[str] = None, method: str = "eth_requestAccounts") -> None:
        self.rpc_url = rpc_url
        self.method = method

    def request_accounts(self) -> list[str]:
        try:
            accounts = rpc.request_accounts(self.method, rpc_url=self.rpc_url)
        except RemoteCallFailure as exc:
            raise NoAccountAuthorized(f"Account access denied: {exc}") from exc
        if not accounts:
            raise NoAccountAuthorized("Provider returned no accounts")
        return list(accounts)

    def send_transaction(self, tx: dict) -> str:
        return rpc.send_transaction(node_transaction(tx), rpc_url=self.rpc_url)


def build_provider(
    kind: str = "local",
    rpc_url: Optional[str] = None,
    chain_id: Optional[int] = None,
    private_key: Optional[str] = None,
) -> WalletProvider:
    if kind == "local":
        return LocalKeyProvider(private_key=private_key, rpc_url=rpc_url, chain_id=chain_id)
    if kind == "node":
        return NodeProvider(rpc_url=rpc_url)
    raise ValueError(f"Unknown wallet provider: {kind}")
