from __future__ import annotations

from typing import Any, Optional

import pytest

from secret_dao.bridge import ContractBridge
from secret_dao.errors import NoAccountAuthorized, RemoteCallFailure
from secret_dao.ledger.abi import load_abi
from secret_dao.models import ContractEndpoint

SENDER = "0x1111111111111111111111111111111111111111"
CONTRACT = "0x2222222222222222222222222222222222222222"
RECIPIENT = "0x3333333333333333333333333333333333333333"


class FakeProvider:
    def __init__(self, accounts: Optional[list[str]] = None, deny: bool = False) -> None:
        self.accounts = [SENDER] if accounts is None else accounts
        self.deny = deny
        self.account_requests = 0

    def request_accounts(self) -> list[str]:
        self.account_requests += 1
        if self.deny:
            raise NoAccountAuthorized("User rejected the request")
        return list(self.accounts)

    def send_transaction(self, tx: dict) -> str:
        raise AssertionError("transactions go through FakeClient")


class FakeClient:
    """Records contract calls; returns canned values or raises."""

    def __init__(self, call_result: Any = None, reject: bool = False) -> None:
        self.call_result = call_result
        self.reject = reject
        self.calls: list[tuple[str, list, Optional[str]]] = []
        self.transactions: list[tuple[str, list, str]] = []

    def call(self, function_name: str, args: list, sender: Optional[str] = None) -> Any:
        self.calls.append((function_name, args, sender))
        if self.reject:
            raise RemoteCallFailure("RPC error: execution reverted")
        return self.call_result

    def transact(self, function_name: str, args: list, sender: str) -> str:
        self.transactions.append((function_name, args, sender))
        if self.reject:
            raise RemoteCallFailure("RPC error: execution reverted")
        return "0x" + "ab" * 32


class RecordingReporter:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture()
def endpoint() -> ContractEndpoint:
    return ContractEndpoint(address=CONTRACT, abi=load_abi())


@pytest.fixture()
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture()
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def bridge(
    endpoint: ContractEndpoint,
    provider: FakeProvider,
    client: FakeClient,
    reporter: RecordingReporter,
) -> ContractBridge:
    return ContractBridge(endpoint, provider, client=client, reporter=reporter)
