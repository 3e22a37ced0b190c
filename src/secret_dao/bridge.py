"""
ContractBridge - actions against the deployed Secret DAO contract.

Every action asks the wallet provider for the active account, issues one
remote call and reports the outcome. Failures are reported once, naming
the action, and returned as ActionFailed; nothing is raised to the caller.

ACTIONS maps action names to handlers; TRIGGERS maps the fixed UI element
ids onto those names.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Protocol

import click

from .config import BridgeConfig
from .errors import NoAccountAuthorized
from .ledger.client import ContractClient
from .models import (
    ActionFailed,
    ActionOk,
    ActionResult,
    ContractEndpoint,
    ProposalRequest,
)
from .wallet.provider import WalletProvider, build_provider


class Reporter(Protocol):
    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ConsoleReporter:
    def info(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)


FAILURE_MESSAGES = {
    "initialize": "Error initializing contract",
    "transfer_assets": "Error transferring assets",
    "create_proposal": "Error creating proposal",
    "cast_ballot": "Error casting ballot",
    "attempt_execution": "Error executing proposal",
    "check_user_assets": "Error checking assets",
    "total_concealed_assets": "Error reading total assets",
}


class ContractBridge:
    def __init__(
        self,
        endpoint: ContractEndpoint,
        provider: WalletProvider,
        client: Optional[ContractClient] = None,
        reporter: Optional[Reporter] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.endpoint = endpoint
        self.provider = provider
        self.client = client or ContractClient(endpoint, provider)
        self.reporter = reporter or ConsoleReporter()
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: BridgeConfig,
        provider: Optional[WalletProvider] = None,
        reporter: Optional[Reporter] = None,
    ) -> "ContractBridge":
        if provider is None:
            provider = build_provider(config.provider, rpc_url=config.rpc_url, chain_id=config.chain_id)
        client = ContractClient(
            config.endpoint, provider, rpc_url=config.rpc_url, gas_limit=config.gas_limit
        )
        return cls(config.endpoint, provider, client=client, reporter=reporter)

    def request_active_account(self) -> str:
        """Return the first account the provider authorizes. Never cached."""
        accounts = self.provider.request_accounts()
        if not accounts:
            raise NoAccountAuthorized("Wallet provider returned no accounts")
        return accounts[0]

    def _run(self, action: str, operation: Callable[[], ActionOk]) -> ActionResult:
        try:
            return operation()
        except Exception as exc:
            self.reporter.error(f"{FAILURE_MESSAGES[action]}: {exc}")
            return ActionFailed(action=action, error=exc)

    def _send(self, action: str, function_name: str, args: list) -> ActionOk:
        sender = self.request_active_account()
        tx_hash = self.client.transact(function_name, args, sender)
        return ActionOk(action=action, sender=sender, tx_hash=tx_hash)

    # ============ Actions ============

    def initialize(self) -> ActionResult:
        def operation() -> ActionOk:
            result = self._send("initialize", "initialize", [])
            self.reporter.info(f"Contract initialized (tx {result.tx_hash})")
            return result

        return self._run("initialize", operation)

    def transfer_assets(self, amount: int, recipient: str) -> ActionResult:
        def operation() -> ActionOk:
            result = self._send("transfer_assets", "transfer_hidden_assets", [amount, recipient])
            self.reporter.info(f"Transferred {amount} to {recipient} (tx {result.tx_hash})")
            return result

        return self._run("transfer_assets", operation)

    def create_proposal(self, proposal: Optional[ProposalRequest] = None) -> ActionResult:
        """
        Submit a proposal; a fresh one-week proposal when none is given.

        The id is read by simulating the call from the sender before sending
        it. When the simulation yields nothing the transaction hash stands in.
        """

        def operation() -> ActionOk:
            request = proposal or ProposalRequest.one_week_out(now=self.clock())
            sender = self.request_active_account()
            record = request.as_abi()
            proposal_id = self.client.call("create_secret_proposal", [record], sender=sender)
            tx_hash = self.client.transact("create_secret_proposal", [record], sender)
            if proposal_id is None:
                proposal_id = tx_hash
            self.reporter.info(f"Proposal ID: {proposal_id}")
            return ActionOk(action="create_proposal", sender=sender, tx_hash=tx_hash, value=proposal_id)

        return self._run("create_proposal", operation)

    def cast_ballot(self, proposal_id: int) -> ActionResult:
        def operation() -> ActionOk:
            result = self._send("cast_ballot", "cast_secret_ballot", [proposal_id])
            self.reporter.info(f"Ballot cast on proposal {proposal_id} (tx {result.tx_hash})")
            return result

        return self._run("cast_ballot", operation)

    def attempt_execution(self, proposal_id: int) -> ActionResult:
        def operation() -> ActionOk:
            result = self._send("attempt_execution", "attempt_execution", [proposal_id])
            self.reporter.info(f"Execution of proposal {proposal_id} sent (tx {result.tx_hash})")
            return result

        return self._run("attempt_execution", operation)

    def check_user_assets(self, owner: Optional[str] = None) -> ActionResult:
        def operation() -> ActionOk:
            sender = self.request_active_account()
            target = owner or sender
            assets = self.client.call("check_user_assets", [target], sender=sender)
            self.reporter.info(f"Assets of {target}: {assets}")
            return ActionOk(action="check_user_assets", sender=sender, value=assets)

        return self._run("check_user_assets", operation)

    def total_concealed_assets(self) -> ActionResult:
        def operation() -> ActionOk:
            total = self.client.call("total_concealed_assets", [])
            self.reporter.info(f"Total concealed assets: {total}")
            return ActionOk(action="total_concealed_assets", value=total)

        return self._run("total_concealed_assets", operation)

    # ============ Dispatch ============

    def dispatch(self, action: str, **params: Any) -> ActionResult:
        """Run the handler registered for ``action``. Raises KeyError for unknown names."""
        handler = ACTIONS[action]
        return handler(self, **params)

    def trigger(self, element_id: str, **params: Any) -> ActionResult:
        """Run the action bound to a UI element id."""
        return self.dispatch(TRIGGERS[element_id], **params)


ACTIONS: dict[str, Callable[..., ActionResult]] = {
    "initialize": ContractBridge.initialize,
    "transfer_assets": ContractBridge.transfer_assets,
    "create_proposal": ContractBridge.create_proposal,
    "cast_ballot": ContractBridge.cast_ballot,
    "attempt_execution": ContractBridge.attempt_execution,
    "check_user_assets": ContractBridge.check_user_assets,
    "total_concealed_assets": ContractBridge.total_concealed_assets,
}

TRIGGERS = {
    "initializeButton": "initialize",
    "transferAssetsButton": "transfer_assets",
    "createProposalButton": "create_proposal",
}
