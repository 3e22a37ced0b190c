__all__ = [
    # Bridge
    "ACTIONS",
    "TRIGGERS",
    "ContractBridge",
    "ConsoleReporter",
    "Reporter",
    # Configuration
    "BridgeConfig",
    # Models
    "ActionFailed",
    "ActionOk",
    "ActionResult",
    "ContractEndpoint",
    "HiddenInstruction",
    "ProposalRequest",
    "ONE_WEEK_SECONDS",
    # Errors
    "BridgeError",
    "ConfigError",
    "NoAccountAuthorized",
    "RemoteCallFailure",
    # Ledger
    "ContractClient",
    "load_abi",
    # Wallet
    "LocalKeyProvider",
    "NodeProvider",
    "WalletProvider",
    "build_provider",
    "generate_eoa",
    "load_private_key",
]

from .errors import BridgeError, ConfigError, NoAccountAuthorized, RemoteCallFailure
from .models import (
    ONE_WEEK_SECONDS,
    ActionFailed,
    ActionOk,
    ActionResult,
    ContractEndpoint,
    HiddenInstruction,
    ProposalRequest,
)
from .ledger.abi import load_abi
from .ledger.client import ContractClient
from .wallet.eth import generate_eoa, load_private_key
from .wallet.provider import LocalKeyProvider, NodeProvider, WalletProvider, build_provider
from .config import BridgeConfig
from .bridge import ACTIONS, TRIGGERS, ConsoleReporter, ContractBridge, Reporter
