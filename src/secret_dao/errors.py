from __future__ import annotations


class BridgeError(RuntimeError):
    exit_code: int = 1


class NoAccountAuthorized(BridgeError):
    """The wallet provider denied account access or returned no accounts."""

    exit_code = 2


class RemoteCallFailure(BridgeError):
    """A JSON-RPC request, transaction or contract call was rejected."""

    exit_code = 3


class ConfigError(BridgeError):
    exit_code = 4
