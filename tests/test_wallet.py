"""Wallet key storage and provider tests (no network)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from eth_account import Account

from conftest import CONTRACT, SENDER
from secret_dao.errors import NoAccountAuthorized, RemoteCallFailure
from secret_dao.wallet.eth import generate_eoa, load_private_key, save_private_key
from secret_dao.wallet.provider import LocalKeyProvider, NodeProvider, build_provider


@pytest.fixture()
def no_key_env(tmp_path: Path):
    env = {k: v for k, v in os.environ.items() if k != "PRIVATE_KEY"}
    with patch.dict(os.environ, env, clear=True):
        with patch("secret_dao.wallet.eth.SECRET_DAO_ENV", tmp_path / "missing" / ".env"):
            yield


class TestKeyStorage:
    def test_generate_eoa(self) -> None:
        private_key, address = generate_eoa()
        assert private_key.startswith("0x") and len(private_key) == 66
        assert Account.from_key(private_key).address == address

    def test_save_keeps_other_entries(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("SECRET_DAO_ADDRESS=0xabc\n", encoding="utf-8")

        save_private_key("0x" + "11" * 32, env_path)

        content = env_path.read_text(encoding="utf-8")
        assert "SECRET_DAO_ADDRESS=0xabc" in content
        assert "PRIVATE_KEY=0x" + "11" * 32 in content

    def test_load_adds_prefix(self) -> None:
        with patch.dict(os.environ, {"PRIVATE_KEY": "22" * 32}):
            assert load_private_key(Path("/nonexistent/.env")) == "0x" + "22" * 32

    def test_load_missing(self, no_key_env) -> None:
        with pytest.raises(ValueError, match="no signing key"):
            load_private_key()


class TestLocalKeyProvider:
    def test_request_accounts(self) -> None:
        private_key, address = generate_eoa()
        assert LocalKeyProvider(private_key).request_accounts() == [address]

    def test_no_key_is_denied(self, no_key_env) -> None:
        with pytest.raises(NoAccountAuthorized):
            LocalKeyProvider().request_accounts()

    def test_signs_and_sends(self) -> None:
        private_key, address = generate_eoa()
        provider = LocalKeyProvider(private_key, rpc_url="http://node", chain_id=31337)
        tx = {"from": address, "to": CONTRACT, "data": "0x8129fc1c", "value": 0, "gas": 200_000}

        with patch("secret_dao.ledger.tx.get_nonce", return_value=4) as nonce, \
                patch("secret_dao.ledger.tx.get_gas_price", return_value=1_000_000_000), \
                patch("secret_dao.ledger.tx.send_raw_transaction", return_value="0xhash") as send:
            assert provider.send_transaction(tx) == "0xhash"

        nonce.assert_called_once_with(address, rpc_url="http://node")
        raw_tx = send.call_args.args[0]
        assert raw_tx.startswith("0x")
        assert Account.recover_transaction(raw_tx) == address

    def test_rejects_foreign_sender(self) -> None:
        private_key, _ = generate_eoa()
        tx = {"from": SENDER, "to": CONTRACT, "data": "0x", "value": 0, "gas": 21_000}
        with pytest.raises(NoAccountAuthorized):
            LocalKeyProvider(private_key).send_transaction(tx)


class TestNodeProvider:
    def test_request_accounts(self) -> None:
        with patch("secret_dao.ledger.rpc._rpc_call", return_value=[SENDER]) as call:
            assert NodeProvider("http://node").request_accounts() == [SENDER]
        assert call.call_args.args[0] == "eth_requestAccounts"

    def test_denied(self) -> None:
        with patch("secret_dao.ledger.rpc._rpc_call", side_effect=RemoteCallFailure("RPC error: User rejected")):
            with pytest.raises(NoAccountAuthorized, match="User rejected"):
                NodeProvider("http://node").request_accounts()

    def test_no_accounts(self) -> None:
        with patch("secret_dao.ledger.rpc._rpc_call", return_value=[]):
            with pytest.raises(NoAccountAuthorized):
                NodeProvider("http://node").request_accounts()

    def test_send_transaction(self) -> None:
        tx = {"from": SENDER, "to": CONTRACT, "data": "0x8129fc1c", "value": 0, "gas": 500_000}
        with patch("secret_dao.ledger.rpc._rpc_call", return_value="0xhash") as call:
            assert NodeProvider("http://node").send_transaction(tx) == "0xhash"

        method, params = call.call_args.args
        assert method == "eth_sendTransaction"
        assert params[0]["gas"] == "0x7a120"
        assert params[0]["from"] == SENDER


class TestBuildProvider:
    def test_kinds(self) -> None:
        assert isinstance(build_provider("local"), LocalKeyProvider)
        assert isinstance(build_provider("node", rpc_url="http://node"), NodeProvider)

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            build_provider("ledger-nano")
