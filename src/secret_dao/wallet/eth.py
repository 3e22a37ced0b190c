"""
Local signing key for the Secret DAO ``local`` wallet provider.

LocalKeyProvider signs contract transactions with the key stored as
PRIVATE_KEY in ~/.secret-dao/.env (the same file that may also hold
SECRET_DAO_ADDRESS, SECRET_DAO_RPC and friends). An exported PRIVATE_KEY
takes precedence over the file.
"""

from __future__ import annotations

import os
import secrets
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount


SECRET_DAO_DIR = Path.home() / ".secret-dao"
SECRET_DAO_ENV = SECRET_DAO_DIR / ".env"


def generate_eoa() -> tuple[str, str]:
    """Create a fresh signing key. Returns ``(private_key_hex, checksummed_address)``."""
    private_key = "0x" + secrets.token_hex(32)
    return private_key, Account.from_key(private_key).address


def save_private_key(private_key: str, env_path: Optional[Path] = None) -> Path:
    """
    Store the signing key in the Secret DAO env file.

    Contract and RPC settings already in the file are preserved; only
    PRIVATE_KEY is replaced. On POSIX the file is made owner-readable only.
    """
    env_path = env_path or SECRET_DAO_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    settings = {k: v for k, v in dotenv_values(env_path).items() if v is not None} if env_path.exists() else {}
    settings["PRIVATE_KEY"] = private_key

    env_path.write_text("".join(f"{k}={v}\n" for k, v in settings.items()), encoding="utf-8")
    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Resolve the key the local provider signs with.

    Raises:
        ValueError: If no PRIVATE_KEY is exported or stored
    """
    env_path = env_path or SECRET_DAO_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(
            f"The local wallet provider has no signing key: export PRIVATE_KEY, "
            f"add it to {env_path}, run 'secret-dao keygen', "
            f"or use --provider node."
        )

    return private_key if private_key.startswith("0x") else "0x" + private_key


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    """The signer for ``private_key``, or for the stored key when None."""
    return Account.from_key(private_key or load_private_key())
