"""
ABI Loader - Loads the contract interface descriptor.

The package bundles contracts/SecretDao.json. A different descriptor can be
supplied as a path, either a bare ABI list or a Foundry/Hardhat artifact
with an "abi" key.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

BUNDLED_ABI = Path(__file__).resolve().parent.parent / "contracts" / "SecretDao.json"


@lru_cache(maxsize=16)
def _load_abi_file(path: str) -> tuple[dict[str, Any], ...]:
    abi_path = Path(path)
    if not abi_path.exists():
        raise FileNotFoundError(f"ABI not found: {abi_path}")

    with abi_path.open("r", encoding="utf-8") as f:
        artifact = json.load(f)

    if isinstance(artifact, dict):
        artifact = artifact.get("abi")
    if not isinstance(artifact, list):
        raise ValueError(f"No ABI list in {abi_path}")

    return tuple(artifact)


def load_abi(path: Optional[str | Path] = None) -> tuple[dict[str, Any], ...]:
    """
    Load a contract ABI.

    Args:
        path: ABI or artifact JSON file (default: bundled SecretDao ABI)

    Returns:
        ABI entries as a tuple of dicts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no ABI list
    """
    return _load_abi_file(str(Path(path).expanduser().resolve() if path else BUNDLED_ABI))


def find_function(abi: Any, function_name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def canonical_type(param: dict[str, Any]) -> str:
    """Expand ``tuple`` parameters into their ``(a,b,...)`` form, keeping array suffixes."""
    param_type = param["type"]
    if param_type.startswith("tuple"):
        inner = ",".join(canonical_type(c) for c in param.get("components", []))
        return f"({inner}){param_type[len('tuple'):]}"
    return param_type


def input_types(func: dict[str, Any]) -> list[str]:
    return [canonical_type(p) for p in func.get("inputs", [])]


def output_types(func: dict[str, Any]) -> list[str]:
    return [canonical_type(p) for p in func.get("outputs", [])]
