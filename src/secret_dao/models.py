from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional, Union

ONE_WEEK_SECONDS = 3600 * 24 * 7


@dataclass(frozen=True)
class ContractEndpoint:
    """Address and interface descriptor of the deployed contract."""

    address: str
    abi: tuple[dict[str, Any], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "abi", tuple(self.abi))


def _hex_bytes(value: str) -> bytes:
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)


@dataclass(frozen=True)
class HiddenInstruction:
    """One call a proposal performs when executed."""

    contract_id: bytes
    function_name: str
    arguments: tuple[bytes, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HiddenInstruction":
        """Build from a JSON object with hex encoded ``contract_id`` and ``arguments``."""
        contract_id = _hex_bytes(data["contract_id"])
        if len(contract_id) != 32:
            raise ValueError(f"contract_id must be 32 bytes, got {len(contract_id)}")
        return cls(
            contract_id=contract_id,
            function_name=data["function_name"],
            arguments=tuple(_hex_bytes(arg) for arg in data.get("arguments", [])),
        )

    def as_abi(self) -> tuple:
        return (self.contract_id, self.function_name, list(self.arguments))


@dataclass(frozen=True)
class ProposalRequest:
    deadline: int
    total_votes: int = 0
    instructions: tuple[HiddenInstruction, ...] = ()

    @classmethod
    def one_week_out(
        cls,
        now: Optional[float] = None,
        instructions: tuple[HiddenInstruction, ...] = (),
    ) -> "ProposalRequest":
        """A fresh proposal with no votes whose deadline is one week after ``now``."""
        if now is None:
            now = time.time()
        return cls(deadline=int(now) + ONE_WEEK_SECONDS, instructions=tuple(instructions))

    @classmethod
    def from_dict(cls, data: dict[str, Any], now: Optional[float] = None) -> "ProposalRequest":
        """
        Build from a JSON object. ``deadline`` defaults to one week after
        ``now``; ``instructions`` holds HiddenInstruction objects.
        """
        instructions = tuple(HiddenInstruction.from_dict(item) for item in data.get("instructions", []))
        if data.get("deadline") is None:
            request = cls.one_week_out(now=now, instructions=instructions)
        else:
            request = cls(deadline=int(data["deadline"]), instructions=instructions)
        if "total_votes" in data:
            request = cls(request.deadline, int(data["total_votes"]), request.instructions)
        return request

    def as_abi(self) -> tuple:
        return (
            self.total_votes,
            self.deadline,
            [instruction.as_abi() for instruction in self.instructions],
        )


@dataclass(frozen=True)
class ActionOk:
    action: str
    sender: Optional[str] = None
    tx_hash: Optional[str] = None
    value: Any = None

    ok = True
    exit_code = 0


@dataclass(frozen=True)
class ActionFailed:
    action: str
    error: BaseException

    ok = False

    @property
    def exit_code(self) -> int:
        return getattr(self.error, "exit_code", 1)


ActionResult = Union[ActionOk, ActionFailed]
