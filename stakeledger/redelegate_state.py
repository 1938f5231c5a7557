"""Redelegation tracking account state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .consts import DEFAULT_PUBKEY, PUBKEY_BYTES, U64_MAX
from .lockup import Clock


class State(IntEnum):
    """Progress of a redelegation."""

    INITIALIZED = 0
    REDELEGATING = 1
    COMPLETED = 2


def _key(value: bytes, name: str) -> bytes:
    key = bytes(value)
    if len(key) != PUBKEY_BYTES:
        raise ValueError(f"{name} must be {PUBKEY_BYTES} bytes")
    return key


@dataclass(frozen=True)
class StartRedelegation:
    """Request to move stake to a new validator."""

    new_validator: bytes
    stake_amount: int
    bump: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "new_validator", _key(self.new_validator, "new validator"))
        if not 0 <= self.stake_amount <= U64_MAX:
            raise ValueError("stake amount must fit in 64 bits")
        if not 0 <= self.bump <= 0xFF:
            raise ValueError("bump must fit in one byte")


@dataclass
class RedelegateState:
    """Owner, validators and progress of a redelegation."""

    SEED: ClassVar[str] = "redelegate"

    is_initialized: bool = False
    owner: bytes = DEFAULT_PUBKEY
    state: State = State.INITIALIZED
    current_validator: bytes = DEFAULT_PUBKEY
    new_validator: bytes = DEFAULT_PUBKEY
    stake_amount: int = 0
    redelegation_timestamp: int = 0

    def __post_init__(self) -> None:
        self.owner = _key(self.owner, "owner")
        self.current_validator = _key(self.current_validator, "current validator")
        self.new_validator = _key(self.new_validator, "new validator")
        self.state = State(self.state)

    def start_redelegation(self, ix_data: StartRedelegation, clock: Clock) -> None:
        """Record the target validator and when the redelegation began."""
        self.new_validator = ix_data.new_validator
        self.state = State.REDELEGATING
        self.redelegation_timestamp = clock.unix_timestamp

    def complete_redelegation(self) -> None:
        """Make the new validator current and reset the pending fields."""
        self.current_validator = self.new_validator
        self.new_validator = DEFAULT_PUBKEY
        self.state = State.COMPLETED
        self.redelegation_timestamp = 0