"""Clock snapshot and the lockup that restricts withdrawals until it expires."""

from __future__ import annotations

from dataclasses import dataclass

from .consts import DEFAULT_PUBKEY, PUBKEY_BYTES


@dataclass(frozen=True)
class Clock:
    """The cluster clock as seen by a program."""

    slot: int = 0
    epoch_start_timestamp: int = 0
    epoch: int = 0
    leader_schedule_epoch: int = 0
    unix_timestamp: int = 0


@dataclass
class Lockup:
    """Withdrawal lockup, lifted by time, by epoch, or by the custodian's signature."""

    unix_timestamp: int = 0
    epoch: int = 0
    custodian: bytes = DEFAULT_PUBKEY

    def __post_init__(self) -> None:
        self.custodian = bytes(self.custodian)
        if len(self.custodian) != PUBKEY_BYTES:
            raise ValueError(f"custodian must be {PUBKEY_BYTES} bytes")

    def is_in_force(self, clock: Clock, custodian: bytes | None = None) -> bool:
        """Whether the lockup still applies; the custodian is never held by it."""
        if custodian is not None and bytes(custodian) == self.custodian:
            return False
        return self.unix_timestamp > clock.unix_timestamp or self.epoch > clock.epoch