"""Staker and withdrawer authorities of a stake account."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from .consts import DEFAULT_PUBKEY
from .errors import ProgramError, ProgramErrorKind, StakeError, stake_error
from .lockup import Clock, Lockup


class StakeAuthorize(IntEnum):
    """Which authority an operation concerns."""

    STAKER = 0
    WITHDRAWER = 1


def _signer_set(signers: Iterable[bytes]) -> frozenset[bytes]:
    return frozenset(bytes(signer) for signer in signers)


@dataclass
class Authorized:
    """The keys allowed to manage stake and to withdraw."""

    staker: bytes = DEFAULT_PUBKEY
    withdrawer: bytes = DEFAULT_PUBKEY

    def __post_init__(self) -> None:
        self.staker = bytes(self.staker)
        self.withdrawer = bytes(self.withdrawer)

    @classmethod
    def auto(cls, authorized: bytes) -> Authorized:
        """Use one key for both authorities."""
        return cls(staker=authorized, withdrawer=authorized)

    def check(self, signers: Iterable[bytes], stake_authorize: StakeAuthorize) -> None:
        """Raise unless the requested authority is among the signers."""
        required = self.staker if stake_authorize is StakeAuthorize.STAKER else self.withdrawer
        if required not in _signer_set(signers):
            raise ProgramError(ProgramErrorKind.MISSING_REQUIRED_SIGNATURE)

    def authorize(
        self,
        signers: Iterable[bytes],
        new_authorized: bytes,
        stake_authorize: StakeAuthorize,
        lockup_custodian_args: tuple[Lockup, Clock, bytes | None] | None = None,
    ) -> None:
        """Replace an authority after checking signatures and, for withdrawers, the lockup."""
        signed = _signer_set(signers)
        if stake_authorize is StakeAuthorize.STAKER:
            # Either the staker or the withdrawer may change the staker.
            if self.staker not in signed and self.withdrawer not in signed:
                raise ProgramError(ProgramErrorKind.MISSING_REQUIRED_SIGNATURE)
            self.staker = bytes(new_authorized)
            return

        if lockup_custodian_args is not None:
            lockup, clock, custodian = lockup_custodian_args
            if lockup.is_in_force(clock, None):
                if custodian is None:
                    raise stake_error(StakeError.CUSTODIAN_MISSING)
                if bytes(custodian) not in signed:
                    raise stake_error(StakeError.CUSTODIAN_SIGNATURE_MISSING)
                if lockup.is_in_force(clock, custodian):
                    raise stake_error(StakeError.LOCKUP_IN_FORCE)
        self.check(signed, stake_authorize)
        self.withdrawer = bytes(new_authorized)