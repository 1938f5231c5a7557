"""Stake account metadata: rent reserve, authorities and lockup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .authorized import Authorized
from .errors import ProgramError, ProgramErrorKind
from .lockup import Clock, Lockup
from .lockup_args import LockupArgs


@dataclass(frozen=True)
class SetLockupSignerArgs:
    """Which of the relevant authorities signed a set-lockup request."""

    has_custodian_signer: bool
    has_withdrawer_signer: bool

    @classmethod
    def from_signers(cls, meta: Meta, signers: Iterable[bytes]) -> SetLockupSignerArgs:
        """Look for the lockup custodian and the withdrawer among the signers."""
        signed = {bytes(signer) for signer in signers}
        return cls(
            has_custodian_signer=meta.lockup.custodian in signed,
            has_withdrawer_signer=meta.authorized.withdrawer in signed,
        )


@dataclass
class Meta:
    """Metadata shared by initialized and delegated stake accounts."""

    rent_exempt_reserve: int = 0
    authorized: Authorized = field(default_factory=Authorized)
    lockup: Lockup = field(default_factory=Lockup)

    def set_lockup(
        self, lockup: LockupArgs, signer_args: SetLockupSignerArgs, clock: Clock
    ) -> None:
        """Apply new lockup values.

        While the lockup is in force only the custodian may change it;
        afterwards the withdrawer may set a new one.
        """
        if self.lockup.is_in_force(clock, None):
            if not signer_args.has_custodian_signer:
                raise ProgramError(ProgramErrorKind.MISSING_REQUIRED_SIGNATURE)
        elif not signer_args.has_withdrawer_signer:
            raise ProgramError(ProgramErrorKind.MISSING_REQUIRED_SIGNATURE)
        if lockup.unix_timestamp is not None:
            self.lockup.unix_timestamp = lockup.unix_timestamp
        if lockup.epoch is not None:
            self.lockup.epoch = lockup.epoch
        if lockup.custodian is not None:
            self.lockup.custodian = lockup.custodian