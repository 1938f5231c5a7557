"""Rules and arithmetic for merging two stake accounts."""

from __future__ import annotations

import logging

from .consts import EPOCH_MAX, U64_MAX
from .delegation import Delegation
from .errors import ProgramError, ProgramErrorKind, StakeError, stake_error
from .lockup import Clock
from .meta import Meta
from .stake import Stake

_U128_MAX = (1 << 128) - 1

log = logging.getLogger(__name__)


def checked_add(a: int, b: int) -> int:
    """Add two lamport amounts, failing with insufficient funds on u64 overflow."""
    total = a + b
    if total > U64_MAX:
        raise ProgramError(ProgramErrorKind.INSUFFICIENT_FUNDS)
    return total


def metas_can_merge(stake: Meta, source: Meta, clock: Clock) -> None:
    """Raise a merge mismatch unless authorities match and lockups are compatible.

    Lockups may differ as long as neither is still in force. The rent-exempt
    reserve plays no part.
    """
    can_merge_lockups = stake.lockup == source.lockup or (
        not stake.lockup.is_in_force(clock, None)
        and not source.lockup.is_in_force(clock, None)
    )
    if stake.authorized == source.authorized and can_merge_lockups:
        return
    log.info("Unable to merge due to metadata mismatch")
    raise stake_error(StakeError.MERGE_MISMATCH)


def active_delegations_can_merge(stake: Delegation, source: Delegation) -> None:
    """Raise a merge mismatch unless both delegate to one voter and neither is deactivated."""
    if stake.voter_pubkey != source.voter_pubkey:
        log.info("Unable to merge due to voter mismatch")
        raise stake_error(StakeError.MERGE_MISMATCH)
    if stake.deactivation_epoch == EPOCH_MAX and source.deactivation_epoch == EPOCH_MAX:
        return
    log.info("Unable to merge due to stake deactivation")
    raise stake_error(StakeError.MERGE_MISMATCH)


def stake_weighted_credits_observed(
    stake: Stake, absorbed_lamports: int, absorbed_credits_observed: int
) -> int | None:
    """Stake-weighted average of credits observed, rounded up.

    Keeping rewards unchanged across a merge requires
    c3 = (c1 * s1 + c2 * s2) / (s1 + s2); the ceiling discards fractional
    credits as merge friction. Returns None when the arithmetic overflows or
    the result does not fit in 64 bits.
    """
    if stake.credits_observed == absorbed_credits_observed:
        return stake.credits_observed

    own_stake = stake.delegation.stake
    total_stake = own_stake + absorbed_lamports
    if total_stake > U64_MAX:
        return None
    stake_weighted_credits = stake.credits_observed * own_stake
    absorbed_weighted_credits = absorbed_credits_observed * absorbed_lamports
    if stake_weighted_credits > _U128_MAX or absorbed_weighted_credits > _U128_MAX:
        return None
    numerator = stake_weighted_credits + absorbed_weighted_credits
    if numerator > _U128_MAX:
        return None
    numerator += total_stake
    if numerator > _U128_MAX:
        return None
    numerator -= 1
    if numerator < 0 or total_stake == 0:
        return None
    result = numerator // total_stake
    return result if result <= U64_MAX else None


def merge_delegation_stake_and_credits_observed(
    stake: Stake, absorbed_lamports: int, absorbed_credits_observed: int
) -> None:
    """Fold absorbed lamports and credits into the stake in place."""
    credits = stake_weighted_credits_observed(
        stake, absorbed_lamports, absorbed_credits_observed
    )
    if credits is None:
        raise ProgramError(ProgramErrorKind.ARITHMETIC_OVERFLOW)
    stake.credits_observed = credits
    stake.delegation.stake = checked_add(stake.delegation.stake, absorbed_lamports)