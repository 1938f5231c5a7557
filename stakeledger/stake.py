"""A delegation together with the vote credits it has observed."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .consts import EPOCH_MAX
from .delegation import Delegation, StakeHistory
from .errors import StakeError, stake_error


@dataclass
class Stake:
    """Delegated stake and the vote credits seen at delegation or redemption."""

    delegation: Delegation = field(default_factory=Delegation)
    credits_observed: int = 0

    def stake_at(
        self,
        epoch: int,
        history: StakeHistory,
        new_rate_activation_epoch: int | None,
    ) -> int:
        """Effective stake at the given epoch."""
        return self.delegation.stake_at(epoch, history, new_rate_activation_epoch)

    def split(self, remaining_stake_delta: int, split_stake_amount: int) -> Stake:
        """Take stake off this one and return a new stake of the split amount."""
        if remaining_stake_delta > self.delegation.stake:
            raise stake_error(StakeError.INSUFFICIENT_STAKE)
        self.delegation.stake = max(self.delegation.stake - remaining_stake_delta, 0)
        return Stake(
            delegation=replace(self.delegation, stake=split_stake_amount),
            credits_observed=self.credits_observed,
        )

    def deactivate(self, epoch: int) -> None:
        """Mark the stake as deactivated from the given epoch."""
        if self.delegation.deactivation_epoch != EPOCH_MAX:
            raise stake_error(StakeError.ALREADY_DEACTIVATED)
        self.delegation.deactivation_epoch = epoch