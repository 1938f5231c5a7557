"""Delegated stake and its warmup and cooldown across epochs."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, Union

from .consts import (
    DEFAULT_PUBKEY,
    DEFAULT_WARMUP_COOLDOWN_RATE,
    EPOCH_MAX,
    NEW_WARMUP_COOLDOWN_RATE,
    PUBKEY_BYTES,
    U64_MAX,
)


@dataclass(frozen=True)
class StakeActivationStatus:
    """Effective, activating and deactivating stake; also a stake history entry."""

    effective: int = 0
    activating: int = 0
    deactivating: int = 0


class _GetEntry(Protocol):
    def get_entry(self, epoch: int) -> StakeActivationStatus | None: ...


StakeHistory = Union[_GetEntry, Mapping[int, StakeActivationStatus]]


def _history_entry(history: StakeHistory, epoch: int) -> StakeActivationStatus | None:
    getter = getattr(history, "get_entry", None)
    if getter is not None:
        return getter(epoch)
    return history.get(epoch)


def _to_u64(value: float) -> int:
    """Convert like a saturating float-to-u64 cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U64_MAX:
        return U64_MAX
    return int(value)


def warmup_cooldown_rate(current_epoch: int, new_rate_activation_epoch: int | None) -> float:
    """Fraction of cluster stake that may change state in the given epoch."""
    threshold = EPOCH_MAX if new_rate_activation_epoch is None else new_rate_activation_epoch
    if current_epoch < threshold:
        return DEFAULT_WARMUP_COOLDOWN_RATE
    return NEW_WARMUP_COOLDOWN_RATE


@dataclass
class Delegation:
    """Stake delegated to a vote account, with the epochs it started and ended."""

    voter_pubkey: bytes = DEFAULT_PUBKEY
    stake: int = 0
    activation_epoch: int = 0
    deactivation_epoch: int = EPOCH_MAX
    warmup_cooldown_rate: float = DEFAULT_WARMUP_COOLDOWN_RATE

    def __post_init__(self) -> None:
        self.voter_pubkey = bytes(self.voter_pubkey)
        if len(self.voter_pubkey) != PUBKEY_BYTES:
            raise ValueError(f"voter pubkey must be {PUBKEY_BYTES} bytes")

    def is_bootstrap(self) -> bool:
        """Bootstrap stake is effective from the start."""
        return self.activation_epoch == EPOCH_MAX

    def stake_at(
        self,
        epoch: int,
        history: StakeHistory,
        new_rate_activation_epoch: int | None,
    ) -> int:
        """Effective stake at the given epoch."""
        return self.stake_activating_and_deactivating(
            epoch, history, new_rate_activation_epoch
        ).effective

    def stake_activating_and_deactivating(
        self,
        target_epoch: int,
        history: StakeHistory,
        new_rate_activation_epoch: int | None,
    ) -> StakeActivationStatus:
        """Split the delegated stake into effective, activating and deactivating parts."""
        effective_stake, activating_stake = self._stake_and_activating(
            target_epoch, history, new_rate_activation_epoch
        )

        if target_epoch < self.deactivation_epoch:
            return StakeActivationStatus(effective=effective_stake, activating=activating_stake)
        if target_epoch == self.deactivation_epoch:
            # Only what was activated can deactivate.
            return StakeActivationStatus(effective=effective_stake, deactivating=effective_stake)

        at_deactivation = _history_entry(history, self.deactivation_epoch)
        if at_deactivation is None:
            # No history, or dropped out of it: assume fully deactivated.
            return StakeActivationStatus()

        prev_epoch = self.deactivation_epoch
        prev_cluster_stake = at_deactivation
        cluster_deactivating = at_deactivation.deactivating
        cluster_effective = at_deactivation.effective
        current_effective_stake = effective_stake
        while True:
            current_epoch = prev_epoch + 1
            # No deactivating stake at the previous epoch: fully undelegated by now.
            if prev_cluster_stake.deactivating == 0:
                break
            weight = current_effective_stake / cluster_deactivating
            rate = warmup_cooldown_rate(current_epoch, new_rate_activation_epoch)
            newly_not_effective_cluster_stake = cluster_effective * rate
            newly_not_effective_stake = max(
                _to_u64(weight * newly_not_effective_cluster_stake), 1
            )
            current_effective_stake = max(
                current_effective_stake - newly_not_effective_stake, 0
            )
            if current_effective_stake == 0:
                break
            if current_epoch >= target_epoch:
                break
            current_cluster_stake = _history_entry(history, current_epoch)
            if current_cluster_stake is None:
                break
            prev_epoch = current_epoch
            prev_cluster_stake = current_cluster_stake

        return StakeActivationStatus(
            effective=current_effective_stake, deactivating=current_effective_stake
        )

    def _stake_and_activating(
        self,
        target_epoch: int,
        history: StakeHistory,
        new_rate_activation_epoch: int | None,
    ) -> tuple[int, int]:
        """Effective and activating stake, ignoring deactivation."""
        delegated = self.stake
        if self.is_bootstrap():
            return delegated, 0
        if self.activation_epoch == self.deactivation_epoch:
            # Activated and deactivated at once: no stake at any epoch.
            return 0, 0
        if target_epoch == self.activation_epoch:
            return 0, delegated
        if target_epoch < self.activation_epoch:
            return 0, 0

        at_activation = _history_entry(history, self.activation_epoch)
        if at_activation is None:
            # No history, or dropped out of it: assume fully effective.
            return delegated, 0

        prev_epoch = self.activation_epoch
        prev_cluster_stake = at_activation
        current_effective_stake = 0
        while True:
            current_epoch = prev_epoch + 1
            # No activating stake at the previous epoch: fully effective by now.
            if prev_cluster_stake.activating == 0:
                break
            remaining_activating_stake = delegated - current_effective_stake
            weight = remaining_activating_stake / prev_cluster_stake.activating
            rate = warmup_cooldown_rate(current_epoch, new_rate_activation_epoch)
            newly_effective_cluster_stake = prev_cluster_stake.effective * rate
            newly_effective_stake = max(_to_u64(weight * newly_effective_cluster_stake), 1)
            current_effective_stake += newly_effective_stake
            if current_effective_stake >= delegated:
                current_effective_stake = delegated
                break
            if current_epoch >= target_epoch or current_epoch >= self.deactivation_epoch:
                break
            current_cluster_stake = _history_entry(history, current_epoch)
            if current_cluster_stake is None:
                break
            prev_epoch = current_epoch
            prev_cluster_stake = current_cluster_stake

        return current_effective_stake, delegated - current_effective_stake