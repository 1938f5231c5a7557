import pytest

from stakeledger.consts import (
    DEFAULT_WARMUP_COOLDOWN_RATE,
    EPOCH_MAX,
    NEW_WARMUP_COOLDOWN_RATE,
)
from stakeledger.delegation import Delegation, StakeActivationStatus, warmup_cooldown_rate

VOTER = bytes(range(32))


class _History:
    def __init__(self, entries):
        self._entries = entries

    def get_entry(self, epoch):
        return self._entries.get(epoch)


def test_warmup_rate_without_activation_epoch_is_default():
    assert warmup_cooldown_rate(5, None) == DEFAULT_WARMUP_COOLDOWN_RATE


def test_warmup_rate_switches_at_activation_epoch():
    assert warmup_cooldown_rate(5, 10) == DEFAULT_WARMUP_COOLDOWN_RATE
    assert warmup_cooldown_rate(10, 10) == NEW_WARMUP_COOLDOWN_RATE
    assert warmup_cooldown_rate(5, 0) == NEW_WARMUP_COOLDOWN_RATE


def test_defaults():
    delegation = Delegation(VOTER)
    assert delegation.deactivation_epoch == EPOCH_MAX
    assert delegation.warmup_cooldown_rate == DEFAULT_WARMUP_COOLDOWN_RATE
    assert not delegation.is_bootstrap()


def test_bad_voter_length_rejected():
    with pytest.raises(ValueError):
        Delegation(b"\x01" * 5)


def test_bootstrap_is_fully_effective():
    delegation = Delegation(VOTER, stake=1234, activation_epoch=EPOCH_MAX)
    assert delegation.is_bootstrap()
    status = delegation.stake_activating_and_deactivating(3, {}, None)
    assert status == StakeActivationStatus(effective=1234)


def test_instant_deactivation_has_no_stake():
    delegation = Delegation(VOTER, stake=500, activation_epoch=4, deactivation_epoch=4)
    assert delegation.stake_activating_and_deactivating(3, {}, None) == StakeActivationStatus()
    assert delegation.stake_at(10, {}, None) == 0


def test_all_activating_at_activation_epoch():
    delegation = Delegation(VOTER, stake=500, activation_epoch=4)
    status = delegation.stake_activating_and_deactivating(4, {}, None)
    assert status == StakeActivationStatus(activating=500)


def test_nothing_before_activation_epoch():
    delegation = Delegation(VOTER, stake=500, activation_epoch=4)
    assert delegation.stake_activating_and_deactivating(2, {}, None) == StakeActivationStatus()


def test_without_history_fully_effective():
    delegation = Delegation(VOTER, stake=500, activation_epoch=4)
    assert delegation.stake_at(9, {}, None) == 500


def test_warmup_worked_example():
    history = {
        0: StakeActivationStatus(effective=200, activating=100),
        1: StakeActivationStatus(effective=250, activating=50),
    }
    delegation = Delegation(VOTER, stake=100, activation_epoch=0)
    first = delegation.stake_activating_and_deactivating(1, history, None)
    assert first == StakeActivationStatus(effective=50, activating=50)
    assert delegation.stake_at(2, history, None) == 100


def test_warmup_invariants_with_get_entry_history():
    entries = {
        epoch: StakeActivationStatus(effective=10_000 + epoch * 1000, activating=4000)
        for epoch in range(20)
    }
    history = _History(entries)
    delegation = Delegation(VOTER, stake=4000, activation_epoch=0)
    previous = 0
    for epoch in range(1, 20):
        status = delegation.stake_activating_and_deactivating(epoch, history, 0)
        assert status.effective + status.activating == 4000
        assert status.deactivating == 0
        assert status.effective >= previous
        previous = status.effective
    assert previous == 4000


def test_deactivation_epoch_deactivates_effective():
    delegation = Delegation(VOTER, stake=700, activation_epoch=EPOCH_MAX, deactivation_epoch=5)
    status = delegation.stake_activating_and_deactivating(5, {}, None)
    assert status == StakeActivationStatus(effective=700, deactivating=700)


def test_after_deactivation_without_history_is_inactive():
    delegation = Delegation(VOTER, stake=700, activation_epoch=EPOCH_MAX, deactivation_epoch=5)
    assert delegation.stake_activating_and_deactivating(6, {}, None) == StakeActivationStatus()


def test_cooldown_is_partial_and_decreasing():
    history = {
        epoch: StakeActivationStatus(effective=2000, deactivating=1000) for epoch in range(5, 12)
    }
    delegation = Delegation(VOTER, stake=1000, activation_epoch=EPOCH_MAX, deactivation_epoch=5)
    previous = 1000
    for epoch in range(6, 12):
        status = delegation.stake_activating_and_deactivating(epoch, history, None)
        assert status.effective == status.deactivating
        assert status.activating == 0
        assert status.deactivating <= previous
        previous = status.deactivating
    first = delegation.stake_activating_and_deactivating(6, history, None)
    assert 0 < first.deactivating < 1000


def test_cooldown_stops_when_cluster_has_nothing_deactivating():
    history = {5: StakeActivationStatus(effective=2000, deactivating=0)}
    delegation = Delegation(VOTER, stake=300, activation_epoch=EPOCH_MAX, deactivation_epoch=5)
    status = delegation.stake_activating_and_deactivating(8, history, None)
    assert status == StakeActivationStatus(effective=300, deactivating=300)