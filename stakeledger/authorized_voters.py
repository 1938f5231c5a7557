"""Authorized voters of a vote account, keyed by the epoch they take effect."""

from __future__ import annotations

from collections.abc import Iterator


class AuthorizedVoters:
    """Epoch-ordered map of authorized voter keys."""

    def __init__(self, epoch: int, pubkey: bytes) -> None:
        self._voters: dict[int, bytes] = {epoch: bytes(pubkey)}

    def _lookup(self, epoch: int) -> tuple[bytes, bool] | None:
        """Voter for the epoch, and whether the map holds an entry for it exactly."""
        voter = self._voters.get(epoch)
        if voter is not None:
            return voter, True
        earlier = [known for known in self._voters if known < epoch]
        if not earlier:
            return None
        # With no entry for this epoch the latest earlier voter stays in place.
        return self._voters[max(earlier)], False

    def get_authorized_voter(self, epoch: int) -> bytes | None:
        found = self._lookup(epoch)
        return None if found is None else found[0]

    def get_and_cache_authorized_voter_for_epoch(self, epoch: int) -> bytes | None:
        """Look up the voter and record it for this epoch if it was inherited."""
        found = self._lookup(epoch)
        if found is None:
            return None
        voter, existed = found
        if not existed:
            self._voters[epoch] = voter
        return voter

    def insert(self, epoch: int, authorized_voter: bytes) -> None:
        self._voters[epoch] = bytes(authorized_voter)

    def purge_authorized_voters(self, current_epoch: int) -> bool:
        """Drop entries for epochs before the current one; at least one must remain."""
        remaining = {
            epoch: voter for epoch, voter in self._voters.items() if epoch >= current_epoch
        }
        if not remaining:
            raise RuntimeError("purging would leave no authorized voter")
        self._voters = remaining
        return True

    def first(self) -> tuple[int, bytes] | None:
        if not self._voters:
            return None
        epoch = min(self._voters)
        return epoch, self._voters[epoch]

    def last(self) -> tuple[int, bytes] | None:
        if not self._voters:
            return None
        epoch = max(self._voters)
        return epoch, self._voters[epoch]

    def __len__(self) -> int:
        return len(self._voters)

    def __contains__(self, epoch: object) -> bool:
        return epoch in self._voters

    def __iter__(self) -> Iterator[tuple[int, bytes]]:
        return iter(sorted(self._voters.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthorizedVoters):
            return NotImplemented
        return self._voters == other._voters

    def __repr__(self) -> str:
        return f"AuthorizedVoters({dict(sorted(self._voters.items()))!r})"