"""Arguments of the authorize-checked-with-seed instruction."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .authorized import StakeAuthorize
from .consts import PUBKEY_BYTES
from .errors import ProgramError, ProgramErrorKind

_SEED_LEN = struct.Struct("<I")
_MIN_DATA_LEN = 41


def _invalid() -> ProgramError:
    return ProgramError(ProgramErrorKind.INVALID_INSTRUCTION_DATA)


@dataclass(frozen=True)
class AuthorizeCheckedWithSeedArgs:
    """Authority kind, derivation seed and owner used to authorize via a derived key."""

    stake_authorize: StakeAuthorize
    authority_seed: str
    authority_owner: bytes

    def __post_init__(self) -> None:
        owner = bytes(self.authority_owner)
        if len(owner) != PUBKEY_BYTES:
            raise ValueError(f"authority owner must be {PUBKEY_BYTES} bytes")
        object.__setattr__(self, "authority_owner", owner)
        object.__setattr__(self, "stake_authorize", StakeAuthorize(self.stake_authorize))

    @property
    def authority_seed_len(self) -> int:
        return len(self.authority_seed.encode("utf-8"))

    def serialize(self) -> bytes:
        """Authority byte, seed length (u32 LE), seed, owner key."""
        seed = self.authority_seed.encode("utf-8")
        return (
            bytes([self.stake_authorize])
            + _SEED_LEN.pack(len(seed))
            + seed
            + self.authority_owner
        )

    @classmethod
    def deserialize(cls, data: bytes) -> AuthorizeCheckedWithSeedArgs:
        """Decode the layout written by serialize; trailing bytes are ignored."""
        data = bytes(data)
        if len(data) < _MIN_DATA_LEN:
            raise ProgramError(ProgramErrorKind.ACCOUNT_DATA_TOO_SMALL)
        try:
            stake_authorize = StakeAuthorize(data[0])
        except ValueError:
            raise _invalid() from None
        offset = 1
        (seed_len,) = _SEED_LEN.unpack_from(data, offset)
        offset += _SEED_LEN.size
        if len(data) < offset + seed_len:
            raise _invalid()
        try:
            seed = data[offset : offset + seed_len].decode("utf-8")
        except UnicodeDecodeError:
            raise _invalid() from None
        offset += seed_len
        if len(data) < offset + PUBKEY_BYTES:
            raise _invalid()
        return cls(
            stake_authorize=stake_authorize,
            authority_seed=seed,
            authority_owner=data[offset : offset + PUBKEY_BYTES],
        )