"""Arguments of the set-lockup instruction and their wire encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .consts import PUBKEY_BYTES
from .errors import ProgramError, ProgramErrorKind

_I64 = struct.Struct("<q")
_U64 = struct.Struct("<Q")


def _invalid() -> ProgramError:
    return ProgramError(ProgramErrorKind.INVALID_INSTRUCTION_DATA)


def _timestamp(data: bytes, offset: int) -> int:
    return _I64.unpack_from(data, offset)[0]


def _epoch(data: bytes, offset: int) -> int:
    return _U64.unpack_from(data, offset)[0]


def _key(data: bytes, offset: int) -> bytes:
    return data[offset : offset + PUBKEY_BYTES]


@dataclass(frozen=True)
class LockupArgs:
    """Optional new lockup values; fields left as None are not changed."""

    unix_timestamp: int | None = None
    epoch: int | None = None
    custodian: bytes | None = None

    def __post_init__(self) -> None:
        if self.custodian is not None:
            custodian = bytes(self.custodian)
            if len(custodian) != PUBKEY_BYTES:
                raise ValueError(f"custodian must be {PUBKEY_BYTES} bytes")
            object.__setattr__(self, "custodian", custodian)

    @classmethod
    def from_data(cls, data: bytes) -> LockupArgs:
        """Decode instruction data: each field is a tag byte followed by its value if set."""
        data = bytes(data)
        size = len(data)
        if size == 3:
            if 1 in data:
                raise _invalid()
            return cls()
        if size == 11:
            if data[0] == 1 and data[9] == 0 and data[10] == 0:
                return cls(unix_timestamp=_timestamp(data, 1))
            if data[0] == 0 and data[1] == 1 and data[10] == 0:
                return cls(epoch=_epoch(data, 2))
            raise _invalid()
        if size == 19:
            if not (data[0] == 1 and data[9] == 1 and data[18] == 0):
                raise _invalid()
            return cls(unix_timestamp=_timestamp(data, 1), epoch=_epoch(data, 10))
        if size == 35:
            if not (data[0] == 0 and data[1] == 0 and data[2] == 1):
                raise _invalid()
            return cls(custodian=_key(data, 3))
        if size == 43:
            if data[0] == 1 and data[9] == 0 and data[10] == 1:
                return cls(unix_timestamp=_timestamp(data, 1), custodian=_key(data, 11))
            if data[0] == 0 and data[1] == 1 and data[10] == 1:
                return cls(epoch=_epoch(data, 2), custodian=_key(data, 11))
            raise _invalid()
        if size == 51:
            if not (data[0] == 1 and data[9] == 1 and data[18] == 1):
                raise _invalid()
            return cls(
                unix_timestamp=_timestamp(data, 1),
                epoch=_epoch(data, 10),
                custodian=_key(data, 19),
            )
        raise _invalid()

    def to_bytes(self) -> bytes:
        """Encode in the layout that from_data reads."""
        fields = (
            (self.unix_timestamp, _I64.pack),
            (self.epoch, _U64.pack),
            (self.custodian, bytes),
        )
        return b"".join(
            b"\x00" if value is None else b"\x01" + encode(value) for value, encode in fields
        )