"""Stake instruction discriminators and instruction-data decoding."""

from __future__ import annotations

from enum import IntEnum

from .consts import PROGRAM_ID
from .errors import ProgramError, ProgramErrorKind


class StakeInstruction(IntEnum):
    """Instructions of the stake program, keyed by their leading data byte."""

    INITIALIZE = 0
    AUTHORIZE = 1
    DELEGATE_STAKE = 2
    SPLIT = 3
    WITHDRAW = 4
    DEACTIVATE = 5
    SET_LOCKUP = 6
    MERGE = 7
    AUTHORIZE_WITH_SEED = 8
    INITIALIZE_CHECKED = 9
    AUTHORIZE_CHECKED = 10
    AUTHORIZE_CHECKED_WITH_SEED = 11
    SET_LOCKUP_CHECKED = 12
    GET_MINIMUM_DELEGATION = 13
    DEACTIVATE_DELINQUENT = 14
    REDELEGATE = 15  # deprecated: never enabled
    MOVE_STAKE = 16
    MOVE_LAMPORTS = 17

    @classmethod
    def from_byte(cls, value: int) -> StakeInstruction:
        """Decode a discriminator byte; unknown values are invalid instruction data."""
        try:
            return cls(value)
        except ValueError:
            raise ProgramError(ProgramErrorKind.INVALID_INSTRUCTION_DATA) from None


def parse_instruction(program_id: bytes, data: bytes) -> tuple[StakeInstruction, bytes]:
    """Check the program id and split instruction data into instruction and payload.

    The deprecated redelegate instruction is rejected as invalid data.
    """
    if bytes(program_id) != PROGRAM_ID:
        raise ProgramError(ProgramErrorKind.INCORRECT_PROGRAM_ID)
    if not data:
        raise ProgramError(ProgramErrorKind.INVALID_INSTRUCTION_DATA)
    instruction = StakeInstruction.from_byte(data[0])
    if instruction is StakeInstruction.REDELEGATE:
        raise ProgramError(ProgramErrorKind.INVALID_INSTRUCTION_DATA)
    return instruction, bytes(data[1:])