import pytest

from stakeledger.consts import PROGRAM_ID, VOTE_PROGRAM_ID
from stakeledger.errors import ProgramError, ProgramErrorKind
from stakeledger.instruction import StakeInstruction, parse_instruction


@pytest.mark.parametrize("instruction", list(StakeInstruction))
def test_from_byte_round_trip(instruction):
    assert StakeInstruction.from_byte(int(instruction)) is instruction


def test_discriminators_are_contiguous():
    decoded = [StakeInstruction.from_byte(value) for value in range(18)]
    assert decoded == list(StakeInstruction)


@pytest.mark.parametrize(
    "value, instruction",
    [
        (0, StakeInstruction.INITIALIZE),
        (6, StakeInstruction.SET_LOCKUP),
        (15, StakeInstruction.REDELEGATE),
        (17, StakeInstruction.MOVE_LAMPORTS),
    ],
)
def test_pinned_discriminators(value, instruction):
    assert StakeInstruction.from_byte(value) is instruction


@pytest.mark.parametrize("value", [18, 100, 255])
def test_unknown_byte_is_invalid_instruction_data(value):
    with pytest.raises(ProgramError) as info:
        StakeInstruction.from_byte(value)
    assert info.value.kind is ProgramErrorKind.INVALID_INSTRUCTION_DATA


def test_program_id_compared_by_value():
    copied_id = bytes(list(PROGRAM_ID))
    assert len(copied_id) == 32
    instruction, rest = parse_instruction(copied_id, bytes([0]))
    assert instruction is StakeInstruction.INITIALIZE
    assert rest == b""


def test_parse_splits_discriminator_and_payload():
    payload = b"\x01\x02\x03"
    instruction, rest = parse_instruction(PROGRAM_ID, bytes([6]) + payload)
    assert instruction is StakeInstruction.SET_LOCKUP
    assert rest == payload


def test_parse_single_byte_gives_empty_payload():
    instruction, rest = parse_instruction(PROGRAM_ID, bytes([7]))
    assert instruction is StakeInstruction.MERGE
    assert rest == b""


def test_parse_wrong_program_id():
    with pytest.raises(ProgramError) as info:
        parse_instruction(VOTE_PROGRAM_ID, bytes([6]))
    assert info.value.kind is ProgramErrorKind.INCORRECT_PROGRAM_ID


def test_program_id_checked_before_data():
    with pytest.raises(ProgramError) as info:
        parse_instruction(bytes(32), b"")
    assert info.value.kind is ProgramErrorKind.INCORRECT_PROGRAM_ID


def test_parse_empty_data():
    with pytest.raises(ProgramError) as info:
        parse_instruction(PROGRAM_ID, b"")
    assert info.value.kind is ProgramErrorKind.INVALID_INSTRUCTION_DATA


def test_parse_redelegate_rejected():
    with pytest.raises(ProgramError) as info:
        parse_instruction(PROGRAM_ID, bytes([15, 0]))
    assert info.value.kind is ProgramErrorKind.INVALID_INSTRUCTION_DATA


def test_parse_unknown_discriminator():
    with pytest.raises(ProgramError) as info:
        parse_instruction(PROGRAM_ID, bytes([18]))
    assert info.value.kind is ProgramErrorKind.INVALID_INSTRUCTION_DATA


@pytest.mark.parametrize(
    "instruction", [i for i in StakeInstruction if i is not StakeInstruction.REDELEGATE]
)
def test_parse_accepts_every_live_instruction(instruction):
    parsed, rest = parse_instruction(PROGRAM_ID, bytes([instruction, 9]))
    assert parsed is instruction
    assert rest == b"\x09"