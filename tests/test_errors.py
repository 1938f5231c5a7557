import pytest

from stakeledger.errors import (
    InstructionError,
    ProgramError,
    ProgramErrorKind,
    StakeError,
    stake_error,
    to_program_error,
)


@pytest.mark.parametrize("error", list(StakeError))
def test_from_code_round_trip(error):
    assert StakeError.from_code(int(error)) is error


@pytest.mark.parametrize("code", [-1, len(StakeError), 1000])
def test_from_code_unknown(code):
    assert StakeError.from_code(code) is None


@pytest.mark.parametrize(
    "code, error",
    [
        (0, StakeError.NO_CREDITS_TO_REDEEM),
        (5, StakeError.MERGE_TRANSIENT_STAKE),
        (10, StakeError.VOTE_ADDRESS_MISMATCH),
        (
            15,
            StakeError.REDELEGATED_STAKE_MUST_FULLY_ACTIVATE_BEFORE_DEACTIVATION_IS_PERMITTED,
        ),
    ],
)
def test_documented_codes(code, error):
    assert StakeError.from_code(code) is error


def test_codes_are_contiguous():
    decoded = [StakeError.from_code(code) for code in range(len(StakeError))]
    assert decoded == list(StakeError)


@pytest.mark.parametrize("error", list(StakeError))
def test_stake_error_becomes_custom(error):
    result = stake_error(error)
    assert result.kind is ProgramErrorKind.CUSTOM
    assert result.code == int(error)
    assert result.stake_error is error


def test_stake_error_can_be_raised_and_caught():
    err = stake_error(StakeError.MERGE_MISMATCH)
    assert err.code == 6
    with pytest.raises(ProgramError) as info:
        raise err
    assert info.value == ProgramError.custom(6)
    assert info.value.stake_error is StakeError.MERGE_MISMATCH


@pytest.mark.parametrize(
    "error",
    [
        InstructionError.INVALID_ARGUMENT,
        InstructionError.INVALID_INSTRUCTION_DATA,
        InstructionError.MISSING_REQUIRED_SIGNATURE,
        InstructionError.ARITHMETIC_OVERFLOW,
        InstructionError.INCORRECT_AUTHORITY,
        InstructionError.BUILTIN_PROGRAMS_MUST_CONSUME_COMPUTE_UNITS,
    ],
)
def test_convertible_instruction_errors_keep_kind(error):
    result = to_program_error(error)
    assert result.kind.name == error.name
    assert result.code is None


@pytest.mark.parametrize(
    "error",
    [
        InstructionError.GENERIC_ERROR,
        InstructionError.UNBALANCED_INSTRUCTION,
        InstructionError.CALL_DEPTH,
        InstructionError.MAX_ACCOUNTS_EXCEEDED,
    ],
)
def test_other_instruction_errors_become_invalid_account_data(error):
    assert to_program_error(error) == ProgramError(ProgramErrorKind.INVALID_ACCOUNT_DATA)


def test_integer_becomes_custom():
    assert to_program_error(42) == ProgramError.custom(42)


def test_to_program_error_accepts_stake_error():
    assert to_program_error(StakeError.LOCKUP_IN_FORCE) == stake_error(
        StakeError.LOCKUP_IN_FORCE
    )


def test_every_program_kind_except_custom_is_reachable():
    reached = {to_program_error(e).kind for e in InstructionError}
    assert reached == set(ProgramErrorKind) - {ProgramErrorKind.CUSTOM}


def test_custom_requires_code():
    with pytest.raises(ValueError):
        ProgramError(ProgramErrorKind.CUSTOM)


def test_non_custom_rejects_code():
    with pytest.raises(ValueError):
        ProgramError(ProgramErrorKind.INVALID_ARGUMENT, 3)


def test_custom_code_must_fit_u32():
    with pytest.raises(ValueError):
        ProgramError.custom(1 << 32)


def test_equality_and_hash():
    a = ProgramError(ProgramErrorKind.INSUFFICIENT_FUNDS)
    b = ProgramError(ProgramErrorKind.INSUFFICIENT_FUNDS)
    assert a == b
    assert len({a, b}) == 1
    assert a != ProgramError(ProgramErrorKind.INVALID_ARGUMENT)


def test_unknown_custom_has_no_stake_error():
    assert ProgramError.custom(999).stake_error is None