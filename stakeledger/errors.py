"""Error kinds of the stake program and the exception that carries them."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class StakeError(IntEnum):
    """Stake-specific failures, reported as custom program error codes."""

    NO_CREDITS_TO_REDEEM = 0
    LOCKUP_IN_FORCE = 1
    ALREADY_DEACTIVATED = 2
    TOO_SOON_TO_REDELEGATE = 3
    INSUFFICIENT_STAKE = 4
    MERGE_TRANSIENT_STAKE = 5
    MERGE_MISMATCH = 6
    CUSTODIAN_MISSING = 7
    CUSTODIAN_SIGNATURE_MISSING = 8
    INSUFFICIENT_REFERENCE_VOTES = 9
    VOTE_ADDRESS_MISMATCH = 10
    MINIMUM_DELINQUENT_EPOCHS_FOR_DEACTIVATION_NOT_MET = 11
    INSUFFICIENT_DELEGATION = 12
    REDELEGATE_TRANSIENT_OR_INACTIVE_STAKE = 13
    REDELEGATE_TO_SAME_VOTE_ACCOUNT = 14
    REDELEGATED_STAKE_MUST_FULLY_ACTIVATE_BEFORE_DEACTIVATION_IS_PERMITTED = 15
    EPOCH_REWARDS_ACTIVE = 16

    @classmethod
    def from_code(cls, code: int) -> StakeError | None:
        """Return the error with this numeric code, or None if there is none."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def message(self) -> str:
        return _STAKE_ERROR_MESSAGES[self]


_STAKE_ERROR_MESSAGES = {
    StakeError.NO_CREDITS_TO_REDEEM: "not enough credits to redeem",
    StakeError.LOCKUP_IN_FORCE: "lockup has not yet expired",
    StakeError.ALREADY_DEACTIVATED: "stake already deactivated",
    StakeError.TOO_SOON_TO_REDELEGATE: "one re-delegation permitted per epoch",
    StakeError.INSUFFICIENT_STAKE: "split amount is more than is staked",
    StakeError.MERGE_TRANSIENT_STAKE: "stake account with transient stake cannot be merged",
    StakeError.MERGE_MISMATCH: (
        "stake account merge failed due to different authority, lockups or state"
    ),
    StakeError.CUSTODIAN_MISSING: "custodian address not present",
    StakeError.CUSTODIAN_SIGNATURE_MISSING: "custodian signature not present",
    StakeError.INSUFFICIENT_REFERENCE_VOTES: (
        "insufficient voting activity in the reference vote account"
    ),
    StakeError.VOTE_ADDRESS_MISMATCH: (
        "stake account is not delegated to the provided vote account"
    ),
    StakeError.MINIMUM_DELINQUENT_EPOCHS_FOR_DEACTIVATION_NOT_MET: (
        "stake account has not been delinquent for the minimum epochs required "
        "for deactivation"
    ),
    StakeError.INSUFFICIENT_DELEGATION: "delegation amount is less than the minimum",
    StakeError.REDELEGATE_TRANSIENT_OR_INACTIVE_STAKE: (
        "stake account with transient or inactive stake cannot be redelegated"
    ),
    StakeError.REDELEGATE_TO_SAME_VOTE_ACCOUNT: (
        "stake redelegation to the same vote account is not permitted"
    ),
    StakeError.REDELEGATED_STAKE_MUST_FULLY_ACTIVATE_BEFORE_DEACTIVATION_IS_PERMITTED: (
        "redelegated stake must be fully activated before deactivation"
    ),
    StakeError.EPOCH_REWARDS_ACTIVE: (
        "stake action is not permitted while the epoch rewards period is active"
    ),
}


class InstructionError(Enum):
    """Runtime-level instruction failures (custom codes are passed as plain ints)."""

    GENERIC_ERROR = auto()
    INVALID_ARGUMENT = auto()
    INVALID_INSTRUCTION_DATA = auto()
    INVALID_ACCOUNT_DATA = auto()
    ACCOUNT_DATA_TOO_SMALL = auto()
    INSUFFICIENT_FUNDS = auto()
    INCORRECT_PROGRAM_ID = auto()
    MISSING_REQUIRED_SIGNATURE = auto()
    ACCOUNT_ALREADY_INITIALIZED = auto()
    UNINITIALIZED_ACCOUNT = auto()
    UNBALANCED_INSTRUCTION = auto()
    MODIFIED_PROGRAM_ID = auto()
    EXTERNAL_ACCOUNT_LAMPORT_SPEND = auto()
    EXTERNAL_ACCOUNT_DATA_MODIFIED = auto()
    READONLY_LAMPORT_CHANGE = auto()
    READONLY_DATA_MODIFIED = auto()
    DUPLICATE_ACCOUNT_INDEX = auto()
    EXECUTABLE_MODIFIED = auto()
    RENT_EPOCH_MODIFIED = auto()
    NOT_ENOUGH_ACCOUNT_KEYS = auto()
    ACCOUNT_DATA_SIZE_CHANGED = auto()
    ACCOUNT_NOT_EXECUTABLE = auto()
    ACCOUNT_BORROW_FAILED = auto()
    ACCOUNT_BORROW_OUTSTANDING = auto()
    DUPLICATE_ACCOUNT_OUT_OF_SYNC = auto()
    INVALID_ERROR = auto()
    EXECUTABLE_DATA_MODIFIED = auto()
    EXECUTABLE_LAMPORT_CHANGE = auto()
    EXECUTABLE_ACCOUNT_NOT_RENT_EXEMPT = auto()
    UNSUPPORTED_PROGRAM_ID = auto()
    CALL_DEPTH = auto()
    MISSING_ACCOUNT = auto()
    REENTRANCY_NOT_ALLOWED = auto()
    MAX_SEED_LENGTH_EXCEEDED = auto()
    INVALID_SEEDS = auto()
    INVALID_REALLOC = auto()
    COMPUTATIONAL_BUDGET_EXCEEDED = auto()
    PRIVILEGE_ESCALATION = auto()
    PROGRAM_ENVIRONMENT_SETUP_FAILURE = auto()
    PROGRAM_FAILED_TO_COMPLETE = auto()
    PROGRAM_FAILED_TO_COMPILE = auto()
    IMMUTABLE = auto()
    INCORRECT_AUTHORITY = auto()
    ACCOUNT_NOT_RENT_EXEMPT = auto()
    INVALID_ACCOUNT_OWNER = auto()
    ARITHMETIC_OVERFLOW = auto()
    UNSUPPORTED_SYSVAR = auto()
    ILLEGAL_OWNER = auto()
    MAX_ACCOUNTS_DATA_ALLOCATIONS_EXCEEDED = auto()
    MAX_ACCOUNTS_EXCEEDED = auto()
    MAX_INSTRUCTION_TRACE_LENGTH_EXCEEDED = auto()
    BUILTIN_PROGRAMS_MUST_CONSUME_COMPUTE_UNITS = auto()


class ProgramErrorKind(Enum):
    """Kinds of error a program can return."""

    CUSTOM = auto()
    INVALID_ARGUMENT = auto()
    INVALID_INSTRUCTION_DATA = auto()
    INVALID_ACCOUNT_DATA = auto()
    ACCOUNT_DATA_TOO_SMALL = auto()
    INSUFFICIENT_FUNDS = auto()
    INCORRECT_PROGRAM_ID = auto()
    MISSING_REQUIRED_SIGNATURE = auto()
    ACCOUNT_ALREADY_INITIALIZED = auto()
    UNINITIALIZED_ACCOUNT = auto()
    NOT_ENOUGH_ACCOUNT_KEYS = auto()
    ACCOUNT_BORROW_FAILED = auto()
    MAX_SEED_LENGTH_EXCEEDED = auto()
    INVALID_SEEDS = auto()
    ACCOUNT_NOT_RENT_EXEMPT = auto()
    UNSUPPORTED_SYSVAR = auto()
    ILLEGAL_OWNER = auto()
    MAX_ACCOUNTS_DATA_ALLOCATIONS_EXCEEDED = auto()
    INVALID_REALLOC = auto()
    MAX_INSTRUCTION_TRACE_LENGTH_EXCEEDED = auto()
    BUILTIN_PROGRAMS_MUST_CONSUME_COMPUTE_UNITS = auto()
    INVALID_ACCOUNT_OWNER = auto()
    ARITHMETIC_OVERFLOW = auto()
    IMMUTABLE = auto()
    INCORRECT_AUTHORITY = auto()


class ProgramError(Exception):
    """Failure of a program operation; custom errors carry a numeric code."""

    def __init__(self, kind: ProgramErrorKind, code: int | None = None) -> None:
        if (kind is ProgramErrorKind.CUSTOM) != (code is not None):
            raise ValueError("a code is given exactly for custom errors")
        if code is not None and not 0 <= code <= 0xFFFF_FFFF:
            raise ValueError(f"custom error code {code} does not fit in 32 bits")
        self.kind = kind
        self.code = code
        super().__init__(self._describe())

    @classmethod
    def custom(cls, code: int) -> ProgramError:
        return cls(ProgramErrorKind.CUSTOM, code)

    @property
    def stake_error(self) -> StakeError | None:
        """The stake error this custom code stands for, if any."""
        if self.code is None:
            return None
        return StakeError.from_code(self.code)

    def _describe(self) -> str:
        if self.code is None:
            return self.kind.name.lower().replace("_", " ")
        known = StakeError.from_code(self.code)
        if known is not None:
            return f"custom error {self.code}: {known.message}"
        return f"custom error {self.code}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgramError):
            return NotImplemented
        return (self.kind, self.code) == (other.kind, other.code)

    def __hash__(self) -> int:
        return hash((self.kind, self.code))

    def __repr__(self) -> str:
        if self.code is None:
            return f"ProgramError({self.kind.name})"
        return f"ProgramError(CUSTOM, {self.code})"


def stake_error(error: StakeError) -> ProgramError:
    """Wrap a stake error as a custom program error."""
    return ProgramError.custom(int(error))


def to_program_error(error: InstructionError | StakeError | int) -> ProgramError:
    """Convert an instruction error to a program error.

    Integers and stake errors become custom errors. Instruction errors with a
    program-level counterpart keep their kind; all others become
    INVALID_ACCOUNT_DATA.
    """
    if isinstance(error, StakeError):
        return stake_error(error)
    if isinstance(error, int):
        return ProgramError.custom(error)
    kind = ProgramErrorKind.__members__.get(error.name)
    if kind is None or kind is ProgramErrorKind.CUSTOM:
        return ProgramError(ProgramErrorKind.INVALID_ACCOUNT_DATA)
    return ProgramError(kind)