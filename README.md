# stakeledger

This package models, in pure Python, the state of a stake account and the rules
that apply to it. It covers authorities, lockups, delegation warm-up and cool-down,
splitting, the checks and credit arithmetic used when merging, and redelegation
bookkeeping. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `stakeledger.consts`: limits and rates such as `MAX_SIGNERS`,
  `LAMPORTS_PER_SOL`, `DEFAULT_WARMUP_COOLDOWN_RATE`, `NEW_WARMUP_COOLDOWN_RATE`
  and `PERPETUAL_NEW_WARMUP_COOLDOWN_RATE_EPOCH`. It also holds the well-known
  32-byte addresses `PROGRAM_ID`, `SYSVAR`, `CLOCK_ID` and `VOTE_PROGRAM_ID`,
  decoded from base58.
- `stakeledger.errors`: `StakeError`, `InstructionError`, `ProgramErrorKind`
  and the `ProgramError` exception.
  - `StakeError.from_code` maps a numeric code back to its member. It returns
    `None` for an unknown code.
  - `stake_error` wraps a stake error as a custom `ProgramError`.
  - `to_program_error` converts an instruction error, a stake error or an
    integer code. An instruction error that has no program-level counterpart
    becomes `INVALID_ACCOUNT_DATA`.
- `stakeledger.instruction`: `StakeInstruction` and
  `StakeInstruction.from_byte`. `parse_instruction(program_id, data)` checks
  the program id, splits off the one-byte discriminator and returns
  `(instruction, payload)`. It rejects the deprecated `REDELEGATE` instruction.
- `stakeledger.lockup`: `Clock` and `Lockup`. `Lockup.is_in_force(clock, custodian)`
  tells whether a lockup still applies. A lockup never holds its own custodian.
- `stakeledger.authorized`: `StakeAuthorize` and `Authorized`.
  - `Authorized.auto` uses one key for both authorities.
  - `check` raises unless the required authority signed.
  - `authorize` changes the staker or the withdrawer. The staker can be changed
    by either authority. Changing the withdrawer respects an optional lockup
    and custodian.
- `stakeledger.lockup_args`: `LockupArgs`. `from_data` decodes the
  optional-field set-lockup payload and `to_bytes` encodes it.
- `stakeledger.meta`: `Meta` and `SetLockupSignerArgs`.
  - `SetLockupSignerArgs.from_signers` finds the custodian and the withdrawer
    among the signers.
  - `Meta.set_lockup` applies new values. While the lockup is in force this
    needs the custodian; after that it needs the withdrawer.
- `stakeledger.authorized_voters`: `AuthorizedVoters` is an epoch-ordered map of
  voter keys. An epoch with no entry inherits the latest earlier voter. It
  supports purging, `first`/`last`, `len`, `in` and iteration.
- `stakeledger.seed_args`: `AuthorizeCheckedWithSeedArgs` serializes as:
  - the authority byte;
  - the seed length as a little-endian u32;
  - the seed;
  - the 32-byte owner.

  It deserializes from the same layout.
- `stakeledger.delegation`: `Delegation`, `StakeActivationStatus` and
  `warmup_cooldown_rate`. `Delegation.stake_activating_and_deactivating` and
  `Delegation.stake_at` compute effective, activating and deactivating stake at
  an epoch. The stake history is either a mapping from epoch to
  `StakeActivationStatus` or an object with a `get_entry(epoch)` method.
- `stakeledger.stake`: `Stake` offers `stake_at`, `split` and `deactivate`.
- `stakeledger.redelegate_state`: `State`, `StartRedelegation` and
  `RedelegateState`, with `start_redelegation` and `complete_redelegation`.
- `stakeledger.merge`: `checked_add`, `metas_can_merge`,
  `active_delegations_can_merge`, `stake_weighted_credits_observed` (a
  stake-weighted average of credits, rounded up) and
  `merge_delegation_stake_and_credits_observed`.

Failures raise `ProgramError`. Its `kind` is a `ProgramErrorKind`. For custom
errors, `code` holds the number and `stake_error` holds the matching
`StakeError`, if there is one.

## Example

```python
from stakeledger.authorized import Authorized, StakeAuthorize
from stakeledger.errors import ProgramError

staker = bytes(range(32))
auth = Authorized.auto(staker)
auth.check([staker], StakeAuthorize.STAKER)

try:
    auth.check([bytes(32)], StakeAuthorize.WITHDRAWER)
except ProgramError as exc:
    print(exc.kind)  # ProgramErrorKind.MISSING_REQUIRED_SIGNATURE
```

## What it does not do

- It does not run instructions against accounts. `parse_instruction` only
  identifies the instruction and returns its payload.
- It does not store accounts, and it does not read or write stake account data
  in a binary layout.
- It does not check signatures or derive addresses.
- It has no command-line tool.