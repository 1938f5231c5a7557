"""Program-wide constants: limits, rates and well-known account addresses."""

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
PUBKEY_BYTES = 32


def _pubkey(text: str) -> bytes:
    """Decode a base58 address into its 32 raw bytes."""
    number = 0
    for char in text:
        number = number * 58 + _BASE58_ALPHABET.index(char)
    leading_zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    raw = b"\x00" * leading_zeros + body
    if len(raw) != PUBKEY_BYTES:
        raise ValueError(f"{text!r} does not decode to a {PUBKEY_BYTES}-byte key")
    return raw


U64_MAX = (1 << 64) - 1
EPOCH_MAX = U64_MAX
DEFAULT_PUBKEY = bytes(PUBKEY_BYTES)

MAX_SIGNERS = 32
FEATURE_STAKE_RAISE_MINIMUM_DELEGATION_TO_1_SOL = False
PERPETUAL_NEW_WARMUP_COOLDOWN_RATE_EPOCH: int | None = 0
LAMPORTS_PER_SOL = 1_000_000_000
DEFAULT_WARMUP_COOLDOWN_RATE = 0.25
NEW_WARMUP_COOLDOWN_RATE = 0.09

PROGRAM_ID = _pubkey("Stake11111111111111111111111111111111111111")
SYSVAR = _pubkey("Sysvar1111111111111111111111111111111111111")
CLOCK_ID = _pubkey("SysvarC1ock11111111111111111111111111111111")
VOTE_PROGRAM_ID = _pubkey("Vote111111111111111111111111111111111111111")

# Maximum number of votes to keep around, tied to the minimum slots per epoch.
MAX_LOCKOUT_HISTORY = 31
INITIAL_LOCKOUT = 2

# Maximum number of credits history entries to keep around.
MAX_EPOCH_CREDITS_HISTORY = 64

# Offset of the prior voters field in a serialized vote state.
DEFAULT_PRIOR_VOTERS_OFFSET = 114

# Votes landing within this many slots of the voted slot earn full credits.
VOTE_CREDITS_GRACE_SLOTS = 2

# Credits awarded for a vote landing within the grace period.
VOTE_CREDITS_MAXIMUM_PER_SLOT = 16

HASH_BYTES = 32
MAX_BASE58_LEN = 44