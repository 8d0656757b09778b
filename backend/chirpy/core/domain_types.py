"""Domain Types — identity types and fixed domain constants.

Invariants:
    - UserId and ChirpId wrap UUIDs; never mix them in domain logic
    - MAX_CHIRP_LENGTH is measured in UTF-8 bytes, not code points
    - PROFANE_WORDS is lower-case; membership checks lower the token first

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - frozenset for the profanity list: static, hashable, not pluggable
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ChirpId = NewType("ChirpId", UUID)


# ─── Chirp Rules ─────────────────────────────────────────────────

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS: frozenset[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
REDACTION_MARKER = "****"
TOKEN_SEPARATOR = " "


# ─── Admin ───────────────────────────────────────────────────────

DEVELOPMENT_PLATFORM = "dev"
