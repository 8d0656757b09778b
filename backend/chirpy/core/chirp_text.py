"""Chirp Text Processing — length rule, profanity detection and redaction.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Tokens are produced by splitting on exactly one ASCII space, so runs of
      spaces yield empty tokens that are re-emitted as-is (tabs never split)
    - Profanity matches whole tokens only, case-insensitively
    - clean_body keeps non-profane tokens verbatim (original casing)
    - replace_lone_surrogates output always encodes as UTF-8

Design Decisions:
    - Length is not checked by is_valid/clean_body: callers enforce it first
      so oversized input never reaches the profanity check
"""

from chirpy.core.domain_types import (
    MAX_CHIRP_LENGTH, PROFANE_WORDS, REDACTION_MARKER, TOKEN_SEPARATOR,
)

REPLACEMENT_CHARACTER = "\ufffd"


def replace_lone_surrogates(text: str) -> str:
    """Swap unpaired UTF-16 surrogates (legal in JSON escapes) for U+FFFD."""
    return "".join(
        REPLACEMENT_CHARACTER if "\ud800" <= ch <= "\udfff" else ch for ch in text
    )


def chirp_length(body: str) -> int:
    """Length of a chirp body as stored (UTF-8 bytes)."""
    return len(body.encode("utf-8"))


def exceeds_max_length(body: str) -> bool:
    return chirp_length(body) > MAX_CHIRP_LENGTH


def is_profane(token: str) -> bool:
    return token.lower() in PROFANE_WORDS


def is_valid(body: str) -> bool:
    """True when no whole token of body is a profane word."""
    return not any(is_profane(token) for token in body.split(TOKEN_SEPARATOR))


def clean_body(body: str) -> str:
    """Replace every profane token with the redaction marker.

    >>> clean_body("You are a Kerfuffle")
    'You are a ****'
    """
    tokens = [
        REDACTION_MARKER if is_profane(token) else token
        for token in body.split(TOKEN_SEPARATOR)
    ]
    return TOKEN_SEPARATOR.join(tokens).strip()
