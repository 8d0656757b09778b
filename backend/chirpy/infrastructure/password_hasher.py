"""Password Hashing — bcrypt implementation of the PasswordHasher protocol.

Invariants:
    - Plain-text passwords are never logged or stored
    - A malformed stored hash surfaces as CredentialHashingError, never as a
      silent mismatch
    - A candidate longer than MAX_PASSWORD_BYTES never matches: login answers
      the same way whether or not the email exists
    - Registering a password longer than MAX_PASSWORD_BYTES raises
      CredentialHashingError (bcrypt would otherwise ignore the tail)

Design Decisions:
    - bcrypt library directly (hashpw/checkpw): no passlib indirection
    - Hashes stored as UTF-8 str so the ORM column stays plain text
    - Passwords encoded with surrogatepass so any decoded JSON string has bytes
"""

import logging

import bcrypt

from chirpy.core.errors import CredentialHashingError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12
MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8", "surrogatepass")


class BcryptPasswordHasher:
    """Hash and verify passwords with a per-password bcrypt salt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        secret = _password_bytes(password)
        if len(secret) > MAX_PASSWORD_BYTES:
            raise CredentialHashingError(
                f"password longer than {MAX_PASSWORD_BYTES} bytes",
            )
        try:
            hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds))
        except ValueError as e:
            logger.error(f"Password hashing failed: {e}")
            raise CredentialHashingError("could not hash password") from e
        return hashed.decode("utf-8")

    def check_password(self, password: str, hashed: str) -> bool:
        candidate = _password_bytes(password)
        if len(candidate) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(candidate, hashed.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password check failed: {e}")
            raise CredentialHashingError("could not check password") from e
