"""Error Hierarchy — typed exceptions for all Chirpy failure modes.

Invariants:
    - Every error has a code (str), a message, a user-safe public_message
      and an http_status
    - to_response() produces the uniform error envelope: {"error": public_message}
    - 500-level errors expose only GENERIC_SERVER_MESSAGE; their detailed
      message goes to the logs
    - No internal details leaked in user-facing messages (causes are logged,
      never serialized)

Design Decisions:
    - Single hierarchy with ChirpyError base: one global handler catches all
    - Unknown email and wrong password share InvalidCredentialsError so the
      caller cannot enumerate accounts
    - Unparsable ids and missing rows share ResourceNotFoundError (404)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

GENERIC_SERVER_MESSAGE = "Something went wrong"


@dataclass
class ErrorContext:
    """Server-side context for logging. Never sent to the client."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class ChirpyError(Exception):
    """Base exception for all Chirpy errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        context: ErrorContext | None = None,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.public_message = public_message or message
        self.code = code
        self.http_status = http_status
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the error envelope body."""
        return {"error": self.public_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ChirpTooLongError(ChirpyError):
    """Chirp body exceeds the maximum length."""
    def __init__(self, length: int, context: ErrorContext | None = None):
        super().__init__(
            "Chirp is too long", "CHIRP_TOO_LONG", 400, context,
        )
        self.length = length


class ProfaneChirpError(ChirpyError):
    """Chirp body contains a disallowed word."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Chirp contains profanity", "CHIRP_PROFANE", 400, context,
        )


class InvalidCredentialsError(ChirpyError):
    """Login failed. Raised for unknown emails and wrong passwords alike."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Incorrect email or password", "INVALID_CREDENTIALS", 401, context,
        )


class ForbiddenOperationError(ChirpyError):
    """Operation not allowed on this deployment."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"{operation} is only available in development mode",
            "FORBIDDEN", 403, context,
        )
        self.operation = operation


class ResourceNotFoundError(ChirpyError):
    """Requested resource does not exist (or its id could not be parsed)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", 404, context,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ChirpyError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", 500, context,
            public_message=GENERIC_SERVER_MESSAGE,
        )
        self.operation = operation


class CredentialHashingError(ChirpyError):
    """Password could not be hashed or checked."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Credential processing failed: {message}",
            "CREDENTIAL_HASHING_ERROR", 500, context,
            public_message=GENERIC_SERVER_MESSAGE,
        )
