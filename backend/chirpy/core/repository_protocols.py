"""Boundary Protocols — contracts between core/services and the shell.

Invariants:
    - Services depend on these Protocols only, never on SQLAlchemy or bcrypt
    - Each store call is one atomic unit: it either succeeds or raises

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async store methods (implementations do IO); PasswordHasher is sync
      because bcrypt is CPU-bound and is pushed to the threadpool by callers
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from chirpy.core.domain_types import UserId, ChirpId


class UserLike(Protocol):
    """Structural contract for user records returned by a UserStore."""
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
    hashed_password: str | None


class ChirpLike(Protocol):
    """Structural contract for chirp records returned by a ChirpStore."""
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID


class UserStore(Protocol):
    """User persistence capability, implemented by the shell."""
    async def create(
        self, email: str, hashed_password: str | None, now: datetime,
    ) -> UserLike: ...
    async def get_by_email(self, email: str) -> UserLike | None: ...
    async def delete_all(self) -> None: ...


class ChirpStore(Protocol):
    """Chirp persistence capability, implemented by the shell."""
    async def create(
        self, body: str, user_id: UserId, now: datetime,
    ) -> ChirpLike: ...
    async def list_all(self) -> list[ChirpLike]: ...
    async def get_by_id(self, chirp_id: ChirpId) -> ChirpLike | None: ...


class PasswordHasher(Protocol):
    """Credential hashing capability, implemented by the shell."""
    def hash_password(self, password: str) -> str: ...
    def check_password(self, password: str, hashed: str) -> bool: ...
