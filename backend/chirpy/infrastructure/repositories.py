"""SQL Repositories — SQLAlchemy implementations of UserStore and ChirpStore.

Invariants:
    - Each write commits on success and rolls back on failure
    - SQLAlchemyError never escapes: mapped to DatabaseError with the cause chained
    - list_all returns chirps in creation order (oldest first)

Design Decisions:
    - Repositories take an AsyncSession per request (from get_db), so
      transactional isolation is owned by the database, not by this layer
"""

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.core.domain_types import ChirpId, UserId
from chirpy.core.errors import DatabaseError
from chirpy.models.chirp import Chirp
from chirpy.models.user import User

logger = logging.getLogger(__name__)


class SqlUserStore:
    """UserStore backed by the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self, email: str, hashed_password: str | None, now: datetime,
    ) -> User:
        user = User(
            email=email, hashed_password=hashed_password,
            created_at=now, updated_at=now,
        )
        self._db.add(user)
        await _commit(self._db, "create user")
        await self._db.refresh(user)
        return user

    async def get_by_email(self, email: str) -> User | None:
        try:
            result = await self._db.execute(
                select(User).where(User.email == email),
            )
        except SQLAlchemyError as e:
            raise _database_error(e, "get user by email") from e
        return result.scalar_one_or_none()

    async def delete_all(self) -> None:
        try:
            await self._db.execute(delete(User))
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise _database_error(e, "delete all users") from e
        await _commit(self._db, "delete all users")


class SqlChirpStore:
    """ChirpStore backed by the chirps table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, body: str, user_id: UserId, now: datetime) -> Chirp:
        chirp = Chirp(
            body=body, user_id=user_id, created_at=now, updated_at=now,
        )
        self._db.add(chirp)
        await _commit(self._db, "create chirp")
        await self._db.refresh(chirp)
        return chirp

    async def list_all(self) -> list[Chirp]:
        try:
            result = await self._db.execute(
                select(Chirp).order_by(Chirp.created_at.asc()),
            )
        except SQLAlchemyError as e:
            raise _database_error(e, "list chirps") from e
        return list(result.scalars().all())

    async def get_by_id(self, chirp_id: ChirpId) -> Chirp | None:
        try:
            result = await self._db.execute(
                select(Chirp).where(Chirp.id == chirp_id),
            )
        except SQLAlchemyError as e:
            raise _database_error(e, "get chirp") from e
        return result.scalar_one_or_none()


async def _commit(db: AsyncSession, operation: str) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise _database_error(e, operation) from e


def _database_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    logger.error(f"DB error during {operation}: {exc}")
    if isinstance(exc, IntegrityError):
        return DatabaseError("Integrity constraint violated", operation)
    return DatabaseError("Database operation failed", operation)
