"""User Service — registration and credential check.

Invariants:
    - Passwords are hashed before persistence; plain text never reaches a store
    - Unknown email, credential-less account and wrong password all raise the
      same InvalidCredentialsError (401)
    - Hasher failures are not credential failures: they propagate as 500

Design Decisions:
    - bcrypt is CPU-bound: hash/check run via run_in_threadpool so the event
      loop keeps serving other requests
"""

import logging
from datetime import datetime, timezone

from starlette.concurrency import run_in_threadpool

from chirpy.core.errors import ErrorContext, InvalidCredentialsError
from chirpy.core.repository_protocols import PasswordHasher, UserLike, UserStore

logger = logging.getLogger(__name__)


class UserService:
    """Account registration and login against a UserStore."""

    def __init__(self, store: UserStore, hasher: PasswordHasher):
        self.store = store
        self.hasher = hasher

    async def register(self, email: str, password: str | None) -> UserLike:
        hashed = None
        if password is not None:
            hashed = await run_in_threadpool(self.hasher.hash_password, password)
        now = datetime.now(timezone.utc)
        user = await self.store.create(email, hashed, now)
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def login(self, email: str, password: str) -> UserLike:
        user = await self.store.get_by_email(email)
        if user is None:
            raise InvalidCredentialsError(
                ErrorContext(debug_info={"email": email, "reason": "unknown email"}),
            )
        if not user.hashed_password:
            raise InvalidCredentialsError(
                ErrorContext(debug_info={"email": email, "reason": "no credential"}),
            )
        matches = await run_in_threadpool(
            self.hasher.check_password, password, user.hashed_password,
        )
        if not matches:
            raise InvalidCredentialsError(
                ErrorContext(debug_info={"email": email, "reason": "password mismatch"}),
            )
        return user
