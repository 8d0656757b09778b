"""Chirp Service — validation-only preview, creation and retrieval of chirps.

Invariants:
    - Length is checked before profanity: an oversized body never reaches is_valid
    - Creation persists the raw body; clean_body only feeds the preview endpoint
    - created_at and updated_at are the same UTC instant on creation
    - Unparsable ids and missing chirps both raise ResourceNotFoundError

Design Decisions:
    - Chirp ids arrive as raw path strings: parsing here keeps the 404 for a
      malformed id identical to the 404 for an absent one
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from chirpy.core.chirp_text import chirp_length, clean_body, exceeds_max_length, is_valid
from chirpy.core.domain_types import ChirpId, UserId
from chirpy.core.errors import (
    ChirpTooLongError, ErrorContext, ProfaneChirpError, ResourceNotFoundError,
)
from chirpy.core.repository_protocols import ChirpLike, ChirpStore

logger = logging.getLogger(__name__)


def check_length(body: str) -> None:
    """Raise ChirpTooLongError if body exceeds the maximum chirp length."""
    if exceeds_max_length(body):
        length = chirp_length(body)
        raise ChirpTooLongError(
            length, ErrorContext(debug_info={"length": length, "body": body}),
        )


def preview_chirp(body: str) -> str:
    """Return the cleaned body for a client-side preview. Nothing is stored."""
    check_length(body)
    return clean_body(body)


class ChirpService:
    """Chirp creation and lookup against a ChirpStore."""

    def __init__(self, store: ChirpStore):
        self.store = store

    async def create(self, body: str, user_id: UserId) -> ChirpLike:
        check_length(body)
        if not is_valid(body):
            raise ProfaneChirpError(
                ErrorContext(debug_info={"body": body, "user_id": str(user_id)}),
            )
        now = datetime.now(timezone.utc)
        chirp = await self.store.create(body, user_id, now)
        logger.info(
            "Chirp created",
            extra={"chirp_id": str(chirp.id), "user_id": str(user_id)},
        )
        return chirp

    async def list_all(self) -> list[ChirpLike]:
        return await self.store.list_all()

    async def get(self, raw_id: str) -> ChirpLike:
        try:
            chirp_id = ChirpId(UUID(raw_id))
        except ValueError as e:
            raise ResourceNotFoundError("Chirp", raw_id) from e
        chirp = await self.store.get_by_id(chirp_id)
        if chirp is None:
            raise ResourceNotFoundError("Chirp", raw_id)
        return chirp
