"""Chirp ORM — short posts owned by a user.

Invariants:
    - body is stored raw (never the redacted form), at most 140 UTF-8 bytes
    - user_id references users.id with ON DELETE CASCADE
    - Immutable once created (no update path)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from chirpy.db.base import Base


class Chirp(Base):
    __tablename__ = "chirps"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="chirps")
