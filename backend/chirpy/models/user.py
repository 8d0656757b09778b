"""User ORM — registered accounts.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique (enforced by the database, not by services)
    - hashed_password is nullable: accounts may exist without a credential

Design Decisions:
    - created_at/updated_at set explicitly by the service so both share one instant
    - cascade delete for chirps: bulk user reset removes their chirps too
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from chirpy.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    hashed_password: Mapped[str | None] = mapped_column(Text, nullable=True)

    chirps: Mapped[list["Chirp"]] = relationship(
        "Chirp", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
