"""Chirp Schemas — request bodies and the public chirp representation.

Invariants:
    - body carries no max_length here: the 140-byte rule is a domain rule
      with its own error message, enforced in services/chirp_service.py
    - body never holds a lone surrogate: each one becomes U+FFFD before any
      length check, so every accepted body encodes as UTF-8
    - ChirpResponse shape: {id, created_at, updated_at, body, user_id}
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from chirpy.core.chirp_text import replace_lone_surrogates


class ChirpValidate(BaseModel):
    """Preview request: body only, nothing persisted."""
    body: str

    @field_validator("body")
    @classmethod
    def scrub_body(cls, v: str) -> str:
        return replace_lone_surrogates(v)


class ChirpCleaned(BaseModel):
    cleaned_body: str


class ChirpCreate(BaseModel):
    body: str
    user_id: UUID

    @field_validator("body")
    @classmethod
    def scrub_body(cls, v: str) -> str:
        return replace_lone_surrogates(v)


class ChirpResponse(BaseModel):
    """Public-facing chirp data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID
