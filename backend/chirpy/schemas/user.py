"""User Schemas — registration/login bodies and the public user representation.

Invariants:
    - UserResponse never includes the credential (hashed_password)
    - email is stripped and lone surrogates become U+FFFD; uniqueness is
      left to the database
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chirpy.core.chirp_text import replace_lone_surrogates


class UserCreate(BaseModel):
    email: str = Field(min_length=1, max_length=320)
    password: str | None = Field(None, min_length=1)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        v = replace_lone_surrogates(v).strip()
        if not v:
            raise ValueError("email cannot be empty or whitespace")
        return v


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return replace_lone_surrogates(v).strip()


class UserResponse(BaseModel):
    """Public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
