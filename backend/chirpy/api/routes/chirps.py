"""Chirp Routes — preview, create, list and fetch chirps.

Invariants:
    - POST /api/validate_chirp never persists anything
    - POST /api/chirps stores the raw body (the cleaned form is preview-only)
    - GET /api/chirps/{chirp_id} answers 404 for malformed and unknown ids alike
"""

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_chirp_service
from chirpy.api.envelope import write_json
from chirpy.core.domain_types import UserId
from chirpy.schemas.chirp import (
    ChirpCleaned, ChirpCreate, ChirpResponse, ChirpValidate,
)
from chirpy.services.chirp_service import ChirpService, preview_chirp

router = APIRouter(prefix="/api", tags=["chirps"])


@router.post("/validate_chirp")
async def validate_chirp(body: ChirpValidate):
    """Return the redacted body for a client-side preview."""
    cleaned = preview_chirp(body.body)
    return write_json(status.HTTP_200_OK, ChirpCleaned(cleaned_body=cleaned))


@router.post("/chirps")
async def create_chirp(
    body: ChirpCreate, service: ChirpService = Depends(get_chirp_service),
):
    chirp = await service.create(body.body, UserId(body.user_id))
    return write_json(
        status.HTTP_201_CREATED, ChirpResponse.model_validate(chirp),
    )


@router.get("/chirps")
async def list_chirps(service: ChirpService = Depends(get_chirp_service)):
    chirps = await service.list_all()
    return write_json(
        status.HTTP_200_OK, [ChirpResponse.model_validate(c) for c in chirps],
    )


@router.get("/chirps/{chirp_id}")
async def get_chirp(
    chirp_id: str, service: ChirpService = Depends(get_chirp_service),
):
    """Fetch one chirp. chirp_id stays a str so a bad UUID is a 404, not a 400."""
    chirp = await service.get(chirp_id)
    return write_json(status.HTTP_200_OK, ChirpResponse.model_validate(chirp))
