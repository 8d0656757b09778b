"""User Routes — registration and login.

Invariants:
    - Responses expose {id, created_at, updated_at, email} only
    - Login failures are 401 with one shared message, whatever the reason
"""

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_user_service
from chirpy.api.envelope import write_json
from chirpy.schemas.user import UserCreate, UserLogin, UserResponse
from chirpy.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users")
async def register_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    user = await service.register(body.email, body.password)
    return write_json(status.HTTP_201_CREATED, UserResponse.model_validate(user))


@router.post("/login")
async def login_user(
    body: UserLogin, service: UserService = Depends(get_user_service),
):
    user = await service.login(body.email, body.password)
    return write_json(status.HTTP_200_OK, UserResponse.model_validate(user))
