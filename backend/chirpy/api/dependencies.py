"""Route Dependencies — wire stores, hasher and shared app state into services.

Invariants:
    - One AsyncSession per request (get_db), shared by all stores of that request
    - The VisitCounter comes from app.state: one instance per application

Design Decisions:
    - Depends() factories over module-level singletons: tests swap any piece
      through app.dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config import Settings, get_settings
from chirpy.core.visit_counter import VisitCounter
from chirpy.infrastructure.database import get_db
from chirpy.infrastructure.password_hasher import BcryptPasswordHasher
from chirpy.infrastructure.repositories import SqlChirpStore, SqlUserStore
from chirpy.services.admin_service import AdminService
from chirpy.services.chirp_service import ChirpService
from chirpy.services.user_service import UserService


def get_visit_counter(request: Request) -> VisitCounter:
    return request.app.state.visit_counter


def get_password_hasher(
    settings: Settings = Depends(get_settings),
) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_chirp_service(db: AsyncSession = Depends(get_db)) -> ChirpService:
    return ChirpService(SqlChirpStore(db))


def get_user_service(
    db: AsyncSession = Depends(get_db),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(SqlUserStore(db), hasher)


def get_admin_service(
    db: AsyncSession = Depends(get_db),
    counter: VisitCounter = Depends(get_visit_counter),
    settings: Settings = Depends(get_settings),
) -> AdminService:
    return AdminService(SqlUserStore(db), counter, settings.is_development)
