"""ORM Models — SQLAlchemy declarative models for users and chirps.

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from chirpy.models.user import User  # noqa: F401
from chirpy.models.chirp import Chirp  # noqa: F401
