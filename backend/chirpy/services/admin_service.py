"""Admin Service — visit metrics page and development-only reset.

Invariants:
    - Reset is refused (403) unless the deployment is in development mode
    - Reset order: counter swapped to 0, then all users deleted (chirps cascade)
    - The metrics page is rendered from a fixed template; only the count varies
"""

import logging

from chirpy.core.errors import ForbiddenOperationError
from chirpy.core.repository_protocols import UserStore
from chirpy.core.visit_counter import VisitCounter

logger = logging.getLogger(__name__)

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


def render_metrics(counter: VisitCounter) -> str:
    return METRICS_TEMPLATE.format(hits=counter.value())


class AdminService:
    """Destructive admin operations, guarded by the development flag."""

    def __init__(self, user_store: UserStore, counter: VisitCounter, is_development: bool):
        self.user_store = user_store
        self.counter = counter
        self.is_development = is_development

    async def reset(self) -> int:
        """Zero the counter and delete all users. Returns the post-reset count."""
        if not self.is_development:
            raise ForbiddenOperationError("Reset")
        previous = self.counter.reset()
        await self.user_store.delete_all()
        logger.warning(f"Admin reset: counter cleared (was {previous}), all users deleted")
        return self.counter.value()
