"""Visit Counting Middleware — counts requests served from static content.

Invariants:
    - Exactly one increment per request whose path is under STATIC_PREFIX
    - Counted before the response is produced, whether or not a file exists
"""

from fastapi import FastAPI, Request

STATIC_PREFIX = "/app"


def register_visit_counter(app: FastAPI) -> None:
    """Install the counting middleware. Expects app.state.visit_counter."""

    @app.middleware("http")
    async def count_static_visits(request: Request, call_next):
        path = request.url.path
        if path == STATIC_PREFIX or path.startswith(STATIC_PREFIX + "/"):
            request.app.state.visit_counter.increment()
        return await call_next(request)
