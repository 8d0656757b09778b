"""Admin Routes — visit metrics page and development-only reset.

Invariants:
    - GET /admin/metrics is HTML, not JSON
    - POST /admin/reset is refused with 403 outside development mode
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from chirpy.api.dependencies import get_admin_service, get_visit_counter
from chirpy.api.envelope import write_json
from chirpy.core.visit_counter import VisitCounter
from chirpy.services.admin_service import AdminService, render_metrics

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(counter: VisitCounter = Depends(get_visit_counter)):
    return HTMLResponse(render_metrics(counter), status_code=status.HTTP_200_OK)


@router.post("/reset")
async def reset(service: AdminService = Depends(get_admin_service)):
    hits = await service.reset()
    return write_json(status.HTTP_200_OK, {"hits": hits})
