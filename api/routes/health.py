"""
Health and readiness endpoints for load balancers and orchestrators.
No auth required; keep payload minimal for fast checks.
"""

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from core.config import SettingsDep

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "furniture-store"


class ReadinessResponse(BaseModel):
    """Readiness plus record counts per store."""

    ready: bool = True
    checks: dict[str, str] = {}

    model_config = {"extra": "forbid"}


@router.get("", response_model=HealthResponse)
async def health(settings: SettingsDep) -> HealthResponse:
    """Liveness: is the process alive."""
    return HealthResponse(service=settings.APP_NAME)


@router.get("/ready", response_model=ReadinessResponse)
async def ready(request: Request) -> ReadinessResponse:
    """Readiness: repositories are wired and answering."""
    state = request.app.state
    checks: dict[str, str] = {"config": "loaded"}
    for name in ("user_service", "furniture_service"):
        service = getattr(state, name, None)
        if service is None:
            checks[name] = "missing"
            continue
        checks[name] = f"ok ({await service.repository.count()} records)"
    return ReadinessResponse(ready=all(v != "missing" for v in checks.values()), checks=checks)


@router.get("/live")
async def live(response: Response) -> None:
    """Minimal live check: 200 with no body."""
    response.status_code = 200
