"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from award_engine import __version__

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    award: str | None = None


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health and report the loaded award."""
    engine = getattr(request.app.state, "engine", None)
    award = None
    if engine is not None:
        award = f"{engine.rules.award.code} {engine.rules.award.version}"

    return HealthResponse(
        status="healthy" if engine is not None else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        award=award,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness check for container orchestration."""
    if getattr(request.app.state, "engine", None) is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not ready"},
        )
    return JSONResponse(content={"status": "ready"})


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
