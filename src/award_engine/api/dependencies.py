"""FastAPI dependencies for dependency injection."""

from typing import Annotated
from uuid import uuid4

from fastapi import Depends, HTTPException, Request, status

from award_engine.calculators import AwardEngine

CORRELATION_ID_HEADER = "X-Correlation-ID"


def get_engine(request: Request) -> AwardEngine:
    """Get the shared engine loaded at startup."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Award rules are not loaded",
        )
    return engine


def get_correlation_id(request: Request) -> str:
    """Correlation ID from the request header, or a fresh one.

    Stored on the request so error handlers log the same ID as the route.
    """
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id is None:
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid4())
        request.state.correlation_id = correlation_id
    return correlation_id


# Type aliases for cleaner dependency injection
Engine = Annotated[AwardEngine, Depends(get_engine)]
CorrelationId = Annotated[str, Depends(get_correlation_id)]
