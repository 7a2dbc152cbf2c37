"""API routes."""

from award_engine.api.routes.calculate import router as calculate_router
from award_engine.api.routes.health import router as health_router

__all__ = ["calculate_router", "health_router"]
