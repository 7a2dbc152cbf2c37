"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from award_engine import __version__
from award_engine.api.dependencies import CORRELATION_ID_HEADER, get_correlation_id
from award_engine.api.routes import calculate_router, health_router
from award_engine.calculators import AwardEngine
from award_engine.config import get_settings
from award_engine.errors import (
    CalculationError,
    ClassificationNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
    EngineError,
    InvalidEmployeeError,
    InvalidShiftError,
    RateNotFoundError,
)
from award_engine.rules import load_rule_table

logger = logging.getLogger(__name__)

# Engine error type -> (HTTP status, error code)
ERROR_MAPPING: dict[type[EngineError], tuple[int, str]] = {
    ClassificationNotFoundError: (status.HTTP_400_BAD_REQUEST, "CLASSIFICATION_NOT_FOUND"),
    RateNotFoundError: (status.HTTP_400_BAD_REQUEST, "RATE_NOT_FOUND"),
    InvalidShiftError: (status.HTTP_400_BAD_REQUEST, "INVALID_SHIFT"),
    InvalidEmployeeError: (status.HTTP_400_BAD_REQUEST, "INVALID_EMPLOYEE"),
    ConfigNotFoundError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIG_ERROR"),
    ConfigParseError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIG_ERROR"),
    CalculationError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "CALCULATION_ERROR"),
}


def error_status_and_code(exc: EngineError) -> tuple[int, str]:
    """HTTP status and error code for an engine error."""
    for error_type, mapping in ERROR_MAPPING.items():
        if isinstance(exc, error_type):
            return mapping
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: object = None,
) -> JSONResponse:
    content: dict[str, object] = {"code": code, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={CORRELATION_ID_HEADER: get_correlation_id(request)},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    rules = load_rule_table(settings.award_config_path)
    app.state.engine = AwardEngine(rules, engine_version=settings.engine_version)
    yield
    # Shutdown
    app.state.engine = None


def create_app(engine: AwardEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Passing ``engine`` skips rule loading at startup.
    """
    app = FastAPI(
        title="Award Engine API",
        description="Award interpretation for the Aged Care Award (MA000018)",
        version=__version__,
        lifespan=None if engine is not None else lifespan,
    )
    if engine is not None:
        app.state.engine = engine

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(EngineError)
    async def engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
        """Map engine errors to status codes."""
        status_code, code = error_status_and_code(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("[%s] %s: %s", get_correlation_id(request), code, exc)
        else:
            logger.warning("[%s] Rejected request: %s", get_correlation_id(request), exc)
        return _error_response(request, status_code, code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body validation failures."""
        errors = exc.errors()
        if any(error.get("type") == "json_invalid" for error in errors):
            code, message = "MALFORMED_JSON", "Request body is not valid JSON"
        else:
            code, message = "VALIDATION_ERROR", "Request validation failed"
        logger.warning("[%s] Rejected request: %s", get_correlation_id(request), code)
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            code,
            message,
            details=jsonable_encoder(errors, custom_encoder={Exception: str}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Keep the error body shape for routing errors."""
        return _error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("[%s] Unexpected error", get_correlation_id(request))
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            "An unexpected error occurred",
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(calculate_router)

    return app


# Default app instance for uvicorn
app = create_app()
