"""
FastAPI application factory and configuration.

This follows the application factory pattern, making testing easier
and allowing for different configurations (dev, test, prod).
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import load_config
from ..engine.manager import SessionManager
from ..errors import DraftRuleViolation, InvalidImageError, SessionNotFound
from ..external.image_client import ImageClient, PassthroughImageClient
from ..storage.settings_store import SettingsStore
from .middleware.cors import setup_cors
from .routes.drafts import router as drafts_router
from .routes.health import router as health_router
from .routes.settings import router as settings_router
from .routes.websocket import router as websocket_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up Draft Board API...")
    logger.info("Startup complete")

    yield

    logger.info("Shutting down Draft Board API...")

    # Cancel every session ticker before the loop goes away
    await app.state.sessions.close()
    await app.state.image_client.close()

    logger.info("Shutdown complete")


def _error_response(status_code: int, error_type: str, message: str, **extra) -> JSONResponse:
    error = {"type": error_type, "message": message, "status_code": status_code}
    error.update(extra)
    return JSONResponse(status_code=status_code, content={"error": error})


def create_app(config: Dict[str, Any] = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures a FastAPI application instance.
    ``config`` overrides environment and built-in defaults.
    """
    app_config = load_config(config)

    logging.basicConfig(level=app_config["log_level"],
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    app = FastAPI(
        title=app_config["title"],
        description=app_config["description"],
        version=app_config["version"],
        debug=app_config["debug"],
        lifespan=lifespan,
        docs_url="/docs" if app_config["debug"] else None,  # Disable docs in prod
        redoc_url="/redoc" if app_config["debug"] else None,
    )

    app.state.config = app_config
    app.state.sessions = SessionManager(
        tick_interval=app_config["tick_interval"],
        seed=app_config["seed"],
    )
    app.state.settings_store = SettingsStore(app_config["settings_dir"])
    if app_config["validate_images"]:
        app.state.image_client = ImageClient(timeout=app_config["image_timeout"])
    else:
        app.state.image_client = PassthroughImageClient()

    setup_cors(app, app_config["cors_origins"])

    # Add request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add response time header for monitoring."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests for monitoring and debugging."""
        start_time = time.time()

        logger.info(f"Request: {request.method} {request.url}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Response: {response.status_code} - {process_time:.3f}s - {request.method} {request.url.path}"
        )

        return response

    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with consistent format."""
        return _error_response(exc.status_code, "http_error", exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        return _error_response(422, "validation_error", "Request validation failed",
                               details=jsonable_encoder(exc.errors()))

    @app.exception_handler(ValidationError)
    async def model_validation_handler(request: Request, exc: ValidationError):
        """Handle draft setup that fails model validation."""
        errors = exc.errors(include_url=False, include_context=False)
        message = errors[0]["msg"] if errors else "Draft setup is invalid"
        return _error_response(422, "validation_error", message, details=jsonable_encoder(errors))

    @app.exception_handler(SessionNotFound)
    async def session_not_found_handler(request: Request, exc: SessionNotFound):
        return _error_response(404, "session_not_found", str(exc))

    @app.exception_handler(DraftRuleViolation)
    async def rule_violation_handler(request: Request, exc: DraftRuleViolation):
        """Rejected actions leave the session unchanged."""
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
        return _error_response(409, "rule_violation", str(exc))

    @app.exception_handler(InvalidImageError)
    async def invalid_image_handler(request: Request, exc: InvalidImageError):
        return _error_response(422, "invalid_image", exc.reason, url=exc.url)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True)

        return _error_response(
            500, "internal_error", "An unexpected error occurred",
            # Don't leak error details in production
            details=str(exc) if app_config["debug"] else None,
        )

    # Include routers
    app.include_router(health_router, prefix="/api/v1", tags=["health"])
    app.include_router(settings_router, prefix="/api/v1", tags=["settings"])
    app.include_router(drafts_router, prefix="/api/v1", tags=["drafts"])
    app.include_router(websocket_router, tags=["websocket"])

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": app_config["title"],
            "version": app_config["version"],
            "description": app_config["description"],
            "docs_url": "/docs" if app_config["debug"] else None,
            "health_check": "/api/v1/health",
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "draftboard.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
