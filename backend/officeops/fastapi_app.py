"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware and DI.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from officeops.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from officeops.config.settings import get_config
from officeops.presentation.api import todos_router
from officeops.setup.ioc.container import create_container, verify_wiring

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: verify handler/listener wiring (ConfigurationError aborts start)
    - Shutdown: close DI container
    """
    container: AsyncContainer = app.state.dishka_container
    await verify_wiring(container)
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(
    container: Optional[AsyncContainer] = None, configure_logging: bool = True
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Returns:
        FastAPI application instance
    """
    settings = get_config()
    if configure_logging:
        setup_logging(settings.LOG_LEVEL, settings.LOG_PATH)

    app = FastAPI(
        title=settings.API_TITLE,
        description="Line-of-business backend over the transactional aggregate pipeline",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info("Request validation failed: %s", errors)
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "value": None,
                "error": "Validation error",
                "details": jsonable_encoder(errors),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "value": None, "error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=500,
            content={"success": False, "value": None, "error": f"Internal server error: {exc}"},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(todos_router)

    return app
