# hangul_corrector\adapters\api\main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from hangul_corrector import __version__
from hangul_corrector.shared.config import settings, AppEnv
from hangul_corrector.shared.container import container
from hangul_corrector.shared.logging_config import configure_logging
from hangul_corrector.shared.observability import setup_telemetry, instrument_fastapi

# Import Routers
from hangul_corrector.adapters.api.routers import correction, health

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (Logging, Telemetry) and shutdown.
    """
    configure_logging()
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    logger.info("app_startup", env=settings.APP_ENV.value, ruleset=settings.RULESET_VERSION)

    yield

    logger.info("app_shutdown")

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Rule-based Korean grammar correction (particles, tense, speech level)",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
        lifespan=lifespan
    )

    # 1. Wire the Container
    # Modules using Provide[...] markers must be wired explicitly.
    container.wire(modules=["hangul_corrector.adapters.api.dependencies"])

    # 2. CORS Configuration
    # The browser client calls this API directly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 3. Auto-Instrument FastAPI for Tracing
    instrument_fastapi(app)

    # 4. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Standardizes HTTP errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail
            }
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to avoid leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc)
            }
        )

    # 5. Mount Routes
    app.include_router(correction.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app

# Entry point for Uvicorn
app = create_app()
