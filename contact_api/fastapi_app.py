"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and the app container.

Endpoints:
- GET  /api/health
- POST /api/contact
- GET  /metrics
- static client assets (production)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from contact_api.config.logging_config import setup_logging
from contact_api.config.settings import Config
from contact_api.domain.exceptions import ContactValidationError, StartupError
from contact_api.observability.metrics import MetricsErrorType, increment_error
from contact_api.presentation.api import (
    contact_router,
    health_router,
    metrics_router,
)
from contact_api.presentation.middleware import (
    CorrelationIdMiddleware,
    MetricsMiddleware,
    SecurityHeadersMiddleware,
)
from contact_api.presentation.rate_limiting import limiter
from contact_api.setup.ioc.container import (
    connect_store,
    create_container,
    verify_mail_relay,
)

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files that fall back to index.html so client-side routes resolve."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: connect the store (fatal on failure), verify the mail relay (logged only)
    - Shutdown: close the DI container (disconnects MongoDB)
    """
    container: AsyncContainer = app.state.dishka_container
    try:
        await connect_store(container)
    except StartupError as e:
        logger.critical(f"Startup aborted: {e.message}")
        await container.close()
        raise

    try:
        await verify_mail_relay(container)
        logger.info("FastAPI application started. DI container initialized.")
        yield
    finally:
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")


def _register_exception_handlers(app: FastAPI) -> None:
    # Body that is not a JSON object of text fields never reaches the pipeline
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"[VALIDATION ERROR] {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"error": ContactValidationError.missing_field().message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.warning(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        increment_error(MetricsErrorType.UNHANDLED)
        detail = str(exc) if Config.EXPOSE_ERROR_DETAILS else "Server error"
        return JSONResponse(status_code=500, content={"error": detail})

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container; when omitted the MongoDB/SMTP providers
            from Config are used (connected by the lifespan)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Contact API",
        description="Contact form backend: validates, stores and announces submissions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.limiter = limiter

    # Middleware: last added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    # Real client address for rate limiting behind a reverse proxy
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=Config.TRUSTED_PROXIES)

    _register_exception_handlers(app)

    # Setup Dishka integration
    if container is None:
        container = create_container()
    setup_dishka(container, app)

    # Register routers
    app.include_router(health_router)  # GET /api/health
    app.include_router(contact_router)  # POST /api/contact
    app.include_router(metrics_router)  # GET /metrics

    # Static client, mounted last so API routes win
    if Config.SERVE_STATIC:
        static_dir = Path(Config.STATIC_DIR)
        if static_dir.is_dir():
            app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning(f"Static directory not found, skipping: {static_dir}")

    return app


# Create the app instance
app = create_fastapi_app()
