"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Response headers and rate limiting middleware
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from gias_api.core.config import settings
from gias_api.interfaces.establishments.router import router as establishments_router
from gias_api.interfaces.health import router as health_router
from gias_api.interfaces.stub import router as stub_router
from gias_api.shared.errors.handlers import register_error_handlers
from gias_api.shared.logging import configure_logging
from gias_api.shared.security.headers import ApiResponseHeadersMiddleware
from gias_api.shared.security.rate_limiting import limiter


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    # --- Response Headers ---
    app.add_middleware(ApiResponseHeadersMiddleware, api_version=settings.version)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(stub_router, prefix="/api/v1")
    app.include_router(establishments_router, prefix="/api/v1")

    return app


app = create_app()
