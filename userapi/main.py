"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, users)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from userapi.core.config import Settings, settings
from userapi.interfaces.health import router as health_router
from userapi.interfaces.users.router import router as users_router
from userapi.shared.errors.handlers import register_error_handlers
from userapi.shared.logging import configure_logging
from userapi.shared.security.headers import SecurityHeadersMiddleware
from userapi.shared.security.rate_limiting import configure_limiter


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to build the app with. Defaults to the
            environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = configure_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
