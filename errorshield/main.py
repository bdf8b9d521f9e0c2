"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized failure-to-HTTP mapping)
- Rate limiting
- Logging configuration

The disclosure mode is read from settings once, here, and passed
explicitly to the error engine. No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from errorshield.core.config import Settings, settings
from errorshield.domain.errors.classifier import Classifier
from errorshield.infrastructure.diagnostics import LoggingDiagnosticLogger
from errorshield.interfaces.health import router as health_router
from errorshield.shared.errors.engine import ErrorResponder
from errorshield.shared.errors.handlers import register_error_handlers
from errorshield.shared.logging import configure_logging
from errorshield.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and rate limiting.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use. Defaults to the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    disclose = app_settings.disclose_errors
    if disclose:
        logger.warning("Error disclosure is ON: raw error messages reach clients")

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if disclose else None,
        redoc_url="/redoc" if disclose else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings.rate_limit_default)
    app.add_middleware(SlowAPIMiddleware)

    # --- Error Handlers ---
    responder = ErrorResponder(
        classifier=Classifier(diagnostics=LoggingDiagnosticLogger()),
        disclose=disclose,
    )
    app.state.error_responder = responder
    register_error_handlers(app, responder)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
