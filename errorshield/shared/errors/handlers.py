"""
Centralized error handlers for FastAPI.

Every exception reaching the application boundary is routed through
the error engine. Handlers only write the resolved status and envelope.
No stack traces or internal details are exposed unless disclosure is on.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from errorshield.domain.errors.exceptions import DomainError
from errorshield.shared.errors.engine import ErrorOutcome, ErrorResponder

logger = logging.getLogger(__name__)

HTTP_500 = 500


def _log_outcome(request: Request, outcome: ErrorOutcome) -> None:
    level = logging.ERROR if outcome.status >= HTTP_500 else logging.WARNING
    logger.log(
        level,
        "%s %s -> %d %s",
        request.method,
        request.url.path,
        outcome.status,
        outcome.result.kind.name,
    )


def build_error_response(
    responder: ErrorResponder, request: Request, exc: object
) -> JSONResponse:
    """Resolve a failure and build its JSON response."""
    outcome = responder.respond(exc)
    _log_outcome(request, outcome)
    return JSONResponse(
        status_code=outcome.status,
        content=outcome.envelope.model_dump(),
    )


def register_error_handlers(app: FastAPI, responder: ErrorResponder) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: Error engine bound to the process disclosure mode.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        """Handle application-raised domain errors."""
        return build_error_response(responder, request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body and parameter validation failures."""
        return build_error_response(responder, request, exc)

    # slowapi's middleware calls this handler directly, without awaiting.
    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle requests over the rate limit."""
        return build_error_response(responder, request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework HTTP errors (unknown route, wrong method)."""
        return build_error_response(responder, request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors."""
        return build_error_response(responder, request, exc)
