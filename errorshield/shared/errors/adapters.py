"""
Boundary adapters: raised values -> Failure variants.

This is the only place that inspects runtime types. Everything past
``wrap_failure`` works on the closed Failure union.

Checks run in classification precedence order:
domain, structured, upstream, persistence, persistence input,
schema validation, parse, type, runtime, unknown.
"""

import json
import traceback
from collections.abc import Mapping
from typing import Any, Optional

import httpx
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy import exc as sa_exc

from errorshield.domain.errors.exceptions import DomainError
from errorshield.domain.errors.failures import (
    DomainFailure,
    Failure,
    ParseFailure,
    PersistenceFailure,
    PersistenceInputFailure,
    RuntimeFailure,
    SchemaValidationFailure,
    StructuredFailure,
    TypeFailure,
    UnknownFailure,
    UpstreamFailure,
)

STATUS_KEYS = ("status", "statusCode", "status_code")
MESSAGE_KEY = "message"
UPSTREAM_ERROR_KEY = "error"
JSON_INVALID = "json_invalid"

# SQLSTATE reported when an ORM query expected a row and found none.
NO_DATA_SQLSTATE = "02000"

PERSISTENCE_INPUT_ERRORS = (
    sa_exc.ArgumentError,
    sa_exc.CompileError,
    sa_exc.InvalidRequestError,
    sa_exc.StatementError,
)


def wrap_failure(value: object) -> Failure:
    """Wrap any raised value into exactly one Failure variant.

    Never raises: values of unknown shape become UnknownFailure.
    """
    if isinstance(value, DomainError):
        return DomainFailure(
            kind=value.kind,
            message=value.message,
            status_override=value.status_override,
        )

    try:
        structured = _as_structured(value)
    except Exception:
        # Lookups on hostile mappings or proxies mean "not structured".
        structured = None
    if structured is not None:
        return structured

    if isinstance(value, httpx.HTTPStatusError):
        return UpstreamFailure(
            status=value.response.status_code,
            error_message=_upstream_error_message(value.response),
        )

    if isinstance(value, sa_exc.NoResultFound):
        return PersistenceFailure(NO_DATA_SQLSTATE, _describe(value))

    if isinstance(value, sa_exc.DBAPIError):
        return PersistenceFailure(
            operation_code=_sqlstate(value.orig) or "",
            vendor_message=_describe(value if value.orig is None else value.orig),
        )

    if isinstance(value, PERSISTENCE_INPUT_ERRORS):
        return PersistenceInputFailure(_describe(value))

    if isinstance(value, RequestValidationError):
        issues = list(value.errors())
        if issues and all(issue.get("type") == JSON_INVALID for issue in issues):
            return ParseFailure(_issue_message(issues[0]))
        return SchemaValidationFailure(_format_issues(issues))

    if isinstance(value, ValidationError):
        return SchemaValidationFailure(_format_issues(value.errors()))

    if isinstance(value, json.JSONDecodeError):
        return ParseFailure(_describe(value))

    if isinstance(value, TypeError):
        return TypeFailure(_describe(value))

    if isinstance(value, Exception):
        return RuntimeFailure(
            name=type(value).__name__,
            message=_describe(value),
            stack="".join(
                traceback.format_exception(type(value), value, value.__traceback__)
            ),
        )

    return UnknownFailure(_describe(value))


def _as_structured(value: object) -> Optional[StructuredFailure]:
    """Rebuild plain status/message data, or objects exposing status_code."""
    if isinstance(value, Mapping):
        status = next(
            (value[key] for key in STATUS_KEYS if key in value), None
        )
        message = value.get(MESSAGE_KEY)
        if not isinstance(message, str):
            message = None
        if status is None and message is None:
            return None
        return StructuredFailure(
            status=status if isinstance(status, int) else None,
            message=message,
        )

    status_code = getattr(value, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        detail = getattr(value, "detail", None)
        return StructuredFailure(
            status=status_code,
            message=detail if isinstance(detail, str) else None,
        )
    return None


def _upstream_error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except (ValueError, httpx.StreamError):
        return None
    if isinstance(body, Mapping):
        error = body.get(UPSTREAM_ERROR_KEY)
        if isinstance(error, str) and error:
            return error
    return None


def _sqlstate(orig: Any) -> Optional[str]:
    """Read the SQLSTATE from a psycopg 3 or psycopg2 error."""
    try:
        code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    except Exception:
        return None
    return code if isinstance(code, str) else None


def _issue_message(issue: Mapping) -> str:
    loc = ".".join(str(part) for part in issue.get("loc", ()))
    msg = str(issue.get("msg", ""))
    return f"{loc}: {msg}" if loc else msg


def _format_issues(issues: Any) -> tuple[str, ...]:
    return tuple(_issue_message(issue) for issue in issues)


def _describe(value: object) -> str:
    """Render a value as text, falling back to its type name."""
    try:
        return str(value)
    except Exception:
        return type(value).__name__
