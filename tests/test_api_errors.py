"""
Tests for the HTTP error boundary.

Runs a real FastAPI app with routes that raise each failure family and
checks the status code and envelope written to the client.
"""

import httpx
import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from psycopg import errors as pg_errors
from pydantic import BaseModel
from sqlalchemy import exc as sa_exc

from errorshield.core.config import Settings
from errorshield.domain.errors.exceptions import DomainError
from errorshield.domain.errors.taxonomy import ErrorKind, SuccessMessage
from errorshield.interfaces.schemas import ResponseEnvelope
from errorshield.main import create_app

GENERIC = ErrorKind.GENERIC_ERROR.value

router = APIRouter(prefix="/raise")


class ItemIn(BaseModel):
    name: str
    quantity: int


@router.get("/not-found")
def raise_not_found() -> None:
    raise DomainError(ErrorKind.RESOURCE_NOT_FOUND)


@router.get("/token-expired")
def raise_token_expired() -> None:
    raise DomainError(ErrorKind.TOKEN_EXPIRED, message="token for user 7 expired")


@router.get("/runtime")
def raise_runtime() -> None:
    raise RuntimeError("Unexpected null")


@router.get("/type")
def raise_type() -> None:
    return None + 1  # type: ignore[operator]


@router.get("/unique")
def raise_unique() -> None:
    orig = pg_errors.UniqueViolation("duplicate key value violates unique constraint")
    raise sa_exc.IntegrityError("INSERT INTO users ...", {}, orig)


@router.get("/upstream")
def raise_upstream() -> None:
    request = httpx.Request("GET", "https://users.internal/users/7")
    response = httpx.Response(404, json={"error": "User not found"}, request=request)
    raise httpx.HTTPStatusError("upstream 404", request=request, response=response)


class _UnrenderableError(Exception):
    def __str__(self) -> str:
        raise ValueError("cannot render")


@router.get("/unrenderable")
def raise_unrenderable() -> None:
    raise _UnrenderableError()


@router.get("/bad-status")
def raise_bad_status() -> None:
    raise DomainError(ErrorKind.RESOURCE_NOT_FOUND, status=0)


@router.post("/items")
def create_item(item: ItemIn) -> ResponseEnvelope[ItemIn]:
    return ResponseEnvelope[ItemIn].ok(SuccessMessage.RESOURCE_CREATED, item)


def _client(disclose: bool, rate_limit: str = "1000/minute") -> TestClient:
    app = create_app(
        Settings(
            _env_file=None,
            expose_errors=disclose,
            rate_limit_default=rate_limit,
            log_level="WARNING",
        )
    )
    app.include_router(router)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client() -> TestClient:
    return _client(disclose=False)


@pytest.fixture
def dev_client() -> TestClient:
    return _client(disclose=True)


def _assert_error(response: httpx.Response, status: int, message: str) -> None:
    assert response.status_code == status
    assert response.json() == {"success": False, "message": message, "data": None}


# =====================================================================
# Success envelope
# =====================================================================

class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_uses_success_envelope(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Resource retrieved successfully"
        assert body["data"]["status"] == "ok"

    def test_docs_hidden_without_disclosure(self, client: TestClient) -> None:
        _assert_error(client.get("/docs"), 404, "Resource not found")


# =====================================================================
# Production mode
# =====================================================================

class TestRedactedErrors:
    """Error responses with disclosure off."""

    def test_domain_not_found(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/not-found"), 404, "Resource not found")

    def test_token_expired_is_redacted(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/token-expired"), 401, "Unauthorized")

    def test_runtime_error(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/runtime"), 500, GENERIC)

    def test_type_error(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/type"), 400, GENERIC)

    def test_unique_violation(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/unique"), 409, "Resource already exists")

    def test_upstream_status_propagates(self, client: TestClient) -> None:
        _assert_error(client.get("/raise/upstream"), 404, "Resource not found")

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/raise/items",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        _assert_error(response, 400, GENERIC)

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/raise/items", json={"name": "bolt"})
        _assert_error(response, 400, GENERIC)

    def test_unknown_route(self, client: TestClient) -> None:
        _assert_error(client.get("/does-not-exist"), 404, "Resource not found")

    def test_method_not_allowed(self, client: TestClient) -> None:
        _assert_error(client.delete("/api/v1/health"), 405, GENERIC)

    def test_unrenderable_exception_still_gets_envelope(
        self, client: TestClient
    ) -> None:
        _assert_error(client.get("/raise/unrenderable"), 500, GENERIC)

    def test_out_of_range_status_override_uses_default(
        self, client: TestClient
    ) -> None:
        _assert_error(client.get("/raise/bad-status"), 404, "Resource not found")

    def test_valid_body_succeeds(self, client: TestClient) -> None:
        response = client.post("/raise/items", json={"name": "bolt", "quantity": 3})
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Resource created successfully",
            "data": {"name": "bolt", "quantity": 3},
        }


# =====================================================================
# Development mode
# =====================================================================

class TestDisclosedErrors:
    """Error responses with disclosure on."""

    def test_runtime_message_shown(self, dev_client: TestClient) -> None:
        _assert_error(dev_client.get("/raise/runtime"), 500, "Unexpected null")

    def test_domain_custom_message_shown(self, dev_client: TestClient) -> None:
        _assert_error(
            dev_client.get("/raise/token-expired"), 401, "token for user 7 expired"
        )

    def test_upstream_error_text_shown(self, dev_client: TestClient) -> None:
        _assert_error(dev_client.get("/raise/upstream"), 404, "User not found")

    def test_missing_field_shows_category(self, dev_client: TestClient) -> None:
        response = dev_client.post("/raise/items", json={"name": "bolt"})
        _assert_error(response, 400, "Invalid data format")

    def test_malformed_json_shows_parser_message(self, dev_client: TestClient) -> None:
        response = dev_client.post(
            "/raise/items",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "JSON decode error" in response.json()["message"]

    def test_unique_violation_same_in_both_modes(self, dev_client: TestClient) -> None:
        _assert_error(dev_client.get("/raise/unique"), 409, "Resource already exists")

    def test_unknown_route_shows_framework_detail(self, dev_client: TestClient) -> None:
        _assert_error(dev_client.get("/does-not-exist"), 404, "Not Found")

    def test_unrenderable_exception_shows_type_name(
        self, dev_client: TestClient
    ) -> None:
        _assert_error(
            dev_client.get("/raise/unrenderable"), 500, "_UnrenderableError"
        )


# =====================================================================
# Rate limiting
# =====================================================================

class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self) -> None:
        """Exceeding the rate limit returns HTTP 429 with the class message."""
        client = _client(disclose=False, rate_limit="2/minute")
        statuses = [client.get("/api/v1/health").status_code for _ in range(3)]
        assert statuses[:2] == [200, 200]

        response = client.get("/api/v1/health")
        _assert_error(response, 429, "Too many requests")
