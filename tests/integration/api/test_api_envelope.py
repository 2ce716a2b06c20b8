"""Integration tests for cross-cutting HTTP behavior.

Response envelope, error status mapping, trace ids and request logging.
"""

import logging
import uuid
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from fiqhqa.application.services import UserService
from fiqhqa.domain.shared.exceptions import StorageError
from fiqhqa.presentation.api.app import create_app
from fiqhqa.presentation.api.dependencies import get_user_service
from tests.integration.api.conftest import build_test_client


class TestRoutingErrors:
    """Unknown routes and methods use the envelope too."""

    def test_unknown_route(self, test_client: TestClient):
        response = test_client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {
            "status": 404,
            "message": "method not found",
            "data": None,
        }

    def test_wrong_method(self, test_client: TestClient):
        response = test_client.delete("/login")

        assert response.status_code == 405
        assert response.json()["message"] == "method not allowed"


class TestInternalErrors:
    """Unexpected failures never leak details."""

    def _client_with_failing_service(self, api_settings, error) -> TestClient:
        service = Mock(spec=UserService)
        service.add = AsyncMock(side_effect=error)

        app = create_app(settings=api_settings)
        app.dependency_overrides[get_user_service] = lambda: service
        return TestClient(app, raise_server_exceptions=False)

    def test_unhandled_exception_is_internal_error(self, api_settings):
        client = self._client_with_failing_service(
            api_settings,
            RuntimeError("database password is hunter2"),
        )

        response = client.post(
            "/users",
            json={"username": "amina", "password": "secret1"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "status": 500,
            "message": "internal error",
            "data": None,
        }
        assert "hunter2" not in response.text

    def test_storage_error_is_internal_error(self, api_settings):
        client = self._client_with_failing_service(api_settings, StorageError())

        response = client.post(
            "/users",
            json={"username": "amina", "password": "secret1"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "internal error"


class TestTraceId:
    """Trace-Id header propagation."""

    def test_trace_id_is_echoed(self, test_client: TestClient):
        response = test_client.post(
            "/login",
            headers={"Trace-Id": "trace-abc-123"},
            json={"username": "nobody", "password": "secret1"},
        )

        assert response.headers["Trace-Id"] == "trace-abc-123"

    def test_trace_id_is_generated_when_missing(self, test_client: TestClient):
        response = test_client.get("/health")

        trace_id = response.headers["Trace-Id"]
        assert uuid.UUID(trace_id)

    def test_each_request_gets_its_own_trace_id(self, test_client: TestClient):
        first = test_client.get("/health").headers["Trace-Id"]
        second = test_client.get("/health").headers["Trace-Id"]

        assert first != second


class TestRequestLogging:
    """One log line per request with trace and user ids."""

    def test_request_is_logged_with_user_id(
        self,
        test_client: TestClient,
        auth_headers,
        registered_user,
        caplog: pytest.LogCaptureFixture,
    ):
        with caplog.at_level(logging.INFO, logger="fiqhqa.http"):
            test_client.get(
                "/users/me",
                headers={**auth_headers, "Trace-Id": "trace-log-1"},
            )

        lines = [r.getMessage() for r in caplog.records if r.name == "fiqhqa.http"]
        assert len(lines) == 1
        assert "[HTTP] TraceId: trace-log-1;" in lines[0]
        assert f"UserId: {registered_user['id']};" in lines[0]
        assert "Method: GET; Path: /users/me; Status: 200;" in lines[0]

    def test_anonymous_request_logs_no_user(
        self,
        test_client: TestClient,
        caplog: pytest.LogCaptureFixture,
    ):
        with caplog.at_level(logging.INFO, logger="fiqhqa.http"):
            test_client.get("/users/me")

        lines = [r.getMessage() for r in caplog.records if r.name == "fiqhqa.http"]
        assert "UserId: None;" in lines[0]
        assert "Status: 401;" in lines[0]

    def test_passwords_are_never_logged(
        self,
        test_client: TestClient,
        caplog: pytest.LogCaptureFixture,
    ):
        with caplog.at_level(logging.DEBUG):
            test_client.post(
                "/users",
                json={"username": "amina", "password": "very-secret-pw"},
            )
            test_client.post(
                "/login",
                json={"username": "amina", "password": "very-secret-pw"},
            )

        assert "very-secret-pw" not in caplog.text


class TestHealth:
    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}


class TestAppOptions:
    def test_cors_preflight_for_configured_origin(self, test_client: TestClient):
        response = test_client.options(
            "/login",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"] == "http://localhost:3000"
        )

    def test_docs_hidden_by_default(self, test_client: TestClient):
        assert test_client.get("/docs").status_code == 404
        assert test_client.get("/openapi.json").status_code == 404

    def test_docs_served_in_debug_mode(self, api_settings, transaction_manager):
        settings = api_settings.model_copy(update={"api_debug": True})
        client = build_test_client(settings, transaction_manager)

        schema = client.get("/openapi.json")

        assert schema.status_code == 200
        assert "/users/me/password" in schema.json()["paths"]


class TestDetailedErrors:
    def test_internal_errors_stay_generic(self, api_settings):
        settings = api_settings.model_copy(update={"api_detailed_errors": True})
        service = Mock(spec=UserService)
        service.add = AsyncMock(side_effect=StorageError("disk full on /var/lib"))
        app = create_app(settings=settings)
        app.dependency_overrides[get_user_service] = lambda: service
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post(
            "/users",
            json={"username": "amina", "password": "secret1"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "internal error"

    def test_validation_message_names_the_field(self, detailed_client: TestClient):
        response = detailed_client.post("/login", json={"username": "amina"})

        assert response.status_code == 400
        assert "password" in response.json()["message"]
