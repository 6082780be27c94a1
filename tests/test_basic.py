"""
Basic application tests.

Validates the health endpoint, request id propagation and the
startup configuration checks.
"""

import importlib

import pytest

from app import config


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self, client) -> None:
        """Health endpoint reports service, environment and request id."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["service"] == "dog-proxy-test"
        assert body["environment"] == "staging"
        assert body["request_id"]


class TestRequestId:
    def test_request_id_header_matches_body(self, client) -> None:
        response = client.get("/health")
        assert response.headers["X-Request-ID"] == response.json()["request_id"]

    def test_request_ids_are_unique(self, client) -> None:
        first = client.get("/health").headers["X-Request-ID"]
        second = client.get("/health").headers["X-Request-ID"]
        assert first != second


class TestConfig:
    """Configuration is validated when the module loads."""

    @pytest.fixture(autouse=True)
    def restore_config(self):
        yield
        importlib.reload(config)

    def test_rejects_unknown_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "qa")
        with pytest.raises(RuntimeError, match="ENVIRONMENT"):
            importlib.reload(config)

    def test_rejects_non_positive_timeout(self, monkeypatch) -> None:
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "0")
        with pytest.raises(RuntimeError, match="UPSTREAM_TIMEOUT_SECONDS"):
            importlib.reload(config)

    def test_rejects_non_numeric_timeout(self, monkeypatch) -> None:
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "soon")
        with pytest.raises(RuntimeError, match="UPSTREAM_TIMEOUT_SECONDS"):
            importlib.reload(config)

    def test_base_url_trailing_slash_is_stripped(self, monkeypatch) -> None:
        monkeypatch.setenv("DOG_API_BASE_URL", "https://example.test/api/")
        importlib.reload(config)
        assert config.DOG_API_BASE_URL == "https://example.test/api"
