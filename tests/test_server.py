"""
Tests for the REST endpoints.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from emoji_search import __version__


@pytest.fixture
def unloaded_client():
    """Create a test client whose startup finds no dataset"""
    from emoji_search.server import app

    with patch("emoji_search.server.ensure_dataset"):
        with TestClient(app) as test_client:
            yield test_client


class TestHealthEndpoints:
    """Tests for health and readiness endpoints."""

    def test_health(self, client):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__

    def test_ready(self, client):
        """Should report the loaded dataset size."""
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert response.json()["entities"] == 9

    def test_not_ready(self, unloaded_client):
        """Should answer 503 until a dataset is loaded."""
        response = unloaded_client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_undecodable_dataset_at_startup(self, monkeypatch, write_dataset_files):
        """Should start and report not ready when a dataset file is not valid UTF-8."""
        from emoji_search.config import settings
        from emoji_search.server import app

        data_dir = write_dataset_files()
        (data_dir / "emoogle-keyword-most-relevant-emoji.json").write_bytes(b'{"\xff": "x"}')
        monkeypatch.setattr(settings, "data_dir", str(data_dir))

        with TestClient(app) as test_client:
            response = test_client.get("/ready")

        assert response.status_code == 503

    def test_root(self, client):
        """Should describe the service."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["mcp"] == "/mcp"


class TestSearchEndpoint:
    """Tests for POST /v1/search."""

    def test_standard_search(self, client):
        """Should return ranked emojis."""
        response = client.post("/v1/search", json={"query": "wave"})

        assert response.status_code == 200
        data = response.json()
        assert data["results"] == ["🌊", "👋"]
        assert data["count"] == 2
        assert data["mode"] == "standard"
        assert data["latency_ms"] >= 0

    def test_best_matching_search(self, client):
        """Should use the best-matching search when requested."""
        response = client.post(
            "/v1/search",
            json={"query": "the smiling dogs", "mode": "best_matching", "limit": 3},
        )

        assert response.status_code == 200
        results = response.json()["results"]
        assert set(results[:2]) == {"😊", "😎"}
        assert results[2] in {"🐶", "🐕"}

    def test_options(self, client):
        """Should apply per-request options."""
        response = client.post(
            "/v1/search",
            json={"query": "wave", "options": {"custom_preferred_entity": {"wave": "👋"}}},
        )

        assert response.status_code == 200
        assert response.json()["results"] == ["👋", "🌊"]

    def test_known_emoji(self, client):
        """Should return a known emoji directly."""
        response = client.post("/v1/search", json={"query": "🐶"})

        assert response.json()["results"] == ["🐶"]

    def test_empty_results(self, client):
        """Should return an empty list for unmatched queries."""
        response = client.post("/v1/search", json={"query": "xyz"})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["count"] == 0

    def test_default_limit(self, client):
        """Should apply the shared default limit when none is given."""
        from emoji_search.config import Settings
        from emoji_search.engine.scoring.constants import DEFAULT_LIMIT
        from emoji_search.models import SearchRequest

        assert SearchRequest(query="wave").limit == DEFAULT_LIMIT
        assert "default_limit" not in Settings.model_fields

        response = client.post("/v1/search", json={"query": "h"})
        assert response.json()["count"] == 4

    def test_limit_above_maximum(self, client):
        """Should reject limits above the configured maximum."""
        response = client.post("/v1/search", json={"query": "wave", "limit": 501})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert "limit" in data["error"]

    def test_negative_limit(self, client):
        """Should reject negative limits during validation."""
        response = client.post("/v1/search", json={"query": "wave", "limit": -1})

        assert response.status_code == 422

    def test_missing_query(self, client):
        """Should reject a body without a query."""
        response = client.post("/v1/search", json={"limit": 5})

        assert response.status_code == 422

    def test_unknown_mode(self, client):
        """Should reject unknown modes."""
        response = client.post("/v1/search", json={"query": "wave", "mode": "fuzzy"})

        assert response.status_code == 422

    def test_dataset_not_loaded(self, unloaded_client):
        """Should answer 503 when no dataset is loaded."""
        response = unloaded_client.post("/v1/search", json={"query": "wave"})

        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "No emoji dataset loaded"}


class TestRequestContext:
    """Tests for request tracing headers."""

    def test_generates_request_id(self, client):
        """Should add a request id and response time."""
        response = client.get("/health")

        assert response.headers["x-request-id"]
        assert float(response.headers["x-response-time-ms"]) >= 0

    def test_echoes_request_id(self, client):
        """Should echo the client's request id."""
        response = client.get("/health", headers={"X-Request-Id": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"
