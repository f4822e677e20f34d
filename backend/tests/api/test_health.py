"""Tests for health check endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings


client = TestClient(create_app())


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    @patch("api.routes.health.get_settings")
    def test_readiness_when_configured(self, mock_settings):
        mock_settings.return_value = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_anon_key="anon",
            supabase_jwt_secret="secret",
        )
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "supabase": "configured",
            "auth": "configured",
        }

    @patch("api.routes.health.get_settings")
    def test_readiness_degraded_without_config(self, mock_settings):
        mock_settings.return_value = Settings(_env_file=None)
        data = client.get("/api/ready").json()
        assert data["status"] == "degraded"
        assert data["supabase"] == "missing"
        assert data["auth"] == "missing"
