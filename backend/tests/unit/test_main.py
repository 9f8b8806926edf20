"""Unit tests for main FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from musicplayer.dependencies import db_dependency
from musicplayer.main import API_VERSION, app


class TestAppConfiguration:
    """Tests for application initialization and configuration."""

    def test_app_title(self):
        """Test app is created with the correct title."""
        assert app.title == "Music Player API"
        assert app.version == API_VERSION

    def test_cors_middleware(self, client):
        """Test CORS middleware by checking response headers."""
        response = client.get("/", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"] == "http://localhost:5173"
        )
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_cors_rejects_unknown_origin(self, client):
        response = client.get("/", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    def test_routers_included(self):
        """Test that every resource router is included."""
        route_paths = set(app.openapi()["paths"])

        for path in [
            "/api/artists",
            "/api/songs",
            "/api/songs/by-artist/{artist_id}",
            "/api/users/{user_id}",
            "/api/auth/login",
            "/api/auth/signup",
            "/api/playlists",
            "/api/playlists/{playlist_id}/songs",
            "/api/search",
            "/api/health",
        ]:
            assert path in route_paths


class TestEndpoints:
    """Tests for the banner endpoints."""

    def test_root_endpoint(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Music Player Backend API"
        assert data["version"] == API_VERSION
        assert data["endpoints"]["health"] == "/api/health"

    def test_api_root_endpoint(self, client):
        response_1 = client.get("/api")
        assert response_1.status_code == 200
        assert response_1.json()["message"].startswith("Music Player API")

        response_2 = client.get("/api/")
        assert response_2.status_code == 200
        assert response_2.json() == response_1.json()


class TestErrorEnvelope:
    """Tests for the JSON error bodies."""

    def test_unknown_path(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_wrong_method(self, client):
        response = client.put("/api/artists")

        assert response.status_code == 405
        assert "error" in response.json()

    def test_unhandled_error(self):
        """Unexpected exceptions become a 500 with the generic envelope."""

        def broken_db():
            raise RuntimeError("boom")

        app.dependency_overrides[db_dependency] = broken_db
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/api/artists")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "boom"}


@pytest.mark.parametrize("path", ["/api/artists/abc", "/api/songs/by-artist/x"])
def test_bad_path_parameter(client, path):
    response = client.get(path)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
