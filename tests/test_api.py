"""Tests for FastAPI endpoints."""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from api.main import app
from core import config, get_events


client = TestClient(app)


class TestPublicEndpoints:
    """Test health and password tool endpoints."""

    def test_root_endpoint(self):
        """Root endpoint should return health status."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_endpoint(self):
        """Health endpoint should return detailed status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "version" in data

    def test_generate_password_default(self):
        """Generate password with default settings."""
        response = client.post("/generate", json={})
        assert response.status_code == 200
        data = response.json()
        assert len(data["password"]) == 12  # Default length
        assert data["length"] == 12
        assert data["classes"] == ["lowercase", "uppercase", "digit", "symbol"]
        assert 0 <= data["score"] <= 5
        assert data["max_score"] == 5
        assert data["label"]
        assert data["color"].startswith("#")

    def test_generate_password_custom_length(self):
        """Generate password with custom length."""
        response = client.post("/generate", json={"length": 32})
        assert response.status_code == 200
        assert len(response.json()["password"]) == 32

    def test_generate_password_only_digits(self):
        """Four digits should score 1."""
        response = client.post("/generate", json={
            "length": 4,
            "use_upper": False,
            "use_lower": False,
            "use_digits": True,
            "use_special": False
        })
        assert response.status_code == 200
        data = response.json()
        assert data["password"].isdigit()
        assert len(data["password"]) == 4
        assert data["score"] == 1
        assert data["label"] == "Weak"

    def test_generate_no_classes(self):
        """No classes should give an empty password, not an error."""
        response = client.post("/generate", json={
            "length": 12,
            "use_upper": False,
            "use_lower": False,
            "use_digits": False,
            "use_special": False
        })
        assert response.status_code == 200
        data = response.json()
        assert data["password"] == ""
        assert data["score"] == 0
        assert data["classes"] == []

    def test_generate_russian_labels(self):
        """Locale should switch the label language."""
        response = client.post("/generate", json={
            "length": 4,
            "use_upper": False,
            "use_lower": False,
            "use_special": False,
            "locale": "ru"
        })
        assert response.status_code == 200
        assert response.json()["label"] == "Слабый"

    def test_score_password(self):
        """Score a password with all classes and a long configured length."""
        response = client.post("/score", json={"password": "aB3$", "length": 20})
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 5
        assert data["label"] == "Very strong"
        assert data["accent"] == "#10B981"

    def test_score_defaults_to_password_length(self):
        """Without length the password's own length is used."""
        response = client.post("/score", json={"password": "aB3$"})
        assert response.status_code == 200
        assert response.json()["score"] == 4

    def test_score_empty_password(self):
        """Empty password should score 0."""
        response = client.post("/score", json={"password": "", "length": 20})
        assert response.status_code == 200
        assert response.json()["score"] == 0

    def test_generation_is_logged_without_password(self):
        """Events should record metadata but never the password."""
        response = client.post("/generate", json={"length": 10})
        password = response.json()["password"]

        events = get_events()
        assert events[-1]["event_type"] == "password_generated"
        assert events[-1]["details"]["length"] == 10
        assert password not in str(events[-1])

    def test_security_headers(self):
        """Responses should not be cacheable."""
        response = client.post("/generate", json={})
        assert response.headers["Cache-Control"].startswith("no-store")
        assert response.headers["X-Frame-Options"] == "DENY"


class TestEventLogFailures:
    """Endpoints should report an unwritable event log cleanly."""

    def test_generate_reports_event_log_unavailable(self, monkeypatch, tmp_path):
        """A directory in place of the app log should give a clear 500."""
        monkeypatch.setattr(config, "APP_LOG_FILE", str(tmp_path))
        response = client.post("/generate", json={})
        assert response.status_code == 500
        assert response.json()["detail"].startswith("Event log unavailable")

    def test_score_reports_event_log_unavailable(self, monkeypatch, tmp_path):
        """Scoring should fail the same way."""
        monkeypatch.setattr(config, "EVENT_LOG_FILE", str(tmp_path))
        response = client.post("/score", json={"password": "abc"})
        assert response.status_code == 500
        assert response.json()["detail"].startswith("Event log unavailable")


class TestHttpsEnforcement:
    """Test the REQUIRE_HTTPS switch."""

    def test_plain_http_rejected(self, monkeypatch):
        """Tool endpoints should refuse plain HTTP when enforced."""
        monkeypatch.setattr("api.main.REQUIRE_HTTPS", True)
        response = client.post("/generate", json={})
        assert response.status_code == 403
        assert response.json()["error"] == "https_required"

    def test_health_exempt(self, monkeypatch):
        """Health checks should stay reachable over HTTP."""
        monkeypatch.setattr("api.main.REQUIRE_HTTPS", True)
        assert client.get("/health").status_code == 200

    def test_forwarded_https_allowed(self, monkeypatch):
        """HTTPS terminated at a proxy should be accepted."""
        monkeypatch.setattr("api.main.REQUIRE_HTTPS", True)
        response = client.post("/generate", json={}, headers={"X-Forwarded-Proto": "https"})
        assert response.status_code == 200


class TestInputValidation:
    """Test input validation."""

    def test_generate_empty_body(self):
        """Empty body should use defaults."""
        response = client.post("/generate", json={})
        assert response.status_code == 200

    def test_generate_length_too_short(self):
        """Length below 4 should return 422."""
        response = client.post("/generate", json={"length": 3})
        assert response.status_code == 422

    def test_generate_length_too_long(self):
        """Length above 32 should return 422."""
        response = client.post("/generate", json={"length": 33})
        assert response.status_code == 422

    def test_generate_unknown_locale(self):
        """Unsupported locale should return 422."""
        response = client.post("/generate", json={"locale": "xx"})
        assert response.status_code == 422

    def test_score_negative_length(self):
        """Negative length should return 422."""
        response = client.post("/score", json={"password": "abc", "length": -1})
        assert response.status_code == 422
