"""Tests for FastAPI endpoints."""

import pytest
from conftest import FakeRangeAPI, range_line

from fastapi.testclient import TestClient
import api.main as api_main
from api.main import app
from api.dependencies import get_breach_checker
from breach_check import BreachChecker


client = TestClient(app)


@pytest.fixture
def range_api():
    """Install a fake range API behind the breach checker dependency."""
    api = FakeRangeAPI()
    app.dependency_overrides[get_breach_checker] = lambda: BreachChecker(fetch=api)
    yield api
    app.dependency_overrides.clear()


class TestPublicEndpoints:
    """Test health endpoints."""

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
        assert "status" in data
        assert "timestamp" in data
        assert "breach_api" in data

    def test_security_headers(self):
        """Responses are never cacheable."""
        response = client.get("/")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "no-store" in response.headers["Cache-Control"]


class TestHttpsEnforcement:
    """Test REQUIRE_HTTPS handling."""

    @pytest.fixture(autouse=True)
    def require_https(self, monkeypatch):
        monkeypatch.setattr(api_main, "REQUIRE_HTTPS", True)

    def test_plain_http_post_rejected(self, range_api):
        """Password-bearing requests over plain HTTP get 403."""
        response = client.post("/check", json={"password": "password"})
        assert response.status_code == 403
        assert response.json()["error"] == "https_required"
        assert range_api.calls == []

    def test_strength_rejected(self):
        """Offline scoring is refused too; the password still travels."""
        response = client.post("/strength", json={"password": "password"})
        assert response.status_code == 403

    def test_health_allowed(self):
        """Health checks work over plain HTTP."""
        assert client.get("/health").status_code == 200
        assert client.get("/").status_code == 200

    def test_forwarded_https_allowed(self, range_api):
        """X-Forwarded-Proto from a TLS-terminating proxy counts as HTTPS."""
        response = client.post(
            "/check",
            json={"password": "password"},
            headers={"X-Forwarded-Proto": "https"},
        )
        assert response.status_code == 200
        assert range_api.calls == ["5BAA6"]

    def test_https_client_allowed(self, range_api):
        """Direct HTTPS requests are served."""
        secure_client = TestClient(app, base_url="https://testserver")
        response = secure_client.post("/breach-check", json={"password": "password"})
        assert response.status_code == 200

    def test_disabled_accepts_plain_http(self, monkeypatch, range_api):
        """With REQUIRE_HTTPS off plain HTTP is accepted."""
        monkeypatch.setattr(api_main, "REQUIRE_HTTPS", False)
        assert client.post("/check", json={"password": "password"}).status_code == 200


class TestStrengthEndpoint:
    """Test offline strength scoring."""

    def test_strong_password(self):
        """All criteria met."""
        response = client.post("/strength", json={"password": "Tr0ub4dor&3xyz!"})
        assert response.status_code == 200
        report = response.json()["report"]
        assert report["score"] == 7
        assert report["total"] == 7
        assert report["percentage"] == 100
        assert report["level"] == "very-strong"
        assert report["label"] == "Very Strong"
        assert response.json()["feedback"] == []

    def test_criteria_order(self):
        """Criteria come back in declaration order."""
        response = client.post("/strength", json={"password": "password"})
        criteria = response.json()["report"]["criteria"]
        assert list(criteria) == [
            "length", "uppercase", "lowercase", "numbers", "special", "noCommon", "noSequential",
        ]
        assert criteria["noCommon"] is False

    def test_empty_password(self):
        """Empty password yields no report."""
        response = client.post("/strength", json={"password": ""})
        assert response.status_code == 200
        assert response.json() == {"report": None, "feedback": []}


class TestBreachEndpoint:
    """Test breach checking through the API."""

    def test_found(self, range_api):
        """Breached password reports its count."""
        range_api.body = range_line("password", 3)
        response = client.post("/breach-check", json={"password": "password"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "found"
        assert data["count"] == 3
        assert data["is_breached"] is True
        assert range_api.calls == ["5BAA6"]

    def test_not_found(self, range_api):
        """Unknown password is not breached."""
        response = client.post("/breach-check", json={"password": "xK9#mL2$pQ7@nR4!"})
        data = response.json()
        assert data["status"] == "not_found"
        assert data["count"] is None
        assert data["is_breached"] is False

    def test_short_password(self, range_api):
        """Short passwords are not sent."""
        response = client.post("/breach-check", json={"password": "abc"})
        assert response.json()["status"] == "not_checked"
        assert range_api.calls == []

    def test_upstream_failure(self, range_api):
        """Upstream failure is a 200 with the advisory message."""
        range_api.error = ConnectionError("down")
        response = client.post("/breach-check", json={"password": "password"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["message"] == "Unable to check breach database"


class TestCombinedCheck:
    """Test combined strength and breach check."""

    def test_both_results(self, range_api):
        """Strength and breach sections are both present."""
        range_api.body = range_line("password", 10437277)
        response = client.post("/check", json={"password": "password"})
        assert response.status_code == 200
        data = response.json()
        assert data["strength"]["level"] == "weak"
        assert data["breach"]["count"] == 10437277
        assert "CRITICAL" in data["breach"]["message"]

    def test_skip_breach(self, range_api):
        """check_breach=false makes no lookup."""
        response = client.post("/check", json={"password": "password", "check_breach": False})
        assert response.json()["breach"]["status"] == "not_checked"
        assert range_api.calls == []

    def test_failure_keeps_strength(self, range_api):
        """Strength report survives a breach failure."""
        range_api.error = TimeoutError()
        data = client.post("/check", json={"password": "Tr0ub4dor&3xyz!"}).json()
        assert data["strength"]["score"] == 7
        assert data["breach"]["status"] == "error"


class TestInputValidation:
    """Test input validation."""

    def test_missing_password(self):
        """Missing password field should fail."""
        response = client.post("/check", json={})
        assert response.status_code == 422

    def test_oversized_password(self):
        """Absurdly long input is rejected."""
        response = client.post("/strength", json={"password": "x" * 5000})
        assert response.status_code == 422
