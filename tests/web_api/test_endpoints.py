"""
Web API Endpoint Tests
======================
Integration tests for the evaluate service.

Usage:
    pip install cssexpr[test]
    pytest tests/web_api/test_endpoints.py -v
"""
import pytest


# Skip entire module if FastAPI not installed
pytest.importorskip("fastapi")


from fastapi.testclient import TestClient
from cssexpr.web_api.main import app


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


# ============================================================================
# HEALTH ENDPOINTS
# ============================================================================

class TestHealthEndpoint:
    """Tests for GET /health and GET /ready"""

    def test_health_returns_ok(self, client):
        """Health endpoint returns status: ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_includes_version(self, client):
        """Health endpoint includes version field."""
        assert "version" in client.get("/health").json()

    def test_ready(self, client):
        """Readiness check exercises the evaluator."""
        assert client.get("/ready").json() == {"status": "ready"}

    def test_root(self, client):
        """Root endpoint describes the service."""
        data = client.get("/").json()
        assert data["name"] == "CSS Expression API"
        assert data["fields"] == ["font-size", "letter-spacing", "line-height"]


# ============================================================================
# EVALUATE ENDPOINT
# ============================================================================

class TestEvaluateEndpoint:
    """Tests for POST /evaluate/"""

    def test_evaluate(self, client):
        """Valid expression returns value, unit and css."""
        response = client.post("/evaluate/", json={"expression": "(2 + 3) * 4em"})
        assert response.status_code == 200
        assert response.json() == {
            "expression": "(2 + 3) * 4em",
            "value": 20,
            "unit": "em",
            "css": "20em",
        }

    def test_unitless(self, client):
        """Bare arithmetic reports unit 'none'."""
        data = client.post("/evaluate/", json={"expression": "2 + 3 * 4"}).json()
        assert data["unit"] == "none"
        assert data["value"] == 14

    def test_invalid_returns_422(self, client):
        """Invalid expression returns 422 with the reason."""
        response = client.post("/evaluate/", json={"expression": "10 / 0"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Invalid expression: division by zero"

    def test_invalid_body_carries_reason(self, client):
        """The 422 body names the rejected expression and the reason."""
        data = client.post("/evaluate/", json={"expression": "2 * (3px"}).json()
        assert data["expression"] == "2 * (3px"
        assert data["reason"] == "unbalanced '('"

    def test_missing_expression_returns_422(self, client):
        """Request validation rejects a missing expression."""
        assert client.post("/evaluate/", json={}).status_code == 422

    def test_overlong_expression_returns_422(self, client):
        """Expressions longer than the limit are rejected."""
        response = client.post("/evaluate/", json={"expression": "1+" * 200 + "1"})
        assert response.status_code == 422


# ============================================================================
# CHECK ENDPOINT
# ============================================================================

class TestCheckEndpoint:
    """Tests for POST /evaluate/check"""

    def test_preset_valid(self, client):
        """Expression within the preset range is valid."""
        response = client.post(
            "/evaluate/check", json={"expression": "1.2 * 1.5", "field": "line-height"}
        )
        assert response.status_code == 200
        assert response.json() == {
            "expression": "1.2 * 1.5",
            "field": "line-height",
            "valid": True,
        }

    def test_partial_input_is_invalid_not_error(self, client):
        """Half-typed input answers 200 with valid: false."""
        response = client.post(
            "/evaluate/check", json={"expression": "1.2 *", "field": "line-height"}
        )
        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_explicit_range(self, client):
        """min_value / max_value apply when no preset is given."""
        data = client.post(
            "/evaluate/check", json={"expression": "7px", "min_value": 0, "max_value": 5}
        ).json()
        assert data == {"expression": "7px", "field": "custom", "valid": False}

    def test_unbounded(self, client):
        """No preset and no bounds accepts any valid expression."""
        data = client.post("/evaluate/check", json={"expression": "-1000000px"}).json()
        assert data["valid"] is True

    def test_inverted_range_returns_422(self, client):
        response = client.post(
            "/evaluate/check", json={"expression": "1", "min_value": 5, "max_value": 1}
        )
        assert response.status_code == 422

    def test_unknown_field_returns_404(self, client):
        response = client.post("/evaluate/check", json={"expression": "1", "field": "nope"})
        assert response.status_code == 404


# ============================================================================
# COMMIT ENDPOINT
# ============================================================================

class TestCommitEndpoint:
    """Tests for POST /evaluate/commit"""

    def test_commit_keeps_unit_for_bare_number(self, client):
        """A bare number keeps the current unit."""
        data = client.post(
            "/evaluate/commit",
            json={"expression": "2 * 3", "current": "1em", "field": "letter-spacing"},
        ).json()
        assert data["valid"] is True
        assert data["reverted"] is False
        assert data["value"] == {"value": 6, "unit": "em", "css": "6em"}
        assert data["error"] is None

    def test_commit_reverts_out_of_range(self, client):
        """Out-of-range values revert to the current value."""
        data = client.post(
            "/evaluate/commit",
            json={"expression": "2000", "current": "200px", "field": "font-size"},
        ).json()
        assert data["reverted"] is True
        assert data["value"]["css"] == "200px"
        assert "outside" in data["error"]

    def test_bad_current_returns_422(self, client):
        response = client.post(
            "/evaluate/commit",
            json={"expression": "1", "current": "(", "field": "font-size"},
        )
        assert response.status_code == 422

    def test_commit_reverts_disallowed_unit(self, client):
        """A unit the field does not offer reverts the commit."""
        data = client.post(
            "/evaluate/commit",
            json={"expression": "10vw", "current": "12px", "field": "font-size"},
        ).json()
        assert data["reverted"] is True
        assert data["value"]["css"] == "12px"

    def test_unknown_field_returns_404(self, client):
        response = client.post(
            "/evaluate/commit",
            json={"expression": "1", "current": "1px", "field": "nope"},
        )
        assert response.status_code == 404
