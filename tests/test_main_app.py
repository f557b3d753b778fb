"""Tests for the Flask app."""

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def payload():
    return {
        "statement": {"rep_name": "Flask Rep", "quota": 200000, "adjustments": 250},
        "tiers": [
            {"name": "Base", "floor_percent": 0, "ceiling_percent": 100, "rate_percent": 10},
            {"name": "Accelerator", "floor_percent": 100, "rate_percent": 15},
        ],
        "deals": [
            {"id": "006A", "name": "Acme", "amount": 100000, "close_date": "2026-02-10"},
        ],
    }


class TestFlaskApp:
    """Test Flask routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy"}

    def test_api_info(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert "calculate_statement" in response.get_json()["endpoints"]

    def test_calculate_statement(self, client, payload):
        response = client.post("/calculate_statement", json=payload)

        assert response.status_code == 200
        summary = response.get_json()["statement_summary"]
        assert summary["attainment_percent"] == pytest.approx(50)
        assert summary["gross_commission"] == 10000.0
        assert summary["net_commission"] == 10250.0

    def test_empty_body(self, client):
        response = client.post("/calculate_statement", data="", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json()["error"] == "No input data provided"

    def test_validation_error(self, client, payload):
        payload["deals"][0]["close_date"] = "not-a-date"
        response = client.post("/calculate_statement", json=payload)

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_non_finite_quota_rejected(self, client):
        response = client.post(
            "/calculate_statement",
            data='{"statement": {"quota": 1e400, "bookings": 5}}',
            content_type="application/json",
        )

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_cors_header(self, client):
        response = client.get("/health", headers={"Origin": "https://dashboard.example.com"})

        # Older flask-cors sends "*", newer releases echo the request origin
        assert response.headers.get("Access-Control-Allow-Origin") in ("*", "https://dashboard.example.com")
