"""Tests for the healthcheck and registry endpoints."""

from __future__ import annotations

from conftest import SAMPLE_FLOWS


def test_health_endpoint_returns_ok(client):
    """The healthcheck endpoint should report the number of loaded flows."""

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "flows": 3}


def test_registry_endpoint_lists_flows_in_order(client):
    response = client.get("/api/flows")

    assert response.status_code == 200
    assert response.get_json() == SAMPLE_FLOWS


def test_api_allows_configured_cors_origin(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost"})

    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost"
