"""API tests for the health endpoint."""

import pytest


@pytest.mark.api
def test_health_reports_status_and_environment(client, settings):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "app_version": settings.app_version,
        "environment": settings.environment,
    }
