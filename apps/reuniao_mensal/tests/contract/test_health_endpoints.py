from __future__ import annotations

from fastapi.testclient import TestClient


def test_health_live_returns_alive(client: TestClient) -> None:
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}
