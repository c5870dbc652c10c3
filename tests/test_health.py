import pytest


@pytest.mark.asyncio
async def test_health_endpoint():
    """Test health endpoint"""
    from stockroom.main import app
    from fastapi.testclient import TestClient

    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
