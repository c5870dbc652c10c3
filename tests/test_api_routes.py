import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from stockroom.main import app
from stockroom.testing.testing_mocks import FixedClock

BASE = "/api/v1/inventory"


@pytest.fixture
def client():
    # Entering the client runs the lifespan, so every test gets a freshly seeded ledger
    with TestClient(app) as client:
        yield client


class TestItemRoutes:
    def test_list_items(self, client):
        response = client.get(f"{BASE}/items")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["data"][0]["id"] == "M-001"
        assert body["data"][0]["category_code"] == "M"

    def test_list_items_filtered(self, client):
        response = client.get(f"{BASE}/items", params={"q": "", "status": "REORDER_ONLY"})
        ids = [item["id"] for item in response.json()["data"]]
        assert ids == ["M-002", "E-102", "M-004", "E-104"]
        assert all(item["status"] == "REORDER" for item in response.json()["data"])

    def test_list_items_search(self, client):
        response = client.get(f"{BASE}/items", params={"q": "BELT"})
        assert [item["name"] for item in response.json()["data"]] == ["V-Belt B-52"]

    def test_invalid_status_filter(self, client):
        response = client.get(f"{BASE}/items", params={"status": "LOW"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_get_item(self, client):
        response = client.get(f"{BASE}/items/E-104")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["stock"] == 2
        assert data["needs_reorder"] is True
        assert data["last_updated"] is None

    def test_get_item_not_found(self, client):
        response = client.get(f"{BASE}/items/X-999")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestTransactionRoutes:
    def test_incoming_transaction(self, client):
        response = client.post(f"{BASE}/items/M-002/transactions", json={"type": "IN", "amount": 10})
        assert response.status_code == 201
        data = response.json()["data"]
        assert (data["item_id"], data["type"], data["amount"]) == ("M-002", "IN", 10)
        assert data["item_name"] == "V-Belt B-52"

        item = client.get(f"{BASE}/items/M-002").json()["data"]
        assert item["stock"] == 15
        assert item["needs_reorder"] is False
        assert item["last_updated"] == data["timestamp"]

    def test_string_amount_accepted(self, client):
        response = client.post(f"{BASE}/items/M-001/transactions", json={"type": "OUT", "amount": "5"})
        assert response.status_code == 201
        assert client.get(f"{BASE}/items/M-001").json()["data"]["stock"] == 40

    def test_negative_stock_conflict(self, client):
        response = client.post(f"{BASE}/items/E-104/transactions", json={"type": "OUT", "amount": 5})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "negative_stock"
        assert client.get(f"{BASE}/items/E-104").json()["data"]["stock"] == 2
        assert client.get(f"{BASE}/transactions").json()["data"] == []

    def test_unknown_item(self, client):
        response = client.post(f"{BASE}/items/X-999/transactions", json={"type": "IN", "amount": 5})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "item_not_found"

    @pytest.mark.parametrize("amount", [0, -3, "abc"])
    def test_invalid_quantity(self, client, amount):
        response = client.post(f"{BASE}/items/M-001/transactions", json={"type": "IN", "amount": amount})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "invalid_quantity"

    def test_fractional_amount_rejected_by_schema(self, client):
        response = client.post(f"{BASE}/items/M-001/transactions", json={"type": "IN", "amount": 2.5})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_unknown_type_rejected_by_schema(self, client):
        response = client.post(f"{BASE}/items/M-001/transactions", json={"type": "MOVE", "amount": 1})
        assert response.status_code == 422

    def test_history_most_recent_first(self, client):
        client.post(f"{BASE}/items/M-001/transactions", json={"type": "OUT", "amount": 1})
        client.post(f"{BASE}/items/E-101/transactions", json={"type": "IN", "amount": 2})
        client.post(f"{BASE}/items/M-001/transactions", json={"type": "IN", "amount": 3})

        history = client.get(f"{BASE}/transactions").json()["data"]
        assert [tx["amount"] for tx in history] == [3, 2, 1]
        assert len(client.get(f"{BASE}/transactions", params={"limit": 1}).json()["data"]) == 1

        item_history = client.get(f"{BASE}/items/M-001/transactions").json()["data"]
        assert [tx["amount"] for tx in item_history] == [3, 1]


class TestStatisticsRoute:
    def test_statistics(self, client):
        client.post(f"{BASE}/items/M-002/transactions", json={"type": "IN", "amount": 10})

        data = client.get(f"{BASE}/stats").json()["data"]
        assert data["total_sku"] == 10
        assert data["reorder_count"] == 3
        assert data["today_transaction_count"] == 1

    def test_statistics_with_fixed_clock(self, client):
        ledger = client.app.state.ledger
        ledger._clock = FixedClock(datetime(2026, 3, 2, 8, 0))
        ledger.record_transaction("M-001", "IN", 1)
        ledger._clock.advance(days=1)

        data = client.get(f"{BASE}/stats").json()["data"]
        assert data["today_transaction_count"] == 0
        assert data["as_of"] == "2026-03-03T08:00:00"
