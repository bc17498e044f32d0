"""
Tests API — Endpoints FastAPI via TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from sokoconnect.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestAskEndpoint:
    def test_demo_dataset_when_no_snapshot(self, client):
        res = client.post("/api/v1/advisor/ask", json={"message": "Where can I sell maize?"})
        assert res.status_code == 200
        body = res.json()
        assert body["status"] == "success"
        assert body["intent"] == "market"
        assert "Kongowea Market" in body["response"]

    def test_caller_snapshot(self, client):
        payload = {
            "message": "Where can I sell maize?",
            "snapshot": {"markets": [
                {"name": "Kiambu Market", "county": "Kiambu",
                 "producePrices": [{"produceName": "Maize", "price": 45}]},
                {"name": "Nakuru Market", "county": "Nakuru",
                 "producePrices": [{"produceName": "Maize", "price": 50}]},
            ]},
        }
        body = client.post("/api/v1/advisor/ask", json=payload).json()
        assert body["response"].index("Nakuru Market") < body["response"].index("Kiambu Market")

    def test_context(self, client):
        payload = {"message": "Any buyers?", "context": {"crop": "maize", "location": "nakuru"}}
        body = client.post("/api/v1/advisor/ask", json=payload).json()
        assert body["intent"] == "buyers"
        assert "Kenya Food Processing" in body["response"]

    def test_invalid_snapshot_is_rejected(self, client):
        payload = {"message": "hi", "snapshot": {"markets": [{"county": "Nakuru"}]}}
        assert client.post("/api/v1/advisor/ask", json=payload).status_code == 422

    def test_missing_message_is_rejected(self, client):
        assert client.post("/api/v1/advisor/ask", json={}).status_code == 422


class TestServiceEndpoints:
    def test_health(self, client):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "active"

    def test_root(self, client):
        body = client.get("/").json()
        assert body["name"] == "SokoConnect Advisor"
        assert body["docs"] == "/docs"
