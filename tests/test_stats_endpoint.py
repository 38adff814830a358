"""
Tests for api/routes/stats.py — GET /api/stats.
"""
import json

from fastapi.testclient import TestClient

from api.app import create_app


class TestStatsEndpoint:
    def test_snapshot_for_seed_data(self, client):
        response = client.get("/api/stats")
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 5
        assert body["averagePrice"] == (2499 + 399 + 999 + 799 + 1199) / 5
        assert body["categories"] == {"Electronics": 3, "Furniture": 2}
        assert body["priceRange"] == {"min": 399, "max": 2499}
        assert body["lastUpdated"]

    def test_repeat_calls_hit_cache(self, client, clock):
        first = client.get("/api/stats").json()
        second = client.get("/api/stats").json()
        assert first == second
        assert clock.calls == 1

    def test_create_between_calls_changes_last_updated(self, client):
        first = client.get("/api/stats").json()
        created = client.post(
            "/api/items", json={"name": "Lamp", "category": "Home", "price": 20}
        )
        assert created.status_code == 201
        second = client.get("/api/stats").json()
        assert second["lastUpdated"] != first["lastUpdated"]
        assert second["total"] == 6
        assert second["categories"]["Home"] == 1

    def test_empty_collection(self, empty_data_file, clock):
        app = create_app(data_path=empty_data_file, clock=clock)
        with TestClient(app) as c:
            body = c.get("/api/stats").json()
        assert body["total"] == 0
        assert body["averagePrice"] == 0
        assert body["categories"] == {}
        assert body["priceRange"] == {"min": 0, "max": 0}

    def test_read_failure_is_500(self, client, data_file):
        data_file.write_text("not json")
        response = client.get("/api/stats")
        assert response.status_code == 500
        assert response.json()["error"] == "Storage error"

    def test_apps_do_not_share_cache(self, data_file, tmp_path, clock):
        other = tmp_path / "other.json"
        other.write_text(json.dumps([{"id": 1, "name": "A", "category": "X", "price": 1}]))
        with TestClient(create_app(data_path=data_file, clock=clock)) as a, \
                TestClient(create_app(data_path=other, clock=clock)) as b:
            assert a.get("/api/stats").json()["total"] == 5
            assert b.get("/api/stats").json()["total"] == 1
