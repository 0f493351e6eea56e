"""
HTTP surface tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from gridsearch import config
from gridsearch.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def run_body(**overrides):
    body = {
        "algorithm_id": "dijkstra",
        "rows": 3,
        "columns": 3,
        "start": [0, 0],
        "target": [2, 2],
        "walls": [],
    }
    body.update(overrides)
    return body


class TestMetadata:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "algorithms": 3}

    def test_algorithms(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        assert [a["id"] for a in resp.json()] == ["astar", "dfs", "dijkstra"]


class TestRunEndpoint:
    def test_dijkstra(self, client):
        resp = client.post("/api/run", json=run_body())
        assert resp.status_code == 200
        data = resp.json()
        assert data["steps_to_find"] == 4
        assert data["expanded"] == 9
        assert len(data["path"]) == 5
        assert data["path"][0]["id"] == "n:0:0"
        assert data["path"][-1] == {"id": "n:2:2", "row": 2, "column": 2, "distance": 4.0}
        assert data["runtime_ms"] >= 0

    def test_unreachable(self, client):
        body = run_body(target=[2, 0], walls=[[1, 0], [1, 1], [1, 2]])
        data = client.post("/api/run", json=body).json()
        assert data["steps_to_find"] == -1
        assert data["path"] == []
        assert {c["id"] for c in data["visited"]} == {"n:0:0", "n:0:1", "n:0:2"}

    def test_budget_option(self, client):
        body = run_body(options={"max_visited": 1})
        data = client.post("/api/run", json=body).json()
        assert len(data["visited"]) == 1
        assert data["steps_to_find"] == -1
        assert {c["id"] for c in data["pending"]} == {"n:1:0", "n:0:1"}

    def test_unknown_algorithm_is_404(self, client):
        resp = client.post("/api/run", json=run_body(algorithm_id="bfs"))
        assert resp.status_code == 404

    def test_out_of_bounds_is_400(self, client):
        resp = client.post("/api/run", json=run_body(start=[5, 5]))
        assert resp.status_code == 400

    def test_zero_budget_is_rejected(self, client):
        resp = client.post("/api/run", json=run_body(options={"max_visited": 0}))
        assert resp.status_code == 422

    def test_grid_size_limit(self, client, monkeypatch):
        monkeypatch.setattr(config, "MAX_GRID_CELLS", 4)
        resp = client.post("/api/run", json=run_body())
        assert resp.status_code == 400

    def test_default_budget_applies_to_empty_options(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_MAX_VISITED", 1)
        for body in (run_body(), run_body(options={})):
            data = client.post("/api/run", json=body).json()
            assert len(data["visited"]) == 1
            assert data["steps_to_find"] == -1

    def test_explicit_budget_overrides_default(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_MAX_VISITED", 1)
        data = client.post("/api/run", json=run_body(options={"max_visited": 3})).json()
        assert len(data["visited"]) == 3
