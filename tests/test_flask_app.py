"""
Tests for the Flask visualizer and JSON API.
"""

import pytest

from ui.flask_app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def visualizer_state(client) -> dict:
    with client.session_transaction() as sess:
        return sess.get("visualizer", {})


class TestJsonApi:
    """/api/* endpoints."""

    def test_algorithms(self, client):
        data = client.get("/api/algorithms").get_json()
        assert [a["id"] for a in data] == ["dijkstra", "astar", "bfs", "dfs"]
        assert data[0]["name"] == "Dijkstra's Algorithm"
        assert [a["weighted"] for a in data] == [True, True, False, False]

    def test_graphs(self, client):
        assert client.get("/api/graphs").get_json() == ["cities", "simple", "complex"]

    def test_graph_by_name(self, client):
        data = client.get("/api/graphs/simple").get_json()
        assert [n["id"] for n in data["nodes"]] == ["A", "B", "C", "D"]
        assert len(data["edges"]) == 5

    def test_unknown_graph(self, client):
        resp = client.get("/api/graphs/maze")
        assert resp.status_code == 404
        assert "Unknown sample graph" in resp.get_json()["error"]

    def test_search(self, client):
        resp = client.post("/api/search", json={"graph": "simple", "algorithm": "dijkstra", "start": "A", "end": "D"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["path"] == ["A", "C", "D"]
        assert data["distance"] == 5
        assert data["visitedOrder"] == ["A", "C", "B", "D"]
        assert data["summary"] == "Path found using Dijkstra's Algorithm! Distance: 5.00"

    def test_search_defaults(self, client):
        """Default graph is cities, unknown algorithm falls back to Dijkstra."""
        data = client.post("/api/search", json={"algorithm": "warp", "start": "A", "end": "D"}).get_json()
        assert data["algorithm"] == "dijkstra"
        assert data["distance"] == 13

    def test_search_inline_graph(self, client):
        graph_data = {
            "nodes": [{"id": "X", "x": 0, "y": 0}, {"id": "Y", "x": 3, "y": 4}],
            "edges": [{"from": "X", "to": "Y", "weight": 5}],
        }
        data = client.post(
            "/api/search", json={"graph_data": graph_data, "algorithm": "astar", "start": "X", "end": "Y"}
        ).get_json()
        assert data["path"] == ["X", "Y"]

    def test_search_invalid_inline_graph(self, client):
        graph_data = {"nodes": [{"id": "X", "x": 0, "y": 0}], "edges": [{"from": "X", "to": "Q", "weight": 1}]}
        resp = client.post("/api/search", json={"graph_data": graph_data, "start": "X", "end": "Q"})
        assert resp.status_code == 400

    def test_search_missing_endpoints(self, client):
        assert client.post("/api/search", json={"start": "A"}).status_code == 400
        assert client.post("/api/search", data="not json").status_code == 400

    def test_search_body_must_be_object(self, client):
        resp = client.post("/api/search", json=["simple", "A", "D"])
        assert resp.status_code == 400
        assert "JSON object" in resp.get_json()["error"]

    def test_search_graph_name_must_be_string(self, client):
        resp = client.post("/api/search", json={"graph": ["simple"], "start": "A", "end": "D"})
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_search_non_string_algorithm_uses_dijkstra(self, client):
        body = {"graph": "simple", "start": "A", "end": "D", "algorithm": 5}
        data = client.post("/api/search", json=body).get_json()
        assert data["algorithm"] == "dijkstra"
        assert data["path"] == ["A", "C", "D"]

    def test_search_unknown_node_lenient(self, client):
        data = client.post("/api/search", json={"start": "A", "end": "Z"}).get_json()
        assert data["found"] is False
        assert data["distance"] == -1
        assert data["summary"] == "No path found between selected nodes"

    def test_search_unknown_node_strict(self, client):
        resp = client.post("/api/search", json={"start": "A", "end": "Z", "strict": True})
        assert resp.status_code == 404
        assert "Z" in resp.get_json()["error"]


class TestHtmlFlow:
    """Session-backed visualizer page."""

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Path Finder Visualizer" in resp.data
        assert b"Mumbai" in resp.data

    def test_select_run_and_reset(self, client):
        client.get("/node/A")
        client.get("/node/D")
        resp = client.post("/run", follow_redirects=True)
        assert b"Path found using" in resp.data
        assert b"13.00" in resp.data
        assert visualizer_state(client)["result"]["path"] == ["A", "B", "D"]

        resp = client.post("/reset", follow_redirects=True)
        assert b"Reset complete" in resp.data
        assert visualizer_state(client)["start"] is None

    def test_run_without_selection(self, client):
        resp = client.post("/run", follow_redirects=True)
        assert b"Please select both start and end nodes" in resp.data

    def test_canvas_click(self, client):
        client.get("/click?x=150&y=300")
        assert visualizer_state(client)["start"] == "A"

    def test_canvas_click_miss(self, client):
        resp = client.get("/click?x=0&y=0", follow_redirects=True)
        assert b"No node at that position" in resp.data

    def test_unknown_node_click(self, client):
        resp = client.get("/node/Z", follow_redirects=True)
        assert resp.status_code == 200
        assert visualizer_state(client).get("start") is None

    def test_select_sample_and_algorithm(self, client):
        client.post("/select", data={"graph": "simple", "algorithm": "bfs"})
        state = visualizer_state(client)
        assert state["graph_name"] == "simple"
        assert state["algorithm"] == "bfs"

    def test_select_unknown_sample(self, client):
        resp = client.post("/select", data={"graph": "maze"}, follow_redirects=True)
        assert b"Unknown sample graph" in resp.data
        assert visualizer_state(client)["graph_name"] == "cities"
