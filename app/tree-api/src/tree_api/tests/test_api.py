"""Unit tests for the API.

These tests use FastAPI's TestClient and point the API root at a temporary
directory through a dependency override.
"""
import pytest
from fastapi.testclient import TestClient

from tree_api.dependencies import get_root
from tree_api.main import app

client = TestClient(app)


# ── Helpers ───────────────────────────────────────────────────────────────────

@pytest.fixture()
def api_root(tmp_path):
    """Serve snapshots from a populated temporary directory."""
    base = tmp_path / "root"
    (base / "a" / "b").mkdir(parents=True)
    (base / "a" / "x.txt").write_text("hi", encoding="utf-8")
    (base / "a" / "b" / "y.md").write_text("y", encoding="utf-8")
    app.dependency_overrides[get_root] = lambda: str(base)
    yield base
    app.dependency_overrides.clear()


def _names(items: list[dict]) -> set[str]:
    return {item["name"] for item in items}


# ── Root ──────────────────────────────────────────────────────────────────────

def test_root() -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "TREE API"


# ── Health ────────────────────────────────────────────────────────────────────

def test_health_ok(api_root) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["root_exists"] is True


def test_health_root_missing(tmp_path) -> None:
    app.dependency_overrides[get_root] = lambda: str(tmp_path / "gone")
    try:
        response = client.get("/health")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 503


# ── Tree ──────────────────────────────────────────────────────────────────────

def test_get_tree(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "a"})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "a"
    kinds = {item["name"]: item["node_type"] for item in data["content"]}
    assert kinds == {"x.txt": "status", "b": "directory"}


def test_get_tree_loaded(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "a", "load": "true"})
    assert response.status_code == 200
    nodes = {item["name"]: item for item in response.json()["content"]}
    assert nodes["x.txt"]["body"] == "hi"
    assert nodes["b"]["content"][0]["node_type"] == "archive"


def test_get_tree_depth_exceeded(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "a", "max_depth": 0})
    assert response.status_code == 422


def test_get_files(api_root) -> None:
    response = client.get("/api/v1/tree/files", params={"path": "a"})
    assert response.status_code == 200
    data = response.json()
    assert _names(data) == {"x.txt"}
    assert data[0]["body"] == "hi"


def test_get_statuses(api_root) -> None:
    response = client.get("/api/v1/tree/statuses", params={"path": "a"})
    assert response.status_code == 200
    assert [item["node_type"] for item in response.json()] == ["status"]


def test_get_dirs(api_root) -> None:
    response = client.get("/api/v1/tree/dirs", params={"path": "a"})
    assert response.status_code == 200
    assert _names(response.json()) == {"b"}


def test_missing_path_is_404(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "nope"})
    assert response.status_code == 404


def test_file_path_is_400(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "a/x.txt"})
    assert response.status_code == 400


def test_path_outside_root_is_403(api_root) -> None:
    response = client.get("/api/v1/tree", params={"path": "../.."})
    assert response.status_code == 403
