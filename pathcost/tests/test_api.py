"""
Tests for the FastAPI server (main.py), driven through TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from main import app, run_search

EXAMPLE_ROWS = [
    "2413432311323",
    "3215453535623",
    "3255245654254",
    "3446585845452",
    "4546657867536",
    "1438598798454",
    "4457876987766",
    "3637877979653",
    "4654967986887",
    "4564679986453",
    "1224686865563",
    "2546548887735",
    "4322674655533",
]


@pytest.fixture
def client():
    return TestClient(app)


def test_status(client):
    res = client.get("/status")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_cost_with_digit_rows(client):
    res = client.post("/cost", json={"grid": EXAMPLE_ROWS})
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "done"
    assert data["reachable"] is True
    assert data["cost"] == 102
    assert data["path"][0] == {"x": 0, "y": 0, "d": data["path"][0]["d"], "r": 0}
    assert data["path"][-1]["x"] == 12 and data["path"][-1]["y"] == 12
    assert data["commands"][-1] == "FIN"


def test_cost_with_integer_rows_and_endpoints(client):
    res = client.post("/cost", json={
        "grid": [[1, 1, 1], [1, 9, 1], [1, 1, 1]],
        "start": [1, 1],
        "goal": [0, 0],
        "initial_headings": ["W", "S"],
    })
    assert res.status_code == 200
    assert res.json()["cost"] == 2


def test_unreachable_is_200(client):
    res = client.post("/cost", json={"grid": ["111", "191", "111"], "min_run": 4, "max_run": 10})
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "no_path"
    assert data["reachable"] is False
    assert data["cost"] is None
    assert data["path"] == [] and data["commands"] == []


def test_budget_exceeded(client):
    res = client.post("/cost", json={"grid": EXAMPLE_ROWS, "max_expansions": 3})
    assert res.status_code == 200
    assert res.json()["status"] == "budget_exceeded"


@pytest.mark.parametrize("payload", [
    {"grid": ["111", "191", "111"], "min_run": 3, "max_run": 2},
    {"grid": ["111", "191", "111"], "goal": [5, 5]},
    {"grid": ["111", "19"]},
    {"grid": ["111", [1, 2, 3]]},
    {"grid": []},
    {"grid": ["1a1"]},
])
def test_config_errors_are_400(client, payload):
    res = client.post("/cost", json=payload)
    assert res.status_code == 400


def test_missing_grid_is_422(client):
    assert client.post("/cost", json={}).status_code == 422


def test_run_search_defaults_to_origin():
    data = run_search(EXAMPLE_ROWS, None, None, 4, 10)
    assert data["cost"] == 94
