import pytest

from nqueens import app as app_module
from nqueens import runner
from nqueens.exceptions import AllocationError


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as client:
        yield client


def test_index_lists_modes(client):
    resp = client.get("/")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["modes"]["4"] == "Backtracking"
    assert data["modes"]["0"] == "All together"


def test_solve_defaults_to_backtracking(client):
    resp = client.get("/solve?board_size=8")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["mode"] == 4
    [result] = data["results"]
    assert result["strategy"] == "Backtracking"
    assert result["solutions"] == 92
    assert result["report"][0] == "Total solutions found (Backtracking): 92"


def test_solve_all_modes(client):
    resp = client.get("/solve?board_size=6&mode=0")
    assert resp.status_code == 200
    results = resp.get_json()["results"]
    assert [r["mode"] for r in results] == [1, 2, 3, 4]
    assert all(r["solutions"] == 4 for r in results)
    assert results[0]["candidates"] == 6 ** 6


@pytest.mark.parametrize("query", [
    "",
    "?board_size=abc",
    "?board_size=3",
    "?board_size=6&mode=9",
    "?board_size=6&mode=x",
])
def test_bad_input(client, query):
    resp = client.get("/solve" + query)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_exhaustive_size_limit(client):
    resp = client.get(f"/solve?board_size={app_module.MAX_EXHAUSTIVE_SIZE + 1}&mode=1")
    assert resp.status_code == 422


def test_backtracking_size_limit(client):
    resp = client.get(f"/solve?board_size={app_module.MAX_BOARD_SIZE + 1}&mode=4")
    assert resp.status_code == 422


def test_allocation_failure(client, monkeypatch):
    def failing_board(n):
        raise AllocationError(n)

    monkeypatch.setattr(runner, "Board", failing_board)
    resp = client.get("/solve?board_size=6")
    assert resp.status_code == 500


def test_unexpected_error(client, monkeypatch):
    def broken(n, mode):
        raise RuntimeError("boom")

    monkeypatch.setattr(app_module, "run_modes", broken)
    resp = client.get("/solve?board_size=6")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Server error."}
