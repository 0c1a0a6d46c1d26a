import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from api_proto.local_api import app  # noqa: E402

client = TestClient(app)


def test_new_game_is_reproducible():
    r1 = client.post("/api/new-game", json={"difficulty": "easy", "seed": 5})
    r2 = client.post("/api/new-game", json={"difficulty": "easy", "seed": 5})

    assert r1.status_code == 200
    body = r1.json()
    assert body == r2.json()
    assert len(body["puzzle"]) == 9
    assert len(body["board"]) == 9


def test_new_game_unknown_difficulty():
    r = client.post("/api/new-game", json={"difficulty": "expert"})
    assert r.status_code == 400


def test_hint(puzzle, solution):
    r = client.post(
        "/api/hint",
        json={
            "board": puzzle.tolist(),
            "solution": solution.tolist(),
            "notes": [{"row": 0, "col": 2, "digits": [1, 2, 5]}],
        },
    )

    assert r.status_code == 200
    hint = r.json()["hint"]
    assert hint["strategy"] == "Remove Invalid Notes"
    assert hint["invalid_notes"] == [5]


def test_hint_on_solved_board(solution):
    r = client.post("/api/hint", json={"board": solution.tolist(), "solution": solution.tolist()})

    assert r.status_code == 200
    assert r.json() == {"hint": None}


def test_candidates(puzzle):
    r = client.post("/api/candidates", json={"board": puzzle.tolist()})

    assert r.status_code == 200
    first = r.json()["candidates"][0]
    assert first == {"row": 0, "col": 2, "digits": [1, 2, 4]}


def test_validate(puzzle, solution):
    board = puzzle.tolist()
    board[0][2] = 1  # 解答は 4

    r = client.post("/api/validate", json={"board": board, "solution": solution.tolist()})

    body = r.json()
    assert body["incorrect_cells"] == [{"row": 0, "col": 2}]
    assert body["is_complete"] is False


def test_validate_rejects_bad_shape():
    r = client.post("/api/validate", json={"board": [[0] * 9] * 8})
    assert r.status_code == 400
