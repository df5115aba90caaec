import uuid

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def _login(name="Lan", avatar="👧"):
    username = f"user-{uuid.uuid4().hex[:8]}"
    r = client.post("/api/login", json={"username": username, "name": name, "avatar": avatar})
    assert r.status_code == 200
    return r.json()


def test_login_creates_then_fetches_same_player():
    p = _login()
    assert p["role"] == "player"
    assert isinstance(p["id"], int)

    again = client.post(
        "/api/login", json={"username": p["username"], "name": "Other", "avatar": "x"}
    )
    assert again.status_code == 200
    assert again.json()["id"] == p["id"]
    assert again.json()["name"] == p["name"]


def test_login_requires_username():
    r = client.post("/api/login", json={"username": "", "name": "x"})
    assert r.status_code == 422


def test_seeded_questions_per_level():
    for level in (1, 2, 3):
        r = client.get(f"/api/questions/{level}")
        assert r.status_code == 200
        qs = r.json()
        assert len(qs) >= 10
        assert all(q["level"] == level for q in qs)
        assert {"id", "level", "question", "answer"}.issubset(qs[0].keys())


def test_questions_limit_and_shuffle():
    r = client.get("/api/questions/1", params={"limit": 5, "random": True})
    assert r.status_code == 200
    assert len(r.json()) == 5


def test_questions_unknown_level_is_empty():
    r = client.get("/api/questions/99")
    assert r.status_code == 200
    assert r.json() == []


def test_submit_score_and_pass_threshold():
    p = _login()
    r = client.post("/api/scores", json={"player_id": p["id"], "level": 1, "score": 4})
    assert r.status_code == 200
    assert r.json()["success"] is True and r.json()["passed"] is True

    r = client.post("/api/scores", json={"player_id": p["id"], "level": 2, "score": 3})
    assert r.json()["passed"] is False


def test_submit_score_unknown_player():
    r = client.post("/api/scores", json={"player_id": 987654, "level": 1, "score": 5})
    assert r.status_code == 404


def test_leaderboard_sums_scores():
    p = _login(name="Top Scorer", avatar="🏆")
    for level, score in ((1, 400), (2, 500), (3, 100)):
        client.post("/api/scores", json={"player_id": p["id"], "level": level, "score": score})

    r = client.get("/api/leaderboard")
    assert r.status_code == 200
    board = r.json()
    assert len(board) <= 10
    assert board[0] == {"name": "Top Scorer", "avatar": "🏆", "total_score": 1000}
    totals = [e["total_score"] for e in board]
    assert totals == sorted(totals, reverse=True)


def test_raw_score_insert_gets_a_timestamp():
    from sqlalchemy import text

    from db import SessionLocal

    p = _login()
    with SessionLocal() as db:
        db.execute(
            text("INSERT INTO scores (player_id, level, score) VALUES (:p, 1, 2)"),
            {"p": p["id"]},
        )
        db.commit()
        ts = db.execute(
            text("SELECT timestamp FROM scores WHERE player_id = :p"), {"p": p["id"]}
        ).scalar_one()
    assert ts is not None
