import uuid

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_admin_open_without_token(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.get("/api/admin/players")
    assert r.status_code == 200
    assert any(p["username"] == "admin" and p["role"] == "admin" for p in r.json())


def test_admin_unauthorized(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.get("/api/admin/questions")
    assert r.status_code == 401


def test_admin_ok_with_token(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.get("/api/admin/questions", headers={"x-admin-token": "secret"})
    assert r.status_code == 200 and isinstance(r.json(), list)


def test_question_create_and_delete():
    r = client.post("/api/admin/questions", json={"level": 7, "question": "4 + (-9)", "answer": -5})
    assert r.status_code == 200 and r.json()["success"] is True
    qid = r.json()["id"]

    level7 = client.get("/api/questions/7").json()
    assert [q["id"] for q in level7] == [qid]

    r = client.delete(f"/api/admin/questions/{qid}")
    assert r.json() == {"success": True}
    assert client.get("/api/questions/7").json() == []


def test_player_delete_removes_scores():
    username = f"gone-{uuid.uuid4().hex[:8]}"
    p = client.post("/api/login", json={"username": username, "name": "Gone", "avatar": "👻"}).json()
    client.post("/api/scores", json={"player_id": p["id"], "level": 1, "score": 5000})
    assert client.get("/api/leaderboard").json()[0]["name"] == "Gone"

    r = client.delete(f"/api/admin/players/{p['id']}")
    assert r.json() == {"success": True}

    ids = [pl["id"] for pl in client.get("/api/admin/players").json()]
    assert p["id"] not in ids
    assert all(e["name"] != "Gone" for e in client.get("/api/leaderboard").json())


def test_delete_missing_is_still_success():
    assert client.delete("/api/admin/players/999999").json() == {"success": True}
    assert client.delete("/api/admin/questions/999999").json() == {"success": True}
