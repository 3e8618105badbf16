from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.db.models.post import Post


def test_create_post(client, users):
    res = client.post("/posts", json={"title": "t", "content": "c", "user_id": users["alice"]})
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "t"
    assert body["content"] == "c"
    assert body["user_id"] == users["alice"]
    assert body["id"]
    assert body["created_at"]


def test_create_post_unknown_user(client, db, users):
    res = client.post("/posts", json={"title": "t", "content": "c", "user_id": 9999})
    assert res.status_code == 400
    assert res.json() == {"detail": "User does not exist"}
    assert db.query(Post).count() == 0


def test_create_post_missing_field(client, users):
    res = client.post("/posts", json={"title": "t", "user_id": users["alice"]})
    assert res.status_code == 422


def test_list_posts_by_user(client, users):
    for title in ("one", "two"):
        client.post("/posts", json={"title": title, "content": "c", "user_id": users["alice"]})
    client.post("/posts", json={"title": "other", "content": "c", "user_id": users["bob"]})

    res = client.get(f"/posts/user/{users['alice']}")
    assert res.status_code == 200
    posts = res.json()
    assert sorted(p["title"] for p in posts) == ["one", "two"]
    assert all(p["user_id"] == users["alice"] for p in posts)


def test_list_posts_by_user_without_posts_is_404(client, users):
    res = client.get(f"/posts/user/{users['bob']}")
    assert res.status_code == 404
    assert res.json() == {"detail": "No posts found for this user"}


def _drop_connection(*args, **kwargs):
    raise OperationalError("INSERT INTO posts", {}, Exception("conn dropped"))


def test_create_post_store_error(client, db, users, monkeypatch, caplog):
    monkeypatch.setattr(Session, "commit", _drop_connection)

    res = client.post("/posts", json={"title": "t", "content": "c", "user_id": users["alice"]})
    assert res.status_code == 500
    assert res.json() == {"detail": "Something went wrong, please try again later!"}
    assert "conn dropped" in caplog.text

    monkeypatch.undo()
    assert db.query(Post).count() == 0


def test_list_posts_store_error(client, users, monkeypatch, caplog):
    monkeypatch.setattr(Session, "query", _drop_connection)

    res = client.get(f"/posts/user/{users['alice']}")
    assert res.status_code == 500
    assert res.json() == {"detail": "Something went wrong, please try again later!"}
    assert "conn dropped" in caplog.text
