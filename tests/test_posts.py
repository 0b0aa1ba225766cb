from pathlib import Path

from tests.conftest import auth_headers, login, png_file, register


def test_text_post_end_to_end(client):
    assert register(client, "alice", "a@x.com", "pw123").status_code == 201
    token = login(client, "a@x.com", "pw123").json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    created = client.post("/posts-txt", json={"text": "hi", "description": "d"}, headers=headers)
    assert created.status_code == 201
    post_id = created.json()["postId"]

    post = client.get(f"/posts-txt/{post_id}").json()
    assert post["text"] == "hi"
    assert post["likes"] == 0
    assert post["username"] == "alice"

    assert client.post(f"/posts-txt/{post_id}/like", headers=headers).status_code == 200
    assert client.get(f"/posts-txt/{post_id}").json()["likes"] == 1


def test_likes_accumulate(client):
    headers = auth_headers(client, "alice")
    post_id = client.post("/posts-txt", json={"text": "t", "description": "d"}, headers=headers).json()["postId"]
    for _ in range(5):
        assert client.post(f"/posts-txt/{post_id}/like", headers=headers).status_code == 200
    assert client.get(f"/posts-txt/{post_id}").json()["likes"] == 5


def test_like_missing_post(client):
    headers = auth_headers(client, "alice")
    response = client.post("/posts-txt/99/like", headers=headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Post not found"


def test_create_text_post_missing_fields(client):
    headers = auth_headers(client, "alice")
    response = client.post("/posts-txt", json={"text": "only text"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Fields text and description are required"


def test_get_missing_text_post(client):
    assert client.get("/posts-txt/123").status_code == 404


def test_non_numeric_id_is_bad_request(client):
    response = client.get("/posts-txt/abc")
    assert response.status_code == 400
    assert "error" in response.json()


def test_list_returns_every_post_regardless_of_limit(client):
    headers = auth_headers(client, "alice")
    for i in range(3):
        client.post("/posts-txt", json={"text": f"t{i}", "description": "d"}, headers=headers)

    body = client.get("/posts-txt", params={"page": 1, "limit": 2}).json()
    assert len(body["posts"]) == 3
    assert body["nextPage"] is None

    body = client.get("/posts-txt", params={"page": 2, "limit": 3}).json()
    assert len(body["posts"]) == 3
    assert body["nextPage"] == 3


def test_list_defaults(client):
    body = client.get("/posts-txt", params={"page": "x", "limit": "0"}).json()
    assert body == {"posts": [], "nextPage": None}


def test_denormalized_username_is_a_snapshot(client, app):
    headers = auth_headers(client, "alice")
    post_id = client.post("/posts-txt", json={"text": "t", "description": "d"}, headers=headers).json()["postId"]
    with app.state.db.unit_of_work() as store:
        store.execute("UPDATE users SET username = 'alicia' WHERE username = 'alice'")
    assert client.get(f"/posts-txt/{post_id}").json()["username"] == "alice"


def test_media_post(client, settings):
    headers = auth_headers(client, "alice")
    response = client.post("/posts-media", data={"description": "goal!"}, files=png_file(), headers=headers)
    assert response.status_code == 201
    post_id = response.json()["postMediaId"]

    post = client.get(f"/posts-media/{post_id}").json()
    assert post["description"] == "goal!"
    assert post["username"] == "alice"
    assert client.get(f"/media/id/{post['id_media']}").status_code == 200

    listing = client.get("/posts-media").json()
    assert [p["post_media_id"] for p in listing["posts"]] == [post_id]
    assert len(list(Path(settings.upload_dir).iterdir())) == 1


def test_media_post_requires_description_then_file(client):
    headers = auth_headers(client, "alice")
    response = client.post("/posts-media", files=png_file(), headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Field description is required"

    response = client.post("/posts-media", data={"description": "d"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "A file is required"


def test_media_post_bad_type(client, settings):
    headers = auth_headers(client, "alice")
    response = client.post(
        "/posts-media",
        data={"description": "d"},
        files={"file": ("doc.pdf", b"%PDF", "application/pdf")},
        headers=headers,
    )
    assert response.status_code == 400
    assert list(Path(settings.upload_dir).iterdir()) == []
