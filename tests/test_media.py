from pathlib import Path

import pytest

from sport_community_api.app.core.errors import NotFoundError
from sport_community_api.app.core.uploads import locate

from tests.conftest import PNG_BYTES, auth_headers, png_file


def _stored_files(settings):
    return sorted(Path(settings.upload_dir).iterdir())


def _media_count(app):
    with app.state.db.unit_of_work() as store:
        return store.fetch_one("SELECT COUNT(*) AS count FROM medias")["count"]


def test_upload_creates_file_and_row(client, app, settings):
    headers = auth_headers(client, "alice")
    response = client.post("/upload", files=png_file("holiday.png"), headers=headers)
    assert response.status_code == 201
    media_id = response.json()["mediaId"]

    files = _stored_files(settings)
    assert len(files) == 1
    stored = files[0]
    assert stored.suffix == ".png"
    assert stored.read_bytes() == PNG_BYTES

    with app.state.db.unit_of_work() as store:
        row = store.fetch_one("SELECT * FROM medias WHERE id_media = ?", (media_id,))
    assert row["filename"] == stored.name
    assert row["filetype"] == "image/png"
    assert row["filepath"] == f"/uploads/{stored.name}"


def test_generated_filename_shape(client, settings):
    headers = auth_headers(client, "alice")
    client.post("/upload", files=png_file("clip.png"), headers=headers)
    name = _stored_files(settings)[0].name
    stamp, rest = name.split("-", 1)
    assert stamp.isdigit() and len(stamp) >= 13
    assert rest.endswith(".png") and rest[:-4].isdigit()


def test_quicktime_video_is_accepted(client):
    headers = auth_headers(client, "alice")
    response = client.post(
        "/upload",
        files={"file": ("clip.mov", b"\x00\x00\x00\x14ftypqt  ", "video/quicktime")},
        headers=headers,
    )
    assert response.status_code == 201


def test_disallowed_type_writes_nothing(client, app, settings):
    headers = auth_headers(client, "alice")
    response = client.post(
        "/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Unsupported file format"
    assert _stored_files(settings) == []
    assert _media_count(app) == 0


def test_upload_without_file(client):
    headers = auth_headers(client, "alice")
    response = client.post("/upload", headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "A file is required"


def test_upload_requires_token(client):
    response = client.post("/upload", files=png_file())
    assert response.status_code == 401


def test_list_user_media(client):
    headers = auth_headers(client, "alice")
    client.post("/upload", files=png_file(), headers=headers)
    client.post("/upload", files=png_file(), headers=headers)
    response = client.get("/media/1", headers=headers)
    assert response.status_code == 200
    assert len(response.json()) == 2
    assert all(row["user_id"] == 1 for row in response.json())


def test_list_user_media_empty_is_not_found(client):
    headers = auth_headers(client, "alice")
    response = client.get("/media/1", headers=headers)
    assert response.status_code == 404


def test_fetch_file_by_name_and_id(client, settings):
    headers = auth_headers(client, "alice")
    media_id = client.post("/upload", files=png_file(), headers=headers).json()["mediaId"]
    name = _stored_files(settings)[0].name

    by_name = client.get(f"/media/file/{name}")
    assert by_name.status_code == 200
    assert by_name.content == PNG_BYTES

    by_id = client.get(f"/media/id/{media_id}")
    assert by_id.status_code == 200
    assert by_id.content == PNG_BYTES

    static = client.get(f"/uploads/{name}")
    assert static.status_code == 200
    assert static.content == PNG_BYTES


def test_fetch_missing_files(client):
    assert client.get("/media/file/nope.png").status_code == 404
    assert client.get("/media/id/42").status_code == 404


def test_locate_refuses_names_outside_upload_dir(settings):
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    for name in ("..", "../secret", "a\\b"):
        with pytest.raises(NotFoundError):
            locate(settings.upload_dir, name)
