from pathlib import Path

from tests.conftest import auth_headers, create_event, event_form, png_file


def test_create_and_get_event(client):
    headers = auth_headers(client, "alice")
    response = client.post("/events", data=event_form(), files=png_file(), headers=headers)
    assert response.status_code == 201
    body = response.json()

    event = client.get(f"/events/{body['eventId']}").json()
    assert event["name"] == "Sunday 5-a-side"
    assert event["username"] == "alice"
    assert event["nb_participants_max"] == 10
    assert event["id_media"] == body["mediaId"]


def test_create_event_missing_fields(client):
    headers = auth_headers(client, "alice")
    response = client.post("/events", data=event_form(lieu=""), files=png_file(), headers=headers)
    assert response.status_code == 400
    assert response.json()["error"].startswith("Fields name, date, lieu")


def test_create_event_zero_capacity_counts_as_missing(client):
    headers = auth_headers(client, "alice")
    response = client.post(
        "/events", data=event_form(nb_participants_max="0"), files=png_file(), headers=headers
    )
    assert response.status_code == 400


def test_create_event_requires_file(client):
    headers = auth_headers(client, "alice")
    response = client.post("/events", data=event_form(), headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "A file is required"


def test_create_event_with_deleted_user_leaves_no_file(client, app, settings):
    headers = auth_headers(client, "alice")
    with app.state.db.unit_of_work() as store:
        store.execute("DELETE FROM users")
    response = client.post("/events", data=event_form(), files=png_file(), headers=headers)
    assert response.status_code == 404
    assert list(Path(settings.upload_dir).iterdir()) == []


def test_list_events(client):
    headers = auth_headers(client, "alice")
    create_event(client, headers)
    create_event(client, headers, name="Second")
    body = client.get("/events").json()
    assert [e["name"] for e in body["events"]] == ["Sunday 5-a-side", "Second"]
    assert body["nextPage"] is None


def test_get_missing_event(client):
    response = client.get("/events/77")
    assert response.status_code == 404
    assert response.json()["error"] == "Event not found"


def test_owner_can_update(client):
    headers = auth_headers(client, "alice")
    event_id = create_event(client, headers)
    payload = dict(event_form(name="Renamed"), nb_participants_max=4)
    response = client.put(f"/events/{event_id}", json=payload, headers=headers)
    assert response.status_code == 200
    assert response.json()["eventId"] == event_id
    event = client.get(f"/events/{event_id}").json()
    assert event["name"] == "Renamed"
    assert event["nb_participants_max"] == 4


def test_update_requires_every_field(client):
    headers = auth_headers(client, "alice")
    event_id = create_event(client, headers)
    response = client.put(f"/events/{event_id}", json={"name": "Only name"}, headers=headers)
    assert response.status_code == 400


def test_non_owner_update_succeeds_without_effect(client):
    owner = auth_headers(client, "alice")
    other = auth_headers(client, "bob")
    event_id = create_event(client, owner)
    response = client.put(f"/events/{event_id}", json=event_form(name="Hijacked"), headers=other)
    assert response.status_code == 200
    assert client.get(f"/events/{event_id}").json()["name"] == "Sunday 5-a-side"


def test_owner_can_delete(client):
    headers = auth_headers(client, "alice")
    event_id = create_event(client, headers)
    response = client.delete(f"/events/{event_id}", headers=headers)
    assert response.status_code == 200
    assert client.get(f"/events/{event_id}").status_code == 404


def test_non_owner_delete_succeeds_without_effect(client):
    owner = auth_headers(client, "alice")
    other = auth_headers(client, "bob")
    event_id = create_event(client, owner)
    assert client.delete(f"/events/{event_id}", headers=other).status_code == 200
    assert client.get(f"/events/{event_id}").status_code == 200


def test_mutations_require_token(client):
    headers = auth_headers(client, "alice")
    event_id = create_event(client, headers)
    assert client.put(f"/events/{event_id}", json=event_form()).status_code == 401
    assert client.delete(f"/events/{event_id}").status_code == 401
