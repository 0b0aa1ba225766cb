from tests.conftest import auth_headers, create_event


def _participant_rows(app, event_id):
    with app.state.db.unit_of_work() as store:
        return store.fetch_all("SELECT user_id FROM event_participants WHERE event_id = ?", (event_id,))


def test_capacity_scenario(client, app):
    alice = auth_headers(client, "alice")
    bob = auth_headers(client, "bob")
    carol = auth_headers(client, "carol")
    event_id = create_event(client, alice, nb_participants_max="1")

    assert client.post(f"/events/{event_id}/participants", headers=bob).status_code == 201

    response = client.post(f"/events/{event_id}/participants", headers=carol)
    assert response.status_code == 400
    assert response.json()["error"] == "Maximum number of participants reached"
    assert len(_participant_rows(app, event_id)) == 1


def test_double_join_is_rejected(client, app):
    alice = auth_headers(client, "alice")
    event_id = create_event(client, alice)
    assert client.post(f"/events/{event_id}/participants", headers=alice).status_code == 201
    response = client.post(f"/events/{event_id}/participants", headers=alice)
    assert response.status_code == 400
    assert response.json()["error"] == "User already registered for this event"
    assert len(_participant_rows(app, event_id)) == 1


def test_join_missing_event(client):
    alice = auth_headers(client, "alice")
    assert client.post("/events/9/participants", headers=alice).status_code == 404


def test_leave_then_leave_again(client, app):
    alice = auth_headers(client, "alice")
    bob = auth_headers(client, "bob")
    event_id = create_event(client, alice)
    client.post(f"/events/{event_id}/participants", headers=alice)
    client.post(f"/events/{event_id}/participants", headers=bob)

    assert client.delete(f"/events/{event_id}/participants", headers=bob).status_code == 200
    assert [row["user_id"] for row in _participant_rows(app, event_id)] == [1]

    response = client.delete(f"/events/{event_id}/participants", headers=bob)
    assert response.status_code == 404
    assert response.json()["error"] == "Participant not found"


def test_list_and_count_participants(client):
    alice = auth_headers(client, "alice")
    bob = auth_headers(client, "bob")
    event_id = create_event(client, alice, nb_participants_max="5")
    client.post(f"/events/{event_id}/participants", headers=alice)
    client.post(f"/events/{event_id}/participants", headers=bob)

    listing = client.get(f"/events/{event_id}/participants").json()
    assert listing == {
        "participants": [
            {"user_id": 1, "username": "alice"},
            {"user_id": 2, "username": "bob"},
        ]
    }

    count = client.get(f"/events/{event_id}/participants/count").json()
    assert count == {"participants": 2, "maxParticipants": 5}


def test_count_for_missing_event(client):
    assert client.get("/events/3/participants/count").status_code == 404


def test_list_for_event_without_participants(client):
    assert client.get("/events/3/participants").json() == {"participants": []}


def test_join_requires_token(client):
    alice = auth_headers(client, "alice")
    event_id = create_event(client, alice)
    assert client.post(f"/events/{event_id}/participants").status_code == 401
