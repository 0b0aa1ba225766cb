def test_list_sports_returns_id_and_name(client):
    sports = client.get("/sports").json()
    assert len(sports) >= 10
    assert set(sports[0]) == {"id_sport", "name"}
    assert sports[0]["name"] == "Football"


def test_get_sport(client):
    sport = client.get("/sports/3").json()
    assert sport["name"] == "Tennis"
    assert "description" in sport


def test_missing_sport(client):
    response = client.get("/sports/999")
    assert response.status_code == 404
    assert response.json()["error"] == "Sport not found"
