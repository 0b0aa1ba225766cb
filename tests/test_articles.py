from tests.conftest import auth_headers, png_file

ARTICLE = {
    "titre": "Derby report",
    "description": "What happened on Sunday",
    "corps": "A long body of text",
    "sport": "Football",
    "date": "2025-09-01",
}


def test_create_and_read_article(client):
    headers = auth_headers(client, "alice")
    response = client.post("/articles", data=ARTICLE, files=png_file(), headers=headers)
    assert response.status_code == 201
    body = response.json()
    article = client.get(f"/articles/{body['articleId']}").json()
    assert article["titre"] == "Derby report"
    assert article["auteur"] == "alice"
    assert article["id_media"] == body["mediaId"]


def test_article_missing_field(client):
    headers = auth_headers(client, "alice")
    data = dict(ARTICLE, corps="")
    response = client.post("/articles", data=data, files=png_file(), headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Fields titre, description, corps, sport and date are required"


def test_article_requires_file(client):
    headers = auth_headers(client, "alice")
    response = client.post("/articles", data=ARTICLE, headers=headers)
    assert response.status_code == 400


def test_article_requires_token(client):
    assert client.post("/articles", data=ARTICLE, files=png_file()).status_code == 401


def test_list_articles(client):
    headers = auth_headers(client, "alice")
    client.post("/articles", data=ARTICLE, files=png_file(), headers=headers)
    body = client.get("/articles", params={"limit": 1}).json()
    assert len(body["articles"]) == 1
    assert body["nextPage"] == 2


def test_missing_article(client):
    assert client.get("/articles/5").status_code == 404
