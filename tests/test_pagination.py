from sport_community_api.app.services.pagination import next_page, parse_page_params
from tests.conftest import auth_headers


def test_defaults_for_missing_or_unusable_values():
    assert parse_page_params(None, None) == (1, 10, 0)
    assert parse_page_params("x", "0") == (1, 10, 0)
    assert parse_page_params("", " ") == (1, 10, 0)


def test_leading_integer_is_used():
    assert parse_page_params("2abc", "5 per page") == (2, 5, 5)
    assert parse_page_params("2.5", " 3") == (2, 3, 3)
    assert parse_page_params("+4", "10") == (4, 10, 30)


def test_next_page_only_when_rows_fill_the_limit():
    assert next_page([1, 2], 3, 2) == 4
    assert next_page([1], 3, 2) is None


def test_list_reads_leading_integer_from_query(client):
    headers = auth_headers(client, "alice")
    for i in range(2):
        client.post("/posts-txt", json={"text": f"t{i}", "description": "d"}, headers=headers)
    body = client.get("/posts-txt", params={"page": "2.5", "limit": "2abc"}).json()
    assert len(body["posts"]) == 2
    assert body["nextPage"] == 3
