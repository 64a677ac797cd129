from gitlab_api_client.dispatch import RAW, do, with_path

from .conftest import API_URL


def test_pagination_headers(client, session):
    session.add(
        200,
        b"[]",
        {
            "X-Total": "95",
            "X-Total-Pages": "5",
            "X-Per-Page": "20",
            "X-Page": "2",
            "X-Next-Page": "3",
            "X-Prev-Page": "1",
        },
    )

    _, resp = do(client, RAW, with_path("projects"))

    assert resp.total_items == 95
    assert resp.total_pages == 5
    assert resp.items_per_page == 20
    assert resp.current_page == 2
    assert resp.next_page == 3
    assert resp.previous_page == 1


def test_missing_headers_default_to_zero_and_empty(client, session):
    session.add(200, b"[]", {"X-Next-Page": ""})

    _, resp = do(client, RAW, with_path("projects"))

    assert resp.total_items == 0
    assert resp.next_page == 0
    assert resp.next_link == ""
    assert resp.last_link == ""


def test_link_header(client, session):
    next_url = API_URL + "projects?id_after=10&pagination=keyset&per_page=2"
    first_url = API_URL + "projects?pagination=keyset&per_page=2"
    session.add(200, b"[]", {"Link": f'<{next_url}>; rel="next", <{first_url}>; rel="first"'})

    _, resp = do(client, RAW, with_path("projects"))

    assert resp.next_link == next_url
    assert resp.first_link == first_url
    assert resp.previous_link == ""


def test_rate_limit_headers(client, session):
    session.add(
        200,
        b"{}",
        {"RateLimit-Limit": "600", "RateLimit-Remaining": "599", "RateLimit-Reset": "1700000000"},
    )

    _, resp = do(client, RAW, with_path("user"))

    assert resp.rate_limit_limit == 600
    assert resp.rate_limit_remaining == 599
    assert resp.rate_limit_reset == 1700000000
