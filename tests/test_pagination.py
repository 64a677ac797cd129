from urllib.parse import parse_qs, urlsplit

import pytest

from gitlab_api_client import GitLabRequestError, ListOptions, scan, scan_pages, with_sudo
from gitlab_api_client.services.jobs import ListJobsOptions

from .conftest import API_URL


def _query(prepared):
    return parse_qs(urlsplit(prepared.url).query)


def test_scan_follows_offset_pages(client, session):
    session.add_json([{"id": 1}, {"id": 2}], headers={"X-Next-Page": "2"})
    session.add_json([{"id": 3}], headers={"X-Next-Page": "3"})
    session.add_json([{"id": 4}])

    todos = list(scan(client.todos.list_todos, ListOptions(per_page=2)))

    assert [todo.id for todo in todos] == [1, 2, 3, 4]
    assert len(session.calls) == 3
    assert "page" not in _query(session.calls[0][0])
    assert _query(session.calls[1][0])["page"] == ["2"]
    assert _query(session.calls[2][0]) == {"page": ["3"], "per_page": ["2"]}


def test_scan_pages_follows_keyset_links(client, session):
    next_url = API_URL + "projects/1/jobs?id_after=5&pagination=keyset&per_page=2"
    session.add_json([{"id": 7}, {"id": 6}], headers={"Link": f'<{next_url}>; rel="next"'})
    session.add_json([{"id": 5}])

    pages = list(
        scan_pages(
            client.jobs.list_project_jobs, 1, ListJobsOptions(pagination="keyset", per_page=2)
        )
    )

    assert [[job.id for job in items] for items, _ in pages] == [[7, 6], [5]]
    assert _query(session.calls[1][0]) == {
        "id_after": ["5"],
        "pagination": ["keyset"],
        "per_page": ["2"],
    }


def test_scan_stops_after_single_page(client, session):
    session.add_json([])

    assert list(scan(client.todos.list_todos, None)) == []
    assert len(session.calls) == 1


def test_scan_without_options_object(client, session):
    session.add_json([{"id": 1}], headers={"X-Next-Page": "2"})
    session.add_json([{"id": 2}])

    todos = list(scan(client.todos.list_todos))

    assert [todo.id for todo in todos] == [1, 2]
    assert _query(session.calls[1][0]) == {"page": ["2"]}


def test_scan_fills_options_after_resource_id(client, session):
    session.add_json([{"id": 10}], headers={"X-Next-Page": "2"})
    session.add_json([{"id": 11}])

    jobs = list(scan(client.jobs.list_project_jobs, 42))

    assert [job.id for job in jobs] == [10, 11]
    assert session.calls[1][0].url == API_URL + "projects/42/jobs?page=2"


def test_scan_keeps_request_options(client, session):
    session.add_json([{"id": 1}], headers={"X-Next-Page": "2"})
    session.add_json([{"id": 2}])

    list(scan(client.todos.list_todos, None, with_sudo("alice")))

    assert [call[0].headers["Sudo"] for call in session.calls] == ["alice", "alice"]


def test_scan_missing_required_argument(client, session):
    with pytest.raises(GitLabRequestError):
        list(scan(client.jobs.list_project_jobs))
    assert session.calls == []
