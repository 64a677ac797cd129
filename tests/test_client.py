import pytest
import requests

from gitlab_api_client import ClientSettings, GitLabClient
from gitlab_api_client.services import (
    CommitsService,
    JobsService,
    ProjectMarkdownUploadsService,
    ProtectedBranchesService,
    Service,
)

from .conftest import API_URL, BASE_URL, DummySession


@pytest.mark.parametrize(
    "base_url, expected",
    [
        ("https://gitlab.example.com", API_URL),
        ("https://gitlab.example.com/", API_URL),
        ("https://gitlab.example.com/api/v4", API_URL),
        ("https://gitlab.example.com/api/v4/", API_URL),
    ],
)
def test_base_url_is_normalised(base_url, expected):
    assert GitLabClient(token="t", base_url=base_url).base_url == expected


def test_default_base_url():
    assert GitLabClient(token="t").base_url == "https://gitlab.com/api/v4/"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"token": ""},
        {"token": "t", "auth_type": "basic"},
        {"token": "t", "timeout": 0},
        {"token": "t", "max_retries": -1},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        GitLabClient(**kwargs)


def test_constructor_is_keyword_only():
    with pytest.raises(TypeError):
        GitLabClient("t")


@pytest.mark.parametrize(
    "auth_type, header, value",
    [
        ("private", "PRIVATE-TOKEN", "tok"),
        ("oauth", "Authorization", "Bearer tok"),
        ("job", "JOB-TOKEN", "tok"),
    ],
)
def test_auth_header(auth_type, header, value):
    session = DummySession()
    session.add_json([])
    client = GitLabClient(token="tok", base_url=BASE_URL, auth_type=auth_type, session=session)

    client.todos.list_todos()

    assert session.last.headers[header] == value


def test_default_headers_and_timeout():
    session = DummySession()
    session.add_json([])
    client = GitLabClient(
        token="tok", base_url=BASE_URL, timeout=10, user_agent="ci-bot/1.0", session=session
    )

    client.todos.list_todos()

    prepared, kwargs = session.calls[-1]
    assert prepared.headers["User-Agent"] == "ci-bot/1.0"
    assert prepared.headers["Accept"] == "application/json"
    assert kwargs["timeout"] == 10


def test_absolute_urls_are_not_joined(client):
    url = "https://other.example.com/api/v4/projects?page=2"
    assert client._prepare_url(url) == url


def test_max_retries_mounts_retrying_adapter():
    client = GitLabClient(token="t", max_retries=3, session=requests.Session())
    adapter = client._session.get_adapter("https://gitlab.com/api/v4/")
    assert adapter.max_retries.total == 3
    assert 503 in adapter.max_retries.status_forcelist


def test_injected_session_is_not_closed(session):
    with GitLabClient(token="t", session=session):
        pass
    assert session.closed is False


def test_services_are_attached(client):
    assert isinstance(client.jobs, JobsService)
    assert isinstance(client.project_markdown_uploads, ProjectMarkdownUploadsService)
    assert "gitlab.example.com" in repr(client.jobs)


@pytest.mark.parametrize(
    "name, cls",
    [("commits", CommitsService), ("jobs", JobsService), ("protected_branches", ProtectedBranchesService)],
)
def test_service_classes_declare_service_base(client, name, cls):
    assert issubclass(cls, Service)
    assert isinstance(getattr(client, name), cls)


def test_every_service_attribute_shares_the_client(client):
    services = {name: value for name, value in vars(client).items() if isinstance(value, Service)}
    assert len(services) == 16
    assert all(service._client is client for service in services.values())


def test_from_settings():
    settings = ClientSettings(
        _env_file=None,
        token="abc",
        base_url="https://git.example.org",
        auth_type="job",
        timeout_seconds=5,
        max_retries=0,
    )

    client = GitLabClient.from_settings(settings)

    assert client.token == "abc"
    assert client.auth_type == "job"
    assert client.base_url == "https://git.example.org/api/v4/"
    assert client.timeout == 5


def test_from_settings_requires_token():
    with pytest.raises(ValueError):
        GitLabClient.from_settings(ClientSettings(_env_file=None))
