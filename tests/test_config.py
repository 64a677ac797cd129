import pytest
from pydantic import ValidationError

from gitlab_api_client import ClientSettings, GitLabClient


def test_defaults():
    settings = ClientSettings(_env_file=None)
    assert settings.token is None
    assert settings.base_url == "https://gitlab.com"
    assert settings.auth_type == "private"
    assert settings.timeout_seconds == 30.0
    assert settings.max_retries == 0


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("GITLAB_TOKEN", "from-env")
    monkeypatch.setenv("GITLAB_BASE_URL", "https://gitlab.internal")
    monkeypatch.setenv("GITLAB_AUTH_TYPE", "oauth")
    monkeypatch.setenv("GITLAB_MAX_RETRIES", "2")

    settings = ClientSettings(_env_file=None)

    assert settings.token == "from-env"
    assert settings.base_url == "https://gitlab.internal"
    assert settings.auth_type == "oauth"
    assert settings.max_retries == 2


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GITLAB_TOKEN=file-token\nGITLAB_TIMEOUT_SECONDS=12.5\n")

    settings = ClientSettings(_env_file=str(env_file))

    assert settings.token == "file-token"
    assert settings.timeout_seconds == 12.5


@pytest.mark.parametrize(
    "name, value",
    [
        ("GITLAB_AUTH_TYPE", "basic"),
        ("GITLAB_MAX_RETRIES", "11"),
        ("GITLAB_TIMEOUT_SECONDS", "0"),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        ClientSettings(_env_file=None)


def test_client_from_environment(monkeypatch):
    monkeypatch.setenv("GITLAB_TOKEN", "from-env")
    monkeypatch.chdir("/")

    client = GitLabClient.from_settings()

    assert client.token == "from-env"
    assert client.base_url == "https://gitlab.com/api/v4/"
