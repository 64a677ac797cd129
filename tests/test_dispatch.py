import pytest
import requests

from gitlab_api_client import (
    GitLabAPIError,
    GitLabDecodeError,
    GitLabRequestError,
    GitLabTransportError,
    InvalidIdentifierError,
    parse_id,
)
from gitlab_api_client.dispatch import (
    NO_CONTENT,
    RAW,
    Many,
    One,
    do,
    with_method,
    with_path,
    with_upload,
)
from gitlab_api_client.services.environments import Environment

from .conftest import API_URL


def test_one_decodes_object(client, session):
    session.add_json({"id": 7, "name": "staging", "state": "available", "unknown": 1})

    env, resp = do(
        client,
        One(Environment),
        with_path("projects/%s/environments/%d", parse_id("group/app"), 7),
    )

    assert env.id == 7
    assert env.name == "staging"
    assert resp.status_code == 200
    assert session.last.method == "GET"
    assert session.last.url == API_URL + "projects/group%2Fapp/environments/7"


def test_many_decodes_list(client, session):
    session.add_json([{"id": 1}, {"id": 2}])

    envs, _ = do(client, Many(Environment), with_path("projects/%s/environments", parse_id(1)))

    assert [env.id for env in envs] == [1, 2]


def test_many_rejects_object(client, session):
    session.add_json({"id": 1})

    with pytest.raises(GitLabDecodeError) as excinfo:
        do(client, Many(Environment), with_path("projects/1/environments"))
    assert excinfo.value.response.status_code == 200


def test_invalid_json_is_a_decode_error(client, session):
    session.add(200, b"<html>", {"Content-Type": "text/html"})

    with pytest.raises(GitLabDecodeError):
        do(client, One(Environment), with_path("projects/1/environments/1"))


def test_invalid_field_type_is_a_decode_error(client, session):
    session.add_json({"id": "not-a-number"})

    with pytest.raises(GitLabDecodeError):
        do(client, One(Environment), with_path("projects/1/environments/1"))


def test_raw_returns_body_bytes(client, session):
    session.add(200, b"PK\x03\x04binary", {"Content-Type": "application/zip"})

    data, _ = do(client, RAW, with_path("projects/1/jobs/2/artifacts"))

    assert data == b"PK\x03\x04binary"


def test_no_content_returns_none(client, session):
    session.add(204, b"", reason="No Content")

    value, resp = do(client, NO_CONTENT, with_method("delete"), with_path("projects/1/environments/2"))

    assert value is None
    assert resp.status_code == 204
    assert session.last.method == "DELETE"


def test_api_error_carries_status_and_message(client, session):
    session.add_json({"message": "404 Project Not Found"}, status=404)

    with pytest.raises(GitLabAPIError) as excinfo:
        do(client, One(Environment), with_path("projects/1/environments/2"))

    err = excinfo.value
    assert err.status_code == 404
    assert err.message == "404 Project Not Found"
    assert err.body == {"message": "404 Project Not Found"}
    assert err.response.status_code == 404
    assert str(err) == "404 404 Project Not Found"


def test_api_error_flattens_field_errors(client, session):
    session.add_json({"message": {"name": ["has already been taken"]}}, status=400)

    with pytest.raises(GitLabAPIError) as excinfo:
        do(client, One(Environment), with_method("POST"), with_path("projects/1/environments"))

    assert excinfo.value.message == "name has already been taken"


def test_api_error_with_oauth_error_body(client, session):
    session.add_json({"error": "invalid_token", "error_description": "Token expired"}, status=401)

    with pytest.raises(GitLabAPIError) as excinfo:
        do(client, One(Environment), with_path("projects/1"))

    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "invalid_token: Token expired"


def test_api_error_with_plain_text_body(client, session):
    session.add(502, b"Bad gateway", {"Content-Type": "text/plain"}, reason="Bad Gateway")

    with pytest.raises(GitLabAPIError) as excinfo:
        do(client, RAW, with_path("projects/1"))

    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "Bad gateway"


def test_transport_error_is_wrapped(client, session):
    session.add_error(requests.ConnectionError("connection refused"))

    with pytest.raises(GitLabTransportError) as excinfo:
        do(client, RAW, with_path("projects/1"))

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_bad_path_arguments_fail_before_sending(client, session):
    with pytest.raises(GitLabRequestError):
        do(client, RAW, with_path("projects/%d", "abc"))
    assert session.calls == []


def test_invalid_identifier_fails_before_sending(client, session):
    with pytest.raises(InvalidIdentifierError):
        client.branches.list_branches(1.5)
    assert session.calls == []


def test_upload_requires_filename():
    with pytest.raises(GitLabRequestError):
        with_upload(b"data", "")
