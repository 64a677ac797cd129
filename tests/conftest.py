"""
Shared fixtures for the client tests.

HTTP traffic never leaves the process: :class:`DummySession` records every
prepared request it is asked to send and answers from a queue of canned
replies.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from gitlab_api_client import GitLabClient

BASE_URL = "https://gitlab.example.com"
API_URL = BASE_URL + "/api/v4/"


class DummySession(requests.Session):
    """A session whose ``send`` replays queued responses or exceptions."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[Tuple[requests.PreparedRequest, Dict[str, Any]]] = []
        self.replies: List[Any] = []
        self.closed = False

    def add(
        self,
        status: int = 200,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        reason: str = "OK",
    ) -> None:
        self.replies.append((status, body, headers or {}, reason))

    def add_json(self, data: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> None:
        all_headers = {"Content-Type": "application/json"}
        all_headers.update(headers or {})
        self.add(status, json.dumps(data).encode("utf-8"), all_headers)

    def add_error(self, exc: Exception) -> None:
        self.replies.append(exc)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.calls[-1][0]

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.calls.append((request, kwargs))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        status, body, headers, reason = reply
        response = requests.Response()
        response.status_code = status
        response._content = body
        response.headers = CaseInsensitiveDict(headers)
        response.reason = reason
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        return response

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture(autouse=True)
def clean_gitlab_env(monkeypatch):
    """Keep ``GITLAB_*`` variables of the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("GITLAB_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def session() -> DummySession:
    return DummySession()


@pytest.fixture
def client(session: DummySession) -> GitLabClient:
    return GitLabClient(token="secret-token", base_url=BASE_URL, session=session)
