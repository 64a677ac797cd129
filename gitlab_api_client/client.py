"""
Client implementation for the GitLab REST API.

This module defines the :class:`GitLabClient` class which holds the
connection settings shared by every service: the instance URL, the
credentials and a :class:`requests.Session`.  Service namespaces such
as ``client.deploy_keys`` translate typed arguments into one request
each and delegate to :func:`gitlab_api_client.dispatch.do`, which uses
the client to build, send and check that request.

Usage
-----

.. code-block:: python

    from gitlab_api_client import GitLabClient, ListOptions

    client = GitLabClient(token="glpat-...", base_url="https://gitlab.example.com")

    # List the deploy keys of a project, addressed by its full path
    keys, resp = client.deploy_keys.list_project_deploy_keys(
        "my-group/my-project", ListOptions(per_page=50)
    )
    for key in keys:
        print(key.title)
    print(resp.total_items)

The client sends the token in the header matching ``auth_type`` on
every request: ``PRIVATE-TOKEN`` for personal and project access
tokens, ``Authorization: Bearer`` for OAuth tokens and ``JOB-TOKEN``
for CI job tokens.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import ClientSettings
from .dispatch import Upload
from .exceptions import GitLabAPIError, GitLabRequestError, GitLabTransportError
from .options import Options
from .request import AUTH_HEADERS, Request, RequestOption, auth_header
from .response import Response
from .services import (
    AccessRequestsService,
    AlertManagementService,
    AuditEventsService,
    BranchesService,
    BroadcastMessagesService,
    CommitsService,
    DeployKeysService,
    DeployTokensService,
    EnvironmentsService,
    GitIgnoreTemplatesService,
    GroupMarkdownUploadsService,
    JobsService,
    ProjectMarkdownUploadsService,
    ProtectedBranchesService,
    SystemHooksService,
    TodosService,
)

logger = logging.getLogger(__name__)

# Methods whose options object is sent as a query string.  All other
# methods send it as a JSON body.
_QUERY_METHODS = {"GET", "HEAD", "DELETE"}


def _error_message(value: Any) -> str:
    """Flatten a GitLab error ``message`` (string, list or field mapping)."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ", ".join(_error_message(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key} {_error_message(item)}" for key, item in value.items())
    return str(value)


class GitLabClient:
    """A client for the GitLab REST API (v4).

    Parameters
    ----------
    token : str
        A personal access token, OAuth token or CI job token.
    base_url : str, optional
        URL of the GitLab instance.  ``/api/v4/`` is appended unless the
        URL already ends with it.  Defaults to ``https://gitlab.com``.
    auth_type : str, optional
        ``"private"`` (default), ``"oauth"`` or ``"job"``; selects the
        header the token is sent in.
    timeout : float, optional
        Default timeout in seconds for every request.  Individual calls
        may override it with :func:`~gitlab_api_client.request.with_timeout`.
    max_retries : int, optional
        Number of transport-level retries on connection errors and on
        429/5xx replies to idempotent requests.  Defaults to ``0``: one
        call is one round trip.
    user_agent : str, optional
        Value of the ``User-Agent`` header.
    session : requests.Session, optional
        A session to send requests with.  The client does not close a
        session it did not create.

    Notes
    -----
    The client is read-only after construction, so a single instance
    may be shared by several threads.
    """

    DEFAULT_BASE_URL = "https://gitlab.com"
    API_PATH = "api/v4/"
    DEFAULT_USER_AGENT = "gitlab-api-client"

    _RETRY_STATUSES = (429, 500, 502, 503, 504)

    def __init__(
        self,
        *,
        token: str,
        base_url: Optional[str] = None,
        auth_type: str = "private",
        timeout: Optional[float] = None,
        max_retries: int = 0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not token:
            raise ValueError("token must be provided")
        auth_type = auth_type.lower()
        if auth_type not in AUTH_HEADERS:
            raise ValueError(
                "auth_type must be one of %s, got %r" % (sorted(AUTH_HEADERS), auth_type)
            )
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")

        self.token = token
        self.auth_type = auth_type
        self.base_url = self._normalise_base_url(base_url or self.DEFAULT_BASE_URL)
        self.timeout = timeout
        self.user_agent = user_agent

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if max_retries:
            retry = Retry(
                total=max_retries,
                backoff_factor=0.5,
                status_forcelist=self._RETRY_STATUSES,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry)
            self._session.mount("https://", adapter)
            self._session.mount("http://", adapter)

        # Service namespaces
        self.access_requests = AccessRequestsService(self)
        self.alert_management = AlertManagementService(self)
        self.audit_events = AuditEventsService(self)
        self.branches = BranchesService(self)
        self.broadcast_messages = BroadcastMessagesService(self)
        self.commits = CommitsService(self)
        self.deploy_keys = DeployKeysService(self)
        self.deploy_tokens = DeployTokensService(self)
        self.environments = EnvironmentsService(self)
        self.gitignore_templates = GitIgnoreTemplatesService(self)
        self.jobs = JobsService(self)
        self.project_markdown_uploads = ProjectMarkdownUploadsService(self)
        self.group_markdown_uploads = GroupMarkdownUploadsService(self)
        self.protected_branches = ProtectedBranchesService(self)
        self.system_hooks = SystemHooksService(self)
        self.todos = TodosService(self)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> "GitLabClient":
        """Create a client from :class:`ClientSettings` (``GITLAB_*`` variables)."""
        settings = settings or ClientSettings()
        if not settings.token:
            raise ValueError("GITLAB_TOKEN must be set")
        return cls(
            token=settings.token,
            base_url=settings.base_url,
            auth_type=settings.auth_type,
            timeout=settings.timeout_seconds,
            max_retries=settings.max_retries,
            user_agent=settings.user_agent,
            session=session,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Release the pooled connections of a session the client created."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "GitLabClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------
    @classmethod
    def _normalise_base_url(cls, url: str) -> str:
        url = url.rstrip("/") + "/"
        if not url.endswith(cls.API_PATH):
            url += cls.API_PATH
        return url

    def _prepare_url(self, path: str) -> str:
        """Build the full request URL from a relative or absolute path.

        If the path is an absolute URL (starts with "http"), it is
        returned as-is.  Otherwise, it is joined to the client's
        ``base_url``.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return self.base_url + path.lstrip("/")

    def _default_headers(self) -> Dict[str, str]:
        name, value = auth_header(self.auth_type, self.token)
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            name: value,
        }

    def new_request(
        self,
        method: str,
        path: str,
        opt: Optional[Options] = None,
        request_options: Sequence[RequestOption] = (),
    ) -> Request:
        """Build a :class:`Request` for ``path``.

        For ``GET``, ``HEAD`` and ``DELETE`` requests ``opt`` is flattened
        into the query string; for every other method it is encoded as
        the JSON body.  ``request_options`` run last and may override
        anything set before them.

        Raises
        ------
        GitLabRequestError
            If ``opt`` is not an :class:`Options` instance.
        """
        if opt is not None and not isinstance(opt, Options):
            raise GitLabRequestError(
                f"options must be an Options instance, got {type(opt).__name__}"
            )
        request = Request(
            method=method.upper(),
            url=self._prepare_url(path),
            headers=self._default_headers(),
            timeout=self.timeout,
        )
        if opt is not None:
            if request.method in _QUERY_METHODS:
                request.params.extend(opt.to_query())
            else:
                request.body = opt.to_json().encode("utf-8")
                request.set_header("Content-Type", "application/json")

        for apply in request_options:
            apply(request)
        return request

    def upload_request(
        self,
        method: str,
        path: str,
        upload: Upload,
        opt: Optional[Options] = None,
        request_options: Sequence[RequestOption] = (),
    ) -> Request:
        """Build a ``multipart/form-data`` request carrying ``upload``.

        The fields of ``opt`` are sent as additional form fields.
        """
        if opt is not None and not isinstance(opt, Options):
            raise GitLabRequestError(
                f"options must be an Options instance, got {type(opt).__name__}"
            )
        request = Request(
            method=method.upper(),
            url=self._prepare_url(path),
            headers=self._default_headers(),
            timeout=self.timeout,
        )
        request.form = opt.to_form() if opt is not None else []
        request.files = {upload.field: (upload.filename, upload.content)}

        for apply in request_options:
            apply(request)
        return request

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------
    def send(self, request: Request) -> Response:
        """Send ``request`` once and return the checked :class:`Response`.

        Raises
        ------
        GitLabTransportError
            If the request could not be sent or no reply was received.
        GitLabAPIError
            If the HTTP response status is not a success code (2xx).
        """
        prepared = self._session.prepare_request(
            requests.Request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body if request.files is None else request.form,
                files=request.files,
            )
        )
        # The path is already escaped; requests would unquote %2E.
        prepared.url = request.full_url
        settings = self._session.merge_environment_settings(prepared.url, {}, None, None, None)

        logger.debug("%s %s", request.method, prepared.url)
        try:
            raw = self._session.send(prepared, timeout=request.timeout, **settings)
        except requests.RequestException as exc:
            raise GitLabTransportError(f"Failed to connect to {request.url}: {exc}") from exc
        logger.debug("%s %s -> %d", request.method, prepared.url, raw.status_code)

        response = Response(raw)
        self._check_response(response)
        return response

    @staticmethod
    def _check_response(response: Response) -> None:
        if response.ok:
            return

        # Attempt to return JSON error details
        body: Any = response.raw.text
        message = body or response.raw.reason or "unknown error"
        try:
            body = response.json()
        except ValueError:
            pass
        else:
            if isinstance(body, dict):
                if "message" in body:
                    message = _error_message(body["message"])
                elif "error" in body:
                    message = _error_message(body["error"])
                    if body.get("error_description"):
                        message = f"{message}: {body['error_description']}"
            else:
                message = _error_message(body)

        raise GitLabAPIError(
            response.status_code,
            message,
            body=body,
            response=response,
        )
