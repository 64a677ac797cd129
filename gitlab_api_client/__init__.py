"""
Python client for the GitLab REST API (v4).

This package provides the :class:`GitLabClient` class, which holds the
instance URL, the credentials and a shared HTTP session, and exposes
one service namespace per resource family (``client.jobs``,
``client.deploy_keys``, ...).  Every service method sends exactly one
request and returns the decoded value together with a
:class:`Response` carrying the pagination and rate limit headers.

Examples
--------

.. code-block:: python

    from gitlab_api_client import GitLabClient, with_sudo
    from gitlab_api_client.services.environments import CreateEnvironmentOptions

    client = GitLabClient(token="glpat-...")

    env, resp = client.environments.create_environment(
        "my-group/my-project",
        CreateEnvironmentOptions(name="staging"),
        with_sudo("deploy-bot"),
    )

Errors are raised as subclasses of :class:`GitLabError`; a non-2xx
reply raises :class:`GitLabAPIError` with the HTTP ``status_code``.
"""

from .client import GitLabClient
from .config import ClientSettings
from .exceptions import (
    GitLabAPIError,
    GitLabDecodeError,
    GitLabError,
    GitLabRequestError,
    GitLabTransportError,
    InvalidIdentifierError,
)
from .identifiers import NoEscape, NumericID, PathID, ResourceID, parse_id, path_escape
from .options import ListOptions, Options
from .pagination import scan, scan_pages
from .request import (
    with_header,
    with_headers,
    with_keyset_pagination,
    with_next,
    with_page,
    with_sudo,
    with_timeout,
    with_token,
)
from .response import Response

__all__ = [
    "ClientSettings",
    "GitLabAPIError",
    "GitLabClient",
    "GitLabDecodeError",
    "GitLabError",
    "GitLabRequestError",
    "GitLabTransportError",
    "InvalidIdentifierError",
    "ListOptions",
    "NoEscape",
    "NumericID",
    "Options",
    "PathID",
    "ResourceID",
    "Response",
    "parse_id",
    "path_escape",
    "scan",
    "scan_pages",
    "with_header",
    "with_headers",
    "with_keyset_pagination",
    "with_next",
    "with_page",
    "with_sudo",
    "with_timeout",
    "with_token",
]
