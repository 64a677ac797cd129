"""
Custom exception types for the GitLab API client.

These exceptions allow callers to distinguish between requests that
could not be built, requests that never reached the server, requests
the server rejected and replies this client could not parse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .response import Response


class GitLabError(Exception):
    """Base exception for all GitLab client errors."""


class InvalidIdentifierError(GitLabError, TypeError):
    """Raised when a resource identifier is neither an integer nor a string."""


class GitLabRequestError(GitLabError, ValueError):
    """Raised when a request cannot be constructed from the given arguments."""


class GitLabTransportError(GitLabError):
    """Raised when the HTTP request fails before a response is received.

    The underlying :mod:`requests` exception is chained as ``__cause__``.
    """


class GitLabAPIError(GitLabError):
    """Raised when the GitLab API answers with a non-success status.

    Parameters
    ----------
    status_code : int
        The HTTP status of the reply.
    message : str
        The error message supplied by the server, flattened to one line.
    body : object, optional
        The decoded JSON error body, or the raw text when it is not JSON.
    response : Response, optional
        The response envelope, including rate-limit headers.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        body: Any = None,
        response: Optional["Response"] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        self.response = response
        super().__init__(f"{status_code} {message}")


class GitLabDecodeError(GitLabError):
    """Raised when a successful reply cannot be decoded into the expected shape."""

    def __init__(self, message: str, *, response: Optional["Response"] = None) -> None:
        self.response = response
        super().__init__(message)
