"""
Outbound request record and per-call request options.

:class:`Request` holds everything needed to send one HTTP request.  It
is assembled by :meth:`GitLabClient.new_request` and then handed to the
request options supplied by the caller, which run last and may
override any header, query parameter, credential or timeout set
before them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Any, Callable, Dict, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode, urlsplit

from .exceptions import GitLabRequestError
from .identifiers import IDLike, parse_id
from .options import QueryItems, format_value

# Header used for each supported authentication type.
AUTH_HEADERS = {
    "private": "PRIVATE-TOKEN",
    "oauth": "Authorization",
    "job": "JOB-TOKEN",
}


def auth_header(auth_type: str, token: str) -> Tuple[str, str]:
    """Return the ``(name, value)`` header pair for ``auth_type``."""
    try:
        name = AUTH_HEADERS[auth_type]
    except KeyError:
        raise GitLabRequestError(
            f"auth_type must be one of {sorted(AUTH_HEADERS)}, got {auth_type!r}"
        ) from None
    if auth_type == "oauth":
        return name, f"Bearer {token}"
    return name, token


@dataclass
class Request:
    """Encapsulates the configuration for one HTTP request.

    ``url`` never carries a query string; query parameters live in
    ``params`` and are encoded, sorted, by :attr:`full_url`.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: QueryItems = field(default_factory=list)
    body: Optional[bytes] = None
    form: Optional[QueryItems] = None
    files: Optional[Dict[str, Tuple[str, Union[bytes, IO[bytes]]]]] = None
    timeout: Optional[float] = None

    def set_param(self, key: str, value: Any) -> None:
        """Replace every existing value of ``key`` with ``value``."""
        self.params = [(k, v) for k, v in self.params if k != key]
        self.params.append((key, format_value(value)))

    def remove_header(self, key: str) -> None:
        for existing in list(self.headers):
            if existing.lower() == key.lower():
                del self.headers[existing]

    def set_header(self, key: str, value: str) -> None:
        self.remove_header(key)
        self.headers[key] = value

    @property
    def query_string(self) -> str:
        return urlencode(sorted(self.params, key=lambda item: item[0]))

    @property
    def full_url(self) -> str:
        query = self.query_string
        return f"{self.url}?{query}" if query else self.url


RequestOption = Callable[[Request], None]


# ----------------------------------------------------------------------
# Request options
# ----------------------------------------------------------------------
def with_header(name: str, value: str) -> RequestOption:
    """Set a single header on the request."""

    def apply(request: Request) -> None:
        request.set_header(name, value)

    return apply


def with_headers(headers: Dict[str, str]) -> RequestOption:
    def apply(request: Request) -> None:
        for name, value in headers.items():
            request.set_header(name, value)

    return apply


def with_sudo(user: IDLike) -> RequestOption:
    """Perform the call as another user (administrators only).

    ``user`` is a numeric user ID or a username.
    """
    uid = parse_id(user)

    def apply(request: Request) -> None:
        request.set_header("Sudo", str(uid.value))

    return apply


def with_token(auth_type: str, token: str) -> RequestOption:
    """Authenticate this call with a different token."""
    name, value = auth_header(auth_type, token)

    def apply(request: Request) -> None:
        for header in AUTH_HEADERS.values():
            request.remove_header(header)
        request.set_header(name, value)

    return apply


def with_page(page: int) -> RequestOption:
    """Request a specific page of an offset-paginated listing."""

    def apply(request: Request) -> None:
        request.set_param("page", page)

    return apply


def with_keyset_pagination(next_link: str) -> RequestOption:
    """Copy the query parameters of a keyset ``Link`` URL onto the request."""
    if not next_link:
        raise GitLabRequestError("next_link must not be empty")
    pairs = parse_qsl(urlsplit(next_link).query, keep_blank_values=True)

    def apply(request: Request) -> None:
        keys = {key for key, _ in pairs}
        request.params = [(k, v) for k, v in request.params if k not in keys]
        request.params.extend(pairs)

    return apply


def with_next(response: Any) -> RequestOption:
    """Request the page following ``response``.

    Keyset links take precedence over offset page numbers.

    Raises
    ------
    GitLabRequestError
        If ``response`` has neither a next link nor a next page.
    """
    if response.next_link:
        return with_keyset_pagination(response.next_link)
    if response.next_page:
        return with_page(response.next_page)
    raise GitLabRequestError("response has no next page")


def with_timeout(seconds: float) -> RequestOption:
    """Override the client's default timeout for this call."""
    if seconds <= 0:
        raise GitLabRequestError("timeout must be positive")

    def apply(request: Request) -> None:
        request.timeout = seconds

    return apply

