"""Response envelope returned alongside every decoded value."""

from __future__ import annotations

from typing import Any, Mapping

import requests

# Offset pagination headers.
_TOTAL = "X-Total"
_TOTAL_PAGES = "X-Total-Pages"
_PER_PAGE = "X-Per-Page"
_PAGE = "X-Page"
_NEXT_PAGE = "X-Next-Page"
_PREV_PAGE = "X-Prev-Page"

# Rate limit headers.
_RATE_LIMIT = "RateLimit-Limit"
_RATE_REMAINING = "RateLimit-Remaining"
_RATE_RESET = "RateLimit-Reset"


def _int_header(headers: Mapping[str, str], name: str) -> int:
    try:
        return int(headers.get(name, "") or 0)
    except ValueError:
        return 0


class Response:
    """A GitLab API response.

    Wraps the :class:`requests.Response` and exposes the pagination and
    rate limit values GitLab sends as headers.  Values that are absent
    are ``0`` for counters and ``""`` for links.

    Attributes
    ----------
    raw : requests.Response
        The underlying response object.
    total_items, total_pages, items_per_page, current_page : int
        Offset pagination counters.
    next_page, previous_page : int
        Page numbers of the neighbouring pages, ``0`` when there is none.
    next_link, previous_link, first_link, last_link : str
        Keyset pagination URLs taken from the ``Link`` header.
    """

    def __init__(self, raw: requests.Response) -> None:
        self.raw = raw
        self._populate_page_values()
        self._populate_link_values()

    def _populate_page_values(self) -> None:
        headers = self.raw.headers
        self.total_items = _int_header(headers, _TOTAL)
        self.total_pages = _int_header(headers, _TOTAL_PAGES)
        self.items_per_page = _int_header(headers, _PER_PAGE)
        self.current_page = _int_header(headers, _PAGE)
        self.next_page = _int_header(headers, _NEXT_PAGE)
        self.previous_page = _int_header(headers, _PREV_PAGE)

    def _populate_link_values(self) -> None:
        links = self.raw.links
        self.next_link = links.get("next", {}).get("url", "")
        self.previous_link = links.get("prev", {}).get("url", "")
        self.first_link = links.get("first", {}).get("url", "")
        self.last_link = links.get("last", {}).get("url", "")

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw.headers

    @property
    def ok(self) -> bool:
        return 200 <= self.raw.status_code < 300

    @property
    def rate_limit_limit(self) -> int:
        return _int_header(self.raw.headers, _RATE_LIMIT)

    @property
    def rate_limit_remaining(self) -> int:
        return _int_header(self.raw.headers, _RATE_REMAINING)

    @property
    def rate_limit_reset(self) -> int:
        """Unix time at which the rate limit window resets."""
        return _int_header(self.raw.headers, _RATE_RESET)

    def json(self) -> Any:
        return self.raw.json()

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.raw.url}>"
