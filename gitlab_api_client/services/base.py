"""Common base of the service namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import GitLabClient


class Service:
    """A group of related endpoint methods.

    A service holds nothing but a reference to the shared client; every
    method translates its arguments into exactly one request.
    """

    def __init__(self, client: "GitLabClient") -> None:
        self._client = client

    def __repr__(self) -> str:
        return f"<{type(self).__name__} base_url={self._client.base_url!r}>"
