"""
Options objects for GitLab API calls.

An options object describes the optional parameters of one endpoint.
Every field defaults to ``None`` and fields left at ``None`` are never
sent: they are skipped both when the object is flattened into a query
string (``GET``, ``HEAD`` and ``DELETE`` requests) and when it is
encoded as a JSON body (``POST``, ``PUT`` and ``PATCH`` requests).

Usage
-----

.. code-block:: python

    from gitlab_api_client.options import ListOptions

    opt = ListOptions(page=2, per_page=20)
    opt.to_query()   # [("page", "2"), ("per_page", "20")]
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

QueryItems = List[Tuple[str, str]]


def _as_utc(value: datetime) -> datetime:
    """Interpret a naive datetime as UTC; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_value(value: Any) -> str:
    """Render a scalar the way the GitLab API expects it in a query or form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, datetime):
        return _as_utc(value).isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _flatten(key: str, value: Any, out: QueryItems) -> None:
    if value is None:
        return
    if isinstance(value, Options):
        for name, sub in value._set_items():
            _flatten(f"{key}[{name}]", sub, out)
    elif isinstance(value, Mapping):
        for name, sub in value.items():
            _flatten(f"{key}[{name}]", sub, out)
    elif isinstance(value, (list, tuple, set, frozenset)):
        list_key = key if key.endswith("[]") else f"{key}[]"
        for item in value:
            if isinstance(item, (Options, Mapping)):
                _flatten(list_key, item, out)
            else:
                out.append((list_key, format_value(item)))
    else:
        out.append((key, format_value(value)))


class Options(BaseModel):
    """Base class of every options object.

    Field aliases carry the wire names, so ``Options`` subclasses may
    use Python-friendly attribute names while still serialising to the
    keys GitLab documents.  Unknown keyword arguments are rejected at
    construction time.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("*")
    @classmethod
    def naive_datetimes_are_utc(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return _as_utc(value)
        return value

    def _set_items(self) -> List[Tuple[str, Any]]:
        items = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            items.append((field.alias or name, value))
        return items

    def to_query(self) -> QueryItems:
        """Flatten the options into sorted ``(key, value)`` query pairs.

        Lists become repeated ``key[]`` entries and mappings become
        ``key[sub]`` entries.  Pairs are sorted by key (stable, so list
        order is kept) which makes the encoded query string
        deterministic for equal options.
        """
        out: QueryItems = []
        for key, value in self._set_items():
            _flatten(key, value, out)
        return sorted(out, key=lambda item: item[0])

    def to_json(self) -> str:
        """Encode the options as a compact JSON document, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_form(self) -> QueryItems:
        """Flatten the options into multipart form fields."""
        return self.to_query()


class ListOptions(Options):
    """Pagination and ordering parameters shared by list endpoints.

    ``pagination="keyset"`` switches supported endpoints from offset to
    keyset pagination; follow-up pages are then addressed through the
    ``Link`` header rather than ``page``.
    """

    pagination: Optional[str] = None
    per_page: Optional[int] = None
    page: Optional[int] = None
    order_by: Optional[str] = None
    sort: Optional[str] = None
