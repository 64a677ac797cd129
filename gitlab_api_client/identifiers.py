"""Resource identifiers and path escaping.

Many endpoints accept either the numeric ID of a project, group or user
or its full path (``"group/subgroup/project"``).  Both forms are modelled
as a small closed set of identifier types sharing a single
:meth:`ResourceID.for_path` method, so call sites never need to care
which form they were handed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote

from .exceptions import InvalidIdentifierError

# Sub-delimiters allowed unescaped inside a path segment (RFC 3986).
_SEGMENT_SAFE = "$&+,;=:@"


def path_escape(value: str) -> str:
    """Escape ``value`` so it can be placed inside a single path segment.

    Slashes become ``%2F`` and dots become ``%2E``; GitLab would otherwise
    treat a trailing ``.json``-like suffix as a format extension.
    """
    return quote(value, safe=_SEGMENT_SAFE).replace(".", "%2E")


class ResourceID:
    """Base class for anything that can render itself as a path segment."""

    def for_path(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class NumericID(ResourceID):
    value: int

    def for_path(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PathID(ResourceID):
    """A namespaced path such as ``"gitlab-org/gitlab"``."""

    value: str

    def for_path(self) -> str:
        return path_escape(self.value)


@dataclass(frozen=True)
class NoEscape(ResourceID):
    """A value inserted into the path verbatim (e.g. artifact file paths)."""

    value: str

    def for_path(self) -> str:
        return self.value


IDLike = Union[int, str, ResourceID]


def parse_id(value: IDLike) -> ResourceID:
    """Convert ``value`` into a :class:`ResourceID`.

    Raises
    ------
    InvalidIdentifierError
        If ``value`` is not an ``int``, ``str`` or :class:`ResourceID`.
        Booleans are rejected even though they are integers.
    """
    if isinstance(value, ResourceID):
        return value
    if isinstance(value, bool):
        raise InvalidIdentifierError(f"invalid ID type {value!r}, the ID must be an int or a string")
    if isinstance(value, int):
        return NumericID(value)
    if isinstance(value, str):
        return PathID(value)
    raise InvalidIdentifierError(
        f"invalid ID type {type(value).__name__}, the ID must be an int or a string"
    )

