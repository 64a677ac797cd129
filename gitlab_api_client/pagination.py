"""
Helpers for walking paginated listings.

Both helpers accept any listing method of a service together with its
positional arguments.  After each page they call the method again with
:func:`~gitlab_api_client.request.with_next` appended to the request
options, so offset pagination (``X-Next-Page``) and keyset pagination
(``Link: <...>; rel="next"``) are followed the same way.

Usage
-----

.. code-block:: python

    from gitlab_api_client import ListOptions, scan

    for job in scan(client.jobs.list_project_jobs, "group/project", ListOptions(per_page=100)):
        print(job.id, job.status)

    # The options object may be left out
    for todo in scan(client.todos.list_todos):
        print(todo.body)
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Iterator, List, Tuple, TypeVar

from .exceptions import GitLabRequestError
from .request import with_next
from .response import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")

ListCall = Callable[..., Tuple[List[T], Response]]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _fill_positional(call: Callable[..., Any], args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Complete ``args`` with the defaults of the positional parameters left out.

    Request options are variadic, so every named positional parameter
    (the options object included) has to be filled before the next-page
    option can be appended.

    Raises
    ------
    GitLabRequestError
        If a positional parameter without a default is missing.
    """
    params = [
        p for p in inspect.signature(call).parameters.values() if p.kind in _POSITIONAL
    ]
    missing = params[len(args):]
    required = [p.name for p in missing if p.default is inspect.Parameter.empty]
    if required:
        name = getattr(call, "__name__", repr(call))
        raise GitLabRequestError(f"{name}() is missing arguments: {', '.join(required)}")
    return args + tuple(p.default for p in missing)


def scan_pages(call: ListCall[T], *args: Any) -> Iterator[Tuple[List[T], Response]]:
    """Yield ``(items, response)`` for every page of a listing.

    ``args`` are passed positionally to ``call``.  Positional parameters
    left out (typically the options object) take their defaults, and
    the next-page option is appended after them.  Iteration stops when
    a response has neither a next link nor a next page number.

    Raises
    ------
    GitLabRequestError
        If a required argument of ``call`` is missing.  Nothing is sent
        in that case.
    """
    args = _fill_positional(call, args)
    items, response = call(*args)
    yield items, response
    while response.next_link or response.next_page:
        logger.debug("fetching page after %s", response.raw.url)
        items, response = call(*args, with_next(response))
        yield items, response


def scan(call: ListCall[T], *args: Any) -> Iterator[T]:
    """Yield every item of a listing, fetching pages lazily."""
    for items, _ in scan_pages(call, *args):
        yield from items
