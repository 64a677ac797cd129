"""
Generic request dispatch.

Every service method is a call to :func:`do`: it describes the
endpoint with a handful of *do options* and names the shape the
response body should be decoded into.

Usage
-----

.. code-block:: python

    # GET returning a single object
    return do(self._client, One(Agent),
              with_path("projects/%s/cluster_agents/%d", parse_id(pid), agent_id),
              with_request_opts(*options))

    # GET returning a list
    return do(self._client, Many(Agent),
              with_path("projects/%s/cluster_agents", parse_id(pid)),
              with_api_opts(opt),
              with_request_opts(*options))

    # DELETE returning nothing
    _, resp = do(self._client, NO_CONTENT,
                 with_method("DELETE"),
                 with_path("projects/%s/cluster_agents/%d", parse_id(pid), agent_id),
                 with_request_opts(*options))
    return resp

Shapes
------
``One(Model)``
    decode a single JSON object into ``Model``.
``Many(Model)``
    decode a JSON array into a list of ``Model``.
``RAW``
    return the body bytes verbatim.
``NO_CONTENT``
    discard the body and return ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    IO,
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ValidationError

from .exceptions import GitLabDecodeError, GitLabRequestError
from .identifiers import ResourceID, path_escape
from .options import Options
from .request import RequestOption
from .response import Response

if TYPE_CHECKING:
    from .client import GitLabClient

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


# ----------------------------------------------------------------------
# Result shapes
# ----------------------------------------------------------------------
class Shape(Generic[T]):
    """Decodes a successful response into a value of type ``T``."""

    def decode(self, response: Response) -> T:
        raise NotImplementedError


def _load_json(response: Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise GitLabDecodeError(
            f"response body is not valid JSON: {exc}", response=response
        ) from exc


class One(Shape[M]):
    def __init__(self, model: Type[M]) -> None:
        self.model = model

    def decode(self, response: Response) -> M:
        data = _load_json(response)
        if not isinstance(data, dict):
            raise GitLabDecodeError(
                f"expected a JSON object for {self.model.__name__}, got {type(data).__name__}",
                response=response,
            )
        try:
            return self.model.model_validate(data)
        except ValidationError as exc:
            raise GitLabDecodeError(str(exc), response=response) from exc


class Many(Shape[List[M]]):
    def __init__(self, model: Type[M]) -> None:
        self.model = model

    def decode(self, response: Response) -> List[M]:
        data = _load_json(response)
        if not isinstance(data, list):
            raise GitLabDecodeError(
                f"expected a JSON array of {self.model.__name__}, got {type(data).__name__}",
                response=response,
            )
        try:
            return [self.model.model_validate(item) for item in data]
        except ValidationError as exc:
            raise GitLabDecodeError(str(exc), response=response) from exc


class _Raw(Shape[bytes]):
    def decode(self, response: Response) -> bytes:
        return response.raw.content


class _NoContent(Shape[None]):
    def decode(self, response: Response) -> None:
        return None


RAW = _Raw()
NO_CONTENT = _NoContent()


# ----------------------------------------------------------------------
# Do options
# ----------------------------------------------------------------------
@dataclass
class Upload:
    """A file sent as one part of a ``multipart/form-data`` request."""

    content: Union[bytes, IO[bytes]]
    filename: str
    field: str = "file"


@dataclass
class _DoConfig:
    method: str = "GET"
    path: str = ""
    api_opts: Optional[Options] = None
    request_opts: Sequence[RequestOption] = field(default_factory=tuple)
    upload: Optional[Upload] = None


DoOption = Callable[[_DoConfig], None]


def with_method(method: str) -> DoOption:
    def apply(config: _DoConfig) -> None:
        config.method = method.upper()

    return apply


def _path_arg(arg: Any) -> Any:
    if isinstance(arg, ResourceID):
        return arg.for_path()
    if isinstance(arg, Enum):
        return arg.value
    if isinstance(arg, str):
        return path_escape(arg)
    return arg


def with_path(template: str, *args: Any) -> DoOption:
    """Substitute ``args`` into the ``%``-style path ``template``.

    Identifiers render through :meth:`ResourceID.for_path`, plain
    strings are escaped as a single path segment and everything else is
    formatted as-is.
    """

    def apply(config: _DoConfig) -> None:
        rendered = tuple(_path_arg(arg) for arg in args)
        try:
            config.path = template % rendered
        except (TypeError, ValueError) as exc:
            raise GitLabRequestError(f"cannot build path from {template!r}: {exc}") from exc

    return apply


def with_api_opts(opt: Optional[Options]) -> DoOption:
    def apply(config: _DoConfig) -> None:
        config.api_opts = opt

    return apply


def with_request_opts(*options: RequestOption) -> DoOption:
    def apply(config: _DoConfig) -> None:
        config.request_opts = options

    return apply


def with_upload(content: Union[bytes, IO[bytes]], filename: str, field: str = "file") -> DoOption:
    """Send the request as ``multipart/form-data`` with one file part."""
    if not filename:
        raise GitLabRequestError("filename must not be empty")

    def apply(config: _DoConfig) -> None:
        config.upload = Upload(content=content, filename=filename, field=field)

    return apply


# ----------------------------------------------------------------------
# Dispatch
# ----------------------------------------------------------------------
def do(client: "GitLabClient", shape: Shape[T], *options: DoOption) -> Tuple[T, Response]:
    """Build, send and decode one API request.

    Parameters
    ----------
    client : GitLabClient
        The client whose session, base URL and credentials are used.
    shape : Shape
        How to decode a successful body (``One``, ``Many``, ``RAW`` or
        ``NO_CONTENT``).
    *options
        Do options describing the request.  The method defaults to
        ``GET``.

    Returns
    -------
    tuple
        The decoded value and the :class:`Response` envelope.

    Raises
    ------
    GitLabRequestError, InvalidIdentifierError
        If the request cannot be built.  Nothing is sent in that case.
    GitLabTransportError
        If no response was received.
    GitLabAPIError
        If the server answers with a non-2xx status.
    GitLabDecodeError
        If a 2xx body does not match ``shape``.
    """
    config = _DoConfig()
    for apply in options:
        apply(config)

    if config.upload is not None:
        request = client.upload_request(
            config.method, config.path, config.upload, config.api_opts, config.request_opts
        )
    else:
        request = client.new_request(
            config.method, config.path, config.api_opts, config.request_opts
        )

    response = client.send(request)
    return shape.decode(response), response
