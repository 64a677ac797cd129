"""
Markdown uploads of projects and groups.

Files uploaded here can be referenced from Markdown (issue descriptions,
comments, wiki pages).  Projects and groups expose the same listing,
download and delete endpoints, so both services share the helpers
below and differ only in the resource segment of the path.

GitLab API docs: https://docs.gitlab.com/api/project_markdown_uploads/
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, IO, List, Optional, Tuple, Union

from ..dispatch import (
    NO_CONTENT,
    RAW,
    Many,
    One,
    do,
    with_api_opts,
    with_method,
    with_path,
    with_request_opts,
    with_upload,
)
from ..identifiers import IDLike, ResourceID, parse_id
from ..models import BasicUser, Resource
from ..options import ListOptions
from ..request import RequestOption
from ..response import Response
from .base import Service

if TYPE_CHECKING:
    from ..client import GitLabClient


class ResourceType(str, Enum):
    PROJECTS = "projects"
    GROUPS = "groups"


class MarkdownUpload(Resource):
    id: int = 0
    size: int = 0
    filename: Optional[str] = None
    created_at: Optional[datetime] = None
    uploaded_by: Optional[BasicUser] = None


class MarkdownUploadedFile(Resource):
    id: int = 0
    alt: Optional[str] = None
    url: Optional[str] = None
    full_path: Optional[str] = None
    markdown: Optional[str] = None


class ListMarkdownUploadsOptions(ListOptions):
    pass


# ----------------------------------------------------------------------
# Shared endpoints
# ----------------------------------------------------------------------
def _list(
    client: "GitLabClient",
    resource: ResourceType,
    rid: ResourceID,
    opt: Optional[ListMarkdownUploadsOptions],
    options: Tuple[RequestOption, ...],
) -> Tuple[List[MarkdownUpload], Response]:
    return do(
        client,
        Many(MarkdownUpload),
        with_path("%s/%s/uploads", resource, rid),
        with_api_opts(opt),
        with_request_opts(*options),
    )


def _download_by_id(
    client: "GitLabClient",
    resource: ResourceType,
    rid: ResourceID,
    upload_id: int,
    options: Tuple[RequestOption, ...],
) -> Tuple[bytes, Response]:
    return do(
        client,
        RAW,
        with_path("%s/%s/uploads/%d", resource, rid, upload_id),
        with_request_opts(*options),
    )


def _download_by_secret_and_filename(
    client: "GitLabClient",
    resource: ResourceType,
    rid: ResourceID,
    secret: str,
    filename: str,
    options: Tuple[RequestOption, ...],
) -> Tuple[bytes, Response]:
    return do(
        client,
        RAW,
        with_path("%s/%s/uploads/%s/%s", resource, rid, secret, filename),
        with_request_opts(*options),
    )


def _delete_by_id(
    client: "GitLabClient",
    resource: ResourceType,
    rid: ResourceID,
    upload_id: int,
    options: Tuple[RequestOption, ...],
) -> Response:
    _, resp = do(
        client,
        NO_CONTENT,
        with_method("DELETE"),
        with_path("%s/%s/uploads/%d", resource, rid, upload_id),
        with_request_opts(*options),
    )
    return resp


def _delete_by_secret_and_filename(
    client: "GitLabClient",
    resource: ResourceType,
    rid: ResourceID,
    secret: str,
    filename: str,
    options: Tuple[RequestOption, ...],
) -> Response:
    _, resp = do(
        client,
        NO_CONTENT,
        with_method("DELETE"),
        with_path("%s/%s/uploads/%s/%s", resource, rid, secret, filename),
        with_request_opts(*options),
    )
    return resp


# ----------------------------------------------------------------------
# Services
# ----------------------------------------------------------------------
class ProjectMarkdownUploadsService(Service):
    def upload_project_markdown(
        self,
        pid: IDLike,
        content: Union[bytes, IO[bytes]],
        filename: str,
        *options: RequestOption,
    ) -> Tuple[MarkdownUploadedFile, Response]:
        """Upload a file to a project for use in Markdown.

        The returned record's ``markdown`` attribute holds a ready-made
        Markdown link to the file.

        GitLab API docs:
        https://docs.gitlab.com/api/project_markdown_uploads/#upload-a-file
        """
        return do(
            self._client,
            One(MarkdownUploadedFile),
            with_method("POST"),
            with_path("projects/%s/uploads", parse_id(pid)),
            with_upload(content, filename),
            with_request_opts(*options),
        )

    def list_project_markdown_uploads(
        self,
        pid: IDLike,
        opt: Optional[ListMarkdownUploadsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[MarkdownUpload], Response]:
        return _list(self._client, ResourceType.PROJECTS, parse_id(pid), opt, options)

    def download_project_markdown_upload_by_id(
        self, pid: IDLike, upload_id: int, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        return _download_by_id(
            self._client, ResourceType.PROJECTS, parse_id(pid), upload_id, options
        )

    def download_project_markdown_upload_by_secret_and_filename(
        self, pid: IDLike, secret: str, filename: str, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        return _download_by_secret_and_filename(
            self._client, ResourceType.PROJECTS, parse_id(pid), secret, filename, options
        )

    def delete_project_markdown_upload_by_id(
        self, pid: IDLike, upload_id: int, *options: RequestOption
    ) -> Response:
        return _delete_by_id(self._client, ResourceType.PROJECTS, parse_id(pid), upload_id, options)

    def delete_project_markdown_upload_by_secret_and_filename(
        self, pid: IDLike, secret: str, filename: str, *options: RequestOption
    ) -> Response:
        return _delete_by_secret_and_filename(
            self._client, ResourceType.PROJECTS, parse_id(pid), secret, filename, options
        )


class GroupMarkdownUploadsService(Service):
    """Markdown uploads of a group.  Uploading is only possible per project."""

    def list_group_markdown_uploads(
        self,
        gid: IDLike,
        opt: Optional[ListMarkdownUploadsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[MarkdownUpload], Response]:
        return _list(self._client, ResourceType.GROUPS, parse_id(gid), opt, options)

    def download_group_markdown_upload_by_id(
        self, gid: IDLike, upload_id: int, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        return _download_by_id(self._client, ResourceType.GROUPS, parse_id(gid), upload_id, options)

    def download_group_markdown_upload_by_secret_and_filename(
        self, gid: IDLike, secret: str, filename: str, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        return _download_by_secret_and_filename(
            self._client, ResourceType.GROUPS, parse_id(gid), secret, filename, options
        )

    def delete_group_markdown_upload_by_id(
        self, gid: IDLike, upload_id: int, *options: RequestOption
    ) -> Response:
        return _delete_by_id(self._client, ResourceType.GROUPS, parse_id(gid), upload_id, options)

    def delete_group_markdown_upload_by_secret_and_filename(
        self, gid: IDLike, secret: str, filename: str, *options: RequestOption
    ) -> Response:
        return _delete_by_secret_and_filename(
            self._client, ResourceType.GROUPS, parse_id(gid), secret, filename, options
        )
