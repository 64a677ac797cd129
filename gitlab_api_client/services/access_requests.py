"""
Access requests of projects and groups.

GitLab API docs: https://docs.gitlab.com/api/access_requests/
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from ..dispatch import (
    NO_CONTENT,
    Many,
    One,
    do,
    with_api_opts,
    with_method,
    with_path,
    with_request_opts,
)
from ..identifiers import IDLike, parse_id
from ..models import AccessLevelValue, Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class AccessRequest(Resource):
    id: int = 0
    username: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    created_at: Optional[datetime] = None
    requested_at: Optional[datetime] = None
    access_level: Optional[AccessLevelValue] = None


class ListAccessRequestsOptions(ListOptions):
    pass


class ApproveAccessRequestOptions(Options):
    access_level: Optional[AccessLevelValue] = None


class AccessRequestsService(Service):
    """Handles the access request endpoints of projects and groups."""

    def list_project_access_requests(
        self,
        pid: IDLike,
        opt: Optional[ListAccessRequestsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[AccessRequest], Response]:
        """Get the pending access requests of a project.

        GitLab API docs:
        https://docs.gitlab.com/api/access_requests/#list-access-requests-for-a-group-or-project
        """
        return do(
            self._client,
            Many(AccessRequest),
            with_path("projects/%s/access_requests", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_group_access_requests(
        self,
        gid: IDLike,
        opt: Optional[ListAccessRequestsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[AccessRequest], Response]:
        """Get the pending access requests of a group."""
        return do(
            self._client,
            Many(AccessRequest),
            with_path("groups/%s/access_requests", parse_id(gid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def request_project_access(
        self, pid: IDLike, *options: RequestOption
    ) -> Tuple[AccessRequest, Response]:
        """Request access to a project for the authenticated user.

        GitLab API docs:
        https://docs.gitlab.com/api/access_requests/#request-access-to-a-group-or-project
        """
        return do(
            self._client,
            One(AccessRequest),
            with_method("POST"),
            with_path("projects/%s/access_requests", parse_id(pid)),
            with_request_opts(*options),
        )

    def request_group_access(
        self, gid: IDLike, *options: RequestOption
    ) -> Tuple[AccessRequest, Response]:
        return do(
            self._client,
            One(AccessRequest),
            with_method("POST"),
            with_path("groups/%s/access_requests", parse_id(gid)),
            with_request_opts(*options),
        )

    def approve_project_access_request(
        self,
        pid: IDLike,
        user: int,
        opt: Optional[ApproveAccessRequestOptions] = None,
        *options: RequestOption,
    ) -> Tuple[AccessRequest, Response]:
        """Approve the access request of ``user``.

        Without an ``access_level`` GitLab grants developer access.

        GitLab API docs:
        https://docs.gitlab.com/api/access_requests/#approve-an-access-request
        """
        return do(
            self._client,
            One(AccessRequest),
            with_method("PUT"),
            with_path("projects/%s/access_requests/%d/approve", parse_id(pid), user),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def approve_group_access_request(
        self,
        gid: IDLike,
        user: int,
        opt: Optional[ApproveAccessRequestOptions] = None,
        *options: RequestOption,
    ) -> Tuple[AccessRequest, Response]:
        return do(
            self._client,
            One(AccessRequest),
            with_method("PUT"),
            with_path("groups/%s/access_requests/%d/approve", parse_id(gid), user),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def deny_project_access_request(
        self, pid: IDLike, user: int, *options: RequestOption
    ) -> Response:
        """Deny the access request of ``user``.

        GitLab API docs:
        https://docs.gitlab.com/api/access_requests/#deny-an-access-request
        """
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/access_requests/%d", parse_id(pid), user),
            with_request_opts(*options),
        )
        return resp

    def deny_group_access_request(
        self, gid: IDLike, user: int, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("groups/%s/access_requests/%d", parse_id(gid), user),
            with_request_opts(*options),
        )
        return resp
