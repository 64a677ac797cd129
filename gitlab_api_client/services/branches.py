"""
Repository branches.

GitLab API docs: https://docs.gitlab.com/api/branches/
"""

from __future__ import annotations

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
from ..models import Commit, Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class Branch(Resource):
    commit: Optional[Commit] = None
    name: Optional[str] = None
    protected: bool = False
    merged: bool = False
    default: bool = False
    can_push: bool = False
    developers_can_push: bool = False
    developers_can_merge: bool = False
    web_url: Optional[str] = None


class ListBranchesOptions(ListOptions):
    search: Optional[str] = None
    regex: Optional[str] = None


class CreateBranchOptions(Options):
    branch: Optional[str] = None
    ref: Optional[str] = None


class BranchesService(Service):
    def list_branches(
        self,
        pid: IDLike,
        opt: Optional[ListBranchesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Branch], Response]:
        """Get the repository branches of a project, sorted by name.

        GitLab API docs:
        https://docs.gitlab.com/api/branches/#list-repository-branches
        """
        return do(
            self._client,
            Many(Branch),
            with_path("projects/%s/repository/branches", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_branch(
        self, pid: IDLike, branch: str, *options: RequestOption
    ) -> Tuple[Branch, Response]:
        """Get a single branch.  ``branch`` is escaped, so names with slashes work."""
        return do(
            self._client,
            One(Branch),
            with_path("projects/%s/repository/branches/%s", parse_id(pid), branch),
            with_request_opts(*options),
        )

    def create_branch(
        self, pid: IDLike, opt: CreateBranchOptions, *options: RequestOption
    ) -> Tuple[Branch, Response]:
        return do(
            self._client,
            One(Branch),
            with_method("POST"),
            with_path("projects/%s/repository/branches", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_branch(self, pid: IDLike, branch: str, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/repository/branches/%s", parse_id(pid), branch),
            with_request_opts(*options),
        )
        return resp

    def delete_merged_branches(self, pid: IDLike, *options: RequestOption) -> Response:
        """Delete every branch merged into the default branch.

        Protected branches are kept.  GitLab answers ``202 Accepted`` and
        performs the deletion asynchronously.

        GitLab API docs:
        https://docs.gitlab.com/api/branches/#delete-merged-branches
        """
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/repository/merged_branches", parse_id(pid)),
            with_request_opts(*options),
        )
        return resp
