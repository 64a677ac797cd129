"""
Protected branches of a project.

GitLab API docs: https://docs.gitlab.com/api/protected_branches/
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import Field

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


class BranchAccessDescription(Resource):
    id: int = 0
    access_level: Optional[AccessLevelValue] = None
    access_level_description: Optional[str] = None
    deploy_key_id: Optional[int] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None


class ProtectedBranch(Resource):
    id: int = 0
    name: Optional[str] = None
    push_access_levels: List[BranchAccessDescription] = []
    merge_access_levels: List[BranchAccessDescription] = []
    unprotect_access_levels: List[BranchAccessDescription] = []
    allow_force_push: bool = False
    code_owner_approval_required: bool = False


class ListProtectedBranchesOptions(ListOptions):
    search: Optional[str] = None


class BranchPermissionOptions(Options):
    """One entry of ``allowed_to_push``, ``allowed_to_merge`` or ``allowed_to_unprotect``.

    Set ``destroy=True`` together with ``id`` to remove an existing rule.
    """

    id: Optional[int] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None
    deploy_key_id: Optional[int] = None
    access_level: Optional[AccessLevelValue] = None
    destroy: Optional[bool] = Field(default=None, alias="_destroy")


class ProtectRepositoryBranchesOptions(Options):
    name: Optional[str] = None
    push_access_level: Optional[AccessLevelValue] = None
    merge_access_level: Optional[AccessLevelValue] = None
    unprotect_access_level: Optional[AccessLevelValue] = None
    allow_force_push: Optional[bool] = None
    allowed_to_push: Optional[List[BranchPermissionOptions]] = None
    allowed_to_merge: Optional[List[BranchPermissionOptions]] = None
    allowed_to_unprotect: Optional[List[BranchPermissionOptions]] = None
    code_owner_approval_required: Optional[bool] = None


class UpdateProtectedBranchOptions(Options):
    name: Optional[str] = None
    allow_force_push: Optional[bool] = None
    code_owner_approval_required: Optional[bool] = None
    allowed_to_push: Optional[List[BranchPermissionOptions]] = None
    allowed_to_merge: Optional[List[BranchPermissionOptions]] = None
    allowed_to_unprotect: Optional[List[BranchPermissionOptions]] = None


class ProtectedBranchesService(Service):
    def list_protected_branches(
        self,
        pid: IDLike,
        opt: Optional[ListProtectedBranchesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[ProtectedBranch], Response]:
        return do(
            self._client,
            Many(ProtectedBranch),
            with_path("projects/%s/protected_branches", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_protected_branch(
        self, pid: IDLike, branch: str, *options: RequestOption
    ) -> Tuple[ProtectedBranch, Response]:
        """Get a protected branch or wildcard rule (e.g. ``release/*``) by name."""
        return do(
            self._client,
            One(ProtectedBranch),
            with_path("projects/%s/protected_branches/%s", parse_id(pid), branch),
            with_request_opts(*options),
        )

    def protect_repository_branches(
        self, pid: IDLike, opt: ProtectRepositoryBranchesOptions, *options: RequestOption
    ) -> Tuple[ProtectedBranch, Response]:
        """Protect a branch, or every branch matching a wildcard.

        GitLab API docs:
        https://docs.gitlab.com/api/protected_branches/#protect-repository-branches
        """
        return do(
            self._client,
            One(ProtectedBranch),
            with_method("POST"),
            with_path("projects/%s/protected_branches", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def unprotect_repository_branches(
        self, pid: IDLike, branch: str, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/protected_branches/%s", parse_id(pid), branch),
            with_request_opts(*options),
        )
        return resp

    def update_protected_branch(
        self,
        pid: IDLike,
        branch: str,
        opt: UpdateProtectedBranchOptions,
        *options: RequestOption,
    ) -> Tuple[ProtectedBranch, Response]:
        return do(
            self._client,
            One(ProtectedBranch),
            with_method("PATCH"),
            with_path("projects/%s/protected_branches/%s", parse_id(pid), branch),
            with_api_opts(opt),
            with_request_opts(*options),
        )
