"""
Deploy tokens of the instance, projects and groups.

GitLab API docs: https://docs.gitlab.com/api/deploy_tokens/
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
from ..models import Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class DeployToken(Resource):
    id: int = 0
    name: Optional[str] = None
    username: Optional[str] = None
    expires_at: Optional[datetime] = None
    revoked: bool = False
    expired: bool = False
    # Only present in the reply to a create call.
    token: Optional[str] = None
    scopes: List[str] = []


class ListProjectDeployTokensOptions(ListOptions):
    pass


class ListGroupDeployTokensOptions(ListOptions):
    pass


class CreateDeployTokenOptions(Options):
    name: Optional[str] = None
    expires_at: Optional[datetime] = None
    username: Optional[str] = None
    scopes: Optional[List[str]] = None


class CreateProjectDeployTokenOptions(CreateDeployTokenOptions):
    pass


class CreateGroupDeployTokenOptions(CreateDeployTokenOptions):
    pass


class DeployTokensService(Service):
    def list_all_deploy_tokens(
        self, *options: RequestOption
    ) -> Tuple[List[DeployToken], Response]:
        """Get every deploy token of the instance.  Requires administrator access.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_tokens/#list-all-deploy-tokens
        """
        return do(
            self._client,
            Many(DeployToken),
            with_path("deploy_tokens"),
            with_request_opts(*options),
        )

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def list_project_deploy_tokens(
        self,
        pid: IDLike,
        opt: Optional[ListProjectDeployTokensOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[DeployToken], Response]:
        return do(
            self._client,
            Many(DeployToken),
            with_path("projects/%s/deploy_tokens", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_project_deploy_token(
        self, pid: IDLike, deploy_token: int, *options: RequestOption
    ) -> Tuple[DeployToken, Response]:
        return do(
            self._client,
            One(DeployToken),
            with_path("projects/%s/deploy_tokens/%d", parse_id(pid), deploy_token),
            with_request_opts(*options),
        )

    def create_project_deploy_token(
        self, pid: IDLike, opt: CreateProjectDeployTokenOptions, *options: RequestOption
    ) -> Tuple[DeployToken, Response]:
        """Create a deploy token for a project.

        The secret is only returned by this call; store ``token`` right away.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_tokens/#create-a-project-deploy-token
        """
        return do(
            self._client,
            One(DeployToken),
            with_method("POST"),
            with_path("projects/%s/deploy_tokens", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_project_deploy_token(
        self, pid: IDLike, deploy_token: int, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/deploy_tokens/%d", parse_id(pid), deploy_token),
            with_request_opts(*options),
        )
        return resp

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    def list_group_deploy_tokens(
        self,
        gid: IDLike,
        opt: Optional[ListGroupDeployTokensOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[DeployToken], Response]:
        return do(
            self._client,
            Many(DeployToken),
            with_path("groups/%s/deploy_tokens", parse_id(gid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_group_deploy_token(
        self, gid: IDLike, deploy_token: int, *options: RequestOption
    ) -> Tuple[DeployToken, Response]:
        return do(
            self._client,
            One(DeployToken),
            with_path("groups/%s/deploy_tokens/%d", parse_id(gid), deploy_token),
            with_request_opts(*options),
        )

    def create_group_deploy_token(
        self, gid: IDLike, opt: CreateGroupDeployTokenOptions, *options: RequestOption
    ) -> Tuple[DeployToken, Response]:
        return do(
            self._client,
            One(DeployToken),
            with_method("POST"),
            with_path("groups/%s/deploy_tokens", parse_id(gid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_group_deploy_token(
        self, gid: IDLike, deploy_token: int, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("groups/%s/deploy_tokens/%d", parse_id(gid), deploy_token),
            with_request_opts(*options),
        )
        return resp
