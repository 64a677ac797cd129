"""
Deploy keys of the instance and of projects.

GitLab API docs: https://docs.gitlab.com/api/deploy_keys/
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


class DeployKeyProject(Resource):
    """A project an instance deploy key has access to."""

    id: int = 0
    description: Optional[str] = None
    name: Optional[str] = None
    name_with_namespace: Optional[str] = None
    path: Optional[str] = None
    path_with_namespace: Optional[str] = None
    created_at: Optional[datetime] = None


class InstanceDeployKey(Resource):
    id: int = 0
    title: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    key: Optional[str] = None
    fingerprint: Optional[str] = None
    fingerprint_sha256: Optional[str] = None
    projects_with_write_access: List[DeployKeyProject] = []
    projects_with_readonly_access: List[DeployKeyProject] = []


class ProjectDeployKey(Resource):
    id: int = 0
    title: Optional[str] = None
    key: Optional[str] = None
    fingerprint: Optional[str] = None
    fingerprint_sha256: Optional[str] = None
    created_at: Optional[datetime] = None
    can_push: bool = False
    expires_at: Optional[datetime] = None


class ListInstanceDeployKeysOptions(ListOptions):
    public: Optional[bool] = None


class AddInstanceDeployKeyOptions(Options):
    key: Optional[str] = None
    title: Optional[str] = None
    expires_at: Optional[datetime] = None


class ListProjectDeployKeysOptions(ListOptions):
    pass


class ListUserProjectDeployKeysOptions(ListOptions):
    pass


class AddDeployKeyOptions(Options):
    key: Optional[str] = None
    title: Optional[str] = None
    can_push: Optional[bool] = None
    expires_at: Optional[datetime] = None


class UpdateDeployKeyOptions(Options):
    title: Optional[str] = None
    can_push: Optional[bool] = None


class DeployKeysService(Service):
    """Handles the deploy key endpoints.

    Project deploy keys may be given the right to push; instance keys
    are managed by administrators and can be enabled on any project.
    """

    def list_all_deploy_keys(
        self, opt: Optional[ListInstanceDeployKeysOptions] = None, *options: RequestOption
    ) -> Tuple[List[InstanceDeployKey], Response]:
        """Get every deploy key of the instance.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_keys/#list-all-deploy-keys
        """
        return do(
            self._client,
            Many(InstanceDeployKey),
            with_path("deploy_keys"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def add_instance_deploy_key(
        self, opt: AddInstanceDeployKeyOptions, *options: RequestOption
    ) -> Tuple[InstanceDeployKey, Response]:
        """Create a deploy key for the instance.  Requires administrator access.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_keys/#add-deploy-key
        """
        return do(
            self._client,
            One(InstanceDeployKey),
            with_method("POST"),
            with_path("deploy_keys"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_project_deploy_keys(
        self,
        pid: IDLike,
        opt: Optional[ListProjectDeployKeysOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[ProjectDeployKey], Response]:
        """GitLab API docs:
        https://docs.gitlab.com/api/deploy_keys/#list-deploy-keys-for-project
        """
        return do(
            self._client,
            Many(ProjectDeployKey),
            with_path("projects/%s/deploy_keys", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_user_project_deploy_keys(
        self,
        uid: IDLike,
        opt: Optional[ListUserProjectDeployKeysOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[ProjectDeployKey], Response]:
        """Get the project deploy keys created by a user (ID or username)."""
        return do(
            self._client,
            Many(ProjectDeployKey),
            with_path("users/%s/project_deploy_keys", parse_id(uid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_deploy_key(
        self, pid: IDLike, deploy_key: int, *options: RequestOption
    ) -> Tuple[ProjectDeployKey, Response]:
        return do(
            self._client,
            One(ProjectDeployKey),
            with_path("projects/%s/deploy_keys/%d", parse_id(pid), deploy_key),
            with_request_opts(*options),
        )

    def add_deploy_key(
        self, pid: IDLike, opt: AddDeployKeyOptions, *options: RequestOption
    ) -> Tuple[ProjectDeployKey, Response]:
        """Create a deploy key for a project.

        If the key already exists in another project it is joined to this
        project, provided the original is accessible by the same user.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_keys/#add-deploy-key-for-a-project
        """
        return do(
            self._client,
            One(ProjectDeployKey),
            with_method("POST"),
            with_path("projects/%s/deploy_keys", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_deploy_key(
        self, pid: IDLike, deploy_key: int, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/deploy_keys/%d", parse_id(pid), deploy_key),
            with_request_opts(*options),
        )
        return resp

    def enable_deploy_key(
        self, pid: IDLike, deploy_key: int, *options: RequestOption
    ) -> Tuple[ProjectDeployKey, Response]:
        """Enable an existing deploy key on the project.

        GitLab API docs:
        https://docs.gitlab.com/api/deploy_keys/#enable-a-deploy-key
        """
        return do(
            self._client,
            One(ProjectDeployKey),
            with_method("POST"),
            with_path("projects/%s/deploy_keys/%d/enable", parse_id(pid), deploy_key),
            with_request_opts(*options),
        )

    def update_deploy_key(
        self,
        pid: IDLike,
        deploy_key: int,
        opt: UpdateDeployKeyOptions,
        *options: RequestOption,
    ) -> Tuple[ProjectDeployKey, Response]:
        return do(
            self._client,
            One(ProjectDeployKey),
            with_method("PUT"),
            with_path("projects/%s/deploy_keys/%d", parse_id(pid), deploy_key),
            with_api_opts(opt),
            with_request_opts(*options),
        )
