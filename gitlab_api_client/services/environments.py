"""
Project environments.

GitLab API docs: https://docs.gitlab.com/api/environments/
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
from ..models import BasicProject, Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class Deployment(Resource):
    id: int = 0
    iid: int = 0
    ref: Optional[str] = None
    sha: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EnvironmentClusterAgent(Resource):
    id: int = 0
    name: Optional[str] = None
    created_at: Optional[datetime] = None


class Environment(Resource):
    id: int = 0
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    state: Optional[str] = None
    tier: Optional[str] = None
    external_url: Optional[str] = None
    project: Optional[BasicProject] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_deployment: Optional[Deployment] = None
    cluster_agent: Optional[EnvironmentClusterAgent] = None
    kubernetes_namespace: Optional[str] = None
    flux_resource_path: Optional[str] = None
    auto_stop_at: Optional[datetime] = None
    auto_stop_setting: Optional[str] = None


class ListEnvironmentsOptions(ListOptions):
    name: Optional[str] = None
    search: Optional[str] = None
    states: Optional[str] = None


class CreateEnvironmentOptions(Options):
    name: Optional[str] = None
    description: Optional[str] = None
    external_url: Optional[str] = None
    tier: Optional[str] = None
    cluster_agent_id: Optional[int] = None
    kubernetes_namespace: Optional[str] = None
    flux_resource_path: Optional[str] = None
    auto_stop_setting: Optional[str] = None


class EditEnvironmentOptions(CreateEnvironmentOptions):
    pass


class StopEnvironmentOptions(Options):
    force: Optional[bool] = None


class EnvironmentsService(Service):
    def list_environments(
        self,
        pid: IDLike,
        opt: Optional[ListEnvironmentsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Environment], Response]:
        """GitLab API docs:
        https://docs.gitlab.com/api/environments/#list-environments
        """
        return do(
            self._client,
            Many(Environment),
            with_path("projects/%s/environments", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_environment(
        self, pid: IDLike, environment: int, *options: RequestOption
    ) -> Tuple[Environment, Response]:
        return do(
            self._client,
            One(Environment),
            with_path("projects/%s/environments/%d", parse_id(pid), environment),
            with_request_opts(*options),
        )

    def create_environment(
        self, pid: IDLike, opt: CreateEnvironmentOptions, *options: RequestOption
    ) -> Tuple[Environment, Response]:
        """Create an environment.  ``name`` is required by the server.

        GitLab API docs:
        https://docs.gitlab.com/api/environments/#create-a-new-environment
        """
        return do(
            self._client,
            One(Environment),
            with_method("POST"),
            with_path("projects/%s/environments", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def edit_environment(
        self,
        pid: IDLike,
        environment: int,
        opt: EditEnvironmentOptions,
        *options: RequestOption,
    ) -> Tuple[Environment, Response]:
        return do(
            self._client,
            One(Environment),
            with_method("PUT"),
            with_path("projects/%s/environments/%d", parse_id(pid), environment),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_environment(
        self, pid: IDLike, environment: int, *options: RequestOption
    ) -> Response:
        """Delete a stopped environment."""
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/environments/%d", parse_id(pid), environment),
            with_request_opts(*options),
        )
        return resp

    def stop_environment(
        self,
        pid: IDLike,
        environment: int,
        opt: Optional[StopEnvironmentOptions] = None,
        *options: RequestOption,
    ) -> Tuple[Environment, Response]:
        return do(
            self._client,
            One(Environment),
            with_method("POST"),
            with_path("projects/%s/environments/%d/stop", parse_id(pid), environment),
            with_api_opts(opt),
            with_request_opts(*options),
        )
