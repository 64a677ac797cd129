"""
System hooks (administrators only).

GitLab API docs: https://docs.gitlab.com/api/system_hooks/
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
from ..models import Resource
from ..options import Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class Hook(Resource):
    id: int = 0
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    push_events: bool = False
    tag_push_events: bool = False
    merge_requests_events: bool = False
    repository_update_events: bool = False
    enable_ssl_verification: bool = False


class HookEvent(Resource):
    """The payload GitLab sends when a hook is tested."""

    event_name: Optional[str] = None
    name: Optional[str] = None
    path: Optional[str] = None
    project_id: int = 0
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None


class AddHookOptions(Options):
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    token: Optional[str] = None
    push_events: Optional[bool] = None
    tag_push_events: Optional[bool] = None
    merge_requests_events: Optional[bool] = None
    repository_update_events: Optional[bool] = None
    enable_ssl_verification: Optional[bool] = None


class SystemHooksService(Service):
    def list_hooks(self, *options: RequestOption) -> Tuple[List[Hook], Response]:
        return do(
            self._client,
            Many(Hook),
            with_path("hooks"),
            with_request_opts(*options),
        )

    def get_hook(self, hook: int, *options: RequestOption) -> Tuple[Hook, Response]:
        return do(
            self._client,
            One(Hook),
            with_path("hooks/%d", hook),
            with_request_opts(*options),
        )

    def add_hook(self, opt: AddHookOptions, *options: RequestOption) -> Tuple[Hook, Response]:
        """Add a new system hook; ``opt.url`` is required by the server."""
        return do(
            self._client,
            One(Hook),
            with_method("POST"),
            with_path("hooks"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def test_hook(self, hook: int, *options: RequestOption) -> Tuple[HookEvent, Response]:
        """Trigger a test event for a system hook.

        GitLab API docs:
        https://docs.gitlab.com/api/system_hooks/#test-system-hook
        """
        return do(
            self._client,
            One(HookEvent),
            with_path("hooks/%d", hook),
            with_request_opts(*options),
        )

    def delete_hook(self, hook: int, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("hooks/%d", hook),
            with_request_opts(*options),
        )
        return resp
