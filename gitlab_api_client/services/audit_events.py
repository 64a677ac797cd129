"""
Audit events of the instance, groups and projects.

GitLab API docs: https://docs.gitlab.com/api/audit_events/
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Tuple

from pydantic import Field

from ..dispatch import Many, One, do, with_api_opts, with_path, with_request_opts
from ..identifiers import IDLike, parse_id
from ..models import Resource
from ..options import ListOptions
from ..request import RequestOption
from ..response import Response
from .base import Service


class AuditEventDetails(Resource):
    with_: Optional[str] = Field(default=None, alias="with")
    add: Optional[str] = None
    as_: Optional[str] = Field(default=None, alias="as")
    change: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    remove: Optional[str] = None
    custom_message: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    author_class: Optional[str] = None
    # Numeric for most entities, a string for some (e.g. runners).
    target_id: Any = None
    target_type: Optional[str] = None
    target_details: Optional[str] = None
    ip_address: Optional[str] = None
    entity_path: Optional[str] = None
    failed_login: Optional[str] = None
    event_name: Optional[str] = None


class AuditEvent(Resource):
    id: int = 0
    author_id: int = 0
    entity_id: int = 0
    entity_type: Optional[str] = None
    event_name: Optional[str] = None
    details: AuditEventDetails = Field(default_factory=AuditEventDetails)
    created_at: Optional[datetime] = None
    event_type: Optional[str] = None


class ListAuditEventsOptions(ListOptions):
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None


class AuditEventsService(Service):
    """Handles the instance, group and project audit event endpoints.

    Instance audit events require administrator access.
    """

    def list_instance_audit_events(
        self, opt: Optional[ListAuditEventsOptions] = None, *options: RequestOption
    ) -> Tuple[List[AuditEvent], Response]:
        """GitLab API docs:
        https://docs.gitlab.com/api/audit_events/#retrieve-all-instance-audit-events
        """
        return do(
            self._client,
            Many(AuditEvent),
            with_path("audit_events"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_instance_audit_event(
        self, event: int, *options: RequestOption
    ) -> Tuple[AuditEvent, Response]:
        return do(
            self._client,
            One(AuditEvent),
            with_path("audit_events/%d", event),
            with_request_opts(*options),
        )

    def list_group_audit_events(
        self,
        gid: IDLike,
        opt: Optional[ListAuditEventsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[AuditEvent], Response]:
        return do(
            self._client,
            Many(AuditEvent),
            with_path("groups/%s/audit_events", parse_id(gid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_group_audit_event(
        self, gid: IDLike, event: int, *options: RequestOption
    ) -> Tuple[AuditEvent, Response]:
        return do(
            self._client,
            One(AuditEvent),
            with_path("groups/%s/audit_events/%d", parse_id(gid), event),
            with_request_opts(*options),
        )

    def list_project_audit_events(
        self,
        pid: IDLike,
        opt: Optional[ListAuditEventsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[AuditEvent], Response]:
        return do(
            self._client,
            Many(AuditEvent),
            with_path("projects/%s/audit_events", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_project_audit_event(
        self, pid: IDLike, event: int, *options: RequestOption
    ) -> Tuple[AuditEvent, Response]:
        return do(
            self._client,
            One(AuditEvent),
            with_path("projects/%s/audit_events/%d", parse_id(pid), event),
            with_request_opts(*options),
        )
