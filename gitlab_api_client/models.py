"""Resource records shared by several services."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """Base class of every decoded API record.

    Records are immutable once decoded and ignore keys they do not
    declare, so new server-side fields never break decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class AccessLevelValue(IntEnum):
    NO_PERMISSIONS = 0
    MINIMAL_ACCESS = 5
    GUEST = 10
    PLANNER = 15
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60


class BuildStateValue(str, Enum):
    CREATED = "created"
    WAITING_FOR_RESOURCE = "waiting_for_resource"
    PREPARING = "preparing"
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"
    SKIPPED = "skipped"
    MANUAL = "manual"
    SCHEDULED = "scheduled"


class BasicUser(Resource):
    id: int = 0
    username: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    locked: bool = False
    created_at: Optional[datetime] = None
    avatar_url: Optional[str] = None
    web_url: Optional[str] = None


class BasicProject(Resource):
    id: int = 0
    description: Optional[str] = None
    name: Optional[str] = None
    name_with_namespace: Optional[str] = None
    path: Optional[str] = None
    path_with_namespace: Optional[str] = None
    created_at: Optional[datetime] = None


class PipelineInfo(Resource):
    """Summary of a pipeline as embedded in commits and trigger jobs."""

    id: int = 0
    iid: int = 0
    project_id: int = 0
    status: Optional[str] = None
    source: Optional[str] = None
    ref: Optional[str] = None
    sha: Optional[str] = None
    web_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CommitStats(Resource):
    additions: int = 0
    deletions: int = 0
    total: int = 0


class Commit(Resource):
    id: Optional[str] = None
    short_id: Optional[str] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    authored_date: Optional[datetime] = None
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None
    committed_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    message: Optional[str] = None
    parent_ids: List[str] = []
    web_url: Optional[str] = None
    stats: Optional[CommitStats] = None
    status: Optional[str] = None
    last_pipeline: Optional[PipelineInfo] = None
    project_id: int = 0
    trailers: Optional[Dict[str, str]] = None
    extended_trailers: Optional[Dict[str, str]] = None
