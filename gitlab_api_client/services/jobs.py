"""
CI/CD jobs and their artifacts.

GitLab API docs: https://docs.gitlab.com/api/jobs/
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

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
)
from ..identifiers import IDLike, NoEscape, parse_id
from ..models import (
    BasicProject,
    BasicUser,
    BuildStateValue,
    Commit,
    PipelineInfo,
    Resource,
)
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class VariableTypeValue(str, Enum):
    ENV_VAR = "env_var"
    FILE = "file"


class JobPipeline(Resource):
    id: int = 0
    project_id: int = 0
    ref: Optional[str] = None
    sha: Optional[str] = None
    status: Optional[str] = None


class JobArtifact(Resource):
    file_type: Optional[str] = None
    filename: Optional[str] = None
    size: int = 0
    file_format: Optional[str] = None


class JobArtifactsFile(Resource):
    filename: Optional[str] = None
    size: int = 0


class JobRunner(Resource):
    id: int = 0
    description: Optional[str] = None
    active: bool = False
    is_shared: bool = False
    name: Optional[str] = None


class Job(Resource):
    id: int = 0
    name: Optional[str] = None
    status: Optional[str] = None
    stage: Optional[str] = None
    ref: Optional[str] = None
    tag: bool = False
    coverage: Optional[float] = None
    allow_failure: bool = False
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    erased_at: Optional[datetime] = None
    duration: Optional[float] = None
    queued_duration: Optional[float] = None
    artifacts_expire_at: Optional[datetime] = None
    tag_list: List[str] = []
    failure_reason: Optional[str] = None
    web_url: Optional[str] = None
    commit: Optional[Commit] = None
    pipeline: Optional[JobPipeline] = None
    artifacts: List[JobArtifact] = []
    artifacts_file: Optional[JobArtifactsFile] = None
    runner: Optional[JobRunner] = None
    project: Optional[BasicProject] = None
    user: Optional[BasicUser] = None


class Bridge(Resource):
    """A trigger job that starts a downstream pipeline."""

    id: int = 0
    name: Optional[str] = None
    status: Optional[str] = None
    stage: Optional[str] = None
    ref: Optional[str] = None
    tag: bool = False
    coverage: Optional[float] = None
    allow_failure: bool = False
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    erased_at: Optional[datetime] = None
    duration: Optional[float] = None
    queued_duration: Optional[float] = None
    failure_reason: Optional[str] = None
    web_url: Optional[str] = None
    commit: Optional[Commit] = None
    pipeline: Optional[PipelineInfo] = None
    downstream_pipeline: Optional[PipelineInfo] = None
    user: Optional[BasicUser] = None


class ListJobsOptions(ListOptions):
    scope: Optional[List[BuildStateValue]] = None
    include_retried: Optional[bool] = None


class GetJobTokensJobOptions(Options):
    job_token: Optional[str] = None


class DownloadArtifactsFileOptions(Options):
    job: Optional[str] = None


class JobVariableOptions(Options):
    key: Optional[str] = None
    value: Optional[str] = None
    variable_type: Optional[VariableTypeValue] = None


class PlayJobOptions(Options):
    job_variables_attributes: Optional[List[JobVariableOptions]] = None


class JobsService(Service):
    """Handles the job endpoints.

    Artifact and trace downloads return the raw bytes of the body.
    """

    def list_project_jobs(
        self,
        pid: IDLike,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Job], Response]:
        """Get the jobs of a project, optionally filtered by ``scope``.

        GitLab API docs:
        https://docs.gitlab.com/api/jobs/#list-project-jobs
        """
        return do(
            self._client,
            Many(Job),
            with_path("projects/%s/jobs", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_pipeline_jobs(
        self,
        pid: IDLike,
        pipeline_id: int,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Job], Response]:
        return do(
            self._client,
            Many(Job),
            with_path("projects/%s/pipelines/%d/jobs", parse_id(pid), pipeline_id),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_pipeline_bridges(
        self,
        pid: IDLike,
        pipeline_id: int,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Bridge], Response]:
        """Get the trigger jobs of a pipeline.

        GitLab API docs:
        https://docs.gitlab.com/api/jobs/#list-pipeline-trigger-jobs
        """
        return do(
            self._client,
            Many(Bridge),
            with_path("projects/%s/pipelines/%d/bridges", parse_id(pid), pipeline_id),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_job_tokens_job(
        self, opt: Optional[GetJobTokensJobOptions] = None, *options: RequestOption
    ) -> Tuple[Job, Response]:
        """Get the job a CI job token belongs to.

        The token can be sent either as ``opt.job_token`` or through the
        ``JOB-TOKEN`` header (``auth_type="job"``).
        """
        return do(
            self._client,
            One(Job),
            with_path("job"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_job(self, pid: IDLike, job_id: int, *options: RequestOption) -> Tuple[Job, Response]:
        return do(
            self._client,
            One(Job),
            with_path("projects/%s/jobs/%d", parse_id(pid), job_id),
            with_request_opts(*options),
        )

    # ------------------------------------------------------------------
    # Artifacts and logs
    # ------------------------------------------------------------------
    def get_job_artifacts(
        self, pid: IDLike, job_id: int, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        """Download the artifacts archive (zip) of a job.

        GitLab API docs:
        https://docs.gitlab.com/api/job_artifacts/#get-job-artifacts
        """
        return do(
            self._client,
            RAW,
            with_path("projects/%s/jobs/%d/artifacts", parse_id(pid), job_id),
            with_request_opts(*options),
        )

    def download_artifacts_file(
        self,
        pid: IDLike,
        ref_name: str,
        opt: DownloadArtifactsFileOptions,
        *options: RequestOption,
    ) -> Tuple[bytes, Response]:
        """Download the artifacts archive of the latest successful ``opt.job`` on a ref.

        ``ref_name`` is inserted unescaped, matching the documented URL.
        """
        return do(
            self._client,
            RAW,
            with_path(
                "projects/%s/jobs/artifacts/%s/download", parse_id(pid), NoEscape(ref_name)
            ),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def download_single_artifacts_file(
        self, pid: IDLike, job_id: int, artifact_path: str, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        """Download one file from a job's artifacts archive."""
        return do(
            self._client,
            RAW,
            with_path(
                "projects/%s/jobs/%d/artifacts/%s",
                parse_id(pid),
                job_id,
                NoEscape(artifact_path),
            ),
            with_request_opts(*options),
        )

    def download_single_artifacts_file_by_tag_or_branch(
        self,
        pid: IDLike,
        ref_name: str,
        artifact_path: str,
        opt: DownloadArtifactsFileOptions,
        *options: RequestOption,
    ) -> Tuple[bytes, Response]:
        return do(
            self._client,
            RAW,
            with_path(
                "projects/%s/jobs/artifacts/%s/raw/%s",
                parse_id(pid),
                ref_name,
                NoEscape(artifact_path),
            ),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_trace_file(
        self, pid: IDLike, job_id: int, *options: RequestOption
    ) -> Tuple[bytes, Response]:
        """Download the log of a job."""
        return do(
            self._client,
            RAW,
            with_path("projects/%s/jobs/%d/trace", parse_id(pid), job_id),
            with_request_opts(*options),
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def _job_action(
        self, pid: IDLike, job_id: int, action: str, options: Tuple[RequestOption, ...]
    ) -> Tuple[Job, Response]:
        return do(
            self._client,
            One(Job),
            with_method("POST"),
            with_path("projects/%s/jobs/%d/" + action, parse_id(pid), job_id),
            with_request_opts(*options),
        )

    def cancel_job(self, pid: IDLike, job_id: int, *options: RequestOption) -> Tuple[Job, Response]:
        return self._job_action(pid, job_id, "cancel", options)

    def retry_job(self, pid: IDLike, job_id: int, *options: RequestOption) -> Tuple[Job, Response]:
        return self._job_action(pid, job_id, "retry", options)

    def erase_job(self, pid: IDLike, job_id: int, *options: RequestOption) -> Tuple[Job, Response]:
        """Erase the log and artifacts of a job."""
        return self._job_action(pid, job_id, "erase", options)

    def keep_artifacts(
        self, pid: IDLike, job_id: int, *options: RequestOption
    ) -> Tuple[Job, Response]:
        """Prevent the artifacts of a job from expiring."""
        return self._job_action(pid, job_id, "artifacts/keep", options)

    def play_job(
        self,
        pid: IDLike,
        job_id: int,
        opt: Optional[PlayJobOptions] = None,
        *options: RequestOption,
    ) -> Tuple[Job, Response]:
        """Trigger a manual job, optionally passing job variables.

        GitLab API docs:
        https://docs.gitlab.com/api/jobs/#run-a-job
        """
        return do(
            self._client,
            One(Job),
            with_method("POST"),
            with_path("projects/%s/jobs/%d/play", parse_id(pid), job_id),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_artifacts(self, pid: IDLike, job_id: int, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/jobs/%d/artifacts", parse_id(pid), job_id),
            with_request_opts(*options),
        )
        return resp

    def delete_project_artifacts(self, pid: IDLike, *options: RequestOption) -> Response:
        """Delete every deletable artifact of a project (asynchronously, 202)."""
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("projects/%s/artifacts", parse_id(pid)),
            with_request_opts(*options),
        )
        return resp
