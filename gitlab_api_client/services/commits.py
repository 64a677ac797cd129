"""
Repository commits, their diffs, comments, statuses and signatures.

GitLab API docs: https://docs.gitlab.com/api/commits/
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import Field

from ..dispatch import (
    Many,
    One,
    do,
    with_api_opts,
    with_method,
    with_path,
    with_request_opts,
)
from ..exceptions import GitLabRequestError
from ..identifiers import IDLike, parse_id
from ..models import BasicUser, BuildStateValue, Commit, Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class FileActionValue(str, Enum):
    CREATE = "create"
    DELETE = "delete"
    MOVE = "move"
    UPDATE = "update"
    CHMOD = "chmod"


class CommitRef(Resource):
    type: Optional[str] = None
    name: Optional[str] = None


class Diff(Resource):
    diff: Optional[str] = None
    new_path: Optional[str] = None
    old_path: Optional[str] = None
    a_mode: Optional[str] = None
    b_mode: Optional[str] = None
    new_file: bool = False
    renamed_file: bool = False
    deleted_file: bool = False


class Author(Resource):
    id: int = 0
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    blocked: bool = False
    created_at: Optional[datetime] = None


class CommitComment(Resource):
    note: Optional[str] = None
    path: Optional[str] = None
    line: Optional[int] = None
    line_type: Optional[str] = None
    author: Optional[Author] = None


class CommitStatus(Resource):
    id: int = 0
    sha: Optional[str] = None
    ref: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    name: Optional[str] = None
    allow_failure: bool = False
    coverage: Optional[float] = None
    pipeline_id: int = 0
    author: Optional[Author] = None
    description: Optional[str] = None
    target_url: Optional[str] = None


class BasicMergeRequest(Resource):
    id: int = 0
    iid: int = 0
    project_id: int = 0
    title: Optional[str] = None
    state: Optional[str] = None
    source_branch: Optional[str] = None
    target_branch: Optional[str] = None
    author: Optional[BasicUser] = None
    web_url: Optional[str] = None
    created_at: Optional[datetime] = None


class GPGSignature(Resource):
    key_id: int = Field(default=0, alias="gpg_key_id")
    key_primary_key_id: Optional[str] = Field(default=None, alias="gpg_key_primary_keyid")
    key_user_name: Optional[str] = Field(default=None, alias="gpg_key_user_name")
    key_user_email: Optional[str] = Field(default=None, alias="gpg_key_user_email")
    verification_status: Optional[str] = None
    key_subkey_id: Optional[int] = Field(default=None, alias="gpg_key_subkey_id")


class ListCommitsOptions(ListOptions):
    ref_name: Optional[str] = None
    since: Optional[datetime] = None
    until: Optional[datetime] = None
    path: Optional[str] = None
    author: Optional[str] = None
    all: Optional[bool] = None
    with_stats: Optional[bool] = None
    first_parent: Optional[bool] = None
    trailers: Optional[bool] = None


class GetCommitRefsOptions(ListOptions):
    type: Optional[str] = None


class GetCommitOptions(Options):
    stats: Optional[bool] = None


class CommitActionOptions(Options):
    action: Optional[FileActionValue] = None
    file_path: Optional[str] = None
    previous_path: Optional[str] = None
    content: Optional[str] = None
    encoding: Optional[str] = None
    last_commit_id: Optional[str] = None
    execute_filemode: Optional[bool] = None


class CreateCommitOptions(Options):
    branch: Optional[str] = None
    commit_message: Optional[str] = None
    start_branch: Optional[str] = None
    start_sha: Optional[str] = None
    start_project: Optional[str] = None
    actions: Optional[List[CommitActionOptions]] = None
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    stats: Optional[bool] = None
    force: Optional[bool] = None


class GetCommitDiffOptions(ListOptions):
    unidiff: Optional[bool] = None


class GetCommitCommentsOptions(ListOptions):
    pass


class PostCommitCommentOptions(Options):
    note: Optional[str] = None
    path: Optional[str] = None
    line: Optional[int] = None
    line_type: Optional[str] = None


class GetCommitStatusesOptions(ListOptions):
    ref: Optional[str] = None
    stage: Optional[str] = None
    name: Optional[str] = None
    pipeline_id: Optional[int] = None
    all: Optional[bool] = None


class SetCommitStatusOptions(Options):
    state: BuildStateValue
    ref: Optional[str] = None
    name: Optional[str] = None
    context: Optional[str] = None
    target_url: Optional[str] = None
    description: Optional[str] = None
    coverage: Optional[float] = None
    pipeline_id: Optional[int] = None


class CherryPickCommitOptions(Options):
    branch: Optional[str] = None
    dry_run: Optional[bool] = None
    message: Optional[str] = None


class RevertCommitOptions(Options):
    branch: Optional[str] = None


class CommitsService(Service):
    """Handles the repository commit endpoints of a project.

    ``sha`` arguments accept a commit SHA, a branch or a tag name; they
    are escaped as a single path segment.
    """

    def list_commits(
        self,
        pid: IDLike,
        opt: Optional[ListCommitsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Commit], Response]:
        """Get the commits of a project's repository.

        GitLab API docs:
        https://docs.gitlab.com/api/commits/#list-repository-commits
        """
        return do(
            self._client,
            Many(Commit),
            with_path("projects/%s/repository/commits", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_commit_refs(
        self,
        pid: IDLike,
        sha: str,
        opt: Optional[GetCommitRefsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[CommitRef], Response]:
        """Get the branches and tags a commit is pushed to."""
        return do(
            self._client,
            Many(CommitRef),
            with_path("projects/%s/repository/commits/%s/refs", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_commit(
        self,
        pid: IDLike,
        sha: str,
        opt: Optional[GetCommitOptions] = None,
        *options: RequestOption,
    ) -> Tuple[Commit, Response]:
        """Get a single commit.

        Raises
        ------
        GitLabRequestError
            If ``sha`` is empty.  Nothing is sent in that case.
        """
        if not sha:
            raise GitLabRequestError("sha must be a non-empty string")
        return do(
            self._client,
            One(Commit),
            with_path("projects/%s/repository/commits/%s", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def create_commit(
        self, pid: IDLike, opt: CreateCommitOptions, *options: RequestOption
    ) -> Tuple[Commit, Response]:
        """Create a commit with one or more file actions.

        GitLab API docs:
        https://docs.gitlab.com/api/commits/#create-a-commit-with-multiple-files-and-actions
        """
        return do(
            self._client,
            One(Commit),
            with_method("POST"),
            with_path("projects/%s/repository/commits", parse_id(pid)),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_commit_diff(
        self,
        pid: IDLike,
        sha: str,
        opt: Optional[GetCommitDiffOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[Diff], Response]:
        return do(
            self._client,
            Many(Diff),
            with_path("projects/%s/repository/commits/%s/diff", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_commit_comments(
        self,
        pid: IDLike,
        sha: str,
        opt: Optional[GetCommitCommentsOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[CommitComment], Response]:
        return do(
            self._client,
            Many(CommitComment),
            with_path("projects/%s/repository/commits/%s/comments", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def post_commit_comment(
        self, pid: IDLike, sha: str, opt: PostCommitCommentOptions, *options: RequestOption
    ) -> Tuple[CommitComment, Response]:
        """Comment on a commit, optionally on a line of one of its files."""
        return do(
            self._client,
            One(CommitComment),
            with_method("POST"),
            with_path("projects/%s/repository/commits/%s/comments", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_commit_statuses(
        self,
        pid: IDLike,
        sha: str,
        opt: Optional[GetCommitStatusesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[CommitStatus], Response]:
        return do(
            self._client,
            Many(CommitStatus),
            with_path("projects/%s/repository/commits/%s/statuses", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def set_commit_status(
        self, pid: IDLike, sha: str, opt: SetCommitStatusOptions, *options: RequestOption
    ) -> Tuple[CommitStatus, Response]:
        """Add or update the status of a commit (e.g. from an external CI).

        GitLab API docs:
        https://docs.gitlab.com/api/commits/#set-the-pipeline-status-of-a-commit
        """
        return do(
            self._client,
            One(CommitStatus),
            with_method("POST"),
            with_path("projects/%s/statuses/%s", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_merge_requests_by_commit(
        self, pid: IDLike, sha: str, *options: RequestOption
    ) -> Tuple[List[BasicMergeRequest], Response]:
        return do(
            self._client,
            Many(BasicMergeRequest),
            with_path("projects/%s/repository/commits/%s/merge_requests", parse_id(pid), sha),
            with_request_opts(*options),
        )

    def cherry_pick_commit(
        self,
        pid: IDLike,
        sha: str,
        opt: CherryPickCommitOptions,
        *options: RequestOption,
    ) -> Tuple[Commit, Response]:
        return do(
            self._client,
            One(Commit),
            with_method("POST"),
            with_path("projects/%s/repository/commits/%s/cherry_pick", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def revert_commit(
        self, pid: IDLike, sha: str, opt: RevertCommitOptions, *options: RequestOption
    ) -> Tuple[Commit, Response]:
        return do(
            self._client,
            One(Commit),
            with_method("POST"),
            with_path("projects/%s/repository/commits/%s/revert", parse_id(pid), sha),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_gpg_signature(
        self, pid: IDLike, sha: str, *options: RequestOption
    ) -> Tuple[GPGSignature, Response]:
        return do(
            self._client,
            One(GPGSignature),
            with_path("projects/%s/repository/commits/%s/signature", parse_id(pid), sha),
            with_request_opts(*options),
        )
