"""
To-do items of the authenticated user.

GitLab API docs: https://docs.gitlab.com/api/todos/
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Tuple

from ..dispatch import (
    NO_CONTENT,
    Many,
    do,
    with_api_opts,
    with_method,
    with_path,
    with_request_opts,
)
from ..models import BasicProject, BasicUser, Resource
from ..options import ListOptions
from ..request import RequestOption
from ..response import Response
from .base import Service


class Todo(Resource):
    id: int = 0
    project: Optional[BasicProject] = None
    author: Optional[BasicUser] = None
    action_name: Optional[str] = None
    target_type: Optional[str] = None
    target: Optional[Any] = None
    target_url: Optional[str] = None
    body: Optional[str] = None
    state: Optional[str] = None
    created_at: Optional[datetime] = None


class ListTodosOptions(ListOptions):
    action: Optional[str] = None
    author_id: Optional[int] = None
    project_id: Optional[int] = None
    group_id: Optional[int] = None
    state: Optional[str] = None
    type: Optional[str] = None


class TodosService(Service):
    def list_todos(
        self, opt: Optional[ListTodosOptions] = None, *options: RequestOption
    ) -> Tuple[List[Todo], Response]:
        """Get the pending to-do items of the current user.

        GitLab API docs:
        https://docs.gitlab.com/api/todos/#get-a-list-of-to-do-items
        """
        return do(
            self._client,
            Many(Todo),
            with_path("todos"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def mark_todo_as_done(self, todo_id: int, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("POST"),
            with_path("todos/%d/mark_as_done", todo_id),
            with_request_opts(*options),
        )
        return resp

    def mark_all_todos_as_done(self, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("POST"),
            with_path("todos/mark_as_done"),
            with_request_opts(*options),
        )
        return resp
