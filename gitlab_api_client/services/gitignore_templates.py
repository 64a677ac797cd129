"""
``.gitignore`` templates.

GitLab API docs: https://docs.gitlab.com/api/templates/gitignores/
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..dispatch import Many, One, do, with_api_opts, with_path, with_request_opts
from ..models import Resource
from ..options import ListOptions
from ..request import RequestOption
from ..response import Response
from .base import Service


class GitIgnoreTemplateListItem(Resource):
    key: Optional[str] = None
    name: Optional[str] = None


class GitIgnoreTemplate(Resource):
    name: Optional[str] = None
    content: Optional[str] = None


class ListTemplatesOptions(ListOptions):
    pass


class GitIgnoreTemplatesService(Service):
    def list_templates(
        self, opt: Optional[ListTemplatesOptions] = None, *options: RequestOption
    ) -> Tuple[List[GitIgnoreTemplateListItem], Response]:
        return do(
            self._client,
            Many(GitIgnoreTemplateListItem),
            with_path("templates/gitignores"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_template(self, key: str, *options: RequestOption) -> Tuple[GitIgnoreTemplate, Response]:
        """Get a single template; ``key`` is escaped as one path segment."""
        return do(
            self._client,
            One(GitIgnoreTemplate),
            with_path("templates/gitignores/%s", key),
            with_request_opts(*options),
        )
