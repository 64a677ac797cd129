"""
Instance-wide broadcast messages (administrators only for writes).

GitLab API docs: https://docs.gitlab.com/api/broadcast_messages/
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
from ..models import AccessLevelValue, Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class BroadcastMessage(Resource):
    id: int = 0
    message: Optional[str] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    font: Optional[str] = None
    active: bool = False
    target_access_levels: List[AccessLevelValue] = []
    target_path: Optional[str] = None
    broadcast_type: Optional[str] = None
    dismissable: bool = False
    theme: Optional[str] = None


class ListBroadcastMessagesOptions(ListOptions):
    pass


class CreateBroadcastMessageOptions(Options):
    message: Optional[str] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    font: Optional[str] = None
    target_access_levels: Optional[List[AccessLevelValue]] = None
    target_path: Optional[str] = None
    broadcast_type: Optional[str] = None
    dismissable: Optional[bool] = None
    theme: Optional[str] = None


class UpdateBroadcastMessageOptions(CreateBroadcastMessageOptions):
    pass


class BroadcastMessagesService(Service):
    def list_broadcast_messages(
        self, opt: Optional[ListBroadcastMessagesOptions] = None, *options: RequestOption
    ) -> Tuple[List[BroadcastMessage], Response]:
        return do(
            self._client,
            Many(BroadcastMessage),
            with_path("broadcast_messages"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def get_broadcast_message(
        self, broadcast: int, *options: RequestOption
    ) -> Tuple[BroadcastMessage, Response]:
        return do(
            self._client,
            One(BroadcastMessage),
            with_path("broadcast_messages/%d", broadcast),
            with_request_opts(*options),
        )

    def create_broadcast_message(
        self, opt: CreateBroadcastMessageOptions, *options: RequestOption
    ) -> Tuple[BroadcastMessage, Response]:
        """Create a broadcast message.

        GitLab API docs:
        https://docs.gitlab.com/api/broadcast_messages/#create-a-broadcast-message
        """
        return do(
            self._client,
            One(BroadcastMessage),
            with_method("POST"),
            with_path("broadcast_messages"),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def update_broadcast_message(
        self, broadcast: int, opt: UpdateBroadcastMessageOptions, *options: RequestOption
    ) -> Tuple[BroadcastMessage, Response]:
        return do(
            self._client,
            One(BroadcastMessage),
            with_method("PUT"),
            with_path("broadcast_messages/%d", broadcast),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_broadcast_message(self, broadcast: int, *options: RequestOption) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path("broadcast_messages/%d", broadcast),
            with_request_opts(*options),
        )
        return resp
