"""
Metric images attached to alerts.

GitLab API docs: https://docs.gitlab.com/api/alert_management_alerts/
"""

from __future__ import annotations

from datetime import datetime
from typing import IO, List, Optional, Tuple, Union

from ..dispatch import (
    NO_CONTENT,
    Many,
    One,
    do,
    with_api_opts,
    with_method,
    with_path,
    with_request_opts,
    with_upload,
)
from ..identifiers import IDLike, parse_id
from ..models import Resource
from ..options import ListOptions, Options
from ..request import RequestOption
from ..response import Response
from .base import Service


class MetricImage(Resource):
    id: int = 0
    created_at: Optional[datetime] = None
    filename: Optional[str] = None
    file_path: Optional[str] = None
    url: Optional[str] = None
    url_text: Optional[str] = None


class UploadMetricImageOptions(Options):
    url: Optional[str] = None
    url_text: Optional[str] = None


class ListMetricImagesOptions(ListOptions):
    pass


class UpdateMetricImageOptions(Options):
    url: Optional[str] = None
    url_text: Optional[str] = None


class AlertManagementService(Service):
    def upload_metric_image(
        self,
        pid: IDLike,
        alert_iid: int,
        content: Union[bytes, IO[bytes]],
        filename: str,
        opt: Optional[UploadMetricImageOptions] = None,
        *options: RequestOption,
    ) -> Tuple[MetricImage, Response]:
        """Upload a metric image to an alert as ``multipart/form-data``.

        GitLab API docs:
        https://docs.gitlab.com/api/alert_management_alerts/#upload-metric-image
        """
        return do(
            self._client,
            One(MetricImage),
            with_method("POST"),
            with_path(
                "projects/%s/alert_management_alerts/%d/metric_images", parse_id(pid), alert_iid
            ),
            with_upload(content, filename),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def list_metric_images(
        self,
        pid: IDLike,
        alert_iid: int,
        opt: Optional[ListMetricImagesOptions] = None,
        *options: RequestOption,
    ) -> Tuple[List[MetricImage], Response]:
        return do(
            self._client,
            Many(MetricImage),
            with_path(
                "projects/%s/alert_management_alerts/%d/metric_images", parse_id(pid), alert_iid
            ),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def update_metric_image(
        self,
        pid: IDLike,
        alert_iid: int,
        image_id: int,
        opt: UpdateMetricImageOptions,
        *options: RequestOption,
    ) -> Tuple[MetricImage, Response]:
        return do(
            self._client,
            One(MetricImage),
            with_method("PUT"),
            with_path(
                "projects/%s/alert_management_alerts/%d/metric_images/%d",
                parse_id(pid),
                alert_iid,
                image_id,
            ),
            with_api_opts(opt),
            with_request_opts(*options),
        )

    def delete_metric_image(
        self, pid: IDLike, alert_iid: int, image_id: int, *options: RequestOption
    ) -> Response:
        _, resp = do(
            self._client,
            NO_CONTENT,
            with_method("DELETE"),
            with_path(
                "projects/%s/alert_management_alerts/%d/metric_images/%d",
                parse_id(pid),
                alert_iid,
                image_id,
            ),
            with_request_opts(*options),
        )
        return resp
