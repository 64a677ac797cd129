from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Dict, Optional
from urllib.parse import urlencode

import pytest
from pydantic import Field, ValidationError

from gitlab_api_client import ListOptions, Options
from gitlab_api_client.options import format_value
from gitlab_api_client.services.audit_events import ListAuditEventsOptions
from gitlab_api_client.services.environments import CreateEnvironmentOptions
from gitlab_api_client.services.jobs import (
    BuildStateValue,
    JobVariableOptions,
    ListJobsOptions,
    PlayJobOptions,
)


class _LabelOptions(Options):
    labels: Optional[Dict[str, str]] = None
    not_: Optional[str] = Field(default=None, alias="not")


def test_unset_fields_are_omitted():
    assert ListOptions().to_query() == []
    assert ListOptions().to_json() == "{}"


def test_list_options_only_sends_given_pagination_keys():
    opt = ListOptions(page=2, per_page=20)
    assert opt.to_query() == [("page", "2"), ("per_page", "20")]
    assert urlencode(opt.to_query()) == "page=2&per_page=20"


def test_json_body_is_compact_and_omits_none():
    assert CreateEnvironmentOptions(name="foo").to_json() == '{"name":"foo"}'


def test_lists_use_bracket_keys():
    opt = ListJobsOptions(scope=[BuildStateValue.FAILED, BuildStateValue.SUCCESS])
    assert opt.to_query() == [("scope[]", "failed"), ("scope[]", "success")]


def test_booleans_render_lowercase():
    assert ListJobsOptions(include_retried=True).to_query() == [("include_retried", "true")]


def test_datetimes_render_as_rfc3339():
    opt = ListAuditEventsOptions(created_after=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    assert opt.to_query() == [("created_after", "2024-01-02T03:04:05Z")]


def test_format_value_scalars():
    assert format_value(False) == "false"
    assert format_value(date(2024, 5, 6)) == "2024-05-06"
    assert format_value(BuildStateValue.MANUAL) == "manual"
    assert format_value(7) == "7"


def test_mappings_and_aliases():
    opt = _LabelOptions(labels={"env": "prod"}, not_="x")
    assert opt.to_query() == [("labels[env]", "prod"), ("not", "x")]
    assert opt.to_json() == '{"labels":{"env":"prod"},"not":"x"}'


def test_nested_options_in_json_body():
    opt = PlayJobOptions(job_variables_attributes=[JobVariableOptions(key="A", value="1")])
    assert opt.to_json() == '{"job_variables_attributes":[{"key":"A","value":"1"}]}'


def test_query_is_deterministic():
    first = ListJobsOptions(per_page=5, include_retried=False, page=1, sort="asc").to_query()
    second = ListJobsOptions(sort="asc", page=1, include_retried=False, per_page=5).to_query()
    assert urlencode(first) == urlencode(second)
    assert [key for key, _ in first] == sorted(key for key, _ in first)


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        ListOptions(pgae=2)


def test_naive_datetimes_are_sent_as_utc():
    opt = ListAuditEventsOptions(created_after=datetime(2024, 1, 2, 3, 4, 5))
    assert opt.to_query() == [("created_after", "2024-01-02T03:04:05Z")]
    assert opt.to_json() == '{"created_after":"2024-01-02T03:04:05Z"}'


def test_aware_datetimes_keep_their_offset():
    tz = timezone(timedelta(hours=2))
    opt = ListAuditEventsOptions(created_after=datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz))
    assert opt.to_query() == [("created_after", "2024-01-02T03:04:05+02:00")]


def test_format_value_naive_datetime():
    assert format_value(datetime(2024, 1, 2)) == "2024-01-02T00:00:00Z"
