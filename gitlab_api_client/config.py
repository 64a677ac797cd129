"""Client configuration read from the environment.

Every setting can be given as ``GITLAB_<NAME>`` in the process
environment or in a ``.env`` file in the working directory, e.g.
``GITLAB_TOKEN`` or ``GITLAB_BASE_URL``.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GITLAB_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    token: Optional[str] = Field(
        default=None,
        description="Personal, OAuth or CI job token.",
    )
    base_url: str = Field(
        default="https://gitlab.com",
        min_length=8,
        description="GitLab instance URL; /api/v4/ is appended when missing.",
    )
    auth_type: Literal["private", "oauth", "job"] = Field(
        default="private",
        description="Which header carries the token.",
    )
    timeout_seconds: Optional[float] = Field(
        default=30.0,
        gt=0,
        description="Default timeout per request (seconds).",
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        le=10,
        description="Transport-level retries on connection errors, 429 and 5xx.",
    )
    user_agent: str = Field(
        default="gitlab-api-client",
        min_length=1,
    )
