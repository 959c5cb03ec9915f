import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ._utils.constants import (
    ENV_BASE_URL,
    ENV_FOLLOW_REDIRECTS,
    ENV_MAX_WORKERS,
    ENV_TIMEOUT,
)

_TRUTHY = ("1", "true", "yes", "on")


class ClientConfig(BaseModel):
    """Settings of the HTTP client used by :class:`HttpxClientAdapter`."""

    base_url: Optional[str] = None
    timeout: float = 30.0
    follow_redirects: bool = True
    default_headers: dict[str, str] = Field(default_factory=dict)
    max_workers: Optional[int] = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        return value.rstrip("/") if value else None

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be greater than zero")
        return value

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from ``RESTSPEC_*`` environment variables."""
        values: dict[str, object] = {}

        base_url = os.getenv(ENV_BASE_URL)
        if base_url:
            values["base_url"] = base_url

        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout

        follow_redirects = os.getenv(ENV_FOLLOW_REDIRECTS)
        if follow_redirects:
            values["follow_redirects"] = follow_redirects.lower() in _TRUTHY

        max_workers = os.getenv(ENV_MAX_WORKERS)
        if max_workers:
            values["max_workers"] = max_workers

        return cls.model_validate(values)
