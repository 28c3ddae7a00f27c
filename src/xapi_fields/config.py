"""Client configuration.

Only request construction is configured here. Credentials, timeouts and
retries belong to whichever HTTP layer sends the requests.

Environment variables:
  - X_API_BASE_URL: API root, default https://api.x.com/2/
  - X_API_MAX_IDS: cap on ids/usernames per batch lookup, default 100
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://api.x.com/2/"
DEFAULT_MAX_IDS = 100


class ClientConfig(BaseModel):
    """Settings used by the request builders."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    max_ids_per_request: int = DEFAULT_MAX_IDS

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        # httpx joins relative paths onto the last path segment otherwise
        v = v.strip()
        return v if v.endswith("/") else f"{v}/"

    @field_validator("max_ids_per_request")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_ids_per_request must be positive")
        return v

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Read overrides from the environment.

        Unset, non-numeric or non-positive values fall back to the defaults.
        """
        base_url = os.environ.get("X_API_BASE_URL", "").strip() or DEFAULT_BASE_URL
        raw_max = os.environ.get("X_API_MAX_IDS", "").strip()
        try:
            max_ids = int(raw_max) if raw_max else DEFAULT_MAX_IDS
        except ValueError:
            max_ids = DEFAULT_MAX_IDS
        if max_ids <= 0:
            max_ids = DEFAULT_MAX_IDS
        return cls(base_url=base_url, max_ids_per_request=max_ids)
