"""Shared test fixtures.

Provides:
  - JSON fixture loading helpers (canned X API v2 responses)
  - Selectors for the user/pinned-tweet scenario used across test modules
  - Environment isolation for ClientConfig.from_env
"""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from xapi_fields.schema import TWEET, USER, UserExpansion
from xapi_fields.selectors import ExpansionSelector, FieldSelector

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict[str, Any]:
    """Load a JSON fixture file by name."""
    return json.loads((FIXTURES_DIR / name).read_text())


@pytest.fixture
def clean_env():
    """Remove X_API_* overrides so config defaults apply."""
    with patch.dict("os.environ", {}, clear=False) as env:
        env.pop("X_API_BASE_URL", None)
        env.pop("X_API_MAX_IDS", None)
        yield env


@pytest.fixture
def user_fields() -> FieldSelector:
    return FieldSelector.empty(USER).add("created_at").add("protected")


@pytest.fixture
def pinned_tweet_expansion() -> ExpansionSelector:
    return ExpansionSelector.empty(USER).add(
        UserExpansion.pinned_tweet_id,
        FieldSelector.empty(TWEET).add("created_at"),
    )
