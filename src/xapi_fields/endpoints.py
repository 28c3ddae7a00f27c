"""Request builders for the X API v2 lookup endpoints.

Each builder composes the field/expansion parameters for its root entity
and returns an unsent `httpx.Request`. Sending it, authenticating it and
following pagination tokens is left to the caller's HTTP client:

    request = get_user("2244994945", fields=FieldSelector.of(USER, "created_at"))
    response = await client.send(request)
    user = XResponse[XUser].model_validate(response.json())

Base URL: https://api.x.com/2/ (override with ClientConfig / X_API_BASE_URL)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import httpx

from xapi_fields.composer import ExtraParameters, build, to_httpx_params
from xapi_fields.config import ClientConfig
from xapi_fields.errors import RequestValidationError, SchemaViolation
from xapi_fields.schema import TWEET, USER
from xapi_fields.schema.base import EntityType
from xapi_fields.selectors import ExpansionSelector, FieldSelector

logger = logging.getLogger(__name__)


def get_user(
    user_id: str,
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET users/{id}"""
    user_id = _require_id(user_id, "user_id")
    return _request(USER, f"users/{user_id}", fields, expansions, config=config)


def get_users(
    user_ids: Sequence[str],
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET users?ids=..."""
    config = config or ClientConfig()
    ids = _require_ids(user_ids, "user_ids", config.max_ids_per_request)
    return _request(USER, "users", fields, expansions, ("ids", ids), config=config)


def get_user_by_username(
    username: str,
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET users/by/username/{username}"""
    username = _require_username(username)
    return _request(USER, f"users/by/username/{username}", fields, expansions, config=config)


def get_users_by_usernames(
    usernames: Sequence[str],
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET users/by?usernames=..."""
    config = config or ClientConfig()
    names = _require_ids(
        usernames, "usernames", config.max_ids_per_request, check=_require_username
    )
    return _request(USER, "users/by", fields, expansions, ("usernames", names), config=config)


def get_tweet(
    tweet_id: str,
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET tweets/{id}"""
    tweet_id = _require_id(tweet_id, "tweet_id")
    return _request(TWEET, f"tweets/{tweet_id}", fields, expansions, config=config)


def get_tweets(
    tweet_ids: Sequence[str],
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET tweets?ids=..."""
    config = config or ClientConfig()
    ids = _require_ids(tweet_ids, "tweet_ids", config.max_ids_per_request)
    return _request(TWEET, "tweets", fields, expansions, ("ids", ids), config=config)


def get_user_tweets(
    user_id: str,
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *others: ExtraParameters,
    config: ClientConfig | None = None,
) -> httpx.Request:
    """GET users/{id}/tweets

    Paging parameters (`max_results`, `pagination_token`, `start_time`, ...)
    are passed through `others` untouched.
    """
    user_id = _require_id(user_id, "user_id")
    return _request(TWEET, f"users/{user_id}/tweets", fields, expansions, *others, config=config)


def _request(
    root: EntityType,
    path: str,
    fields: FieldSelector | None,
    expansions: ExpansionSelector | None,
    *others: ExtraParameters,
    config: ClientConfig | None = None,
) -> httpx.Request:
    for selector in (fields, expansions):
        if selector is not None and selector.entity != root:
            raise SchemaViolation(
                f"Endpoint '{path}' returns {root.name} objects, "
                f"got a {selector.entity.name} selector"
            )
    config = config or ClientConfig()
    params = build(fields, expansions, *others)
    url = httpx.URL(config.base_url).join(path)
    logger.debug(f"X API: GET {path} with {len(params)} query parameters")
    return httpx.Request("GET", url, params=to_httpx_params(params))


# Characters that would end the path segment once joined onto the base URL
_RESERVED_PATH_CHARS = ("/", "?", "#")


def _require_id(value: str, name: str) -> str:
    cleaned = "" if value is None else str(value).strip()
    if not cleaned:
        raise RequestValidationError(f"{name} must be non-empty")
    for char in _RESERVED_PATH_CHARS:
        if char in cleaned:
            raise RequestValidationError(f"{name} must not contain '{char}': {cleaned!r}")
    return cleaned


def _require_username(value: str, name: str = "username") -> str:
    """Like _require_id, with a leading '@' dropped."""
    if isinstance(value, str):
        value = value.strip().lstrip("@")
    return _require_id(value, name)


def _require_ids(
    values: Sequence[str],
    name: str,
    limit: int,
    check: Callable[[str, str], str] = _require_id,
) -> str:
    if isinstance(values, str):
        values = [values]
    cleaned = [check(v, name) for v in values]
    if not cleaned:
        raise RequestValidationError(f"{name} must contain at least one entry")
    unique = list(dict.fromkeys(cleaned))
    if len(unique) > limit:
        raise RequestValidationError(f"{name} accepts at most {limit} entries, got {len(unique)}")
    return ",".join(unique)
