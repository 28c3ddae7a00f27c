"""Response envelope: primary data, includes, errors and paging meta.

The X API v2 returns expanded entities out of line, in `includes`, keyed by
entity kind. Which lists are populated depends on the expansions that were
requested.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from xapi_fields.models.common import XModel
from xapi_fields.models.media import XMedia, XPlace, XPoll
from xapi_fields.models.tweet import XTweet
from xapi_fields.models.user import XUser

T = TypeVar("T")


class XIncludes(XModel):
    """Entities pulled in by expansions."""

    tweets: list[XTweet] = []
    users: list[XUser] = []
    media: list[XMedia] = []
    polls: list[XPoll] = []
    places: list[XPlace] = []

    def tweet(self, tweet_id: str) -> XTweet | None:
        return next((t for t in self.tweets if t.id == tweet_id), None)

    def user(self, user_id: str) -> XUser | None:
        return next((u for u in self.users if u.id == user_id), None)


class XApiError(XModel):
    """A partial error, e.g. one id in a batch lookup not found."""

    title: str = ""
    detail: str = ""
    type: str = ""
    resource_type: str | None = None
    resource_id: str | None = None
    parameter: str | None = None
    value: str | None = None


class XPaginationMeta(XModel):
    """Pagination metadata from X API v2 responses."""

    result_count: int = 0
    next_token: str | None = None
    previous_token: str | None = None
    newest_id: str | None = None
    oldest_id: str | None = None


class XResponse(XModel, Generic[T]):
    """`{"data": ..., "includes": ..., "errors": [...], "meta": ...}`."""

    data: T | None = None
    includes: XIncludes = XIncludes()
    errors: list[XApiError] = []
    meta: XPaginationMeta | None = None
