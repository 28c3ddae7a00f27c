"""User payload model.

`id`, `name` and `username` always come back. Everything else is present
only when requested through `user.fields`, so it defaults to None.
"""

from datetime import datetime

from xapi_fields.models.common import (
    MentionEntity,
    TagEntity,
    URLEntityDetails,
    WithheldInformation,
    XModel,
)


class UserProfileMetrics(XModel):
    """Activity counts for a user."""

    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0
    listed_count: int = 0


class URLEntity(XModel):
    urls: list[URLEntityDetails] | None = None


class DescriptionEntity(XModel):
    """Special-meaning text inside a user's bio."""

    urls: list[URLEntityDetails] | None = None
    hashtags: list[TagEntity] | None = None
    mentions: list[MentionEntity] | None = None
    cashtags: list[TagEntity] | None = None


class UserEntities(XModel):
    url: URLEntity | None = None
    description: DescriptionEntity | None = None


class XUser(XModel):
    """A user profile from the X API v2."""

    id: str
    name: str
    username: str
    created_at: datetime | None = None
    description: str | None = None
    entities: UserEntities | None = None
    location: str | None = None
    pinned_tweet_id: str | None = None
    profile_image_url: str | None = None
    protected: bool | None = None
    public_metrics: UserProfileMetrics | None = None
    url: str | None = None
    verified: bool | None = None
    withheld: WithheldInformation | None = None
