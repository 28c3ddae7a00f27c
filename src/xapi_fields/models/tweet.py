"""Tweet payload model.

Only `id` and `text` are guaranteed (plus `edit_history_tweet_ids`, which
the API now always returns). Metrics blocks other than `public_metrics`
need user-context auth and are usually absent.
"""

from datetime import datetime
from typing import Any

from xapi_fields.models.common import (
    AnnotationEntity,
    MentionEntity,
    TagEntity,
    URLEntityDetails,
    WithheldInformation,
    XModel,
)


class XTweetMetrics(XModel):
    """Public engagement metrics for a tweet."""

    retweet_count: int = 0
    reply_count: int = 0
    like_count: int = 0
    quote_count: int = 0
    bookmark_count: int = 0
    impression_count: int = 0


class XTweetPrivateMetrics(XModel):
    """Non-public, organic or promoted metrics. Counts differ per block."""

    impression_count: int = 0
    url_link_clicks: int | None = None
    user_profile_clicks: int | None = None
    retweet_count: int | None = None
    reply_count: int | None = None
    like_count: int | None = None


class TweetAttachments(XModel):
    media_keys: list[str] = []
    poll_ids: list[str] = []


class TweetGeo(XModel):
    place_id: str | None = None
    coordinates: dict[str, Any] | None = None


class ReferencedTweet(XModel):
    """A retweeted, quoted or replied-to tweet."""

    type: str
    id: str


class TweetEntities(XModel):
    annotations: list[AnnotationEntity] | None = None
    urls: list[URLEntityDetails] | None = None
    hashtags: list[TagEntity] | None = None
    mentions: list[MentionEntity] | None = None
    cashtags: list[TagEntity] | None = None


class XTweet(XModel):
    """A tweet from the X API v2."""

    id: str
    text: str
    edit_history_tweet_ids: list[str] = []
    attachments: TweetAttachments | None = None
    author_id: str | None = None
    context_annotations: list[dict[str, Any]] | None = None
    conversation_id: str | None = None
    created_at: datetime | None = None
    entities: TweetEntities | None = None
    geo: TweetGeo | None = None
    in_reply_to_user_id: str | None = None
    lang: str | None = None
    non_public_metrics: XTweetPrivateMetrics | None = None
    organic_metrics: XTweetPrivateMetrics | None = None
    possibly_sensitive: bool | None = None
    promoted_metrics: XTweetPrivateMetrics | None = None
    public_metrics: XTweetMetrics | None = None
    referenced_tweets: list[ReferencedTweet] | None = None
    reply_settings: str | None = None
    source: str | None = None
    withheld: WithheldInformation | None = None
