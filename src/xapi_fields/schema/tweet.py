"""Tweet entity schema.

Tweets are the hub of the graph: every other entity type is reachable from
a tweet through one expansion, and `referenced_tweets.id` loops back to the
tweet type itself.
"""

from enum import Enum

from xapi_fields.schema.base import EntityType, ExpansionRelation


class TweetField(str, Enum):
    """Optional fields of a tweet, requested through `tweet.fields`."""

    attachments = "attachments"
    author_id = "author_id"
    context_annotations = "context_annotations"
    conversation_id = "conversation_id"
    created_at = "created_at"
    entities = "entities"
    geo = "geo"
    in_reply_to_user_id = "in_reply_to_user_id"
    lang = "lang"
    non_public_metrics = "non_public_metrics"
    organic_metrics = "organic_metrics"
    possibly_sensitive = "possibly_sensitive"
    promoted_metrics = "promoted_metrics"
    public_metrics = "public_metrics"
    referenced_tweets = "referenced_tweets"
    reply_settings = "reply_settings"
    source = "source"
    withheld = "withheld"


class TweetExpansion(str, Enum):
    """Relations a tweet can be expanded along."""

    attachments_poll_ids = "attachments.poll_ids"
    attachments_media_keys = "attachments.media_keys"
    author_id = "author_id"
    entities_mentions_username = "entities.mentions.username"
    geo_place_id = "geo.place_id"
    in_reply_to_user_id = "in_reply_to_user_id"
    referenced_tweets_id = "referenced_tweets.id"
    referenced_tweets_id_author_id = "referenced_tweets.id.author_id"


TWEET = EntityType(
    name="tweet",
    identity_field="id",
    core_attributes=("id", "text"),
    fields=TweetField,
    field_parameter="tweet.fields",
    expansions=TweetExpansion,
    relations=(
        ExpansionRelation(token="attachments.poll_ids", target="poll"),
        ExpansionRelation(token="attachments.media_keys", target="media"),
        ExpansionRelation(token="author_id", target="user"),
        ExpansionRelation(token="entities.mentions.username", target="user"),
        ExpansionRelation(token="geo.place_id", target="place"),
        ExpansionRelation(token="in_reply_to_user_id", target="user"),
        ExpansionRelation(token="referenced_tweets.id", target="tweet"),
        ExpansionRelation(token="referenced_tweets.id.author_id", target="user"),
    ),
)
