"""User entity schema."""

from enum import Enum

from xapi_fields.schema.base import EntityType, ExpansionRelation


class UserField(str, Enum):
    """Optional fields of a user, requested through `user.fields`."""

    created_at = "created_at"
    description = "description"
    entities = "entities"
    location = "location"
    pinned_tweet_id = "pinned_tweet_id"
    profile_image_url = "profile_image_url"
    protected = "protected"
    public_metrics = "public_metrics"
    url = "url"
    verified = "verified"
    withheld = "withheld"


class UserExpansion(str, Enum):
    """Relations a user can be expanded along."""

    pinned_tweet_id = "pinned_tweet_id"


USER = EntityType(
    name="user",
    identity_field="id",
    core_attributes=("id", "name", "username"),
    fields=UserField,
    field_parameter="user.fields",
    expansions=UserExpansion,
    relations=(ExpansionRelation(token="pinned_tweet_id", target="tweet"),),
)
