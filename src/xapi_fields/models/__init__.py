"""Typed Pydantic models for X API v2 payloads.

Each entity model mirrors one schema in `xapi_fields.schema`: core
attributes are required, optional fields default to None. Decode a response
with e.g. `XResponse[XUser].model_validate(payload)`.
"""

from xapi_fields.models.envelope import (
    XApiError,
    XIncludes,
    XPaginationMeta,
    XResponse,
)
from xapi_fields.models.media import XMedia, XPlace, XPoll, XPollOption
from xapi_fields.models.tweet import XTweet, XTweetMetrics
from xapi_fields.models.user import UserProfileMetrics, XUser

ENTITY_MODELS = {
    "user": XUser,
    "tweet": XTweet,
    "media": XMedia,
    "poll": XPoll,
    "place": XPlace,
}

__all__ = [
    "ENTITY_MODELS",
    "UserProfileMetrics",
    "XApiError",
    "XIncludes",
    "XMedia",
    "XPaginationMeta",
    "XPlace",
    "XPoll",
    "XPollOption",
    "XResponse",
    "XTweet",
    "XTweetMetrics",
    "XUser",
]
