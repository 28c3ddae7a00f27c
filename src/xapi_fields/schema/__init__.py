"""Entity schema registry: maps entity names to their EntityType.

Adding a new entity type:
  1. Create a module in this package with its field Enum and EntityType
  2. Add one entry to ENTITY_TYPES below
  3. Relations on other entities can then target it by name
"""

from __future__ import annotations

from types import MappingProxyType

from xapi_fields.errors import SchemaViolation
from xapi_fields.schema.base import EXPANSIONS_PARAMETER, EntityType, ExpansionRelation
from xapi_fields.schema.media import MEDIA, MediaField
from xapi_fields.schema.place import PLACE, PlaceField
from xapi_fields.schema.poll import POLL, PollField
from xapi_fields.schema.tweet import TWEET, TweetExpansion, TweetField
from xapi_fields.schema.user import USER, UserExpansion, UserField

ENTITY_TYPES: MappingProxyType[str, EntityType] = MappingProxyType(
    {
        "user": USER,
        "tweet": TWEET,
        "media": MEDIA,
        "poll": POLL,
        "place": PLACE,
    }
)


def get_entity_type(name: str) -> EntityType:
    """Look up an entity type by name."""
    entity = ENTITY_TYPES.get(name)
    if entity is None:
        supported = ", ".join(sorted(ENTITY_TYPES.keys()))
        raise SchemaViolation(f"Unknown entity type '{name}'. Supported: {supported}")
    return entity


__all__ = [
    "ENTITY_TYPES",
    "EXPANSIONS_PARAMETER",
    "MEDIA",
    "PLACE",
    "POLL",
    "TWEET",
    "USER",
    "EntityType",
    "ExpansionRelation",
    "MediaField",
    "PlaceField",
    "PollField",
    "TweetExpansion",
    "TweetField",
    "UserExpansion",
    "UserField",
    "get_entity_type",
]
