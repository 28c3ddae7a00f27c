"""Media entity schema (photos, videos, animated GIFs)."""

from enum import Enum

from xapi_fields.schema.base import EntityType


class MediaField(str, Enum):
    """Optional fields of a media item, requested through `media.fields`."""

    duration_ms = "duration_ms"
    height = "height"
    non_public_metrics = "non_public_metrics"
    organic_metrics = "organic_metrics"
    preview_image_url = "preview_image_url"
    promoted_metrics = "promoted_metrics"
    public_metrics = "public_metrics"
    width = "width"
    alt_text = "alt_text"
    url = "url"


MEDIA = EntityType(
    name="media",
    identity_field="media_key",
    core_attributes=("media_key", "type"),
    fields=MediaField,
    field_parameter="media.fields",
)
