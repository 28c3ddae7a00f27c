"""Media, poll and place payload models.

These three only ever arrive through the includes envelope of a tweet
request, never as the primary `data` of a lookup.
"""

from datetime import datetime
from typing import Any

from xapi_fields.models.common import XModel


class XMediaMetrics(XModel):
    view_count: int = 0


class XMedia(XModel):
    """A photo, video or animated GIF attached to a tweet."""

    media_key: str
    type: str
    duration_ms: int | None = None
    height: int | None = None
    non_public_metrics: dict[str, int] | None = None
    organic_metrics: dict[str, int] | None = None
    preview_image_url: str | None = None
    promoted_metrics: dict[str, int] | None = None
    public_metrics: XMediaMetrics | None = None
    width: int | None = None
    alt_text: str | None = None
    url: str | None = None


class XPollOption(XModel):
    position: int
    label: str
    votes: int = 0


class XPoll(XModel):
    id: str
    options: list[XPollOption]
    duration_minutes: int | None = None
    end_datetime: datetime | None = None
    voting_status: str | None = None


class XPlace(XModel):
    """A place tagged on a tweet."""

    full_name: str
    id: str
    contained_within: list[str] | None = None
    country: str | None = None
    country_code: str | None = None
    geo: dict[str, Any] | None = None
    name: str | None = None
    place_type: str | None = None
