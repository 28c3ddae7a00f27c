"""Poll entity schema."""

from enum import Enum

from xapi_fields.schema.base import EntityType


class PollField(str, Enum):
    """Optional fields of a poll, requested through `poll.fields`."""

    duration_minutes = "duration_minutes"
    end_datetime = "end_datetime"
    voting_status = "voting_status"


POLL = EntityType(
    name="poll",
    identity_field="id",
    core_attributes=("id", "options"),
    fields=PollField,
    field_parameter="poll.fields",
)
