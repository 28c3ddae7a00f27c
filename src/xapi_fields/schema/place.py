"""Place entity schema (tagged tweet locations)."""

from enum import Enum

from xapi_fields.schema.base import EntityType


class PlaceField(str, Enum):
    """Optional fields of a place, requested through `place.fields`."""

    contained_within = "contained_within"
    country = "country"
    country_code = "country_code"
    geo = "geo"
    place_name = "name"  # member name "name" would shadow Enum.name
    place_type = "place_type"


PLACE = EntityType(
    name="place",
    identity_field="id",
    core_attributes=("full_name", "id"),
    fields=PlaceField,
    field_parameter="place.fields",
)
