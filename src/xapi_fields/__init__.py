"""Field selection and expansion composition for the X API v2.

Callers pick optional fields and expansions per entity type; the composer
turns those choices into the exact query parameters the API accepts. The
result is handed to whatever HTTP layer issues the request.
"""

from xapi_fields.composer import build, to_httpx_params
from xapi_fields.errors import RequestValidationError, SchemaViolation, XApiFieldsError
from xapi_fields.params import QueryParameter
from xapi_fields.schema import ENTITY_TYPES, get_entity_type
from xapi_fields.selectors import ExpansionSelector, FieldSelector

__all__ = [
    "ENTITY_TYPES",
    "ExpansionSelector",
    "FieldSelector",
    "QueryParameter",
    "RequestValidationError",
    "SchemaViolation",
    "XApiFieldsError",
    "build",
    "get_entity_type",
    "to_httpx_params",
]
