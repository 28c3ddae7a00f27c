"""Exceptions raised while building X API requests.

Everything here is raised synchronously, at the point the caller builds a
selector or a request. Nothing is retried or recovered. Both concrete errors
also subclass ValueError, so existing `except ValueError` handlers still
catch them.
"""


class XApiFieldsError(Exception):
    """Base error for this package."""


class SchemaViolation(XApiFieldsError, ValueError):
    """Raised when a field, relation, or entity is not in the schema catalogue."""


class RequestValidationError(XApiFieldsError, ValueError):
    """Raised when a request builder gets an unusable identifier."""
