"""Query parameter value type.

A QueryParameter is what the composer hands to the HTTP layer: a name and a
comma-joined token list. Values are never percent-encoded here; httpx does
that when the request is built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class QueryParameter(BaseModel):
    """One (name, value) pair attached to a GET request."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    @field_validator("name", "value")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("query parameters must have a non-empty name and value")
        return v

    @property
    def tokens(self) -> list[str]:
        """The value split back into its comma-separated tokens."""
        return [t for t in self.value.split(",") if t]

    def as_pair(self) -> tuple[str, str]:
        return (self.name, self.value)
