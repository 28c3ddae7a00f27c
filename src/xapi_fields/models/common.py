"""Payload fragments shared by several entity models."""

from pydantic import BaseModel, ConfigDict


class XModel(BaseModel):
    """Base for X API payload models. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class WithheldInformation(XModel):
    """Withholding details for content hidden in some countries."""

    copyright: bool = False
    country_codes: list[str] = []
    scope: str | None = None


class EntityRange(XModel):
    """Start/end character offsets of an entity inside a text."""

    start: int
    end: int


class URLEntityDetails(EntityRange):
    url: str | None = None
    expanded_url: str | None = None
    display_url: str | None = None


class TagEntity(EntityRange):
    """A hashtag or cashtag."""

    tag: str


class MentionEntity(EntityRange):
    username: str
    id: str | None = None


class AnnotationEntity(EntityRange):
    probability: float = 0.0
    type: str = ""
    normalized_text: str = ""
