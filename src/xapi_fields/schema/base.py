"""Entity schema primitives.

An EntityType is pure declarative data: which attributes always come back,
which optional fields can be requested (a closed `str` Enum), the wire name
of the field parameter, and which expansion relations lead to other entity
types.

Design choices:
  - Catalogues are Enums, not free strings. Lookups go through `field()` and
    `relation()`, which reject anything outside the catalogue. A member of a
    different entity's Enum is rejected even when its string value matches
    (`TweetField.created_at` is not a valid user field).
  - Relation targets are entity *names*, resolved through the registry in
    `xapi_fields.schema`. User and tweet point at each other, so they cannot
    hold direct references at definition time.
  - Catalogue order (Enum definition order) is the canonical serialization
    order for both fields and relations.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from xapi_fields.errors import SchemaViolation

EXPANSIONS_PARAMETER = "expansions"


class ExpansionRelation(BaseModel):
    """A relation an entity can be expanded along."""

    model_config = ConfigDict(frozen=True)

    token: str
    target: str
    accepts_fields: bool = True

    def target_entity(self) -> EntityType:
        """Resolve the target entity type from the registry."""
        from xapi_fields.schema import get_entity_type

        return get_entity_type(self.target)


class EntityType(BaseModel):
    """Schema of one X API resource kind."""

    model_config = ConfigDict(frozen=True)

    name: str
    identity_field: str
    core_attributes: tuple[str, ...]
    fields: type[Enum]
    field_parameter: str
    expansions: type[Enum] | None = None
    relations: tuple[ExpansionRelation, ...] = ()

    def field(self, token: Enum | str) -> Enum:
        """Return the catalogue member for `token`, or raise SchemaViolation."""
        return self._lookup(self.fields, token, "field")

    def relation(self, token: Enum | str) -> ExpansionRelation:
        """Return the relation descriptor for `token`, or raise SchemaViolation."""
        if self.expansions is None:
            raise SchemaViolation(f"Entity '{self.name}' has no expansions")
        member = self._lookup(self.expansions, token, "expansion")
        for relation in self.relations:
            if relation.token == member.value:
                return relation
        raise SchemaViolation(
            f"Expansion '{member.value}' of '{self.name}' has no relation descriptor"
        )

    def ordered_fields(self, members: Iterable[Enum]) -> list[str]:
        """Wire tokens for `members`, in catalogue order."""
        chosen = set(members)
        return [m.value for m in self.fields if m in chosen]

    def ordered_relations(self, relations: Iterable[ExpansionRelation]) -> list[str]:
        """Wire tokens for `relations`, in catalogue order."""
        chosen = {r.token for r in relations}
        return [r.token for r in self.relations if r.token in chosen]

    @property
    def field_tokens(self) -> list[str]:
        return [m.value for m in self.fields]

    @property
    def relation_tokens(self) -> list[str]:
        return [r.token for r in self.relations]

    def _lookup(self, catalogue: type[Enum], token: Enum | str, kind: str) -> Enum:
        if isinstance(token, Enum):
            if isinstance(token, catalogue):
                return token
            raise SchemaViolation(
                f"{type(token).__name__}.{token.name} is not a {self.name} {kind}"
            )
        try:
            return catalogue(token)
        except ValueError:
            allowed = ", ".join(m.value for m in catalogue)
            raise SchemaViolation(
                f"Unknown {self.name} {kind} '{token}'. Allowed: {allowed}"
            ) from None
