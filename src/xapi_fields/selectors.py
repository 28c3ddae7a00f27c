"""Field and expansion selectors.

Both selectors are immutable value objects scoped to one entity type. Each
`add()` validates its argument against the entity's catalogue and returns a
new selector, so a selector can be shared between requests without copying.

Serialization rules:
  - Tokens are emitted in catalogue order, not insertion order, so the same
    selection always produces the same query string.
  - Empty selections emit nothing. The API rejects `user.fields=`.
  - Nested field selections of relations that share a target entity are
    merged. The API has one `<entity>.fields` slot per entity type, not one
    per relation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from xapi_fields.errors import SchemaViolation
from xapi_fields.params import QueryParameter
from xapi_fields.schema.base import EXPANSIONS_PARAMETER, EntityType, ExpansionRelation


@dataclass(frozen=True)
class FieldSelector:
    """A set of optional fields chosen for one entity type."""

    entity: EntityType
    members: frozenset[Enum] = field(default_factory=frozenset)

    @classmethod
    def empty(cls, entity: EntityType) -> FieldSelector:
        return cls(entity=entity)

    @classmethod
    def of(cls, entity: EntityType, *tokens: Enum | str) -> FieldSelector:
        """Build a selector with `tokens` already added."""
        selector = cls.empty(entity)
        for token in tokens:
            selector = selector.add(token)
        return selector

    def add(self, token: Enum | str) -> FieldSelector:
        """Return a selector that also includes `token`. Adding twice is a no-op."""
        member = self.entity.field(token)
        if member in self.members:
            return self
        return replace(self, members=self.members | {member})

    def union(self, other: FieldSelector) -> FieldSelector:
        """Return a selector holding the fields of both selectors."""
        if other.entity != self.entity:
            raise SchemaViolation(
                f"Cannot merge {other.entity.name} fields into {self.entity.name} fields"
            )
        return replace(self, members=self.members | other.members)

    @property
    def tokens(self) -> list[str]:
        """Selected wire tokens in catalogue order."""
        return self.entity.ordered_fields(self.members)

    def is_empty(self) -> bool:
        return not self.members

    def __contains__(self, token: object) -> bool:
        if isinstance(token, Enum):
            return token in self.members
        return token in self.tokens

    def __len__(self) -> int:
        return len(self.members)

    def to_query_parameter(self) -> QueryParameter | None:
        """Serialize to `<entity>.fields=a,b,c`, or None when nothing is selected."""
        if not self.members:
            return None
        return QueryParameter(name=self.entity.field_parameter, value=",".join(self.tokens))


@dataclass(frozen=True)
class ExpansionSelector:
    """A set of relations to expand for one entity type.

    `selections` keeps (relation, nested fields) pairs in the order the
    relations were first added. That order decides the order of the nested
    field parameters; the `expansions` value itself is in catalogue order.
    """

    entity: EntityType
    selections: tuple[tuple[ExpansionRelation, FieldSelector], ...] = ()

    @classmethod
    def empty(cls, entity: EntityType) -> ExpansionSelector:
        return cls(entity=entity)

    def add(
        self,
        relation: Enum | str,
        fields: FieldSelector | Iterable[Enum | str] | None = None,
    ) -> ExpansionSelector:
        """Return a selector that also expands `relation`.

        `fields` selects optional fields of the relation's target entity,
        either as a FieldSelector or as an iterable of tokens. Re-adding a
        relation replaces its nested fields but keeps its position.
        """
        descriptor = self.entity.relation(relation)
        nested = self._nested_selector(descriptor, fields)

        selections = list(self.selections)
        for i, (existing, _) in enumerate(selections):
            if existing.token == descriptor.token:
                selections[i] = (descriptor, nested)
                break
        else:
            selections.append((descriptor, nested))
        return replace(self, selections=tuple(selections))

    @staticmethod
    def _nested_selector(
        descriptor: ExpansionRelation,
        fields: FieldSelector | Iterable[Enum | str] | None,
    ) -> FieldSelector:
        target = descriptor.target_entity()
        if fields is None:
            nested = FieldSelector.empty(target)
        elif isinstance(fields, FieldSelector):
            if fields.entity != target:
                raise SchemaViolation(
                    f"Expansion '{descriptor.token}' targets {target.name}, "
                    f"got {fields.entity.name} fields"
                )
            nested = fields
        elif isinstance(fields, (str, Enum)):
            # A bare string would otherwise be iterated character by character
            nested = FieldSelector.of(target, fields)
        else:
            nested = FieldSelector.of(target, *fields)

        if not nested.is_empty() and not descriptor.accepts_fields:
            raise SchemaViolation(f"Expansion '{descriptor.token}' does not accept field selection")
        return nested

    @property
    def relations(self) -> list[ExpansionRelation]:
        return [relation for relation, _ in self.selections]

    def nested_fields(self, relation: Enum | str) -> FieldSelector | None:
        """The nested field selector recorded for `relation`, if it was added."""
        descriptor = self.entity.relation(relation)
        for existing, nested in self.selections:
            if existing.token == descriptor.token:
                return nested
        return None

    def is_empty(self) -> bool:
        return not self.selections

    def __len__(self) -> int:
        return len(self.selections)

    def target_field_selectors(self) -> list[FieldSelector]:
        """One merged nested selector per target entity, first-added order.

        Targets whose merged selection is empty are left out.
        """
        merged: dict[str, FieldSelector] = {}
        for relation, nested in self.selections:
            if nested.is_empty():
                continue
            current = merged.get(relation.target)
            merged[relation.target] = nested if current is None else current.union(nested)
        return list(merged.values())

    def to_query_parameters(self) -> list[QueryParameter]:
        """Serialize to `expansions=...` plus one `<target>.fields` per target type."""
        if not self.selections:
            return []
        params = [
            QueryParameter(
                name=EXPANSIONS_PARAMETER,
                value=",".join(self.entity.ordered_relations(self.relations)),
            )
        ]
        for selector in self.target_field_selectors():
            param = selector.to_query_parameter()
            if param is not None:
                params.append(param)
        return params
