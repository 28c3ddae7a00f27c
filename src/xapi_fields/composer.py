"""Query composer: selectors + extra parameters -> final parameter list.

Ordering of the output:
  1. root `<entity>.fields`
  2. `expansions`
  3. one `<target>.fields` per target entity, first-added relation order
  4. caller-supplied parameters (pagination, ids, ...), caller order

A name that shows up more than once is emitted once, in the slot of its
first appearance, with the values merged as a set union. Field parameters
are merged as selectors so the merged value stays in catalogue order; a
tweet lookup that also expands `referenced_tweets.id` therefore sends a
single `tweet.fields`. Other values are merged token by token, keeping the
order tokens were first seen. A caller value whose name appears only once
is sent exactly as given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from xapi_fields.errors import SchemaViolation
from xapi_fields.params import QueryParameter
from xapi_fields.schema.base import EXPANSIONS_PARAMETER
from xapi_fields.selectors import ExpansionSelector, FieldSelector

logger = logging.getLogger(__name__)

ExtraParameter = QueryParameter | tuple[str, Any]
ExtraParameters = ExtraParameter | Mapping[str, Any]

# FieldSelector for field params, str for a caller value seen once, list of
# tokens once a name has been merged
Slot = FieldSelector | str | list[str]


def build(
    fields: FieldSelector | None = None,
    expansions: ExpansionSelector | None = None,
    *others: ExtraParameters,
) -> list[QueryParameter]:
    """Compose the ordered, de-duplicated query parameters for one request."""
    if fields is not None and expansions is not None and fields.entity != expansions.entity:
        raise SchemaViolation(
            f"Field selector is for {fields.entity.name} but expansion selector "
            f"is for {expansions.entity.name}"
        )

    slots: dict[str, Slot] = {}

    if fields is not None:
        _merge_selector(slots, fields)

    if expansions is not None and not expansions.is_empty():
        relations = expansions.entity.ordered_relations(expansions.relations)
        _merge_tokens(slots, EXPANSIONS_PARAMETER, relations)
        for selector in expansions.target_field_selectors():
            _merge_selector(slots, selector)

    for name, value in _iter_extras(others):
        _merge_value(slots, name, value)

    params: list[QueryParameter] = []
    for name, slot in slots.items():
        value = _slot_value(slot)
        if value is not None:
            params.append(QueryParameter(name=name, value=value))
    return params


def as_pairs(params: Iterable[QueryParameter]) -> list[tuple[str, str]]:
    """Plain (name, value) tuples, for HTTP layers that want them."""
    return [param.as_pair() for param in params]


def to_httpx_params(params: Iterable[QueryParameter]) -> httpx.QueryParams:
    """Convert composed parameters into httpx.QueryParams, keeping their order."""
    return httpx.QueryParams(as_pairs(params))


def _merge_selector(slots: dict[str, Slot], selector: FieldSelector) -> None:
    if selector.is_empty():
        return
    name = selector.entity.field_parameter
    current = slots.get(name)
    if current is None:
        slots[name] = selector
    elif isinstance(current, FieldSelector):
        logger.debug(f"Merging duplicate '{name}' parameter")
        slots[name] = current.union(selector)
    else:
        logger.debug(f"Merging '{name}' selector into caller-supplied parameter")
        _merge_tokens(slots, name, selector.tokens)


def _merge_tokens(slots: dict[str, Slot], name: str, tokens: list[str]) -> None:
    if not tokens:
        return
    current = slots.get(name)
    if current is None:
        slots[name] = list(dict.fromkeys(tokens))
        return
    logger.debug(f"Merging duplicate '{name}' parameter")
    slots[name] = list(dict.fromkeys([*_slot_tokens(current), *tokens]))


def _merge_value(slots: dict[str, Slot], name: str, value: Any) -> None:
    """Keep a caller value verbatim unless another source already used `name`."""
    raw = _stringify(value)
    if raw is None:
        return
    if name not in slots:
        slots[name] = raw
        return
    _merge_tokens(slots, name, _split(raw))


def _slot_tokens(slot: Slot) -> list[str]:
    if isinstance(slot, FieldSelector):
        return slot.tokens
    if isinstance(slot, str):
        return _split(slot)
    return slot


def _slot_value(slot: Slot) -> str | None:
    if isinstance(slot, FieldSelector):
        param = slot.to_query_parameter()
        return param.value if param is not None else None
    if isinstance(slot, str):
        return slot
    return ",".join(slot) if slot else None


def _iter_extras(others: Iterable[ExtraParameters]) -> Iterable[tuple[str, Any]]:
    for item in others:
        if isinstance(item, QueryParameter):
            yield item.name, item.value
        elif isinstance(item, Mapping):
            yield from item.items()
        elif isinstance(item, tuple) and len(item) == 2:
            yield item[0], item[1]
        else:
            raise TypeError(f"Unsupported query parameter: {item!r}")


def _stringify(value: Any) -> str | None:
    """Caller value as sent on the wire; None for empty or whitespace-only values."""
    if value is None:
        return None
    if isinstance(value, bool):
        raw = str(value).lower()
    elif isinstance(value, (list, tuple)):
        parts = [_stringify(v) for v in value]
        raw = ",".join(p for p in parts if p is not None)
    else:
        raw = str(value)
    return raw if raw.strip() else None


def _split(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]
