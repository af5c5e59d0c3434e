"""
Tagged node types for boolean query trees.

Raw query JSON is a flat dict whose shape is decided by which compound key it
carries. ``parse_node`` reads one level of that dict into one of the node
classes below; children stay raw so the canonicalizer controls recursion depth.
"""

from dataclasses import dataclass, field
from typing import Any

QueryDict = dict[str, Any]

# Simplified dialect, produced by the query-generation agent
AND = "and"
OR = "or"
NOT = "not"
SIMPLIFIED_KEYS = (AND, OR, NOT)

# Canonical dialect, consumed by the search engine
CONJUNCTS = "conjuncts"
DISJUNCTS = "disjuncts"
MUST = "must"
SHOULD = "should"
MUST_NOT = "must_not"
LIST_KEYS = (CONJUNCTS, DISJUNCTS)
CLAUSE_KEYS = (MUST, SHOULD, MUST_NOT)


@dataclass(frozen=True)
class EmptyNode:
    """Anything that is not a JSON object."""


@dataclass(frozen=True)
class AndNode:
    children: list[Any]
    extra: QueryDict = field(default_factory=dict)


@dataclass(frozen=True)
class OrNode:
    children: list[Any]
    extra: QueryDict = field(default_factory=dict)


@dataclass(frozen=True)
class NotNode:
    inner: Any
    extra: QueryDict = field(default_factory=dict)


@dataclass(frozen=True)
class CanonicalNode:
    """A node without simplified keys: canonical compounds, leaf attributes, or both.

    ``entries`` keeps the raw key order so the rebuilt dict serializes the same.
    """

    entries: list[tuple[str, Any]]


QueryNode = EmptyNode | AndNode | OrNode | NotNode | CanonicalNode


def _without(raw: QueryDict, key: str) -> QueryDict:
    return {k: v for k, v in raw.items() if k != key}


def _as_children(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []


def parse_node(raw: Any) -> QueryNode:
    """Classify one level of raw query JSON.

    ``and`` takes precedence over ``or``, which takes precedence over ``not``.
    Keys other than the matched one are kept in ``extra``.
    """
    if not isinstance(raw, dict):
        return EmptyNode()
    if AND in raw:
        return AndNode(children=_as_children(raw[AND]), extra=_without(raw, AND))
    if OR in raw:
        return OrNode(children=_as_children(raw[OR]), extra=_without(raw, OR))
    if NOT in raw:
        return NotNode(inner=raw[NOT], extra=_without(raw, NOT))
    return CanonicalNode(entries=list(raw.items()))
