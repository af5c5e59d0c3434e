"""
Query DSL canonicalization.

The query-generation agent answers in a simplified boolean grammar::

    {"and": [...]}, {"or": [...]}, {"not": {...}}

The search engine expects the canonical algebra::

    {"conjuncts": [...]}, {"disjuncts": [...]}, {"must_not": {"disjuncts": [...]}}

``canonicalize`` rewrites the former into the latter over arbitrarily nested
JSON. It never raises: malformed nodes and nodes past the depth ceiling become
``{}`` at the point where they occur, and the rest of the tree is kept.
"""

from typing import Any

from vectordash_core.config import get_settings
from vectordash_core.logging_config import get_logger
from vectordash_core.query.nodes import (
    CLAUSE_KEYS,
    CONJUNCTS,
    DISJUNCTS,
    LIST_KEYS,
    MUST_NOT,
    SIMPLIFIED_KEYS,
    AndNode,
    EmptyNode,
    NotNode,
    OrNode,
    QueryDict,
    parse_node,
)

logger = get_logger(__name__)


def canonicalize(
    node: Any, depth: int = 0, max_depth: int | None = None
) -> QueryDict:
    """
    Rewrite a query tree into the canonical dialect.

    Args:
        node: Raw query JSON in either dialect
        depth: Depth of ``node`` within the whole tree
        max_depth: Depth ceiling; defaults to the configured ``query.max_depth``

    Returns:
        A new canonical-dialect dict. The input is not modified.
    """
    if max_depth is None:
        max_depth = get_settings().query.max_depth
    return _canonicalize(node, depth, max_depth)


def _canonicalize(node: Any, depth: int, max_depth: int) -> QueryDict:
    if depth > max_depth:
        logger.debug(f"Query tree truncated at depth {depth} (max {max_depth})")
        return {}

    parsed = parse_node(node)

    def recurse(child: Any) -> QueryDict:
        return _canonicalize(child, depth + 1, max_depth)

    if isinstance(parsed, EmptyNode):
        if node is not None:
            logger.debug(
                f"Dropping non-object query node of type {type(node).__name__}"
            )
        return {}

    if isinstance(parsed, AndNode):
        return {**parsed.extra, CONJUNCTS: [recurse(c) for c in parsed.children]}

    if isinstance(parsed, OrNode):
        return {**parsed.extra, DISJUNCTS: [recurse(c) for c in parsed.children]}

    if isinstance(parsed, NotNode):
        # The engine expects negation as an excluded disjunction
        return {**parsed.extra, MUST_NOT: {DISJUNCTS: [recurse(parsed.inner)]}}

    result: QueryDict = {}
    for key, value in parsed.entries:
        if key in LIST_KEYS and isinstance(value, list):
            result[key] = [recurse(v) for v in value]
        elif key in CLAUSE_KEYS:
            result[key] = recurse(value)
        else:
            result[key] = value
    return result


def uses_simplified_dialect(node: Any) -> bool:
    """Check whether ``node`` or any descendant carries an and/or/not key.

    Callers use this to skip canonicalization of trees that are already
    canonical.
    """
    if not isinstance(node, dict):
        return False
    if any(key in node for key in SIMPLIFIED_KEYS):
        return True
    for value in node.values():
        if isinstance(value, list):
            if any(uses_simplified_dialect(item) for item in value):
                return True
        elif isinstance(value, dict) and uses_simplified_dialect(value):
            return True
    return False


def normalize_query(node: Any, max_depth: int | None = None) -> QueryDict:
    """Canonicalize agent output, skipping the rewrite when nothing needs it.

    Non-object input still normalizes to ``{}``. Trees already in the canonical
    dialect are returned as a shallow copy.
    """
    if not isinstance(node, dict):
        return canonicalize(node, max_depth=max_depth)
    if not uses_simplified_dialect(node):
        return dict(node)
    return canonicalize(node, max_depth=max_depth)
