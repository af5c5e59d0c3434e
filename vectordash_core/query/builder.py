"""
Constructors for canonical-dialect query nodes.

Each function returns a plain dict ready to send to the search engine.
Optional parameters left as ``None`` are omitted from the output. Field names
and values are not validated; the engine is authoritative on query validity.

Example:
    >>> boolean(
    ...     must=[term("published", "status"), match("technology", "category")],
    ...     must_not=[term("archived", "status")],
    ... )
    {'must': {'conjuncts': [...]}, 'must_not': {'disjuncts': [...]}}
"""

from typing import Any, Literal, TypedDict

from vectordash_core.query.nodes import (
    CONJUNCTS,
    DISJUNCTS,
    MUST,
    MUST_NOT,
    SHOULD,
    QueryDict,
)

Fuzziness = int | Literal["auto"]


class GeoPoint(TypedDict):
    lon: float
    lat: float


class GeoBounds(TypedDict):
    top_left: GeoPoint
    bottom_right: GeoPoint


def _compact(**attrs: Any) -> QueryDict:
    """Build a node from keyword attributes, dropping the ones set to None."""
    return {key: value for key, value in attrs.items() if value is not None}


def query_string(query: str, boost: float | None = None) -> QueryDict:
    """Query string syntax, e.g. ``"body:computer AND category:technology"``."""
    return _compact(query=query, boost=boost)


def term(term: str, field: str | None = None, boost: float | None = None) -> QueryDict:
    """Exact term match."""
    return _compact(term=term, field=field, boost=boost)


def match(
    match: str,
    field: str | None = None,
    analyzer: str | None = None,
    boost: float | None = None,
    prefix_length: int | None = None,
    fuzziness: Fuzziness | None = None,
    operator: Literal["or", "and"] | None = None,
) -> QueryDict:
    """Analyzed text match."""
    return _compact(
        match=match,
        field=field,
        analyzer=analyzer,
        boost=boost,
        prefix_length=prefix_length,
        fuzziness=fuzziness,
        operator=operator,
    )


def match_phrase(
    match_phrase: str,
    field: str | None = None,
    analyzer: str | None = None,
    boost: float | None = None,
    fuzziness: Fuzziness | None = None,
) -> QueryDict:
    """Phrase match."""
    return _compact(
        match_phrase=match_phrase,
        field=field,
        analyzer=analyzer,
        boost=boost,
        fuzziness=fuzziness,
    )


def prefix(prefix: str, field: str | None = None, boost: float | None = None) -> QueryDict:
    return _compact(prefix=prefix, field=field, boost=boost)


def fuzzy(
    term: str,
    field: str | None = None,
    fuzziness: Fuzziness | None = None,
    prefix_length: int | None = None,
    boost: float | None = None,
) -> QueryDict:
    """Fuzzy term match; shares the ``term`` key with exact term queries."""
    return _compact(
        term=term,
        field=field,
        fuzziness=fuzziness,
        prefix_length=prefix_length,
        boost=boost,
    )


def numeric_range(
    field: str,
    min: float | None = None,
    max: float | None = None,
    inclusive_min: bool | None = None,
    inclusive_max: bool | None = None,
    boost: float | None = None,
) -> QueryDict:
    """Numeric range on ``field``; either bound may be left open."""
    return _compact(
        field=field,
        min=min,
        max=max,
        inclusive_min=inclusive_min,
        inclusive_max=inclusive_max,
        boost=boost,
    )


def date_range(
    field: str,
    start: str | None = None,
    end: str | None = None,
    inclusive_start: bool | None = None,
    inclusive_end: bool | None = None,
    datetime_parser: str | None = None,
    boost: float | None = None,
) -> QueryDict:
    """Date range on ``field`` with RFC 3339 ``start``/``end`` strings."""
    return _compact(
        field=field,
        start=start,
        end=end,
        inclusive_start=inclusive_start,
        inclusive_end=inclusive_end,
        datetime_parser=datetime_parser,
        boost=boost,
    )


def match_all(boost: float | None = None) -> QueryDict:
    return _compact(match_all={}, boost=boost)


def match_none(boost: float | None = None) -> QueryDict:
    return _compact(match_none={}, boost=boost)


def doc_ids(ids: list[str], boost: float | None = None) -> QueryDict:
    """Match documents by ID."""
    return _compact(ids=list(ids), boost=boost)


def geo_distance(
    field: str, location: GeoPoint, distance: str, boost: float | None = None
) -> QueryDict:
    """Points within ``distance`` (e.g. ``"5km"``) of ``location``."""
    return _compact(field=field, location=location, distance=distance, boost=boost)


def geo_bounding_box(
    field: str, bounds: GeoBounds, boost: float | None = None
) -> QueryDict:
    return _compact(
        field=field,
        top_left=bounds["top_left"],
        bottom_right=bounds["bottom_right"],
        boost=boost,
    )


def conjunction(queries: list[QueryDict]) -> QueryDict:
    """AND: every query must match."""
    return {CONJUNCTS: list(queries)}


def disjunction(queries: list[QueryDict], min: int | None = None) -> QueryDict:
    """OR: at least ``min`` queries must match (engine default when omitted)."""
    return _compact(**{DISJUNCTS: list(queries)}, min=min)


def boolean(
    must: list[QueryDict] | None = None,
    should: list[QueryDict] | None = None,
    must_not: list[QueryDict] | None = None,
    filter: QueryDict | None = None,
    boost: float | None = None,
    min_should_match: int | None = None,
) -> QueryDict:
    """
    Combine queries with boolean logic.

    Only non-empty clause lists produce a key, so an empty list and a missing
    list give the same node.

    Args:
        must: Queries that all have to match
        should: Queries of which at least ``min_should_match`` have to match
        must_not: Queries that must not match
        filter: Non-scoring restriction applied to the result set
        boost: Score multiplier for the whole node
        min_should_match: Minimum number of ``should`` matches

    Returns:
        Boolean query node
    """
    result = _compact(boost=boost)
    if must:
        result[MUST] = conjunction(must)
    if should:
        result[SHOULD] = disjunction(should, min=min_should_match)
    if must_not:
        result[MUST_NOT] = disjunction(must_not)
    if filter is not None:
        result["filter"] = filter
    return result
