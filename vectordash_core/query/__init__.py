"""Boolean query canonicalization and construction."""

from .builder import (
    boolean,
    conjunction,
    date_range,
    disjunction,
    doc_ids,
    fuzzy,
    geo_bounding_box,
    geo_distance,
    match,
    match_all,
    match_none,
    match_phrase,
    numeric_range,
    prefix,
    query_string,
    term,
)
from .canonicalizer import canonicalize, normalize_query, uses_simplified_dialect

__all__ = [
    "boolean",
    "canonicalize",
    "conjunction",
    "date_range",
    "disjunction",
    "doc_ids",
    "fuzzy",
    "geo_bounding_box",
    "geo_distance",
    "match",
    "match_all",
    "match_none",
    "match_phrase",
    "normalize_query",
    "numeric_range",
    "prefix",
    "query_string",
    "term",
    "uses_simplified_dialect",
]
