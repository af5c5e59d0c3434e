"""Field type inference and schema suggestions for sampled documents."""

from .classifier import PLACEHOLDER_KIND, classify, truncate_value
from .detection import (
    NO_DOCUMENTS_MESSAGE,
    detect,
    documents_from_hits,
    match_all_sample_query,
)
from .searchable import generate_basic_field, generate_searchable_fields
from .suggestions import suggest
from .table_schema import build_table_schema, document_schema

__all__ = [
    "NO_DOCUMENTS_MESSAGE",
    "PLACEHOLDER_KIND",
    "build_table_schema",
    "classify",
    "detect",
    "document_schema",
    "documents_from_hits",
    "generate_basic_field",
    "generate_searchable_fields",
    "match_all_sample_query",
    "suggest",
    "truncate_value",
]
