"""
Field detection over a sample of documents.

Builds per-kind and cross-kind field statistics from documents fetched with a
match-all query, and turns them into ``DetectedField`` lists with storage type
suggestions. Counting follows a first-seen policy: a field's kind comes from
its first observed value, and its example is the first non-null value.
"""

from typing import Any

from vectordash_core.config import DetectionSettings, get_settings
from vectordash_core.logging_config import get_logger
from vectordash_core.models import (
    DetectedField,
    DetectionGroup,
    DetectionResult,
    DetectionStatus,
)
from vectordash_core.query.builder import match_all
from vectordash_core.schema.classifier import classify
from vectordash_core.schema.suggestions import suggest

logger = get_logger(__name__)

NO_DOCUMENTS_MESSAGE = "No documents found in table"


def match_all_sample_query(limit: int | None = None) -> dict[str, Any]:
    """Build the request a fetch collaborator sends to sample a table."""
    if limit is None:
        limit = get_settings().detection.sample_size
    return {"full_text_search": match_all(), "limit": limit}


def documents_from_hits(hits: list[Any]) -> list[Any]:
    """Pull ``_source`` documents out of search hits, one entry per hit.

    Hits without a ``_source`` object yield ``None`` so they still count toward
    the sample size in ``detect`` while contributing no fields.
    """
    documents = []
    for hit in hits:
        source = hit.get("_source") if isinstance(hit, dict) else None
        if not isinstance(source, dict):
            logger.debug("Counting hit without a _source object as an empty entry")
            source = None
        documents.append(source)
    return documents


def observe(
    doc: dict[str, Any], seen: dict[str, dict[str, Any]], settings: DetectionSettings
) -> None:
    """Record the top-level entries of one document into ``seen``."""
    reserved = set(settings.reserved_fields)
    for key, value in doc.items():
        if key.startswith(settings.internal_prefix) or key in reserved:
            continue

        stats = seen.get(key)
        if stats is None:
            seen[key] = {
                "name": key,
                "example_value": value,
                "seen_count": 1,
                "inferred_type": classify(value),
            }
            continue

        stats["seen_count"] += 1
        if stats["example_value"] is None and value is not None:
            stats["example_value"] = value


def summarize(seen: dict[str, dict[str, Any]], doc_count: int) -> list[DetectedField]:
    """Turn accumulated stats into detected fields, most frequent first.

    ``sorted`` is stable, so ties keep the order fields were first seen in.
    """
    ordered = sorted(seen.values(), key=lambda s: s["seen_count"], reverse=True)
    return [
        DetectedField(
            name=s["name"],
            inferred_type=s["inferred_type"],
            example_value=s["example_value"],
            frequency=s["seen_count"] / doc_count,
            sample_count=doc_count,
            suggested_types=suggest(s["inferred_type"], s["example_value"]),
        )
        for s in ordered
    ]


def document_kind(doc: dict[str, Any], settings: DetectionSettings) -> str:
    """Kind of a document, or the default kind when it has no usable discriminator."""
    kind = doc.get(settings.kind_field)
    if isinstance(kind, str) and kind:
        return kind
    return settings.default_kind


def detect(
    documents: list[Any], settings: DetectionSettings | None = None
) -> DetectionResult:
    """
    Detect fields in a document sample.

    Args:
        documents: Sampled documents, already fetched. Entries that are not
            JSON objects count toward the sample size but contribute no fields.
        settings: Detection settings; defaults to the configured ones

    Returns:
        Detection result. An empty sample yields ``status=no_documents``
        rather than an empty successful result.
    """
    if settings is None:
        settings = get_settings().detection

    sample_count = len(documents)
    if sample_count == 0:
        logger.info(NO_DOCUMENTS_MESSAGE)
        return DetectionResult(
            status=DetectionStatus.NO_DOCUMENTS, error=NO_DOCUMENTS_MESSAGE
        )

    global_seen: dict[str, dict[str, Any]] = {}
    kind_seen: dict[str, dict[str, dict[str, Any]]] = {}
    kind_counts: dict[str, int] = {}

    for doc in documents:
        if not isinstance(doc, dict):
            logger.debug(f"Skipping non-object document of type {type(doc).__name__}")
            continue

        kind = document_kind(doc, settings)
        kind_counts[kind] = kind_counts.get(kind, 0) + 1
        observe(doc, kind_seen.setdefault(kind, {}), settings)
        observe(doc, global_seen, settings)

    groups = [
        DetectionGroup(
            type_name=kind,
            fields=summarize(kind_seen[kind], count),
            doc_count=count,
        )
        for kind, count in kind_counts.items()
    ]
    fields = summarize(global_seen, sample_count)

    logger.info(
        f"Detected {len(fields)} fields across {len(groups)} document kinds "
        f"from {sample_count} sampled documents"
    )
    return DetectionResult(
        status=DetectionStatus.OK,
        groups=groups,
        fields=fields,
        sample_count=sample_count,
    )
