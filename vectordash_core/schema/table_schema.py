"""Table schema generation from detection results."""

from typing import Any

from vectordash_core.config import get_settings
from vectordash_core.models import DetectedField, DetectionResult, JsonKind, StorageType

TYPES_EXTENSION = "x-antfly-types"


def field_property(
    field: DetectedField, storage_types: list[StorageType] | None = None
) -> dict[str, Any] | None:
    """JSON schema property for one field, or None if it has no storage types."""
    types = field.suggested_types if storage_types is None else storage_types
    if not types:
        return None

    prop: dict[str, Any] = {
        "type": field.inferred_type.value,
        TYPES_EXTENSION: [StorageType(t).value for t in types],
    }
    if field.inferred_type == JsonKind.ARRAY:
        prop["items"] = {"type": "string"}
    return prop


def document_schema(
    fields: list[DetectedField],
    overrides: dict[str, list[StorageType]] | None = None,
) -> dict[str, Any]:
    """
    Build the document schema for one kind.

    Args:
        fields: Detected fields of the kind
        overrides: Storage types chosen by the user, by field name; fields
            not listed keep their suggestions

    Returns:
        ``{"schema": {"type": "object", "properties": {...}}}``
    """
    overrides = overrides or {}
    properties: dict[str, Any] = {}
    for field in fields:
        prop = field_property(field, overrides.get(field.name))
        if prop is not None:
            properties[field.name] = prop
    return {"schema": {"type": "object", "properties": properties}}


def build_table_schema(
    result: DetectionResult,
    overrides: dict[str, dict[str, list[StorageType]]] | None = None,
) -> dict[str, Any]:
    """
    Build a table schema with one document schema per detected kind.

    The default type is the configured default kind when it was sampled,
    otherwise the first kind encountered.

    Args:
        result: Detection result
        overrides: Per-kind storage type choices, ``{kind: {field: types}}``

    Returns:
        Table schema dict; empty document schemas when nothing was detected
    """
    overrides = overrides or {}
    document_schemas = {
        group.type_name: document_schema(group.fields, overrides.get(group.type_name))
        for group in result.groups
    }

    default_kind = get_settings().detection.default_kind
    if default_kind in document_schemas or not document_schemas:
        default_type = default_kind
    else:
        default_type = next(iter(document_schemas))

    return {"document_schemas": document_schemas, "default_type": default_type}
