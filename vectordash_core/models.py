"""
Pydantic models for field detection results.

Detection output is consumed by the schema-authoring UI, which expects
camelCase keys; ``to_wire()`` produces that shape.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JsonKind(str, Enum):
    """Kind of a JSON value as seen by field detection."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class StorageType(str, Enum):
    """Storage/index types a schema field can be declared with."""

    TEXT = "text"
    KEYWORD = "keyword"
    HTML = "html"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    GEOPOINT = "geopoint"
    GEOSHAPE = "geoshape"
    EMBEDDING = "embedding"
    LINK = "link"
    BLOB = "blob"
    SEARCH_AS_YOU_TYPE = "search_as_you_type"

    @property
    def label(self) -> str:
        return STORAGE_TYPE_LABELS[self]


STORAGE_TYPE_LABELS: dict[StorageType, str] = {
    StorageType.TEXT: "Text",
    StorageType.KEYWORD: "Keyword",
    StorageType.HTML: "HTML",
    StorageType.NUMERIC: "Numeric",
    StorageType.BOOLEAN: "Boolean",
    StorageType.DATETIME: "Datetime",
    StorageType.GEOPOINT: "Geo Point",
    StorageType.GEOSHAPE: "Geo Shape",
    StorageType.EMBEDDING: "Embedding",
    StorageType.LINK: "Link",
    StorageType.BLOB: "Blob",
    StorageType.SEARCH_AS_YOU_TYPE: "Search as You Type",
}


class DetectionStatus(str, Enum):
    """Outcome of a detection run."""

    OK = "ok"
    NO_DOCUMENTS = "no_documents"


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class DetectedField(WireModel):
    """One inferred field of a document kind."""

    name: str = Field(description="Top-level field name")
    inferred_type: JsonKind = Field(description="Kind of the first observed value")
    example_value: Any = Field(
        default=None, description="First non-null observed value"
    )
    frequency: float = Field(
        ge=0.0, le=1.0, description="Share of sampled documents containing the field"
    )
    sample_count: int = Field(ge=0, description="Denominator used for frequency")
    suggested_types: list[StorageType] = Field(
        default_factory=list, description="Ordered storage type candidates"
    )


class DetectionGroup(WireModel):
    """Detected fields for one document kind."""

    type_name: str = Field(description="Document kind")
    fields: list[DetectedField] = Field(
        default_factory=list, description="Fields, most frequently seen first"
    )
    doc_count: int = Field(ge=0, description="Sampled documents of this kind")


class DetectionResult(WireModel):
    """Result of one detection run over a document sample."""

    status: DetectionStatus = Field(description="Whether anything was detected")
    groups: list[DetectionGroup] = Field(
        default_factory=list, description="Per-kind detection, in encounter order"
    )
    fields: list[DetectedField] = Field(
        default_factory=list, description="Cross-kind detection over the whole sample"
    )
    sample_count: int = Field(default=0, ge=0, description="Documents in the sample")
    error: str | None = Field(
        default=None, description="Message for the no-documents condition"
    )

    @property
    def found_documents(self) -> bool:
        return self.status == DetectionStatus.OK

    def group(self, type_name: str) -> DetectionGroup | None:
        """Look up the group for a document kind."""
        for group in self.groups:
            if group.type_name == type_name:
                return group
        return None
