"""Searchable field variants offered by query-builder field pickers."""

from pydantic import BaseModel, Field

from vectordash_core.models import StorageType

KEYWORD_SUFFIX = "__keyword"
EDGE_NGRAM_SUFFIX = "__2gram"


class SearchableField(BaseModel):
    """One way of searching a schema field."""

    display_name: str
    search_field: str = Field(description="Index field name to query")
    original_field: str
    schema_types: list[str] = Field(default_factory=list)
    storage_types: list[StorageType | str] = Field(default_factory=list)
    variation: str = Field(description="text, keyword or 2gram")


class BasicField(BaseModel):
    display_name: str
    field_name: str
    schema_type: str


def storage_type(value: StorageType | str) -> StorageType | str:
    """Known storage types as enum members; anything else passes through."""
    try:
        return StorageType(value)
    except ValueError:
        return value


def generate_searchable_fields(
    field: str, schema_types: list[str], storage_types: list[StorageType | str]
) -> list[SearchableField]:
    """
    List the searchable variants of a field.

    A field indexed as both text and keyword exposes a ``__keyword`` sub-field;
    search-as-you-type adds an edge n-gram sub-field and implies text.

    Args:
        field: Field name
        schema_types: JSON schema types of the field
        storage_types: Storage types the field is indexed with. Types this
            module does not know are kept but add no variants.

    Returns:
        Variants in display order
    """
    storage_types = [storage_type(t) for t in storage_types]
    multiple = len(storage_types) > 1

    def variant(display_name: str, search_field: str, variation: str) -> SearchableField:
        return SearchableField(
            display_name=display_name,
            search_field=search_field,
            original_field=field,
            schema_types=schema_types,
            storage_types=storage_types,
            variation=variation,
        )

    variants: list[SearchableField] = []

    if StorageType.TEXT in storage_types or not storage_types:
        variants.append(variant(f"{field} (text)" if multiple else field, field, "text"))

    if multiple and StorageType.KEYWORD in storage_types:
        variants.append(
            variant(f"{field} (keyword)", f"{field}{KEYWORD_SUFFIX}", "keyword")
        )

    if StorageType.SEARCH_AS_YOU_TYPE in storage_types:
        variants.append(
            variant(f"{field} (edgegram)", f"{field}{EDGE_NGRAM_SUFFIX}", "2gram")
        )
        if StorageType.TEXT not in storage_types:
            variants.append(variant(f"{field} (text)", field, "text"))

    return variants


def generate_basic_field(field: str, schema_type: str) -> BasicField:
    """Display entry for a non-text field."""
    return BasicField(
        display_name=f"{field} ({schema_type})", field_name=field, schema_type=schema_type
    )
