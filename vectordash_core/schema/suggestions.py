"""
Storage type suggestions for detected fields.

A static table keyed by JSON kind. Only string fields look at the example
value, to tell date-times and HTML apart from plain text.
"""

import re
from typing import Any

from vectordash_core.models import JsonKind, StorageType

SUGGESTIONS_BY_KIND: dict[JsonKind, tuple[StorageType, ...]] = {
    JsonKind.NUMBER: (StorageType.NUMERIC,),
    JsonKind.BOOLEAN: (),
    JsonKind.ARRAY: (StorageType.KEYWORD,),
    JsonKind.OBJECT: (),
}

# Checked in order against string examples; first match wins.
STRING_PATTERNS: tuple[tuple[re.Pattern[str], StorageType], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}(T|\s)?\d{2}:\d{2}"), StorageType.DATETIME),
    (re.compile(r"<[a-z][\s\S]*>", re.IGNORECASE), StorageType.HTML),
)

STRING_DEFAULT = (StorageType.TEXT,)


def suggest(inferred_type: JsonKind | str, example_value: Any) -> list[StorageType]:
    """Suggest storage types for a field, best candidate first.

    Unknown kinds get the string treatment.
    """
    try:
        kind = JsonKind(inferred_type)
    except ValueError:
        kind = JsonKind.STRING

    if kind in SUGGESTIONS_BY_KIND:
        return list(SUGGESTIONS_BY_KIND[kind])

    if isinstance(example_value, str):
        for pattern, storage_type in STRING_PATTERNS:
            if pattern.search(example_value):
                return [storage_type]

    return list(STRING_DEFAULT)
