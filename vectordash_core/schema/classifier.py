"""JSON value classification for field detection."""

import json
from typing import Any

from vectordash_core.models import JsonKind

# null has no kind of its own; detection records it as a string field and the
# example value is replaced by the first non-null value seen later.
PLACEHOLDER_KIND = JsonKind.STRING


def classify(value: Any) -> JsonKind:
    """Classify a decoded JSON value.

    Arrays are ``array`` whatever their elements; any mapping is ``object``.
    """
    if value is None:
        return PLACEHOLDER_KIND
    # bool is a subclass of int
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, int | float):
        return JsonKind.NUMBER
    if isinstance(value, list | tuple):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    return JsonKind.STRING


def truncate_value(value: Any, max_len: int = 80) -> str:
    """Render an example value for display, cut to ``max_len`` characters."""
    if value is None:
        return "null"
    if isinstance(value, dict | list):
        text = json.dumps(value, default=str)
    elif isinstance(value, bool):
        text = json.dumps(value)
    else:
        text = str(value)

    if len(text) > max_len:
        return text[:max_len] + "..."
    return text
