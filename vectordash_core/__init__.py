"""vectordash-core: query canonicalization and schema inference for a search database dashboard."""

__version__ = "0.1.0"

from .models import DetectedField, DetectionGroup, DetectionResult, DetectionStatus
from .query import canonicalize, uses_simplified_dialect
from .schema import detect, suggest

__all__ = [
    "DetectedField",
    "DetectionGroup",
    "DetectionResult",
    "DetectionStatus",
    "canonicalize",
    "detect",
    "suggest",
    "uses_simplified_dialect",
]
