"""Core span status types and collaborators."""

from .status import (
    DefaultSpanStatusExtractor,
    RecordingSpanStatusBuilder,
    SpanStatusBuilder,
    SpanStatusExtractor,
)
from .types import AuditConfig, AuditFinding, AuditReport, KindStats

__all__ = [
    "DefaultSpanStatusExtractor",
    "RecordingSpanStatusBuilder",
    "SpanStatusBuilder",
    "SpanStatusExtractor",
    "AuditConfig",
    "AuditFinding",
    "AuditReport",
    "KindStats",
]
