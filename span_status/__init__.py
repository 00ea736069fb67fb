"""
Span Status - HTTP span status extraction for OpenTelemetry instrumentation
"""

__version__ = "1.0.0"

from .core.status import (
    DefaultSpanStatusExtractor,
    RecordingSpanStatusBuilder,
    SpanStatusBuilder,
    SpanStatusExtractor,
)
from .core.types import AuditConfig
from .extractors import HttpSpanStatusExtractor, HttpStatusCodeConverter, HttpStatusCodeGetter, is_error

__all__ = [
    "DefaultSpanStatusExtractor",
    "RecordingSpanStatusBuilder",
    "SpanStatusBuilder",
    "SpanStatusExtractor",
    "AuditConfig",
    "HttpSpanStatusExtractor",
    "HttpStatusCodeConverter",
    "HttpStatusCodeGetter",
    "is_error",
]
