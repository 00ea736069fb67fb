"""Integration-specific status code accessors and status builders."""

from .otel import OtelSpanStatusBuilder
from .otlp import OtlpSpanStatusCodeGetter
from .wsgi import WerkzeugStatusCodeGetter

__all__ = ["OtelSpanStatusBuilder", "OtlpSpanStatusCodeGetter", "WerkzeugStatusCodeGetter"]
