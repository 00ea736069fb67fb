"""
Status builder that writes to a live OpenTelemetry span.
"""

from typing import Optional

from opentelemetry.trace import Span, Status, StatusCode


class OtelSpanStatusBuilder:
    """Forwards status decisions to an opentelemetry.trace.Span."""

    def __init__(self, span: Span):
        self.span = span

    def set_status(self, status_code: StatusCode, description: Optional[str] = None) -> None:
        self.span.set_status(Status(status_code, description))
