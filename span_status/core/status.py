"""
Span status collaborators: the status builder and the default status policy.
"""

from typing import Any, Optional, Protocol

from opentelemetry.trace import StatusCode


class SpanStatusBuilder(Protocol):
    """Receives the status decided for a span."""

    def set_status(self, status_code: StatusCode, description: Optional[str] = None) -> None:
        ...


class RecordingSpanStatusBuilder:
    """Holds the last status set on it. Starts out UNSET."""

    def __init__(self):
        self.status_code = StatusCode.UNSET
        self.description: Optional[str] = None

    def set_status(self, status_code: StatusCode, description: Optional[str] = None) -> None:
        self.status_code = status_code
        self.description = description

    def __repr__(self) -> str:
        return f"RecordingSpanStatusBuilder(status_code={self.status_code.name}, description={self.description!r})"


class SpanStatusExtractor(Protocol):
    """Decides the status of a span from its request, response and failure."""

    def extract(
        self,
        status_builder: SpanStatusBuilder,
        request: Any,
        response: Optional[Any] = None,
        error: Optional[BaseException] = None
    ) -> None:
        ...

    @staticmethod
    def get_default() -> 'DefaultSpanStatusExtractor':
        """Return the shared protocol-agnostic status policy."""
        return _DEFAULT


class DefaultSpanStatusExtractor:
    """
    Protocol-agnostic status policy.

    Marks the span as ERROR when a failure was recorded and leaves it
    untouched otherwise.
    """

    def extract(
        self,
        status_builder: SpanStatusBuilder,
        request: Any,
        response: Optional[Any] = None,
        error: Optional[BaseException] = None
    ) -> None:
        if error is not None:
            status_builder.set_status(StatusCode.ERROR)


_DEFAULT = DefaultSpanStatusExtractor()
