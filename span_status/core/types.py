"""
Type definitions for span status auditing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TypedDict

from opentelemetry.trace import StatusCode


DEFAULT_STATUS_CODE_KEYS = ('http.response.status_code', 'http.status_code')


class KindStats(TypedDict):
    """Audit counters for one span kind."""
    checked: int
    mismatches: int
    without_status_code: int


class AuditConfig:
    """Configuration for status auditing."""

    def __init__(
        self,
        status_code_keys: Optional[Sequence[str]] = None,
        treat_ok_as_unset: bool = True,
        include_internal_errors: bool = False
    ):
        """
        Initialize status audit configuration.

        Args:
            status_code_keys: Span attribute keys holding the HTTP response status code,
                              in lookup order.
                              Default: ('http.response.status_code', 'http.status_code')

            treat_ok_as_unset: If True, a span recorded as OK is considered consistent
                               with a computed UNSET status. Instrumentations commonly
                               record OK for successful calls.
                               Default: True

            include_internal_errors: If True, INTERNAL spans recorded as ERROR are listed
                                     in the report as skipped spans.
                                     Default: False
        """
        self.status_code_keys = tuple(status_code_keys or DEFAULT_STATUS_CODE_KEYS)
        self.treat_ok_as_unset = treat_ok_as_unset
        self.include_internal_errors = include_internal_errors


@dataclass
class AuditFinding:
    """A span whose recorded status differs from the computed one."""
    trace_id: str
    span_id: str
    name: str
    kind: str
    service_name: str
    http_status_code: Optional[int]
    recorded_status: StatusCode
    expected_status: StatusCode
    has_exception: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'trace_id': self.trace_id,
            'span_id': self.span_id,
            'name': self.name,
            'kind': self.kind,
            'service_name': self.service_name,
            'http_status_code': self.http_status_code,
            'recorded_status': self.recorded_status.name,
            'expected_status': self.expected_status.name,
            'has_exception': self.has_exception,
        }


@dataclass
class AuditReport:
    """Result of auditing every HTTP span in a trace file."""
    stats: Dict[str, KindStats] = field(default_factory=dict)
    findings: List[AuditFinding] = field(default_factory=list)
    skipped_internal_errors: List[str] = field(default_factory=list)

    @property
    def total_checked(self) -> int:
        return sum(s['checked'] for s in self.stats.values())

    @property
    def total_mismatches(self) -> int:
        return len(self.findings)
