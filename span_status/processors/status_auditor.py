"""
Replays HTTP span status extraction over recorded spans and reports
spans whose recorded status disagrees with it.
"""

import logging
from typing import Dict, Iterable, List, Optional

from opentelemetry.trace import StatusCode

from ..core.status import RecordingSpanStatusBuilder
from ..core.types import AuditConfig, AuditFinding, AuditReport, KindStats
from ..extractors import HttpSpanStatusExtractor
from ..integrations.otlp import OtlpSpanStatusCodeGetter
from .file_processor import TraceFileProcessor

logger = logging.getLogger(__name__)

SPAN_KIND_SERVER = 'SPAN_KIND_SERVER'
SPAN_KIND_CLIENT = 'SPAN_KIND_CLIENT'
SPAN_KIND_INTERNAL = 'SPAN_KIND_INTERNAL'

# OTLP enum values, as found in exports that don't use the string names
_SPAN_KINDS_BY_NUMBER = {
    1: SPAN_KIND_INTERNAL,
    2: SPAN_KIND_SERVER,
    3: SPAN_KIND_CLIENT,
    4: 'SPAN_KIND_PRODUCER',
    5: 'SPAN_KIND_CONSUMER',
}

_STATUS_CODES = {
    0: StatusCode.UNSET,
    1: StatusCode.OK,
    2: StatusCode.ERROR,
    'STATUS_CODE_UNSET': StatusCode.UNSET,
    'STATUS_CODE_OK': StatusCode.OK,
    'STATUS_CODE_ERROR': StatusCode.ERROR,
}


class RecordedException(Exception):
    """Failure rebuilt from a span's 'exception' event."""

    def __init__(self, exception_type: str, message: str):
        super().__init__(message)
        self.exception_type = exception_type
        self.message = message


def normalize_span_kind(kind) -> str:
    """Return the SPAN_KIND_* name for a string or numeric span kind."""
    if isinstance(kind, int):
        return _SPAN_KINDS_BY_NUMBER.get(kind, 'SPAN_KIND_UNSPECIFIED')
    return kind or 'SPAN_KIND_UNSPECIFIED'


def recorded_status(span: Dict) -> StatusCode:
    """Return the status recorded on an OTLP span, UNSET when missing or unknown."""
    status = span.get('status')
    if not isinstance(status, dict):
        return StatusCode.UNSET
    code = status.get('code', 0)
    if not isinstance(code, (int, str)):
        return StatusCode.UNSET
    return _STATUS_CODES.get(code, StatusCode.UNSET)


def _entries(container, key: str) -> List[Dict]:
    """Return the dict entries of an OTLP list field, ignoring any other shape."""
    if not isinstance(container, dict):
        return []
    items = container.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _string_value(attr: Dict) -> str:
    value = attr.get('value')
    if not isinstance(value, dict):
        return ''
    return str(value.get('stringValue', ''))


def recorded_exception(span: Dict) -> Optional[RecordedException]:
    """Rebuild the first exception event of a span, if it has one."""
    for event in _entries(span, 'events'):
        if event.get('name') != 'exception':
            continue
        values = {attr.get('key'): _string_value(attr) for attr in _entries(event, 'attributes')}
        return RecordedException(values.get('exception.type', ''), values.get('exception.message', ''))
    return None


def _service_name(span: Dict) -> str:
    for attr in _entries(span.get('resource'), 'attributes'):
        if attr.get('key') == 'service.name':
            return _string_value(attr) or 'unknown-service'
    return 'unknown-service'


def _is_http_span(span: Dict) -> bool:
    return any(str(attr.get('key', '')).startswith('http.') for attr in _entries(span, 'attributes'))


class _ResolvedStatusCode:
    """Getter answering with a status code already read off the span."""

    def __init__(self, status_code: Optional[int]):
        self.status_code = status_code

    def get_http_response_status_code(self, request, response, error) -> Optional[int]:
        return self.status_code


class StatusAuditor:
    """Checks recorded HTTP CLIENT and SERVER spans against the HTTP status rule."""

    def __init__(self, config: Optional[AuditConfig] = None):
        """
        Initialize the auditor.

        Args:
            config: AuditConfig instance, defaults when omitted
        """
        self.config = config or AuditConfig()
        self.getter = OtlpSpanStatusCodeGetter(self.config.status_code_keys)
        self.factories = {
            SPAN_KIND_SERVER: HttpSpanStatusExtractor.create_server,
            SPAN_KIND_CLIENT: HttpSpanStatusExtractor.create_client,
        }

    def audit_file(self, file_path: str) -> AuditReport:
        """
        Audit every span in a trace JSON file.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            AuditReport with per-kind counters and mismatching spans
        """
        return self.audit_spans(TraceFileProcessor.iter_spans(file_path))

    def audit_spans(self, spans: Iterable[Dict]) -> AuditReport:
        report = AuditReport()
        for span in spans:
            kind = normalize_span_kind(span.get('kind'))

            if kind not in self.factories:
                if (kind == SPAN_KIND_INTERNAL and self.config.include_internal_errors
                        and recorded_status(span) == StatusCode.ERROR):
                    report.skipped_internal_errors.append(span.get('name', ''))
                continue

            if not _is_http_span(span):
                continue

            stats = report.stats.setdefault(kind, KindStats(checked=0, mismatches=0, without_status_code=0))
            stats['checked'] += 1
            status_code = self.getter.get_http_response_status_code(span, span, None)
            if status_code is None:
                stats['without_status_code'] += 1

            finding = self._compare(span, kind, status_code)
            if finding is not None:
                stats['mismatches'] += 1
                report.findings.append(finding)

        logger.info("Audited %d HTTP spans, %d mismatches", report.total_checked, report.total_mismatches)
        return report

    def check_span(self, span: Dict) -> Optional[AuditFinding]:
        """
        Compare a span's recorded status with the status computed for it.

        Args:
            span: OTLP span dictionary of kind CLIENT or SERVER

        Returns:
            AuditFinding when the statuses disagree, None otherwise
        """
        kind = normalize_span_kind(span.get('kind'))
        return self._compare(span, kind, self.getter.get_http_response_status_code(span, span, None))

    def _compare(self, span: Dict, kind: str, status_code: Optional[int]) -> Optional[AuditFinding]:
        extractor = self.factories[kind](_ResolvedStatusCode(status_code))
        error = recorded_exception(span)

        builder = RecordingSpanStatusBuilder()
        extractor.extract(builder, span, span, error)

        expected = builder.status_code
        recorded = recorded_status(span)
        if recorded == expected:
            return None
        if self.config.treat_ok_as_unset and recorded == StatusCode.OK and expected == StatusCode.UNSET:
            return None

        return AuditFinding(
            trace_id=span.get('traceId', ''),
            span_id=span.get('spanId', ''),
            name=span.get('name', ''),
            kind=kind,
            service_name=_service_name(span),
            http_status_code=status_code,
            recorded_status=recorded,
            expected_status=expected,
            has_exception=error is not None,
        )
