"""
Markdown rendering of status audit reports.
"""

from typing import List

from ..core.types import AuditReport

_KIND_LABELS = {
    'SPAN_KIND_SERVER': 'SERVER (incoming requests)',
    'SPAN_KIND_CLIENT': 'CLIENT (outgoing calls)',
}


def format_report(report: AuditReport, source: str = '') -> str:
    """
    Render an audit report as a markdown document.

    Args:
        report: AuditReport produced by StatusAuditor
        source: Name of the audited trace file, shown in the heading

    Returns:
        Markdown text
    """
    lines: List[str] = ['# HTTP Span Status Audit', '']
    if source:
        lines += [f'Source: `{source}`', '']

    lines += ['## Summary', '', '| Span kind | Checked | Without status code | Mismatches |',
              '|---|---:|---:|---:|']
    for kind, stats in sorted(report.stats.items()):
        lines.append(f"| {_KIND_LABELS.get(kind, kind)} | {stats['checked']} | "
                     f"{stats['without_status_code']} | {stats['mismatches']} |")
    lines.append(f'| **Total** | {report.total_checked} | '
                 f"{sum(s['without_status_code'] for s in report.stats.values())} | "
                 f'{report.total_mismatches} |')
    lines.append('')

    lines += ['## Mismatches', '']
    if not report.findings:
        lines += ['All recorded statuses match the HTTP status rule.', '']
    else:
        lines += ['| Service | Span | Kind | HTTP status | Recorded | Expected | Exception | Trace ID |',
                  '|---|---|---|---:|---|---|---|---|']
        for f in report.findings:
            http_status = f.http_status_code if f.http_status_code is not None else '-'
            lines.append(
                f'| {f.service_name} | {_escape(f.name)} | {f.kind.replace("SPAN_KIND_", "")} | '
                f'{http_status} | {f.recorded_status.name} | {f.expected_status.name} | '
                f'{"yes" if f.has_exception else "no"} | `{f.trace_id}` |'
            )
        lines.append('')

    if report.skipped_internal_errors:
        lines += ['## INTERNAL spans recorded as ERROR (not audited)', '']
        lines += [f'- {_escape(name)}' for name in report.skipped_internal_errors]
        lines.append('')

    return '\n'.join(lines)


def _escape(text: str) -> str:
    return text.replace('|', '\\|')
