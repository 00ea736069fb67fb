#!/usr/bin/env python3
"""
HTTP Span Status Auditor - command line entry point
"""

import sys

import ijson

from span_status import AuditConfig
from span_status.formatters import format_report
from span_status.processors import StatusAuditor


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(
        description='Check the recorded status of HTTP spans in a trace JSON file against the HTTP status rule.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_status.py trace.json
  python analyze_status.py trace.json -o audit.md
  python analyze_status.py trace.json --strict-ok
  python analyze_status.py trace.json --status-key http.status_code
        """
    )
    parser.add_argument('input_file', help='Path to the trace JSON file')
    parser.add_argument('-o', '--output', dest='output_file', default='status_audit.md', help='Output markdown file')
    parser.add_argument('--strict-ok', action='store_true',
                        help='Report spans recorded as OK where the computed status is UNSET')
    parser.add_argument('--status-key', dest='status_keys', action='append', metavar='KEY',
                        help='Span attribute holding the HTTP status code (repeatable, tried in order)')
    parser.add_argument('--include-internal', action='store_true',
                        help='List INTERNAL spans recorded as ERROR in the report')
    args = parser.parse_args(argv)

    config = AuditConfig(
        status_code_keys=args.status_keys,
        treat_ok_as_unset=not args.strict_ok,
        include_internal_errors=args.include_internal
    )
    auditor = StatusAuditor(config)

    try:
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Status code keys: {', '.join(config.status_code_keys)}")
        print(f"  Treat OK as UNSET: {config.treat_ok_as_unset}\n")
        report = auditor.audit_file(args.input_file)
        with open(args.output_file, 'w', encoding='utf-8') as f:
            f.write(format_report(report, args.input_file))
        print(f"\nChecked {report.total_checked} HTTP spans, found {report.total_mismatches} status mismatches")
        print(f"Report written to {args.output_file}")
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.")
        return 1
    except ijson.JSONError as e:
        print(f"Error: '{args.input_file}' is not valid JSON: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
