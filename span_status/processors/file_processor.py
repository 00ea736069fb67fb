"""
JSON trace file processing using streaming parser.
"""

import ijson
from typing import Dict, Iterator

# Grafana/Tempo exports use 'batches', raw OTLP JSON uses 'resourceSpans'
BATCH_PREFIXES = ('batches.item', 'resourceSpans.item')
SCOPE_KEYS = ('instrumentationLibrarySpans', 'scopeSpans')


class TraceFileProcessor:
    """Streams spans out of OpenTelemetry trace JSON files."""

    @staticmethod
    def iter_spans(file_path: str) -> Iterator[Dict]:
        """
        Yield every span in a trace JSON file.

        Each span gets its batch's resource attached under 'resource'
        so the service name can be looked up later.

        Args:
            file_path: Path to the trace JSON file

        Yields:
            OTLP span dictionaries
        """
        print(f"Processing {file_path}...")

        batch_count, span_count = 0, 0
        for prefix in BATCH_PREFIXES:
            with open(file_path, 'rb') as f:
                for batch in ijson.items(f, prefix, use_float=True):
                    batch_count += 1
                    resource = batch.get('resource', {})
                    for scope_key in SCOPE_KEYS:
                        for scope_spans in batch.get(scope_key, []):
                            for span in scope_spans.get('spans', []):
                                span_count += 1
                                span['resource'] = resource
                                yield span

                    if batch_count % 100 == 0:
                        print(f"  Read {batch_count} batches, {span_count} spans...")

            if batch_count:
                break

        print(f"Completed reading file: {batch_count} batches, {span_count} spans found.")
