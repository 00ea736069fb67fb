"""
Status code access for recorded OpenTelemetry spans in OTLP JSON form.
"""

import logging
from typing import Dict, Optional, Sequence

from ..core.types import DEFAULT_STATUS_CODE_KEYS

logger = logging.getLogger(__name__)


class OtlpSpanStatusCodeGetter:
    """
    Reads the HTTP status code from the attributes of an OTLP JSON span.

    Both request and response are the recorded span dictionary. Attributes are
    expected in OTLP form: [{'key': ..., 'value': {'intValue': ...}}].
    """

    def __init__(self, status_code_keys: Optional[Sequence[str]] = None):
        """
        Args:
            status_code_keys: Attribute keys to try, in order. Defaults to the
                              stable 'http.response.status_code' then the legacy
                              'http.status_code'.
        """
        self.status_code_keys = tuple(status_code_keys or DEFAULT_STATUS_CODE_KEYS)

    def get_http_response_status_code(
        self,
        request: Dict,
        response: Optional[Dict],
        error: Optional[BaseException]
    ) -> Optional[int]:
        if not isinstance(response, dict):
            return None

        attributes = response.get('attributes') or []
        if not isinstance(attributes, list):
            return None

        values = {}
        for attr in attributes:
            if isinstance(attr, dict) and attr.get('key') in self.status_code_keys:
                values.setdefault(attr['key'], attr.get('value'))

        for key in self.status_code_keys:
            if key in values:
                status_code = _parse_int_value(values[key])
                if status_code is not None:
                    return status_code
                logger.warning("Ignoring malformed %s value on span %s: %r",
                               key, response.get('spanId', '?'), values[key])
        return None


def _parse_int_value(value) -> Optional[int]:
    """
    Convert an OTLP attribute value to an int.

    OTLP JSON encodes 64-bit integers as strings, so intValue may be "404".
    Fractional and non-finite numbers are not status codes.
    """
    if not isinstance(value, dict):
        return None
    raw = value.get('intValue')
    if raw is None:
        raw = value.get('stringValue')
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float) and not raw.is_integer():
        return None
    try:
        return int(raw)
    except (ValueError, TypeError, OverflowError):
        return None
