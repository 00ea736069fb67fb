"""
HTTP span status extraction.

Instrumentation of HTTP client or server frameworks uses this extractor so
every integration marks failed HTTP spans the same way: the response status
code can only push a span to ERROR, everything else is left to the default
status policy.
"""

import logging
from typing import Any, Optional

from opentelemetry.trace import StatusCode

from ..core.status import SpanStatusBuilder, SpanStatusExtractor
from .getters import HttpStatusCodeGetter
from .status_code_converter import HttpStatusCodeConverter

logger = logging.getLogger(__name__)


class HttpSpanStatusExtractor:
    """Sets the span status from the HTTP response status code, falling back to a default policy."""

    def __init__(
        self,
        getter: HttpStatusCodeGetter,
        status_code_converter: HttpStatusCodeConverter,
        default: Optional[SpanStatusExtractor] = None
    ):
        self._getter = getter
        self._status_code_converter = status_code_converter
        self._default = default if default is not None else SpanStatusExtractor.get_default()

    @classmethod
    def create_client(
        cls,
        getter: HttpStatusCodeGetter,
        default: Optional[SpanStatusExtractor] = None
    ) -> 'HttpSpanStatusExtractor':
        """
        Create an extractor for outgoing HTTP calls.

        Any 4xx or 5xx response marks the span as ERROR.

        Args:
            getter: Integration accessor for the response status code
            default: Fallback policy, the shared default when omitted
        """
        return cls(getter, HttpStatusCodeConverter.CLIENT, default)

    @classmethod
    def create_server(
        cls,
        getter: HttpStatusCodeGetter,
        default: Optional[SpanStatusExtractor] = None
    ) -> 'HttpSpanStatusExtractor':
        """
        Create an extractor for handled incoming HTTP requests.

        Only 5xx responses mark the span as ERROR.

        Args:
            getter: Integration accessor for the response status code
            default: Fallback policy, the shared default when omitted
        """
        return cls(getter, HttpStatusCodeConverter.SERVER, default)

    @property
    def role(self) -> HttpStatusCodeConverter:
        return self._status_code_converter

    def extract(
        self,
        status_builder: SpanStatusBuilder,
        request: Any,
        response: Optional[Any] = None,
        error: Optional[BaseException] = None
    ) -> None:
        """
        Decide the span status and record it on the builder.

        Args:
            status_builder: Receives the status, set at most once by this method
            request: Integration request object
            response: Integration response object, None when no response was received
            error: Failure raised while processing the request, if any
        """
        if response is not None:
            status_code = self._getter.get_http_response_status_code(request, response, error)
            if status_code is not None and self._status_code_converter.is_error(status_code):
                logger.debug(
                    "HTTP %s status code %s classified as error",
                    self._status_code_converter.name, status_code
                )
                status_builder.set_status(StatusCode.ERROR)
                return
        self._default.extract(status_builder, request, response, error)
