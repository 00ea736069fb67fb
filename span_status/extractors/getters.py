"""
Status code accessor protocol implemented by HTTP integrations.
"""

from typing import Any, Optional, Protocol


class HttpStatusCodeGetter(Protocol):
    """
    Reads the HTTP response status code from an integration's request/response pair.

    Implementations must not raise: anything that prevents reading a code is
    reported as None. HttpSpanStatusExtractor only calls it when a response
    is present, other callers may pass None.
    """

    def get_http_response_status_code(
        self,
        request: Any,
        response: Any,
        error: Optional[BaseException]
    ) -> Optional[int]:
        ...
