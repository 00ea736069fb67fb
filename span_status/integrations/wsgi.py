"""
Status code access for werkzeug (and Flask) request/response objects.
"""

from typing import Optional

from werkzeug.wrappers import Request, Response


class WerkzeugStatusCodeGetter:
    """Reads the status code of a werkzeug Response handled by a WSGI application."""

    def get_http_response_status_code(
        self,
        request: Request,
        response: Optional[Response],
        error: Optional[BaseException]
    ) -> Optional[int]:
        status_code = getattr(response, 'status_code', None)
        if isinstance(status_code, int) and not isinstance(status_code, bool):
            return status_code
        return None
