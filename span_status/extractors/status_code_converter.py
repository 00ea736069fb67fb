"""
Role-based HTTP status code classification.
"""

from enum import Enum


class HttpStatusCodeConverter(Enum):
    """
    Side of the HTTP exchange a span represents, carrying the lowest
    status code that marks the span as failed.

    CLIENT spans fail on any 4xx or 5xx response. SERVER spans only fail on
    5xx, since 4xx responses are the caller's mistake.
    """

    CLIENT = 400
    SERVER = 500

    def is_error(self, status_code: int) -> bool:
        return status_code >= self.value


def is_error(status_code: int, role: HttpStatusCodeConverter) -> bool:
    """
    Classify an HTTP status code for the given role.

    Args:
        status_code: HTTP response status code
        role: HttpStatusCodeConverter.CLIENT or HttpStatusCodeConverter.SERVER

    Returns:
        True if a span with this role and status code should be marked as ERROR
    """
    return role.is_error(status_code)
