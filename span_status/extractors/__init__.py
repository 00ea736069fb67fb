"""HTTP status extraction for trace spans."""

from .getters import HttpStatusCodeGetter
from .http_status_extractor import HttpSpanStatusExtractor
from .status_code_converter import HttpStatusCodeConverter, is_error

__all__ = ["HttpStatusCodeGetter", "HttpSpanStatusExtractor", "HttpStatusCodeConverter", "is_error"]
