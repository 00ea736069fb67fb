"""Processing components for recorded trace files."""

from .file_processor import TraceFileProcessor
from .status_auditor import StatusAuditor

__all__ = ["TraceFileProcessor", "StatusAuditor"]
