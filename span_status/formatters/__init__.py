"""Formatting utilities for audit output."""

from .markdown import format_report

__all__ = ["format_report"]
