"""Auxiliary logging helpers (formatters, context) used by openrouter_client.base.logging."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext"]
