"""Structured logging utilities for the client.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the HTTP and streaming layers.
- Standard library ``logging`` only; the JSON shape lives in
  :mod:`openrouter_client.base.log_support`.

Every module obtains a child of the shared ``openrouter_client`` logger via
``get_logger(__name__)``; only the base logger owns handlers. Its level comes
from ``OPENROUTER_CLIENT_LOG_LEVEL`` (default ``WARNING`` so that a library
stays quiet unless asked). Events are emitted with ``log_event`` as one JSON
object per line. Credentials are never part of a payload.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional, Union

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "openrouter_client"
LOG_LEVEL_ENV = "OPENROUTER_CLIENT_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_openrouter_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_openrouter_console_handler"
_FILE_HANDLER_ATTR = "_openrouter_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: Optional[str], default: int = logging.WARNING) -> int:
    """Parse a logging level name into its integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    case-insensitively and falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    """Initialize (once) and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    level = _parse_level(os.getenv(LOG_LEVEL_ENV))
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True) -> logging.Logger:
    """Return ``name`` as a logger that propagates to the shared base logger.

    Names outside the ``openrouter_client`` hierarchy are nested under it so
    their records reach the managed handlers.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(
    *,
    level: Union[int, str, None] = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level, numeric or by name (e.g. ``"DEBUG"``). ``None`` keeps
        the current level.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused when it already targets the same path). When
        ``None``, any file handler previously attached here is removed.
    json_mode: bool
        JSON formatter (default) or a plain text formatter.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers attached by callers are left
        untouched.
    """
    logger = _ensure_base_logger(json_mode=json_mode)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False) or getattr(handler, _FILE_HANDLER_ATTR, False):
            handler.setLevel(logger.level)
            handler.setFormatter(_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path is not None else None
    for handler in managed:
        if abs_path is not None and getattr(handler, "baseFilename", None) == abs_path:
            continue
        logger.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()
    if abs_path is None or any(getattr(h, "baseFilename", None) == abs_path for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    # 10MB x 5 backups
    file_handler = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(file_handler, _FILE_HANDLER_ATTR, True)
    file_handler.setLevel(logger.level)
    file_handler.setFormatter(_formatter(json_mode))
    logger.addHandler(file_handler)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from ``get_logger``.
    event: str
        Event name (e.g. ``http.response``).
    ctx: LogContext | None
        Request context; merged shallowly.
    level: int
        Logging level of the record.
    **fields: Any
        JSON-serializable key/value pairs; ``None`` values are dropped.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
