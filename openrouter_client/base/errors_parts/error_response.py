"""
Error envelope returned by the API.

The server reports failures as ``{"error": {"code": int, "message": str,
"metadata": {...}}}``. The envelope may accompany any status code,
including a nominal 200.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Inner error object: numeric code, message and optional metadata."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    metadata: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


__all__ = ["ErrorDetail", "ErrorResponse"]
