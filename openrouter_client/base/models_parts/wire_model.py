"""
Shared base class for every JSON value exchanged with the API.

All models are immutable (``frozen=True``), ignore unknown inbound fields,
and serialize through :meth:`WireModel.to_wire`, which omits absent fields
instead of emitting ``null``. The few fields the server expects as explicit
``null`` are listed per model in ``always_emit``.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Immutable pydantic model with absent-field-omitting serialization."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    always_emit: ClassVar[Tuple[str, ...]] = ()

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping sent over the wire.

        ``None`` fields are dropped at every nesting level except the
        top-level names in ``always_emit``, which are emitted as ``null``.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for name in self.always_emit:
            data.setdefault(name, None)
        return data


__all__ = ["WireModel"]
