"""
Structured content parts for multimodal messages.

A message's content is either a plain string or an ordered list of parts.
Each part is tagged on the wire by its ``type`` field: ``"text"`` for plain
text and ``"image_url"`` for an image reference (URL or base64 data URI)
with an optional detail hint.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .wire_model import WireModel


class TextContent(WireModel):
    """A plain-text content part."""

    type: Literal["text"] = "text"
    text: str


class ImageUrl(WireModel):
    """Image location plus an optional detail hint (``"low"``, ``"high"``, ``"auto"``)."""

    url: str
    detail: Optional[str] = None


class ImageContent(WireModel):
    """An image content part."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl

    @classmethod
    def from_url(cls, url: str, detail: Optional[str] = None) -> "ImageContent":
        return cls(image_url=ImageUrl(url=url, detail=detail))


ContentPart = Annotated[Union[TextContent, ImageContent], Field(discriminator="type")]


__all__ = [
    "TextContent",
    "ImageUrl",
    "ImageContent",
    "ContentPart",
]
