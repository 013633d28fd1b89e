"""
Decoders for the polymorphic message content unions.

``MessageContent`` is either a bare string or a bare array of content parts;
the wire never wraps it in an object naming the variant. Content parts are
dispatched on their ``type`` discriminator.

Both decoders raise :class:`DecodingError` rather than a generic validation
error so callers can tell a shape mismatch in the union itself apart from
other failures. The ``path`` argument locates the value inside the enclosing
document and is carried into the error.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Union

from pydantic import ValidationError

from ..errors import DecodingError
from .content_part import ImageContent, TextContent

Path = Sequence[Union[str, int]]

_PART_TYPES = {
    "text": TextContent,
    "image_url": ImageContent,
}


def decode_content_part(value: Any, path: Path = ()) -> Union[TextContent, ImageContent]:
    """Decode one content part by its ``type`` discriminator.

    Raises:
        DecodingError: ``value`` is not an object, its ``type`` names no known
            variant (the offending value is carried on ``.value``), or the
            variant's own fields are invalid.
    """
    if isinstance(value, (TextContent, ImageContent)):
        return value
    if not isinstance(value, Mapping):
        raise DecodingError("ContentPart", "expected an object with a 'type' field", path, value)
    discriminator = value.get("type")
    part_cls = _PART_TYPES.get(discriminator) if isinstance(discriminator, str) else None
    if part_cls is None:
        raise DecodingError(
            "ContentPart",
            f"unrecognized variant {discriminator!r}",
            (*path, "type"),
            discriminator,
        )
    try:
        return part_cls.model_validate(value)
    except ValidationError as exc:
        raise DecodingError("ContentPart", f"invalid {discriminator!r} part: {exc.errors()[0]['msg']}", path, value) from exc


def decode_content(value: Any, path: Path = ()) -> Union[str, List[Union[TextContent, ImageContent]]]:
    """Decode ``MessageContent``: a string first, then an array of parts.

    Raises:
        DecodingError: ``value`` is neither a string nor an array, or one of
            the array's parts fails to decode.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return [decode_content_part(part, (*path, index)) for index, part in enumerate(value)]
    raise DecodingError(
        "MessageContent",
        f"expected a string or an array of content parts, got {type(value).__name__}",
        path,
        value,
    )


__all__ = ["decode_content", "decode_content_part"]
