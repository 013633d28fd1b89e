"""
Message DTO used in chat requests.

Defines the `Message` model and the `Role` literal representing the sender
role. Content may be either plain text or a list of content parts; inbound
content is decoded by :func:`decode_content` so the string/array union is
resolved the same way whether a message is built in code or parsed from JSON.
"""
from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import field_validator

from .codec import decode_content
from .content_part import ContentPart
from .wire_model import WireModel


# Message roles accepted by the API.
Role = Literal["user", "assistant", "system", "tool"]

MessageContent = Union[str, List[ContentPart]]


class Message(WireModel):
    """A chat message.

    Attributes:
        role: The role of the message author.
        content: Either a plain string or a list of content parts.
        name: Optional participant name.
    """

    role: Role
    content: MessageContent
    name: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def _decode_content(cls, value: Any) -> Any:
        return decode_content(value, ("content",))

    def is_structured(self) -> bool:
        """Return True if the message content is a list of parts."""
        return isinstance(self.content, list)

    def text_or_joined(self) -> str:
        """Return a flattened string view of the content.

        Text parts are joined with newlines; image parts are rendered as
        ``[image]`` for compact logging.
        """
        if isinstance(self.content, str):
            return self.content
        return "\n".join(getattr(p, "text", None) or "[image]" for p in self.content)


__all__ = [
    "Message",
    "MessageContent",
    "Role",
]
