"""Decoding rules for the string-or-parts message content union."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from openrouter_client.base.errors import DecodingError, ErrorKind
from openrouter_client.base.models import (
    ImageContent,
    Message,
    TextContent,
    decode_content,
    decode_content_part,
)


def test_bare_string_decodes_to_string_variant():
    assert decode_content("hello") == "hello"


def test_array_decodes_to_parts_in_order():
    parts = decode_content(
        [
            {"type": "text", "text": "What is in this image?"},
            {"type": "image_url", "image_url": {"url": "https://example.org/cat.png", "detail": "low"}},
        ]
    )
    assert isinstance(parts[0], TextContent)
    assert parts[0].text == "What is in this image?"
    assert isinstance(parts[1], ImageContent)
    assert parts[1].image_url.url == "https://example.org/cat.png"
    assert parts[1].image_url.detail == "low"


def test_empty_array_is_valid_parts_variant():
    assert decode_content([]) == []


@pytest.mark.parametrize("value", [42, 1.5, None, {"type": "text", "text": "x"}, True])
def test_non_string_non_array_names_union_type(value):
    with pytest.raises(DecodingError) as info:
        decode_content(value, ("messages", 0, "content"))
    err = info.value
    assert err.type_name == "MessageContent"
    assert err.path == ("messages", 0, "content")
    assert err.kind is ErrorKind.DECODING
    assert "messages.0.content" in err.message


def test_unknown_part_discriminator_carries_value():
    with pytest.raises(DecodingError) as info:
        decode_content([{"type": "text", "text": "ok"}, {"type": "audio", "data": "..."}])
    err = info.value
    assert err.type_name == "ContentPart"
    assert err.value == "audio"
    assert err.path == (1, "type")


def test_part_that_is_not_an_object_fails():
    with pytest.raises(DecodingError) as info:
        decode_content_part("text")
    assert info.value.type_name == "ContentPart"


def test_part_with_missing_fields_fails():
    with pytest.raises(DecodingError):
        decode_content_part({"type": "image_url"})


def test_decoded_part_instances_pass_through():
    part = TextContent(text="hi")
    assert decode_content_part(part) is part


def test_message_validation_surfaces_decoding_error():
    with pytest.raises(ValidationError) as info:
        Message.model_validate({"role": "user", "content": 7})
    assert isinstance(info.value.errors()[0]["ctx"]["error"], DecodingError)


def test_message_from_json_structured_content():
    msg = Message.model_validate_json(
        '{"role": "user", "content": [{"type": "text", "text": "a"}, '
        '{"type": "image_url", "image_url": {"url": "data:image/png;base64,AAAA"}}]}'
    )
    assert msg.is_structured()
    assert msg.text_or_joined() == "a\n[image]"


def test_message_encodes_content_without_wrapper():
    plain = Message(role="system", content="be brief")
    assert plain.to_wire() == {"role": "system", "content": "be brief"}

    structured = Message(role="user", content=[TextContent(text="a"), ImageContent.from_url("https://x.io/i.png")])
    assert structured.to_wire() == {
        "role": "user",
        "content": [
            {"type": "text", "text": "a"},
            {"type": "image_url", "image_url": {"url": "https://x.io/i.png"}},
        ],
    }


def test_message_is_immutable():
    msg = Message(role="user", content="hi")
    with pytest.raises(ValidationError):
        msg.content = "changed"
