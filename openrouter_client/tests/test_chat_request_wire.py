"""Serialization of chat requests and decoding of chat responses."""

from __future__ import annotations

import json

from openrouter_client.base.models import (
    ChatRequest,
    ChatResponse,
    FunctionDescription,
    FunctionToolChoice,
    Message,
    ProviderPreferences,
    ReasoningConfiguration,
    ReasoningEffort,
    ResponseFormat,
    StreamingDelta,
    Tool,
)

from .helpers import chat_response_payload


def test_minimal_request_omits_absent_fields():
    req = ChatRequest(model="openai/gpt-4o", messages=[Message(role="user", content="Hello")])
    assert req.to_wire() == {
        "model": "openai/gpt-4o",
        "messages": [{"role": "user", "content": "Hello"}],
    }


def test_full_request_wire_shape():
    req = ChatRequest(
        model="openai/gpt-4o",
        messages=[Message(role="user", content="weather?")],
        models=["anthropic/claude-3.5-sonnet"],
        route="fallback",
        temperature=0.2,
        max_tokens=64,
        stop=["\n\n"],
        response_format=ResponseFormat(type="json_object"),
        tools=[
            Tool(
                function=FunctionDescription(
                    name="get_weather",
                    description="Look up the weather",
                    parameters={"type": "object", "properties": {"city": {"type": "string"}}},
                )
            )
        ],
        tool_choice=FunctionToolChoice.named("get_weather"),
        logit_bias={50256: -100.0},
        provider=ProviderPreferences(order=["OpenAI", "Azure"], allow_fallbacks=False),
        reasoning=ReasoningConfiguration(effort=ReasoningEffort.HIGH),
    )
    wire = json.loads(json.dumps(req.to_wire()))
    assert wire["route"] == "fallback"
    assert wire["models"] == ["anthropic/claude-3.5-sonnet"]
    assert wire["tools"][0] == {
        "type": "function",
        "function": {
            "name": "get_weather",
            "description": "Look up the weather",
            "parameters": {"type": "object", "properties": {"city": {"type": "string"}}},
        },
    }
    assert wire["tool_choice"] == {"type": "function", "function": {"name": "get_weather"}}
    assert wire["logit_bias"] == {"50256": -100.0}
    assert wire["provider"] == {"order": ["OpenAI", "Azure"], "allow_fallbacks": False}
    assert wire["reasoning"] == {"effort": "high"}
    assert wire["response_format"] == {"type": "json_object"}
    assert "stream" not in wire
    assert "prompt" not in wire


def test_literal_tool_choice_is_bare_string():
    req = ChatRequest(model="m", prompt="hi", tool_choice="auto")
    assert req.to_wire() == {"model": "m", "prompt": "hi", "tool_choice": "auto"}


def test_with_streaming_copies_and_forces_flag():
    req = ChatRequest(model="m", prompt="hi", stream=False)
    streamed = req.with_streaming()
    assert streamed.stream is True
    assert req.stream is False
    assert streamed.to_wire()["stream"] is True


def test_request_round_trips_through_json():
    req = ChatRequest(
        model="m",
        messages=[Message(role="user", content="hi", name="alice")],
        logit_bias={7: 1.5},
        tool_choice="none",
    )
    decoded = ChatRequest.model_validate_json(json.dumps(req.to_wire()))
    assert decoded == req


def test_chat_response_decodes_and_exposes_content():
    resp = ChatResponse.model_validate(chat_response_payload("Hi!"))
    assert resp.content == "Hi!"
    assert resp.choices[0].finish_reason == "stop"
    assert resp.usage.total_tokens == 13
    assert resp.usage.reasoning_tokens is None


def test_chat_response_reasoning_tokens_and_unknown_fields():
    payload = chat_response_payload()
    payload["usage"]["completion_tokens_details"] = {"reasoning_tokens": 42}
    payload["system_fingerprint"] = "fp_1"
    resp = ChatResponse.model_validate(payload)
    assert resp.usage.reasoning_tokens == 42


def test_chat_response_null_content_and_no_choices():
    payload = chat_response_payload()
    payload["choices"][0]["message"]["content"] = None
    assert ChatResponse.model_validate(payload).content is None
    payload["choices"] = []
    assert ChatResponse.model_validate(payload).content is None


def test_streaming_delta_first_content():
    delta = StreamingDelta.model_validate(
        {"id": "gen-1", "choices": [{"index": 0, "delta": {"content": "Hel"}}]}
    )
    assert delta.first_content == "Hel"
    assert StreamingDelta.model_validate({"id": "gen-1", "choices": []}).first_content is None
