"""
Tool descriptors and the tool-choice directive.

Tool definitions are passed through to the API verbatim. ``ToolChoice`` is a
tagged union: the literal strings ``"none"`` and ``"auto"``, or a
:class:`FunctionToolChoice` naming one function.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import Field

from .wire_model import WireModel


class FunctionDescription(WireModel):
    """A callable function: name, optional description, JSON-schema parameters."""

    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)


class Tool(WireModel):
    """A tool available to the model."""

    type: str = "function"
    function: FunctionDescription


class ToolChoiceFunction(WireModel):
    name: str


class FunctionToolChoice(WireModel):
    """Forces the model to call the named function."""

    type: Literal["function"] = "function"
    function: ToolChoiceFunction

    @classmethod
    def named(cls, name: str) -> "FunctionToolChoice":
        return cls(function=ToolChoiceFunction(name=name))


ToolChoice = Union[Literal["none", "auto"], FunctionToolChoice]


__all__ = [
    "FunctionDescription",
    "Tool",
    "ToolChoiceFunction",
    "FunctionToolChoice",
    "ToolChoice",
]
