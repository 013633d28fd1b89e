"""Token usage statistics shared by complete and streamed responses."""
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field

from .wire_model import WireModel


class OutputTokensDetails(WireModel):
    """Breakdown of output tokens; present when the provider reports reasoning usage."""

    reasoning_tokens: Optional[int] = None


class Usage(WireModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    output_tokens_details: Optional[OutputTokensDetails] = Field(
        default=None,
        validation_alias=AliasChoices("output_tokens_details", "completion_tokens_details"),
    )

    @property
    def reasoning_tokens(self) -> Optional[int]:
        details = self.output_tokens_details
        return details.reasoning_tokens if details is not None else None


__all__ = ["OutputTokensDetails", "Usage"]
