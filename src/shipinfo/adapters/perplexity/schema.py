"""Perplexity chat-completion response schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PerplexityBaseModel(BaseModel):
    # responses carry usage, citations and search results we do not read
    model_config = ConfigDict(extra="ignore")


class ChatMessage(PerplexityBaseModel):
    role: str | None = None
    content: str


class ChatChoice(PerplexityBaseModel):
    index: int | None = None
    message: ChatMessage
    finish_reason: str | None = None


class ChatCompletionResponse(PerplexityBaseModel):
    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice] = Field(min_length=1)

    @property
    def content(self) -> str:
        return self.choices[0].message.content
