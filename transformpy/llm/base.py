from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

MessageRole = Literal["system", "user", "assistant", "tool"]


class Message(BaseModel):
    """A single chat message in OpenAI format."""

    role: MessageRole
    content: str

    @classmethod
    def from_str(cls, role: str, content: str) -> Message:
        return cls.model_validate({"role": role, "content": content})


ChatMessages = Sequence[Message | Mapping[str, Any]]


def to_openai_messages(messages: ChatMessages) -> list[dict[str, Any]]:
    """Normalize messages into JSON-ready OpenAI payload dicts."""

    normalized: list[dict[str, Any]] = []
    for message in messages:
        if isinstance(message, Message):
            normalized.append(message.model_dump())
            continue
        if "role" not in message or "content" not in message:
            raise ValueError("Chat message must include both 'role' and 'content'.")
        normalized.append(dict(message))
    return normalized


class ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str
    content: str | None = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int = 0
    message: ResponseMessage
    finish_reason: str | None = None


class Usage(BaseModel):
    model_config = ConfigDict(extra="allow")

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class ChatCompletion(BaseModel):
    """Structured chat completion returned by OpenAI-compatible endpoints."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None

    @property
    def content(self) -> str:
        """First choice's message content, empty when there is none."""
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""
