"""
Chat adapter registry and the module-level chat completion facade.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx
from loguru import logger

from transformpy.errors import UnsupportedProviderError
from transformpy.keys import Key
from transformpy.provider import Provider
from transformpy.request import UNSET, post_json, redact_url

from .base import ChatCompletion, ChatMessages
from .openai_client import OpenAICompatibleChat

_chat_adapters: dict[Provider, OpenAICompatibleChat] = {
    Provider.OpenAI: OpenAICompatibleChat(Provider.OpenAI),
    Provider.DeepInfra: OpenAICompatibleChat(
        Provider.DeepInfra, "/v1/openai/chat/completions"
    ),
    Provider.Hyperbolic: OpenAICompatibleChat(Provider.Hyperbolic),
    Provider.Google: OpenAICompatibleChat(
        Provider.Google, "/v1beta/openai/chat/completions"
    ),
    Provider.Groq: OpenAICompatibleChat(Provider.Groq, "/openai/v1/chat/completions"),
    Provider.TogetherAI: OpenAICompatibleChat(Provider.TogetherAI),
    Provider.Cerebras: OpenAICompatibleChat(Provider.Cerebras),
    Provider.SambaNova: OpenAICompatibleChat(Provider.SambaNova),
}


def _get_chat(provider: Provider) -> OpenAICompatibleChat:
    try:
        return _chat_adapters[provider]
    except KeyError:
        raise UnsupportedProviderError(provider, "chat") from None


def chat_providers() -> list[Provider]:
    return list(_chat_adapters)


class ChatCompletionResponse:
    """Raw chat completion response tagged with its provider."""

    def __init__(
        self,
        provider: Provider,
        content: bytes,
        status_code: int | None = None,
        content_type: str | None = None,
    ) -> None:
        self.provider = provider
        self._content = content
        self.status_code = status_code
        self.content_type = content_type

    @classmethod
    def from_httpx(
        cls, provider: Provider, resp: httpx.Response
    ) -> ChatCompletionResponse:
        return cls(
            provider=provider,
            content=resp.content,
            status_code=resp.status_code,
            content_type=resp.headers.get("content-type"),
        )

    def bytes(self) -> bytes:
        return self._content

    def raw_value(self) -> Any:
        return json.loads(self._content)

    def structured(self) -> ChatCompletion:
        return _get_chat(self.provider).parse(self)


async def chat_completion(
    provider: Provider,
    key: Key,
    model: str,
    messages: ChatMessages,
    *,
    extra: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = UNSET,
) -> ChatCompletionResponse:
    """
    Request a chat completion from an OpenAI-compatible endpoint.

    ``extra`` is merged into the request body last (e.g. ``temperature``) and
    is not validated.
    """
    if key.provider != provider:
        raise ValueError(f"Key is for {key.provider}, not {provider}")
    adapter = _get_chat(provider)
    url = adapter.address(key)
    body = adapter.build_body(model, messages, extra)
    logger.debug(f"Requesting chat completion from {redact_url(url)}: {body}")
    resp = await post_json(
        url, adapter.headers(key), body, client=client, timeout=timeout
    )
    return ChatCompletionResponse.from_httpx(provider, resp)
