"""
Text-to-speech entry point and its response wrapper.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from transformpy.keys import Key
from transformpy.provider import Provider
from transformpy.request import UNSET, post_json, redact_url

from .base import Speech, TTSConfig
from .tts_factory import TTSFactory


class SpeechResponse:
    """
    Raw TTS response tagged with the provider that produced it.

    ``structured()`` dispatches on ``provider``; a wrapper built by hand must
    carry the provider the request was sent to.
    """

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
    def from_httpx(cls, provider: Provider, resp: httpx.Response) -> SpeechResponse:
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

    def structured(self) -> Speech:
        return TTSFactory.get_adapter(self.provider).parse(self)


async def tts(
    key: Key,
    config: TTSConfig,
    model: str | None,
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = UNSET,
) -> SpeechResponse:
    """
    Synthesize ``text`` with the provider of ``key``.

    Args:
        key: Provider credential; selects the adapter
        config: Optional voice/speed/format settings
        model: Model name, or None for the provider default
        text: Text to speak
        client: Optional shared ``httpx.AsyncClient``
        timeout: Request timeout in seconds, defaults to config

    Returns:
        SpeechResponse; call ``structured()`` for the decoded audio

    Raises:
        UnsupportedProviderError: If the provider has no TTS endpoint
        UnsupportedOptionError: If ``config`` sets a field the provider lacks
        httpx.HTTPError: On transport failure
    """
    adapter = TTSFactory.get_adapter(key.provider)
    url = adapter.address(key, model)
    body = adapter.build_body(text, config, model)
    headers = adapter.headers(key)
    logger.debug(f"Requesting text-to-speech from {redact_url(url)}: {body}")
    resp = await post_json(url, headers, body, client=client, timeout=timeout)
    return SpeechResponse.from_httpx(key.provider, resp)
