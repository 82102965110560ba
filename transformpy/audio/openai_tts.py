"""
OpenAI TTS adapter.

OpenAI answers a successful synthesis with the audio file itself and an error
with a JSON document. The status code and content type tell the two apart.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from loguru import logger

from transformpy.errors import MalformedResponseError, ProviderError
from transformpy.keys import Key
from transformpy.provider import Provider

from .base import Speech, TTSAdapter, TTSConfig

if TYPE_CHECKING:
    from .speech import SpeechResponse


class OpenAITTS(TTSAdapter):
    provider = Provider.OpenAI

    def address(self, key: Key, model: str | None = None) -> str:
        return f"{key.provider.domain}/v1/audio/speech"

    def build_body(
        self, text: str, config: TTSConfig, model: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"input": text}
        if config.voice is not None:
            body["voice"] = config.voice
        return self.apply_common_fields(body, config, model)

    def _is_error_document(self, response: SpeechResponse) -> bool:
        if response.status_code is not None and response.status_code >= 400:
            return True
        if response.content_type is not None:
            return response.content_type.split(";")[0].strip() == "application/json"
        if response.status_code is not None:
            return False
        # Neither status nor content type known: probe the body
        try:
            json.loads(response.bytes())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return False
        return True

    def parse(self, response: SpeechResponse) -> Speech:
        if not self._is_error_document(response):
            return Speech(
                request_id=None,
                file_format=self.default_format,
                audio=response.bytes(),
            )
        try:
            doc = self.document(response)
        except MalformedResponseError:
            if response.status_code is not None and response.status_code >= 400:
                text = response.bytes().decode("utf-8", errors="replace").strip()
                logger.warning(f"{self.provider} returned HTTP {response.status_code}")
                raise ProviderError(
                    self.provider,
                    text or f"HTTP {response.status_code}",
                    response.status_code,
                ) from None
            raise
        self.raise_for_error(doc, "error", response)
        raise MalformedResponseError(
            self.provider,
            "expected audio but received a JSON document without an error",
            response.status_code,
        )
