"""
DeepInfra TTS adapter.

DeepInfra serves speech models through its generic inference endpoint, so the
model name is part of the URL. Audio comes back as a base64 data URI.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from transformpy.errors import MalformedResponseError
from transformpy.keys import Key
from transformpy.provider import Provider

from .base import Speech, TTSAdapter, TTSConfig

if TYPE_CHECKING:
    from .speech import SpeechResponse

DEFAULT_MODEL = "hexgrad/Kokoro-82M"

_DATA_URI_PREFIX = re.compile(r"^data:audio/[A-Za-z0-9.+-]+;base64,")


class DeepInfraTTS(TTSAdapter):
    provider = Provider.DeepInfra

    def address(self, key: Key, model: str | None = None) -> str:
        return f"{key.provider.domain}/v1/inference/{model or DEFAULT_MODEL}"

    def build_body(
        self, text: str, config: TTSConfig, model: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"text": text}
        if config.voice is not None:
            body["preset_voice"] = config.voice
        return self.apply_common_fields(body, config, model)

    def decode_audio(self, audio: str) -> bytes:
        match = _DATA_URI_PREFIX.match(audio)
        if match is None:
            raise MalformedResponseError(
                self.provider, "audio is missing the 'data:audio/...;base64,' prefix"
            )
        return super().decode_audio(audio[match.end() :])

    def parse(self, response: SpeechResponse) -> Speech:
        doc = self.document(response)
        self.raise_for_error(doc, "detail", response)
        audio = self.require_str(doc, "audio", response)
        file_format = self.require_str(doc, "output_format", response)
        request_id = doc.get("request_id")
        return Speech(
            request_id=request_id if isinstance(request_id, str) else None,
            file_format=file_format,
            audio=self.decode_audio(audio),
        )
