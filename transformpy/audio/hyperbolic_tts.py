"""
Hyperbolic TTS adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from transformpy.errors import UnsupportedOptionError
from transformpy.keys import Key
from transformpy.provider import Provider

from .base import Speech, TTSAdapter, TTSConfig

if TYPE_CHECKING:
    from .speech import SpeechResponse


class HyperbolicTTS(TTSAdapter):
    provider = Provider.Hyperbolic

    def address(self, key: Key, model: str | None = None) -> str:
        return f"{key.provider.domain}/v1/audio/generation"

    def build_body(
        self, text: str, config: TTSConfig, model: str | None = None
    ) -> dict[str, Any]:
        if config.voice is not None:
            raise UnsupportedOptionError(
                "Hyperbolic TTS has no voice field; "
                "pass provider-specific fields through TTSConfig.other"
            )
        body: dict[str, Any] = {"text": text}
        return self.apply_common_fields(body, config, model)

    def parse(self, response: SpeechResponse) -> Speech:
        doc = self.document(response)
        audio = self.require_str(doc, "audio", response)
        return Speech(
            request_id=None,
            file_format=self.default_format,
            audio=self.decode_audio(audio),
        )
