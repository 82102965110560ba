"""
Google Cloud Text-to-Speech adapter.

Google authenticates this endpoint with the API key in the query string, so
the Authorization header is removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from loguru import logger

from transformpy.errors import MalformedResponseError
from transformpy.keys import Key
from transformpy.provider import Provider

from .base import Speech, TTSAdapter, TTSConfig

if TYPE_CHECKING:
    from .speech import SpeechResponse

ENDPOINT = "https://texttospeech.googleapis.com/v1beta1/text:synthesize"

AUDIO_CONFIG: dict[str, Any] = {
    "audioEncoding": "LINEAR16",
    "pitch": 0,
    "speakingRate": 1,
}


class GoogleTTS(TTSAdapter):
    provider = Provider.Google

    def address(self, key: Key, model: str | None = None) -> str:
        return f"{ENDPOINT}?key={quote(key.key, safe='')}"

    def headers(self, key: Key) -> dict[str, str]:
        headers = super().headers(key)
        headers.pop("Authorization", None)
        return headers

    def build_body(
        self, text: str, config: TTSConfig, model: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"input": {"text": text}}
        if config.voice is not None:
            voice: dict[str, Any] = {"name": config.voice}
            if config.language_code is not None:
                voice["languageCode"] = config.language_code
            body["voice"] = voice
            body["audioConfig"] = dict(AUDIO_CONFIG)
        return self.apply_common_fields(body, config, model)

    def parse(self, response: SpeechResponse) -> Speech:
        doc = self.document(response)
        self.raise_for_error(doc, "error", response)
        audio = self.require_str(doc, "audioContent", response)
        timepoints = doc.get("timepoints", [])
        if not isinstance(timepoints, list):
            raise MalformedResponseError(
                self.provider, "'timepoints' is not a list", response.status_code
            )
        logger.debug(f"Google returned {len(timepoints)} timepoints")
        return Speech(
            request_id=None,
            file_format=self.default_format,
            audio=self.decode_audio(audio),
        )
