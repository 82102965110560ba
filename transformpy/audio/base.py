"""
TTS adapter interface and the value types shared by all providers.
"""

from __future__ import annotations

import abc
import base64
import binascii
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from loguru import logger

from transformpy.errors import MalformedResponseError, ProviderError, error_message
from transformpy.keys import Key
from transformpy.provider import Provider
from transformpy.request import request_headers

if TYPE_CHECKING:
    from .speech import SpeechResponse


@dataclass(frozen=True)
class TTSConfig:
    """
    Optional text-to-speech settings for a single request.

    Unset fields are left out of the request body so the provider default
    applies. ``other`` is merged into the body last and may override any
    field; it is sent unvalidated, so a bad entry produces a request the
    provider rejects.
    """

    output_format: str | None = None
    voice: str | None = None
    speed: float | None = None
    language_code: str | None = None
    other: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Speech:
    """Decoded audio returned by a provider."""

    request_id: str | None
    file_format: str
    audio: bytes

    @staticmethod
    def base64_decode(audio: str, provider: Provider) -> bytes:
        """Decode a provider's base64 audio field into raw bytes."""
        from .tts_factory import TTSFactory

        return TTSFactory.get_adapter(provider).decode_audio(audio)


class TTSAdapter(abc.ABC):
    """Per-provider request shaping and response parsing for TTS."""

    provider: ClassVar[Provider]
    default_format: ClassVar[str] = "mp3"

    @abc.abstractmethod
    def address(self, key: Key, model: str | None = None) -> str:
        """Return the synthesis endpoint URL."""

    @abc.abstractmethod
    def build_body(
        self, text: str, config: TTSConfig, model: str | None = None
    ) -> dict[str, Any]:
        """Return the JSON request body."""

    @abc.abstractmethod
    def parse(self, response: SpeechResponse) -> Speech:
        """Extract a ``Speech`` from a raw response."""

    def headers(self, key: Key) -> dict[str, str]:
        return request_headers(key)

    def decode_audio(self, audio: str) -> bytes:
        try:
            return base64.b64decode(audio, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedResponseError(
                self.provider, f"audio is not valid base64: {e}"
            ) from e

    def apply_common_fields(
        self, body: dict[str, Any], config: TTSConfig, model: str | None
    ) -> dict[str, Any]:
        """Set the fields every provider names the same way, then ``other``."""
        if model is not None:
            body["model"] = model
        if config.speed is not None:
            body["speed"] = config.speed
        if config.output_format is not None:
            body["output_format"] = config.output_format
        if config.other:
            for name, value in config.other.items():
                body[name] = value
        return body

    def document(self, response: SpeechResponse) -> dict[str, Any]:
        """The response as a JSON object, or ``MalformedResponseError``."""
        try:
            value = response.raw_value()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponseError(
                self.provider, f"body is not JSON: {e}", response.status_code
            ) from e
        if not isinstance(value, dict):
            raise MalformedResponseError(
                self.provider,
                f"expected a JSON object, got {type(value).__name__}",
                response.status_code,
            )
        logger.debug(f"{self.provider} response keys: {sorted(value)}")
        return value

    def raise_for_error(
        self, doc: dict[str, Any], field: str, response: SpeechResponse
    ) -> None:
        if field in doc:
            message = error_message(doc[field])
            logger.warning(f"{self.provider} returned an error: {message}")
            raise ProviderError(self.provider, message, response.status_code)

    def require_str(
        self, doc: dict[str, Any], field: str, response: SpeechResponse
    ) -> str:
        value = doc.get(field)
        if not isinstance(value, str):
            raise MalformedResponseError(
                self.provider,
                f"missing string field '{field}'",
                response.status_code,
            )
        return value
