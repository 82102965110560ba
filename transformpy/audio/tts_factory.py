"""
TTS adapter registry.

Maps each provider with a speech endpoint to the adapter that knows its URL,
body shape and response schema.
"""

from transformpy.errors import UnsupportedProviderError
from transformpy.provider import Provider

from .base import TTSAdapter
from .deepinfra_tts import DeepInfraTTS
from .google_tts import GoogleTTS
from .hyperbolic_tts import HyperbolicTTS
from .openai_tts import OpenAITTS


class TTSFactory:
    """Lookup of TTS adapters by provider"""

    _adapters: dict[Provider, TTSAdapter] = {
        Provider.DeepInfra: DeepInfraTTS(),
        Provider.Hyperbolic: HyperbolicTTS(),
        Provider.OpenAI: OpenAITTS(),
        Provider.Google: GoogleTTS(),
    }

    @classmethod
    def get_adapter(cls, provider: Provider) -> TTSAdapter:
        """
        Return the adapter for ``provider``.

        Raises:
            UnsupportedProviderError: If the provider has no TTS adapter
        """
        try:
            return cls._adapters[provider]
        except KeyError:
            raise UnsupportedProviderError(provider, "TTS") from None

    @classmethod
    def supported_providers(cls) -> list[Provider]:
        return list(cls._adapters)
