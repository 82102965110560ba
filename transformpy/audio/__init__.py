"""
Audio package for transformpy.

Contains the text-to-speech adapters and their shared types.
"""

from .base import Speech, TTSAdapter, TTSConfig
from .speech import SpeechResponse, tts
from .tts_factory import TTSFactory

__all__ = [
    "Speech",
    "SpeechResponse",
    "TTSAdapter",
    "TTSConfig",
    "TTSFactory",
    "tts",
]
