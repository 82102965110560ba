"""
transformpy: one request/response model over several AI provider HTTP APIs.
"""

from loguru import logger

from .audio import Speech, SpeechResponse, TTSConfig, tts
from .errors import (
    MalformedResponseError,
    MissingKeyError,
    ProviderError,
    TransformError,
    UnsupportedOptionError,
    UnsupportedProviderError,
)
from .keys import Key, Keys, load_keys
from .llm import ChatCompletion, ChatCompletionResponse, Message, chat_completion
from .provider import Provider
from .request import request_headers
from .version import __version__

# Library logging stays silent until setup_logging() enables it
logger.disable("transformpy")

__all__ = [
    "ChatCompletion",
    "ChatCompletionResponse",
    "Key",
    "Keys",
    "MalformedResponseError",
    "Message",
    "MissingKeyError",
    "Provider",
    "ProviderError",
    "Speech",
    "SpeechResponse",
    "TTSConfig",
    "TransformError",
    "UnsupportedOptionError",
    "UnsupportedProviderError",
    "__version__",
    "chat_completion",
    "load_keys",
    "request_headers",
    "tts",
]
