"""
LLM package exposing OpenAI-compatible chat completion across providers.
"""

from .base import ChatCompletion, Choice, Message, Usage
from .provider import ChatCompletionResponse, chat_completion, chat_providers

__all__ = [
    "ChatCompletion",
    "ChatCompletionResponse",
    "Choice",
    "Message",
    "Usage",
    "chat_completion",
    "chat_providers",
]
