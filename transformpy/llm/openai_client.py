"""
OpenAI-compatible chat completion adapter.

Every supported vendor exposes the OpenAI ``/chat/completions`` schema; they
differ only in where the endpoint lives.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import ValidationError

from transformpy.errors import MalformedResponseError, ProviderError, error_message
from transformpy.keys import Key
from transformpy.provider import Provider
from transformpy.request import request_headers

from .base import ChatCompletion, ChatMessages, to_openai_messages

if TYPE_CHECKING:
    from .provider import ChatCompletionResponse

_ERROR_FIELDS = ("error", "detail")


class OpenAICompatibleChat:
    def __init__(self, provider: Provider, path: str = "/v1/chat/completions") -> None:
        self.provider = provider
        self.path = path

    def address(self, key: Key) -> str:
        return f"{key.provider.domain}{self.path}"

    def build_body(
        self,
        model: str,
        messages: ChatMessages,
        extra: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": model,
            "messages": to_openai_messages(messages),
        }
        if extra:
            for name, value in extra.items():
                body[name] = value
        return body

    def headers(self, key: Key) -> dict[str, str]:
        return request_headers(key)

    def parse(self, response: ChatCompletionResponse) -> ChatCompletion:
        try:
            doc = response.raw_value()
        except ValueError as e:
            raise MalformedResponseError(
                self.provider, f"body is not JSON: {e}", response.status_code
            ) from e
        if not isinstance(doc, dict):
            raise MalformedResponseError(
                self.provider,
                f"expected a JSON object, got {type(doc).__name__}",
                response.status_code,
            )
        for field in _ERROR_FIELDS:
            if field in doc:
                message = error_message(doc[field])
                logger.warning(f"{self.provider} returned an error: {message}")
                raise ProviderError(self.provider, message, response.status_code)
        try:
            completion = ChatCompletion.model_validate(doc)
        except ValidationError as e:
            raise MalformedResponseError(
                self.provider, str(e), response.status_code
            ) from e
        if not completion.choices:
            raise MalformedResponseError(
                self.provider, "response has no choices", response.status_code
            )
        return completion
