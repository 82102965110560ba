"""
Exception types raised by transformpy.

Provider error payloads surface as ``ProviderError``; anything the adapters
cannot make sense of surfaces as ``MalformedResponseError``. Transport
failures are left to ``httpx`` and propagate unchanged.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from transformpy.provider import Provider


class TransformError(Exception):
    """Base class for all transformpy errors."""


class UnsupportedProviderError(TransformError, ValueError):
    """The provider has no adapter for the requested capability."""

    def __init__(self, provider: Provider | str, capability: str) -> None:
        self.provider = provider
        self.capability = capability
        super().__init__(f"Unsupported {capability} provider: {provider}")


class UnsupportedOptionError(TransformError, ValueError):
    """A config option was set that the provider cannot express."""


class MissingKeyError(TransformError, LookupError):
    """No credential is configured for a provider."""

    def __init__(self, provider: Provider) -> None:
        self.provider = provider
        names = ", ".join(provider.key_names)
        super().__init__(f"No key found for {provider} (expected one of: {names})")


class ProviderError(TransformError):
    """The provider answered with an error payload."""

    def __init__(
        self,
        provider: Provider,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider} returned an error: {message}")


class MalformedResponseError(TransformError):
    """The response does not have the shape expected for the provider."""

    def __init__(
        self,
        provider: Provider,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.reason = reason
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Malformed {provider} response{detail}: {reason}")


def error_message(value: Any) -> str:
    """Render a provider error value as readable text."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("message"), str):
        return value["message"]
    return json.dumps(value)
