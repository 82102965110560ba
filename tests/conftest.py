"""Shared fixtures: provider keys and an httpx client backed by a mock transport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from transformpy import Key, Provider


@pytest.fixture
def make_key() -> Callable[[Provider], Key]:
    def _make(provider: Provider) -> Key:
        return Key(provider=provider, key=f"test-{provider.value}-key")

    return _make


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingTransport:
        return RecordingTransport(handler)

    return _make
