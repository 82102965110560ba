"""
Shared HTTP helpers: request headers and the single POST every call issues.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit, urlunsplit

import httpx
from loguru import logger

from transformpy.configs.config import config
from transformpy.keys import Key

UNSET: Any = object()


def request_headers(key: Key) -> dict[str, str]:
    """Default headers with a bearer credential for ``key``."""
    return {
        "Authorization": f"Bearer {key.key}",
        "Content-Type": "application/json",
        "User-Agent": config.user_agent,
    }


def redact_url(url: str) -> str:
    """Drop the query string, which may carry an API key."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


async def post_json(
    url: str,
    headers: dict[str, str],
    body: dict[str, Any],
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = UNSET,
) -> httpx.Response:
    """
    POST ``body`` as JSON and return the fully read response.

    A caller-supplied ``client`` is used as-is and left open. Otherwise a
    client is created for this call only. ``timeout`` defaults to
    ``config.request_timeout``; ``None`` disables timeouts.
    """
    t = config.request_timeout if timeout is UNSET else timeout
    logger.debug(f"POST {redact_url(url)}")
    if client is not None:
        if timeout is UNSET:
            resp = await client.post(url, headers=headers, json=body)
        else:
            resp = await client.post(url, headers=headers, json=body, timeout=t)
    else:
        async with httpx.AsyncClient(timeout=t) as own_client:
            resp = await own_client.post(url, headers=headers, json=body)
    logger.debug(
        f"Response {resp.status_code} from {redact_url(url)} "
        f"({resp.headers.get('content-type', 'unknown')}, {len(resp.content)} bytes)"
    )
    return resp
