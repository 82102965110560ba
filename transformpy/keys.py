"""
Provider credentials and the key store they are loaded into.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values
from loguru import logger

from transformpy.configs.config import config
from transformpy.errors import MissingKeyError
from transformpy.provider import Provider


@dataclass(frozen=True)
class Key:
    """A provider paired with its access credential."""

    provider: Provider
    key: str = field(repr=False)

    def __repr__(self) -> str:
        masked = f"{self.key[:4]}..." if len(self.key) > 8 else "***"
        return f"Key(provider={self.provider}, key={masked!r})"


class Keys:
    """Read-only mapping of providers to their keys."""

    def __init__(self, keys: Mapping[Provider, Key] | None = None) -> None:
        self._keys: dict[Provider, Key] = dict(keys or {})

    def for_provider(self, provider: Provider) -> Key:
        try:
            return self._keys[provider]
        except KeyError:
            raise MissingKeyError(provider) from None

    def __contains__(self, provider: object) -> bool:
        return provider in self._keys

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str | None]) -> Keys:
        """Collect keys from environment-style ``NAME_KEY=value`` pairs."""
        keys: dict[Provider, Key] = {}
        for provider in Provider:
            for name in provider.key_names:
                value = (values.get(name) or "").strip()
                if value:
                    keys[provider] = Key(provider=provider, key=value)
                    break
        return cls(keys)


def load_keys(path: str | os.PathLike[str] | None = None) -> Keys:
    """
    Load provider keys from a dotenv file layered over the process environment.

    Values in the file win over environment variables of the same name. A
    missing file is not an error; only the environment is used then.
    """
    env_path = Path(path if path is not None else config.keys_file)
    values: dict[str, str | None] = dict(os.environ)
    if env_path.exists():
        values.update(dotenv_values(env_path))
    else:
        logger.debug(f"Keys file {env_path} not found, using environment only")
    keys = Keys.from_mapping(values)
    logger.debug(f"Loaded keys for: {[str(k.provider) for k in keys]}")
    return keys
