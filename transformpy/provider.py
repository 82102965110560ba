"""
Supported AI providers.
"""

from __future__ import annotations

from enum import Enum

_DOMAINS: dict[str, str] = {
    "openai": "https://api.openai.com",
    "deepinfra": "https://api.deepinfra.com",
    "hyperbolic": "https://api.hyperbolic.xyz",
    "google": "https://generativelanguage.googleapis.com",
    "groq": "https://api.groq.com",
    "togetherai": "https://api.together.xyz",
    "cerebras": "https://api.cerebras.ai",
    "sambanova": "https://api.sambanova.ai",
}

_KEY_PREFIXES: dict[str, str] = {
    "togetherai": "TOGETHER",
}


class Provider(str, Enum):
    OpenAI = "openai"
    DeepInfra = "deepinfra"
    Hyperbolic = "hyperbolic"
    Google = "google"
    Groq = "groq"
    TogetherAI = "togetherai"
    Cerebras = "cerebras"
    SambaNova = "sambanova"

    def __str__(self) -> str:
        return self.name

    @property
    def domain(self) -> str:
        """Base URL (scheme and host) of the provider's API."""
        return _DOMAINS[self.value]

    @property
    def key_names(self) -> tuple[str, ...]:
        """Environment variable names that may hold this provider's key."""
        prefix = _KEY_PREFIXES.get(self.value, self.value.upper())
        return (f"{prefix}_KEY", f"{prefix}_API_KEY")

    @classmethod
    def from_name(cls, name: str) -> Provider:
        """Parse a provider from its case-insensitive name."""
        lowered = name.strip().lower()
        if lowered == "gemini":
            lowered = "google"
        elif lowered == "together":
            lowered = "togetherai"
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(
            f"Unknown provider: {name}. Available providers: {[p.value for p in cls]}"
        )
