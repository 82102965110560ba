"""Tests for providers, keys and the shared request headers."""

from __future__ import annotations

from pathlib import Path

import pytest

from transformpy import (
    Key,
    Keys,
    MissingKeyError,
    Provider,
    load_keys,
    request_headers,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for provider in Provider:
        for name in provider.key_names:
            monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    ("provider", "domain"),
    [
        (Provider.OpenAI, "https://api.openai.com"),
        (Provider.DeepInfra, "https://api.deepinfra.com"),
        (Provider.Hyperbolic, "https://api.hyperbolic.xyz"),
        (Provider.Google, "https://generativelanguage.googleapis.com"),
    ],
)
def test_provider_domain(provider: Provider, domain: str) -> None:
    assert provider.domain == domain


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("openai", Provider.OpenAI),
        ("DeepInfra", Provider.DeepInfra),
        (" gemini ", Provider.Google),
        ("together", Provider.TogetherAI),
    ],
)
def test_provider_from_name(name: str, expected: Provider) -> None:
    assert Provider.from_name(name) is expected


def test_provider_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown provider"):
        Provider.from_name("acme")


def test_provider_str_is_display_name() -> None:
    assert str(Provider.DeepInfra) == "DeepInfra"
    assert f"{Provider.OpenAI}" == "OpenAI"


def test_key_repr_masks_secret() -> None:
    key = Key(provider=Provider.OpenAI, key="sk-very-secret-value")
    assert "very-secret" not in repr(key)


def test_request_headers_use_bearer_token() -> None:
    headers = request_headers(Key(provider=Provider.OpenAI, key="abc"))
    assert headers["Authorization"] == "Bearer abc"
    assert headers["Content-Type"] == "application/json"


def test_load_keys_from_dotenv_file(tmp_path: Path, clean_env: None) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "DEEPINFRA_KEY=di-123\nOPENAI_API_KEY=sk-456\nUNRELATED=1\n",
        encoding="utf-8",
    )

    keys = load_keys(env_file)

    assert keys.for_provider(Provider.DeepInfra) == Key(Provider.DeepInfra, "di-123")
    assert keys.for_provider(Provider.OpenAI).key == "sk-456"
    assert Provider.Google not in keys
    assert len(keys) == 2


def test_load_keys_file_overrides_environment(
    tmp_path: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GOOGLE_KEY", "from-env")
    monkeypatch.setenv("HYPERBOLIC_KEY", "hyper-env")
    env_file = tmp_path / "keys.env"
    env_file.write_text("GOOGLE_KEY=from-file\n", encoding="utf-8")

    keys = load_keys(env_file)

    assert keys.for_provider(Provider.Google).key == "from-file"
    assert keys.for_provider(Provider.Hyperbolic).key == "hyper-env"


def test_load_keys_missing_file_uses_environment(
    tmp_path: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TOGETHER_KEY", "tg")

    keys = load_keys(tmp_path / "absent.env")

    assert keys.for_provider(Provider.TogetherAI).key == "tg"


def test_for_provider_raises_missing_key() -> None:
    keys = Keys()
    with pytest.raises(MissingKeyError) as exc_info:
        keys.for_provider(Provider.Groq)
    assert "GROQ_KEY" in str(exc_info.value)
    assert isinstance(exc_info.value, LookupError)


def test_empty_values_are_ignored() -> None:
    keys = Keys.from_mapping({"OPENAI_KEY": "  ", "OPENAI_API_KEY": "sk-1"})
    assert keys.for_provider(Provider.OpenAI).key == "sk-1"
