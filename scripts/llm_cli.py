#!/usr/bin/env python3
"""CLI helpers to exercise chat completion and text-to-speech per provider."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT_DIR))
for dotenv_name in (".env", ".env.local"):
    candidate = ROOT_DIR / dotenv_name
    if candidate.exists():
        load_dotenv(candidate, override=False)

from transformpy import (  # noqa: E402
    Message,
    Provider,
    TTSConfig,
    chat_completion,
    load_keys,
    tts,
)
from transformpy.audio import TTSFactory  # noqa: E402
from transformpy.configs.config import config  # noqa: E402
from transformpy.configs.logging_config import setup_logging  # noqa: E402
from transformpy.llm import chat_providers  # noqa: E402

console = Console()
err_console = Console(stderr=True)

DEFAULT_CHAT_MODELS: dict[Provider, str] = {
    Provider.OpenAI: "gpt-4o-mini",
    Provider.DeepInfra: "meta-llama/Llama-3.3-70B-Instruct",
    Provider.Hyperbolic: "meta-llama/Llama-3.3-70B-Instruct",
    Provider.Google: "gemini-1.5-flash",
    Provider.Groq: "llama-3.3-70b-versatile",
    Provider.TogetherAI: "meta-llama/Llama-3.3-70B-Instruct-Turbo",
    Provider.Cerebras: "llama3.1-8b",
    Provider.SambaNova: "Meta-Llama-3.3-70B-Instruct",
}

DEFAULT_TTS_MODELS: dict[Provider, str | None] = {
    Provider.OpenAI: "tts-1",
    Provider.DeepInfra: None,
    Provider.Hyperbolic: None,
    Provider.Google: None,
}


def status_label(label: str, style: str) -> Text:
    """Create a styled status label wrapped in brackets."""
    text = Text(f"[{label}]")
    text.stylize(style)
    return text


def _parse_provider(raw: str) -> Provider:
    try:
        return Provider.from_name(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _timeout_kwargs(args: argparse.Namespace) -> dict[str, float]:
    # Without --timeout the configured REQUEST_TIMEOUT applies
    return {} if args.timeout is None else {"timeout": args.timeout}


def _fail(message: str) -> int:
    err_console.print(status_label("FAIL", "bold red"), message)
    return 1


async def _run_chat(args: argparse.Namespace) -> int:
    provider: Provider = args.provider
    model = args.model or DEFAULT_CHAT_MODELS.get(provider)
    if not model:
        return _fail(f"No default chat model for {provider}; pass --model.")
    messages: list[Message] = []
    if args.system:
        messages.append(Message.from_str("system", args.system))
    messages.append(Message.from_str("user", args.prompt))

    keys = load_keys(args.keys_file)
    console.print(status_label("INFO", "bold blue"), f"Using {provider} model {model}")
    try:
        key = keys.for_provider(provider)
        resp = await chat_completion(
            provider, key, model, messages, **_timeout_kwargs(args)
        )
        completion = resp.structured()
    except Exception as exc:  # noqa: BLE001
        return _fail(f"Chat request failed: {exc}")

    reply = completion.content
    if reply:
        console.print(status_label("OK", "bold green"), reply)
    else:
        console.print(status_label("OK", "bold green"), "[dim]<empty response>[/]")
    return 0


async def _run_tts(args: argparse.Namespace) -> int:
    provider: Provider = args.provider
    model = args.model or DEFAULT_TTS_MODELS.get(provider)
    tts_config = TTSConfig(
        voice=args.voice,
        speed=args.speed,
        output_format=args.format,
        language_code=args.language_code,
    )

    keys = load_keys(args.keys_file)
    console.print(
        status_label("INFO", "bold blue"),
        f"Using {provider} model {model or '<provider default>'}",
    )
    try:
        key = keys.for_provider(provider)
        resp = await tts(key, tts_config, model, args.text, **_timeout_kwargs(args))
        speech = resp.structured()
    except Exception as exc:  # noqa: BLE001
        return _fail(f"TTS request failed: {exc}")

    output_path = Path(args.output).expanduser().resolve()
    if not output_path.suffix:
        output_path = output_path.with_suffix(f".{speech.file_format}")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(speech.audio)
    console.print(
        status_label("OK", "bold green"),
        f"Saved {len(speech.audio)} bytes ({speech.file_format}) to {output_path}",
    )
    if speech.request_id:
        console.print(status_label("INFO", "bold blue"), f"Request {speech.request_id}")
    return 0


def cmd_chat(args: argparse.Namespace) -> int:
    return asyncio.run(_run_chat(args))


def cmd_tts(args: argparse.Namespace) -> int:
    return asyncio.run(_run_tts(args))


def cmd_providers(args: argparse.Namespace) -> int:
    keys = load_keys(args.keys_file)
    tts_supported = set(TTSFactory.supported_providers())
    chat_supported = set(chat_providers())
    for provider in Provider:
        capabilities = [
            name
            for name, supported in (
                ("chat", provider in chat_supported),
                ("tts", provider in tts_supported),
            )
            if supported
        ]
        mark = (
            status_label("KEY", "bold green")
            if provider in keys
            else status_label("NO KEY", "bold yellow")
        )
        console.print(
            mark,
            f"{provider.name:<11} {provider.domain:<45} {', '.join(capabilities)}",
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Provider chat and TTS utilities.")
    parser.add_argument(
        "--keys-file",
        default=config.keys_file,
        help=f"Dotenv file with provider keys (default: {config.keys_file}).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for transformpy (default: LOG_LEVEL or INFO).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chat_parser = subparsers.add_parser(
        "chat",
        help="Send a quick chat completion request.",
    )
    chat_parser.add_argument("prompt", help="User prompt to send to the model.")
    chat_parser.add_argument(
        "--provider",
        type=_parse_provider,
        default=Provider.OpenAI,
        help="Provider name (default: openai).",
    )
    chat_parser.add_argument("--system", help="Optional system instruction.")
    chat_parser.add_argument(
        "--model",
        help="Model name (defaults to a per-provider model).",
    )
    chat_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Optional request timeout (seconds).",
    )
    chat_parser.set_defaults(func=cmd_chat)

    tts_parser = subparsers.add_parser(
        "tts",
        help="Generate speech audio for quick testing.",
    )
    tts_parser.add_argument("text", help="Input text to convert to speech.")
    tts_parser.add_argument(
        "--provider",
        type=_parse_provider,
        default=Provider.OpenAI,
        help="Provider name (default: openai).",
    )
    tts_parser.add_argument("--model", help="TTS model (provider default if unset).")
    tts_parser.add_argument("--voice", help="Voice identifier (provider-specific).")
    tts_parser.add_argument("--speed", type=float, default=None, help="Speech speed.")
    tts_parser.add_argument(
        "--language-code",
        help="Language code for the voice (Google only, e.g. en-US).",
    )
    tts_parser.add_argument("--format", help="Requested output format, e.g. mp3.")
    tts_parser.add_argument(
        "--output",
        default="output/tts",
        help="Path to save the audio; the format is appended when no suffix.",
    )
    tts_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Optional request timeout (seconds).",
    )
    tts_parser.set_defaults(func=cmd_tts)

    providers_parser = subparsers.add_parser(
        "providers",
        help="List providers, their capabilities and whether a key is set.",
    )
    providers_parser.set_defaults(func=cmd_providers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
