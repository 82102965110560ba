"""Tests for turning raw provider TTS payloads into ``Speech`` values."""

from __future__ import annotations

import base64
import json

import pytest

from transformpy import (
    MalformedResponseError,
    Provider,
    ProviderError,
    Speech,
    SpeechResponse,
)

AUDIO = b"\x00\x01fake-audio\xff\xfe"
AUDIO_B64 = base64.b64encode(AUDIO).decode("ascii")


def _json_response(
    provider: Provider, payload: object, status_code: int | None = 200
) -> SpeechResponse:
    return SpeechResponse(
        provider=provider,
        content=json.dumps(payload).encode("utf-8"),
        status_code=status_code,
        content_type="application/json",
    )


@pytest.mark.parametrize(
    "payload",
    [b"", b"\x00\x10\x20", bytes(range(256)), b"hello world" * 50],
)
def test_deepinfra_prefix_round_trip(payload: bytes) -> None:
    encoded = "data:audio/mp3;base64," + base64.b64encode(payload).decode("ascii")
    assert Speech.base64_decode(encoded, Provider.DeepInfra) == payload


def test_deepinfra_decode_requires_prefix() -> None:
    with pytest.raises(MalformedResponseError, match="prefix"):
        Speech.base64_decode(AUDIO_B64, Provider.DeepInfra)


def test_invalid_base64_is_malformed() -> None:
    with pytest.raises(MalformedResponseError, match="base64"):
        Speech.base64_decode("not*base64!", Provider.Hyperbolic)


def test_deepinfra_success() -> None:
    resp = _json_response(
        Provider.DeepInfra,
        {
            "request_id": "req-42",
            "output_format": "wav",
            "audio": f"data:audio/wav;base64,{AUDIO_B64}",
            "inference_status": {"status": "succeeded"},
        },
    )

    speech = resp.structured()

    assert speech == Speech(request_id="req-42", file_format="wav", audio=AUDIO)


def test_deepinfra_detail_is_provider_error() -> None:
    resp = _json_response(
        Provider.DeepInfra, {"detail": "Model not found"}, status_code=404
    )

    with pytest.raises(ProviderError) as exc_info:
        resp.structured()

    assert exc_info.value.message == "Model not found"
    assert exc_info.value.status_code == 404
    assert "Model not found" in str(exc_info.value)


def test_deepinfra_missing_audio_is_malformed() -> None:
    resp = _json_response(Provider.DeepInfra, {"output_format": "mp3"})
    with pytest.raises(MalformedResponseError, match="audio"):
        resp.structured()


def test_hyperbolic_success() -> None:
    resp = _json_response(Provider.Hyperbolic, {"audio": AUDIO_B64})

    assert resp.structured() == Speech(request_id=None, file_format="mp3", audio=AUDIO)


def test_hyperbolic_non_json_is_malformed() -> None:
    resp = SpeechResponse(Provider.Hyperbolic, b"<html>bad gateway</html>", 502)
    with pytest.raises(MalformedResponseError, match="not JSON"):
        resp.structured()


def test_openai_audio_body_is_returned_raw() -> None:
    resp = SpeechResponse(
        Provider.OpenAI, AUDIO, status_code=200, content_type="audio/mpeg"
    )

    assert resp.structured() == Speech(request_id=None, file_format="mp3", audio=AUDIO)


def test_openai_audio_that_parses_as_json_is_still_audio() -> None:
    resp = SpeechResponse(
        Provider.OpenAI, b"123", status_code=200, content_type="audio/mpeg"
    )
    assert resp.structured().audio == b"123"


def test_openai_error_payload() -> None:
    resp = _json_response(
        Provider.OpenAI,
        {"error": {"message": "Incorrect API key provided", "type": "auth"}},
        status_code=401,
    )

    with pytest.raises(ProviderError, match="Incorrect API key provided"):
        resp.structured()


def test_openai_plain_string_error() -> None:
    resp = _json_response(Provider.OpenAI, {"error": "x"}, status_code=400)
    with pytest.raises(ProviderError) as exc_info:
        resp.structured()
    assert exc_info.value.message == "x"


def test_openai_error_status_with_text_body() -> None:
    resp = SpeechResponse(
        Provider.OpenAI, b"upstream timeout", status_code=504, content_type="text/plain"
    )
    with pytest.raises(ProviderError, match="upstream timeout"):
        resp.structured()


def test_openai_json_without_error_is_malformed() -> None:
    resp = _json_response(Provider.OpenAI, {"status": "ok"})
    with pytest.raises(MalformedResponseError):
        resp.structured()


def test_openai_without_metadata_probes_body() -> None:
    error = SpeechResponse(Provider.OpenAI, b'{"error": "x"}')
    with pytest.raises(ProviderError):
        error.structured()

    audio = SpeechResponse(Provider.OpenAI, AUDIO)
    assert audio.structured().audio == AUDIO


def test_google_success_discards_timepoints() -> None:
    resp = _json_response(
        Provider.Google,
        {
            "audioContent": AUDIO_B64,
            "timepoints": [{"markName": "a", "timeSeconds": 0.5}],
            "audioConfig": {"audioEncoding": "LINEAR16"},
        },
    )

    assert resp.structured() == Speech(request_id=None, file_format="mp3", audio=AUDIO)


def test_google_without_timepoints() -> None:
    resp = _json_response(Provider.Google, {"audioContent": AUDIO_B64})
    assert resp.structured().audio == AUDIO


def test_google_error_payload() -> None:
    resp = _json_response(
        Provider.Google,
        {"error": {"code": 400, "message": "API key not valid", "status": "INVALID"}},
        status_code=400,
    )
    with pytest.raises(ProviderError, match="API key not valid"):
        resp.structured()


def test_google_bad_timepoints_is_malformed() -> None:
    resp = _json_response(
        Provider.Google, {"audioContent": AUDIO_B64, "timepoints": "soon"}
    )
    with pytest.raises(MalformedResponseError, match="timepoints"):
        resp.structured()


def test_raw_value_and_bytes() -> None:
    resp = _json_response(Provider.Hyperbolic, {"audio": AUDIO_B64})
    assert resp.raw_value() == {"audio": AUDIO_B64}
    assert json.loads(resp.bytes()) == {"audio": AUDIO_B64}


def test_json_array_is_malformed() -> None:
    resp = _json_response(Provider.Google, [1, 2, 3])
    with pytest.raises(MalformedResponseError, match="JSON object"):
        resp.structured()
