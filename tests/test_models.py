"""Request / result value objects"""
import pytest

from transcribe.errors import TransportError
from transcribe.models import Err, Ok, TranscriptionRequest, TranscriptionResult


def test_request_from_url():
    request = TranscriptionRequest.from_url("https://dpgr.am/spacewalk.wav")

    assert request.source_url == "https://dpgr.am/spacewalk.wav"
    assert request.audio_bytes is None


def test_request_from_bytes():
    request = TranscriptionRequest.from_bytes(b"RIFF")

    assert request.audio_bytes == b"RIFF"
    assert request.source_url is None


def test_request_rejects_both_variants():
    with pytest.raises(ValueError):
        TranscriptionRequest(source_url="https://example.com/a.wav", audio_bytes=b"x")


def test_request_rejects_neither_variant():
    with pytest.raises(ValueError):
        TranscriptionRequest()


def test_request_describe_never_includes_audio():
    assert TranscriptionRequest.from_bytes(b"abcd").describe() == "<4 bytes>"
    assert TranscriptionRequest.from_url("https://x/y.wav").describe() == "https://x/y.wav"


def test_request_immutable():
    request = TranscriptionRequest.from_url("https://x/y.wav")

    with pytest.raises(Exception):
        request.source_url = "https://other"


def test_result_to_dict():
    assert TranscriptionResult("hello").to_dict() == {"transcript": "hello"}


def test_result_defaults_to_empty_transcript():
    assert TranscriptionResult().transcript == ""


def test_outcomes_pattern_match():
    error = TransportError("down")

    match Ok(TranscriptionResult("hi")):
        case Ok(result):
            assert result.transcript == "hi"
        case _:
            pytest.fail("expected Ok")

    match Err(error):
        case Err(e):
            assert e is error
        case _:
            pytest.fail("expected Err")
