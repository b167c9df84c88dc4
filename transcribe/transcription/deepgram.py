"""DeepgramTranscriptionClient — Deepgram prerecorded speech-to-text backend."""
import asyncio
import logging
from typing import Any

import aiohttp

from transcribe.constants import (
    AUDIO_CONTENT_TYPE,
    DEEPGRAM_AUTH_SCHEME,
    DEEPGRAM_LISTEN_URL,
    DEFAULT_MODEL,
    MSG_TRANSCRIBE_FILE_FAILED,
    MSG_TRANSCRIBE_URL_FAILED,
    PUNCTUATE,
)
from transcribe.errors import ProviderError, TranscriptionError, TransportError
from transcribe.models import Err, Ok, Outcome, TranscriptionRequest, TranscriptionResult
from transcribe.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def extract_transcript(payload: Any) -> str:
    """First channel, first alternative. Anything missing yields ""."""
    match payload:
        case {"results": {"channels": [{"alternatives": [{"transcript": str() as text}, *_]}, *_]}}:
            return text
        case _:
            return ""


def provider_error_message(payload: Any) -> str | None:
    """Return the provider's error text if the body reports one."""
    match payload:
        case {"err_msg": str() as msg}:
            return msg
        case {"error": str() as msg} if msg:
            return msg
        case {"err_code": code}:
            return str(code)
        case _:
            return None


# ── client ────────────────────────────────────────────────────────────────────


class DeepgramTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        listen_url: str = DEEPGRAM_LISTEN_URL,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._listen_url = listen_url

    def _params(self) -> dict[str, str]:
        return {"model": self._model, "punctuate": str(PUNCTUATE).lower()}

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"{DEEPGRAM_AUTH_SCHEME} {self._api_key}"}

    async def transcribe(self, request: TranscriptionRequest) -> Outcome:
        try:
            payload = await self._post(request)
        except TranscriptionError as e:
            template = (
                MSG_TRANSCRIBE_URL_FAILED if request.source_url is not None
                else MSG_TRANSCRIBE_FILE_FAILED
            )
            logger.error(template, request.describe(), e)
            return Err(e)
        return Ok(TranscriptionResult(transcript=extract_transcript(payload)))

    async def _post(self, request: TranscriptionRequest) -> Any:
        match request:
            case TranscriptionRequest(source_url=str() as url):
                body: dict[str, Any] = {"json": {"url": url}}
                headers = self._headers()
            case TranscriptionRequest(audio_bytes=bytes() as audio):
                body = {"data": audio}
                headers = {**self._headers(), "Content-Type": AUDIO_CONTENT_TYPE}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self._listen_url,
                    params=self._params(),
                    headers=headers,
                    **body,
                ) as response:
                    status = response.status
                    try:
                        payload = await response.json(content_type=None)
                    except ValueError:
                        payload = None
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        message = provider_error_message(payload)
        match (status, message):
            case (s, _) if s >= 400:
                raise ProviderError(f"HTTP {s}: {message or 'no error detail'}", status=s)
            case (s, _) if payload is None:
                raise ProviderError(f"HTTP {s}: response body is not JSON", status=s)
            case (_, str() as m):
                raise ProviderError(m, status=status)
            case _:
                pass
        logger.debug("Deepgram answered %d for %s", status, request.describe())
        return payload
