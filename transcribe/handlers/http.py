"""HTTP handler — POST / with {"url": ...} returns {"transcript": ...}."""
from __future__ import annotations

import logging
from typing import Any

from aiohttp import web

from transcribe.constants import (
    ERR_TRANSCRIBE_FAILED,
    ERR_URL_REQUIRED,
    MSG_SERVER_LISTENING,
    MSG_SERVER_STOPPED,
)
from transcribe.errors import ValidationError
from transcribe.models import Err, Ok
from transcribe.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)

TRANSCRIBER_KEY = web.AppKey("transcriber", TranscriptionClient)


def parse_url(body: Any) -> str:
    """Pull the audio URL out of a decoded JSON body.

    Any truthy value is accepted; the provider decides whether it is a URL.
    """
    match body:
        case {"url": url} if url:
            return str(url)
        case _:
            raise ValidationError(ERR_URL_REQUIRED)


async def _handle_transcribe(request: web.Request) -> web.Response:
    try:
        url = parse_url(await request.json())
    except ValueError as e:
        # ValidationError, and JSONDecodeError for empty or malformed bodies
        logger.info("Rejected POST / from %s: %s", request.remote, e)
        return web.json_response({"error": ERR_URL_REQUIRED}, status=400)

    transcriber = request.app[TRANSCRIBER_KEY]
    match await transcriber.transcribe_url(url):
        case Ok(result):
            return web.json_response(result.to_dict())
        case Err(error):
            logger.warning("POST / failed for %s: %r", url, error)
            return web.json_response({"error": ERR_TRANSCRIBE_FAILED}, status=500)


def build_app(transcriber: TranscriptionClient) -> web.Application:
    app = web.Application()
    app[TRANSCRIBER_KEY] = transcriber
    app.router.add_post("/", _handle_transcribe)
    return app


class TranscriptionServer:
    """aiohttp server exposing the HTTP handler."""

    def __init__(self, transcriber: TranscriptionClient, host: str, port: int) -> None:
        self._app = build_app(transcriber)
        self._host = host
        self._port = port
        self._runner: web.AppRunner | None = None

    async def start(self) -> None:
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._host, self._port)
        await site.start()
        logger.info(MSG_SERVER_LISTENING, self._port)

    async def stop(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            logger.info(MSG_SERVER_STOPPED)
