"""CLI handler — one transcription, JSON on stdout, exit code back to the caller."""
import json
import logging
import sys
from typing import Optional

from transcribe.constants import DEFAULT_AUDIO_URL, JSON_INDENT, MSG_TRANSCRIPTION_FAILED
from transcribe.models import Err, Ok, Outcome
from transcribe.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)


async def _dispatch(
    transcriber: TranscriptionClient,
    url: Optional[str],
    path: Optional[str],
) -> Outcome:
    match (path, url):
        case (str() as p, _) if p:
            return await transcriber.transcribe_file(p)
        case (_, str() as u) if u:
            return await transcriber.transcribe_url(u)
        case _:
            return await transcriber.transcribe_url(DEFAULT_AUDIO_URL)


async def run_cli(
    transcriber: TranscriptionClient,
    url: Optional[str] = None,
    path: Optional[str] = None,
) -> int:
    """Transcribe once. --path wins over --url; neither means the sample URL."""
    match await _dispatch(transcriber, url, path):
        case Ok(result):
            print(json.dumps(result.to_dict(), indent=JSON_INDENT))
            return 0
        case Err(error):
            logger.warning("CLI transcription failed: %r", error)
            print(MSG_TRANSCRIPTION_FAILED, file=sys.stderr)
            return 1
