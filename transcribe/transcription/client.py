"""TranscriptionClient — abstract base for speech-to-text backends."""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from transcribe.constants import MSG_TRANSCRIBE_FILE_FAILED
from transcribe.errors import AudioReadError
from transcribe.models import Err, Outcome, TranscriptionRequest

logger = logging.getLogger(__name__)


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, request: TranscriptionRequest) -> Outcome:
        """Send one request to the provider. Returns Ok or Err, never raises."""
        ...

    async def transcribe_url(self, url: str) -> Outcome:
        return await self.transcribe(TranscriptionRequest.from_url(url))

    async def transcribe_file(self, filepath: str) -> Outcome:
        # Whole file is buffered, blocking the loop while it reads.
        try:
            audio = Path(filepath).read_bytes()
        except OSError as e:
            error = AudioReadError(filepath, e.strerror or str(e))
            logger.error(MSG_TRANSCRIBE_FILE_FAILED, filepath, error)
            return Err(error)
        return await self.transcribe(TranscriptionRequest.from_bytes(audio))
