from unittest.mock import AsyncMock, MagicMock

import pytest

from transcribe.models import Outcome
from transcribe.transcription.client import TranscriptionClient


@pytest.fixture
def make_transcriber():
    """Build a TranscriptionClient double whose calls all return `outcome`."""

    def _make(outcome: Outcome) -> MagicMock:
        transcriber = MagicMock(spec=TranscriptionClient)
        transcriber.transcribe_url = AsyncMock(return_value=outcome)
        transcriber.transcribe_file = AsyncMock(return_value=outcome)
        return transcriber

    return _make
