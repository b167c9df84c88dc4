"""Error taxonomy for configuration, requests and provider calls."""
from typing import Optional


class ConfigError(ValueError):
    """Startup configuration is missing or malformed."""


class ValidationError(ValueError):
    """An HTTP request body is missing a required field."""


class TranscriptionError(Exception):
    """Base for everything a transcription call can come back with."""


class ProviderError(TranscriptionError):

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class TransportError(TranscriptionError):
    pass


class AudioReadError(TranscriptionError):

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
