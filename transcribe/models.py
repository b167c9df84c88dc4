from dataclasses import dataclass
from typing import Optional, Union

from transcribe.errors import TranscriptionError


@dataclass(frozen=True)
class TranscriptionRequest:
    source_url: Optional[str] = None
    audio_bytes: Optional[bytes] = None

    def __post_init__(self) -> None:
        match (self.source_url, self.audio_bytes):
            case (str(), None) | (None, bytes()):
                pass
            case _:
                raise ValueError("exactly one of source_url or audio_bytes must be set")

    @classmethod
    def from_url(cls, url: str) -> "TranscriptionRequest":
        return cls(source_url=url)

    @classmethod
    def from_bytes(cls, data: bytes) -> "TranscriptionRequest":
        return cls(audio_bytes=data)

    def describe(self) -> str:
        """Short label for log lines, never the audio itself."""
        match self.source_url:
            case str() as url:
                return url
            case None:
                return f"<{len(self.audio_bytes)} bytes>"


@dataclass(frozen=True)
class TranscriptionResult:
    transcript: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"transcript": self.transcript}


@dataclass(frozen=True)
class Ok:
    result: TranscriptionResult


@dataclass(frozen=True)
class Err:
    error: TranscriptionError


# What every TranscriptionClient call returns instead of raising.
Outcome = Union[Ok, Err]
