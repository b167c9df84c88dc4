from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from transcribe.constants import (
    DEEPGRAM_LISTEN_URL,
    DEFAULT_HOST,
    DEFAULT_MODEL,
    DEFAULT_PORT,
    MSG_INVALID_PORT,
    MSG_MISSING_API_KEY,
)
from transcribe.errors import ConfigError


@dataclass(frozen=True)
class Config:
    deepgram_api_key: str
    raw_port: str
    host: str
    log_level: str
    deepgram_model: str
    deepgram_listen_url: str

    @property
    def port(self) -> int:
        """Listening port; PORT is only read in server mode."""
        try:
            return int(self.raw_port)
        except ValueError:
            raise ConfigError(MSG_INVALID_PORT % self.raw_port) from None

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("DEEPGRAM_API_KEY")
        raw_port = os.getenv("PORT", str(DEFAULT_PORT))
        host = os.getenv("HOST", DEFAULT_HOST)
        log_level = os.getenv("LOG_LEVEL", "INFO")
        model = os.getenv("DEEPGRAM_MODEL") or DEFAULT_MODEL
        listen_url = os.getenv("DEEPGRAM_LISTEN_URL") or DEEPGRAM_LISTEN_URL

        return cls._validate(
            deepgram_api_key=api_key,
            raw_port=raw_port,
            host=host,
            log_level=log_level,
            deepgram_model=model,
            deepgram_listen_url=listen_url,
        )

    @staticmethod
    def _validate(
        deepgram_api_key: Optional[str],
        raw_port: str,
        host: str,
        log_level: str,
        deepgram_model: str,
        deepgram_listen_url: str,
    ) -> "Config":
        match deepgram_api_key:
            case None | "":
                raise ConfigError(MSG_MISSING_API_KEY)
            case _:
                pass

        return Config(
            deepgram_api_key=deepgram_api_key,
            raw_port=raw_port,
            host=host,
            log_level=log_level,
            deepgram_model=deepgram_model,
            deepgram_listen_url=deepgram_listen_url,
        )
