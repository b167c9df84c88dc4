"""Entry point — wires Config → DeepgramTranscriptionClient → CLI or HTTP handler."""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from transcribe.config import Config
from transcribe.errors import ConfigError
from transcribe.handlers.cli import run_cli
from transcribe.handlers.http import TranscriptionServer
from transcribe.transcription.client import TranscriptionClient
from transcribe.transcription.deepgram import DeepgramTranscriptionClient


def _setup_logging(level: str) -> None:
    # stdout is reserved for the CLI's JSON result
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="transcribe",
        description="Transcribe audio with Deepgram, once from the command line or as an HTTP server.",
    )
    parser.add_argument("--url", help="URL of the audio file to transcribe")
    parser.add_argument("--path", help="Local file path of the audio file to transcribe")
    parser.add_argument("--serve", action="store_true", help="Run as an HTTP server")
    return parser.parse_args(argv)


async def serve(transcriber: TranscriptionClient, host: str, port: int) -> None:
    """Run the HTTP handler until the task is cancelled."""
    server = TranscriptionServer(transcriber, host, port)
    await server.start()
    try:
        await asyncio.Event().wait()
    finally:
        await server.stop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = Config.from_env()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1
    _setup_logging(config.log_level)

    transcriber = DeepgramTranscriptionClient(
        config.deepgram_api_key,
        model=config.deepgram_model,
        listen_url=config.deepgram_listen_url,
    )

    match args.serve:
        case True:
            try:
                port = config.port
            except ConfigError as e:
                print(e, file=sys.stderr)
                return 1
            try:
                asyncio.run(serve(transcriber, config.host, port))
            except KeyboardInterrupt:
                pass
            return 0
        case _:
            return asyncio.run(run_cli(transcriber, url=args.url, path=args.path))


if __name__ == "__main__":
    sys.exit(main())
