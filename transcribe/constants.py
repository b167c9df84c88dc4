"""All magic values live here — no inline literals anywhere else."""

# Provider
DEEPGRAM_LISTEN_URL = "https://api.deepgram.com/v1/listen"
DEEPGRAM_AUTH_SCHEME = "Token"
DEFAULT_MODEL = "nova"
PUNCTUATE = True
AUDIO_CONTENT_TYPE = "application/octet-stream"

# CLI
DEFAULT_AUDIO_URL = "https://dpgr.am/spacewalk.wav"
JSON_INDENT = 2

# Server
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Log / user-facing messages
MSG_MISSING_API_KEY = "Missing DEEPGRAM_API_KEY in .env"
MSG_INVALID_PORT = "PORT must be an integer, got %r"
MSG_TRANSCRIPTION_FAILED = "Transcription failed"
MSG_SERVER_LISTENING = "Server listening at http://localhost:%d"
MSG_SERVER_STOPPED = "Server stopped"
MSG_TRANSCRIBE_URL_FAILED = "Error transcribing audio from URL %s: %s"
MSG_TRANSCRIBE_FILE_FAILED = "Error transcribing audio from file %s: %s"

# HTTP error bodies
ERR_URL_REQUIRED = "URL is required in request body"
ERR_TRANSCRIBE_FAILED = "Failed to transcribe audio"
