"""Configuration and runtime constants."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# API Keys
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Model Configuration
MODEL_NAME = os.getenv("MODEL_NAME", "gpt-4o-mini")
CHAT_MODEL_NAME = os.getenv("CHAT_MODEL_NAME", MODEL_NAME)
TTS_MODEL_NAME = os.getenv("TTS_MODEL_NAME", "gpt-4o-mini-tts")
TTS_VOICE = os.getenv("TTS_VOICE", "alloy")

# Request Configuration
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "60"))
API_MAX_ATTEMPTS = int(os.getenv("API_MAX_ATTEMPTS", "3"))  # transient provider errors only
ENABLE_AUDIO = os.getenv("ENABLE_AUDIO", "1") == "1"
STRICT_SCHEMA = os.getenv("STRICT_SCHEMA", "1") == "1"  # "0" reads missing lists as empty

# Audio format returned by the speech endpoint (response_format="pcm")
AUDIO_SAMPLE_RATE = 24000
AUDIO_SAMPLE_WIDTH = 2  # bytes, little-endian signed, mono

# Session Configuration
HISTORY_LIMIT = 20
HISTORY_KEY = "searchHistory"
BOOKMARKS_KEY = "bookmarkedWords"
EXAMPLE_WORDS = ["كتاب", "شمس", "جميل"]

# Directory Configuration
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
STORE_DB = Path(os.getenv("STORE_DB", str(DATA_DIR / "scholar.sqlite")))

# Testing Configuration
LIVE_TESTING = os.getenv("ARABIC_SCHOLAR_LIVE", "0") == "1"


@dataclass(frozen=True)
class Settings:
    """Snapshot of the runtime configuration carried by an ``AppContext``."""

    api_key: Optional[str] = OPENAI_API_KEY
    model: str = MODEL_NAME
    chat_model: str = CHAT_MODEL_NAME
    tts_model: str = TTS_MODEL_NAME
    tts_voice: str = TTS_VOICE
    timeout: float = API_TIMEOUT
    max_attempts: int = API_MAX_ATTEMPTS
    enable_audio: bool = ENABLE_AUDIO
    strict_schema: bool = STRICT_SCHEMA
    history_limit: int = HISTORY_LIMIT
    store_path: Path = STORE_DB
