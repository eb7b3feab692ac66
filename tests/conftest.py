"""Pytest configuration and fixtures."""

import copy
import hashlib
import json
import pathlib
import pytest
import vcr

from arabic_scholar.config import LIVE_TESTING, Settings
from arabic_scholar.context import AppContext
from arabic_scholar.errors import AudioError, TransportError
from arabic_scholar.storage import MemoryStore

# Calculate hash of prompts.py for cassette invalidation
PROMPTS_HASH = hashlib.sha256(
    (pathlib.Path(__file__).parent.parent / "arabic_scholar" / "prompts.py").read_bytes()
).hexdigest()[:8]


def cassette(name: str) -> str:
    """Generate cassette filename with prompt hash."""
    return f"{name}_{PROMPTS_HASH}.yaml"


@pytest.fixture
def my_vcr():
    """VCR fixture for recording/replaying HTTP interactions."""
    return vcr.VCR(
        cassette_library_dir="tests/fixtures",
        filter_headers=[("authorization", "DUMMY")],
        record_mode="once",
    )


def live_guard():
    """Check if live testing is enabled."""
    if not LIVE_TESTING:
        pytest.skip("Live LLM disabled (set ARABIC_SCHOLAR_LIVE=1)")


@pytest.fixture
def live():
    """Skip unless live testing is enabled; returns the cassette namer."""
    live_guard()
    return cassette


KITAB_ENTRY = {
    "word": "كِتَابٌ",
    "root": {
        "letters": "ك ت ب",
        "explanation": "Writing, recording.",
        "derivedWords": [
            {"arabic": "كَاتِبٌ", "english": "writer"},
            {"arabic": "مَكْتَبَةٌ", "english": "library"},
        ],
    },
    "meaning": {"arabic": "مَجْمُوعَةُ صُحُفٍ مَكْتُوبَةٍ", "english": "book"},
    "synonyms": [{"arabic": "مُصْحَفٌ", "english": "volume"}],
    "antonyms": [],
    "verbForms": [
        {"formName": "Form I (Fa'ala)", "arabic": "كَتَبَ", "english": "to write"},
        {"formName": "Form III (Faa'ala)", "arabic": "كَاتَبَ", "english": "to correspond"},
    ],
    "exampleSentences": [
        {"arabic": "قَرَأْتُ الكِتَابَ", "english": "I read the book."},
    ],
    "quranVerses": [
        {
            "verse": "ذَٰلِكَ الْكِتَابُ لَا رَيْبَ فِيهِ",
            "surah": "Al-Baqarah 2:2",
            "english": "This is the Book about which there is no doubt.",
        }
    ],
    "hadithNarrations": [],
    "poems": [
        {
            "poem": "وَخَيْرُ جَلِيسٍ فِي الزَّمَانِ كِتَابُ",
            "poet": "Al-Mutanabbi",
            "english": "And the best companion in time is a book.",
        }
    ],
}

PCM_B64 = "AAABAAIAAwA="


@pytest.fixture
def kitab_payload():
    """A schema-valid lookup reply, as a dict."""
    return copy.deepcopy(KITAB_ENTRY)


class FakeBackend:
    """Stand-in for ``OpenAIBackend`` returning canned replies.

    ``replies`` maps a query word (as it appears in the prompt) to the reply
    text, or to an exception to raise. ``gates`` maps a word to an
    ``asyncio.Event`` the lookup waits on before answering.
    """

    def __init__(self, reply=None, audio=PCM_B64, chat_reply="Marhaba!"):
        self.reply = reply
        self.replies = {}
        self.gates = {}
        self.audio = audio
        self.chat_reply = chat_reply
        self.json_calls = []
        self.speak_calls = []
        self.chat_calls = []

    async def complete_json(self, instruction, content):
        self.json_calls.append((instruction, content))
        word = content.split('"')[1] if '"' in content else content
        if word in self.gates:
            await self.gates[word].wait()
        reply = self.replies.get(word, self.reply)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply, ensure_ascii=False)
        return reply

    async def speak(self, word):
        self.speak_calls.append(word)
        if isinstance(self.audio, Exception):
            raise self.audio
        return self.audio

    async def chat(self, messages):
        self.chat_calls.append(messages)
        if isinstance(self.chat_reply, Exception):
            raise self.chat_reply
        return self.chat_reply


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def backend(kitab_payload):
    return FakeBackend(reply=kitab_payload)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def settings():
    return Settings(api_key="test-key", store_path=pathlib.Path(":memory:"))


@pytest.fixture
def ctx(backend, store, settings):
    return AppContext(backend=backend, store=store, settings=settings)


@pytest.fixture
def transport_error():
    return TransportError("lookup failed: 503 Service Unavailable")


@pytest.fixture
def audio_error():
    return AudioError("speech failed")

