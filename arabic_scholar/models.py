"""Data models for the Arabic dictionary."""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class ArabicEnglishPair(BaseModel):
    """An Arabic text together with its English rendering."""

    model_config = ConfigDict(frozen=True)

    arabic: str
    english: str


class VerbForm(ArabicEnglishPair):
    """A verb form derived from the word's root."""

    form_name: str = Field(alias="formName")  # e.g. "Form II (Fa''ala)"

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RootInfo(BaseModel):
    """The triliteral (or quadriliteral) root of a word and its family."""

    model_config = ConfigDict(populate_by_name=True)

    letters: str  # e.g. "ك ت ب"
    explanation: str
    derived_words: List[ArabicEnglishPair] = Field(alias="derivedWords")


class QuranVerse(BaseModel):
    verse: str
    surah: str  # surah name and verse number
    english: str


class HadithNarration(BaseModel):
    hadith: str
    source: str  # collection and number
    english: str


class ArabicPoem(BaseModel):
    poem: str
    poet: str
    english: str


class DictionaryEntry(BaseModel):
    """Everything the model returned for one looked-up word.

    List fields are always present and may be empty; an empty list means the
    category does not apply to the word.
    """

    model_config = ConfigDict(populate_by_name=True)

    word: str  # as resolved by the model, not necessarily the literal query
    root: Optional[RootInfo] = None
    meaning: ArabicEnglishPair
    synonyms: List[ArabicEnglishPair]
    antonyms: List[ArabicEnglishPair]
    verb_forms: List[VerbForm] = Field(alias="verbForms")
    example_sentences: List[ArabicEnglishPair] = Field(alias="exampleSentences")
    quran_verses: List[QuranVerse] = Field(alias="quranVerses")
    hadith_narrations: List[HadithNarration] = Field(alias="hadithNarrations")
    poems: List[ArabicPoem]
    pronunciation_audio: Optional[str] = Field(default=None, alias="pronunciationAudio")  # base64 PCM

    def with_audio(self, audio_b64: str) -> "DictionaryEntry":
        """Return a copy of the entry carrying pronunciation audio."""
        return self.model_copy(update={"pronunciation_audio": audio_b64})


class ChatMessage(BaseModel):
    """One turn of a chat transcript."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


class SessionSnapshot(BaseModel):
    """Read-only view of the session handed to the presentation layer."""

    entry: Optional[DictionaryEntry] = None
    loading: bool = False
    error: Optional[str] = None
    history: List[str] = []
    bookmarks: List[str] = []
