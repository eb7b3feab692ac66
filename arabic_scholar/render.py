"""Plain-text rendering of dictionary entries for the terminal."""

import base64
from typing import Iterable, List

from .config import AUDIO_SAMPLE_RATE, AUDIO_SAMPLE_WIDTH
from .models import ArabicEnglishPair, DictionaryEntry


def _pairs(title: str, items: Iterable[ArabicEnglishPair]) -> List[str]:
    return [title] + [f"  {p.arabic} - {p.english}" for p in items]


def audio_seconds(entry: DictionaryEntry) -> float:
    """Length of the pronunciation clip in seconds."""
    if not entry.pronunciation_audio:
        return 0.0
    pcm = base64.b64decode(entry.pronunciation_audio)
    return len(pcm) / (AUDIO_SAMPLE_RATE * AUDIO_SAMPLE_WIDTH)


def format_entry(entry: DictionaryEntry, bookmarked: bool = False) -> str:
    """Render an entry; empty categories are left out."""
    star = " ★" if bookmarked else ""
    lines = [f"{entry.word}{star}", f"  {entry.meaning.english}", f"  {entry.meaning.arabic}"]

    if entry.root:
        lines += ["", f"Root: {entry.root.letters}", f"  {entry.root.explanation}"]
        lines += [f"    {p.arabic} - {p.english}" for p in entry.root.derived_words]

    if entry.example_sentences:
        lines += [""] + _pairs("Example Sentences", entry.example_sentences)
    if entry.synonyms:
        lines += [""] + _pairs("Synonyms", entry.synonyms)
    if entry.antonyms:
        lines += [""] + _pairs("Antonyms", entry.antonyms)
    if entry.verb_forms:
        lines += ["", "Verb Forms"]
        lines += [f"  {v.form_name}: {v.arabic} - {v.english}" for v in entry.verb_forms]
    if entry.quran_verses:
        lines += ["", "Quran"]
        for q in entry.quran_verses:
            lines += [f"  {q.verse}", f"  \"{q.english}\" ({q.surah})"]
    if entry.hadith_narrations:
        lines += ["", "Hadith"]
        for h in entry.hadith_narrations:
            lines += [f"  {h.hadith}", f"  \"{h.english}\" ({h.source})"]
    if entry.poems:
        lines += ["", "Poetry"]
        for p in entry.poems:
            lines += [f"  {p.poem}", f"  \"{p.english}\" ({p.poet})"]

    if entry.pronunciation_audio:
        lines += ["", f"Pronunciation audio available ({audio_seconds(entry):.1f} s)"]
    return "\n".join(lines)


def format_word_list(words: List[str]) -> str:
    if not words:
        return "No words here yet."
    return "\n".join(f"{i}. {w}" for i, w in enumerate(words, 1))
