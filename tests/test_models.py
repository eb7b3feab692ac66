"""Tests for data models."""

import pytest
from pydantic import ValidationError

from arabic_scholar.models import (
    ArabicEnglishPair, ChatMessage, DictionaryEntry, SessionSnapshot, VerbForm
)


def test_pair_is_immutable():
    """ArabicEnglishPair cannot be changed once created."""
    pair = ArabicEnglishPair(arabic="شَمْسٌ", english="sun")

    with pytest.raises(ValidationError):
        pair.english = "moon"
    assert pair.english == "sun"


def test_verb_form_accepts_wire_and_python_names():
    """VerbForm reads camelCase from the model and snake_case from Python."""
    wire = VerbForm.model_validate({"formName": "Form I (Fa'ala)", "arabic": "كَتَبَ", "english": "to write"})
    local = VerbForm(form_name="Form I (Fa'ala)", arabic="كَتَبَ", english="to write")

    assert wire == local
    assert wire.form_name == "Form I (Fa'ala)"
    assert isinstance(wire, ArabicEnglishPair)


def test_entry_from_payload(kitab_payload):
    """DictionaryEntry with all fields populated."""
    entry = DictionaryEntry.model_validate(kitab_payload)

    assert entry.word == "كِتَابٌ"
    assert entry.root.letters == "ك ت ب"
    assert len(entry.root.derived_words) == 2
    assert entry.meaning.english == "book"
    assert entry.antonyms == []
    assert len(entry.verb_forms) == 2
    assert entry.quran_verses[0].surah == "Al-Baqarah 2:2"
    assert entry.hadith_narrations == []
    assert entry.poems[0].poet == "Al-Mutanabbi"
    assert entry.pronunciation_audio is None


def test_entry_without_root(kitab_payload):
    """A word may have no identifiable root."""
    kitab_payload["root"] = None
    entry = DictionaryEntry.model_validate(kitab_payload)

    assert entry.root is None


def test_with_audio_returns_copy(kitab_payload):
    """Attaching audio leaves the original entry untouched."""
    entry = DictionaryEntry.model_validate(kitab_payload)
    voiced = entry.with_audio("AAAA")

    assert voiced.pronunciation_audio == "AAAA"
    assert entry.pronunciation_audio is None
    assert voiced.word == entry.word


def test_entry_dumps_wire_names(kitab_payload):
    """Test that entries serialize with camelCase field names."""
    entry = DictionaryEntry.model_validate(kitab_payload)
    dumped = entry.model_dump(by_alias=True)

    assert "verbForms" in dumped
    assert "exampleSentences" in dumped
    assert dumped["root"]["derivedWords"][0]["english"] == "writer"


def test_chat_message_roles():
    """Test that only user and assistant roles are accepted."""
    assert ChatMessage(role="user", text="hi").role == "user"
    with pytest.raises(ValidationError):
        ChatMessage(role="model", text="hi")


def test_snapshot_defaults():
    """Test the empty session snapshot."""
    snapshot = SessionSnapshot()

    assert snapshot.entry is None
    assert snapshot.loading is False
    assert snapshot.error is None
    assert snapshot.history == []
    assert snapshot.bookmarks == []
