"""JSON schema the model must follow for a lookup, and validation of replies.

The schema is sent to the provider as a structured-output constraint, but the
model is not trusted to honour it: every reply goes through ``parse_entry``
before a ``DictionaryEntry`` is built.
"""

import json
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from .errors import InvalidResponseError, SchemaError
from .models import DictionaryEntry

log = structlog.get_logger()

SCHEMA_NAME = "dictionary_entry"

LIST_FIELDS = (
    "synonyms",
    "antonyms",
    "verbForms",
    "exampleSentences",
    "quranVerses",
    "hadithNarrations",
    "poems",
)


def _object(properties: Dict[str, Any], nullable: bool = False) -> Dict[str, Any]:
    # Strict structured output wants every property listed as required.
    return {
        "type": ["object", "null"] if nullable else "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


def _strings(*names: str) -> Dict[str, Any]:
    return {name: {"type": "string"} for name in names}


def _array(items: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "array", "items": items}


PAIR_SCHEMA = _object(_strings("arabic", "english"))

VERB_FORM_SCHEMA = _object({
    "formName": {
        "type": "string",
        "description": "e.g., 'Form I (Fa'ala)', 'Form II (Fa''ala)'",
    },
    **_strings("arabic", "english"),
})

ROOT_SCHEMA = _object(
    {
        "letters": {"type": "string", "description": "Root letters separated by spaces"},
        "explanation": {"type": "string"},
        "derivedWords": _array(PAIR_SCHEMA),
    },
    nullable=True,
)

LOOKUP_SCHEMA = _object({
    "word": {"type": "string", "description": "The word in its fully vowelled dictionary form"},
    "root": ROOT_SCHEMA,
    "meaning": PAIR_SCHEMA,
    "synonyms": _array(PAIR_SCHEMA),
    "antonyms": _array(PAIR_SCHEMA),
    "verbForms": _array(VERB_FORM_SCHEMA),
    "exampleSentences": _array(PAIR_SCHEMA),
    "quranVerses": _array(_object(_strings("verse", "surah", "english"))),
    "hadithNarrations": _array(_object(_strings("hadith", "source", "english"))),
    "poems": _array(_object(_strings("poem", "poet", "english"))),
})


def response_format() -> Dict[str, Any]:
    """The ``response_format`` argument for a schema-constrained completion."""
    return {
        "type": "json_schema",
        "json_schema": {"name": SCHEMA_NAME, "schema": LOOKUP_SCHEMA, "strict": True},
    }


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence the model may wrap around its JSON."""
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _describe(error: ValidationError) -> List[str]:
    return [
        "{}: {}".format(".".join(str(p) for p in e["loc"]) or "<root>", e["msg"])
        for e in error.errors()
    ]


def parse_entry(text: str, strict: bool = True) -> DictionaryEntry:
    """Parse a model reply into a ``DictionaryEntry``.

    Raises ``InvalidResponseError`` when the reply is not JSON and
    ``SchemaError`` when it is JSON of the wrong shape. With ``strict`` off,
    absent (or null) list fields are read as empty lists; every other
    required field must still be present.
    """
    cleaned = strip_code_fence(text or "")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        log.error("Failed to parse JSON response", error=str(e), response=cleaned[:200])
        raise InvalidResponseError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"Expected a JSON object, got {type(data).__name__}")

    if not strict:
        for name in LIST_FIELDS:
            if data.get(name) is None:
                data[name] = []

    # Audio is attached by the client, never taken from the model.
    data.pop("pronunciationAudio", None)
    data.pop("pronunciation_audio", None)

    try:
        entry = DictionaryEntry.model_validate(data)
    except ValidationError as e:
        problems = _describe(e)
        log.error("Response does not match schema", problems=problems)
        raise SchemaError("Response does not match schema: " + "; ".join(problems)) from e

    if not entry.word.strip():
        raise SchemaError("Response does not match schema: word is empty")
    return entry
