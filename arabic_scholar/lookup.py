"""Dictionary lookups against the model."""

import time

import structlog

from . import prompts
from .context import AppContext
from .errors import QueryValidationError, TransportError
from .models import DictionaryEntry
from .schema import parse_entry

log = structlog.get_logger()


class LookupClient:
    """Turns an Arabic word into a validated ``DictionaryEntry``."""

    def __init__(self, ctx: AppContext):
        self.backend = ctx.backend
        self.settings = ctx.settings

    async def lookup(self, word: str) -> DictionaryEntry:
        """Look up ``word``.

        Raises ``QueryValidationError`` for blank input (no request is made),
        ``TransportError`` when the provider call fails, and ``SchemaError``
        (or its subclass ``InvalidResponseError``) when the reply is unusable.
        Pronunciation audio is best-effort and never fails the lookup.
        """
        query = (word or "").strip()
        if not query:
            raise QueryValidationError("Query is blank")

        log.info("Starting lookup", word=query)
        t0 = time.perf_counter()
        try:
            text = await self.backend.complete_json(
                prompts.LOOKUP_INSTRUCTION,
                prompts.LOOKUP_CONTENT.format(word=query),
            )
        except TransportError:
            raise
        except Exception as e:
            log.error("Lookup request failed", word=query, error=str(e))
            raise TransportError(f"lookup failed: {e}") from e

        entry = parse_entry(text, strict=self.settings.strict_schema)
        elapsed = 1000 * (time.perf_counter() - t0)
        log.info("Lookup completed", word=query, resolved=entry.word, elapsed_ms=elapsed)

        if self.settings.enable_audio:
            entry = await self._attach_audio(entry)
        return entry

    async def _attach_audio(self, entry: DictionaryEntry) -> DictionaryEntry:
        # Pronounce the resolved word; the model may have corrected the query.
        try:
            audio = await self.backend.speak(entry.word)
        except Exception as e:
            # AudioError from the backend, or anything else a stub may throw
            log.warning("Pronunciation unavailable", word=entry.word,
                        error=str(e), error_type=type(e).__name__)
            return entry

        if not audio:
            log.warning("Pronunciation unavailable", word=entry.word, error="empty audio")
            return entry
        return entry.with_audio(audio)
