"""OpenAI-backed model collaborator with retry logic."""

import asyncio
import base64
from typing import Any, Callable, Dict, List

import openai
import structlog
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from . import prompts
from .config import Settings
from .errors import AudioError, ConfigError, TransportError
from .schema import response_format

log = structlog.get_logger()

TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,  # 5xx
)


def create_openai_retry_decorator(max_attempts: int):
    """Create a retry decorator for transient OpenAI API failures."""
    return retry(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential_jitter(initial=1, max=20, jitter=1),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
    )


def _error_details(e: Exception) -> str:
    details = str(e)
    status = getattr(e, "status_code", None)
    if status is not None:
        details = f"{details} - Status Code: {status}"
    return details


class OpenAIBackend:
    """Talks to the OpenAI API on behalf of the lookup client and chat session.

    The SDK client is synchronous; calls are pushed to the default executor so
    the event loop stays free while a request is in flight.
    """

    def __init__(self, settings: Settings, client: Any = None):
        if client is None:
            if not settings.api_key:
                raise ConfigError("OPENAI_API_KEY is not set")
            client = openai.OpenAI(api_key=settings.api_key)
        self.client = client
        self.settings = settings

    async def _call(self, what: str, fn: Callable[[], Any]) -> Any:
        @create_openai_retry_decorator(self.settings.max_attempts)
        async def _make_api_call():
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, fn)

        try:
            return await _make_api_call()
        except RetryError as e:
            actual_exception = e.last_attempt.exception()
            log.error("OpenAI API call failed after retries",
                      call=what,
                      error=_error_details(actual_exception),
                      attempts=e.last_attempt.attempt_number)
            raise TransportError(f"{what} failed: {actual_exception}") from actual_exception
        except openai.OpenAIError as e:
            log.error("OpenAI API call failed", call=what, error=_error_details(e))
            raise TransportError(f"{what} failed: {e}") from e

    async def complete_json(self, instruction: str, content: str) -> str:
        """Run a schema-constrained completion and return the raw reply text."""
        messages = [
            {"role": "system", "content": instruction},
            {"role": "user", "content": content},
        ]
        response = await self._call(
            "lookup",
            lambda: self.client.chat.completions.create(
                model=self.settings.model,
                messages=messages,
                response_format=response_format(),
                timeout=self.settings.timeout,
            ),
        )
        text = response.choices[0].message.content
        if text is None:
            raise TransportError("lookup failed: empty completion")
        return text

    async def chat(self, messages: List[Dict[str, str]]) -> str:
        """Send a full conversation and return the assistant's reply."""
        response = await self._call(
            "chat",
            lambda: self.client.chat.completions.create(
                model=self.settings.chat_model,
                messages=messages,
                timeout=self.settings.timeout,
            ),
        )
        text = response.choices[0].message.content
        if text is None:
            raise TransportError("chat failed: empty completion")
        return text

    async def speak(self, word: str) -> str:
        """Synthesize a pronunciation of ``word``.

        Returns base64-encoded 16-bit little-endian mono PCM at 24 kHz.
        """
        try:
            response = await self._call(
                "speech",
                lambda: self.client.audio.speech.create(
                    model=self.settings.tts_model,
                    voice=self.settings.tts_voice,
                    input=word,
                    instructions=prompts.PRONUNCIATION_INSTRUCTION.strip(),
                    response_format="pcm",
                    timeout=self.settings.timeout,
                ),
            )
        except TransportError as e:
            raise AudioError(str(e)) from e

        pcm = getattr(response, "content", None)
        if not pcm:
            raise AudioError("speech response carried no audio")
        return base64.b64encode(pcm).decode("ascii")
