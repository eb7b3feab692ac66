"""Free-form chat with the model."""

from typing import Dict, List

import structlog

from . import prompts
from .context import AppContext
from .errors import ChatBusyError, ChatInputError
from .models import ChatMessage

log = structlog.get_logger()


class ChatSession:
    """One conversation with the Arabic-learning assistant.

    The transcript is append-only. A user message is recorded before the
    model is asked, so it survives a failed reply.
    """

    def __init__(self, ctx: AppContext, instruction: str = prompts.CHAT_INSTRUCTION):
        self.backend = ctx.backend
        self.instruction = instruction.strip()
        self._transcript: List[ChatMessage] = [
            ChatMessage(role="assistant", text=prompts.CHAT_GREETING)
        ]
        self.busy = False

    @property
    def transcript(self) -> List[ChatMessage]:
        return list(self._transcript)

    def _messages(self) -> List[Dict[str, str]]:
        messages = [{"role": "system", "content": self.instruction}]
        messages.extend({"role": m.role, "content": m.text} for m in self._transcript)
        return messages

    async def send(self, text: str) -> str:
        """Send ``text`` and return the assistant's reply (or the fallback)."""
        text = (text or "").strip()
        if not text:
            raise ChatInputError("Message is blank")
        if self.busy:
            raise ChatBusyError("A message is already being answered")

        self.busy = True
        self._transcript.append(ChatMessage(role="user", text=text))
        try:
            reply = await self.backend.chat(self._messages())
        except Exception as e:
            log.error("Chat request failed", error=str(e))
            reply = prompts.CHAT_FALLBACK
        finally:
            self.busy = False

        self._transcript.append(ChatMessage(role="assistant", text=reply))
        return reply
