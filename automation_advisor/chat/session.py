# automation_advisor/chat/session.py
"""
Chat assistant session.

The transcript is append-only: every user message is followed by exactly one
model message, either the real reply or a fixed apology. The provider-side
conversation is created lazily from the transcript and thrown away after any
failure, so the next message starts a fresh conversation.
"""

import logging
from typing import Any

from automation_advisor.models.plan import ChatMessage

logger = logging.getLogger(__name__)

GREETING = "¡Hola! Soy tu asistente de IA. ¿Cómo puedo ayudarte hoy?"
ERROR_REPLY = "Lo siento, ocurrió un error. Por favor intenta de nuevo."


class ChatSession:
    """Transcript plus the provider conversation handle behind it."""

    def __init__(self, client: Any, greeting: str | None = GREETING) -> None:
        """
        Args:
            client: LLM client exposing start_chat(history)
            greeting: Initial model message (None for an empty transcript)
        """
        self._client = client
        self._conversation: Any = None
        self._transcript: list[ChatMessage] = []
        if greeting:
            self._transcript.append(ChatMessage(role="model", content=greeting))
        self.is_loading = False
        self.last_failed = False

    @property
    def transcript(self) -> list[ChatMessage]:
        """Copy of the transcript, oldest first."""
        return list(self._transcript)

    @property
    def has_conversation(self) -> bool:
        return self._conversation is not None

    async def send(self, text: str) -> str | None:
        """
        Send a user message.

        Never raises for provider failures: the apology is appended instead.

        Returns:
            The model entry's text, or None if the input was blank or a
            request is already in flight
        """
        if not text.strip() or self.is_loading:
            return None

        history = list(self._transcript)
        self._transcript.append(ChatMessage(role="user", content=text))
        self.is_loading = True

        try:
            if self._conversation is None:
                self._conversation = self._client.start_chat(history)
            reply = await self._conversation.send_message(text)
            self.last_failed = False
        except Exception as e:
            logger.error(f"Chat failed, resetting conversation: {e}")
            self.reset()
            reply = ERROR_REPLY
            self.last_failed = True
        finally:
            self.is_loading = False

        self._transcript.append(ChatMessage(role="model", content=reply))
        return reply

    def reset(self) -> None:
        """Drop the provider conversation; the transcript is kept."""
        self._conversation = None

    def close(self) -> None:
        """Dispose of the session."""
        self.reset()
        logger.info(f"Chat session closed after {len(self._transcript)} message(s)")
