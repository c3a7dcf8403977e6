# automation_advisor/llm/conversation.py
"""Chat conversation for providers without server-side chat sessions."""

import logging
from typing import Any

from automation_advisor.errors import CollaboratorError
from automation_advisor.models.plan import ChatMessage

logger = logging.getLogger(__name__)

# Transcript roles -> OpenAI/Ollama chat roles
_ROLE_MAP = {"user": "user", "model": "assistant"}


def to_chat_messages(history: list[ChatMessage]) -> list[dict]:
    """Convert transcript entries to chat-completion message dicts."""
    return [{"role": _ROLE_MAP[m.role], "content": m.content} for m in history]


class HistoryConversation:
    """
    Keeps the running message list locally and resends it every turn.

    Context lives in this object, so dropping it forgets the conversation.
    """

    def __init__(self, client: Any, history: list[ChatMessage], model: str | None = None) -> None:
        """
        Args:
            client: OllamaClient or LMStudioClient
            history: Transcript to seed the conversation with
            model: Chat model (defaults to the client's model)
        """
        self._client = client
        self._model = model
        self._messages = to_chat_messages(history)

    async def send_message(self, text: str) -> str:
        """
        Send one user message and return the reply.

        Raises:
            CollaboratorError: On any provider failure
        """
        messages = self._messages + [{"role": "user", "content": text}]
        try:
            reply = await self._client.generate(messages, model=self._model)
        except Exception as e:
            logger.error(f"Chat request failed: {e}")
            raise CollaboratorError("Failed to get chat response") from e

        self._messages = messages + [{"role": "assistant", "content": reply}]
        return reply
