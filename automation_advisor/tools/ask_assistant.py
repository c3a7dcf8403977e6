# automation_advisor/tools/ask_assistant.py
"""
ask_assistant tool implementation.

Sends one message to the chat assistant.
"""

import logging

from fastmcp.exceptions import ToolError

from automation_advisor.chat.session import ChatSession
from automation_advisor.models.responses import ChatReplyResponse

logger = logging.getLogger(__name__)


async def ask_assistant(message: str, session: ChatSession) -> dict:
    """
    Ask the chat assistant a question.

    Provider failures do not raise: the reply is the fixed apology text and
    the next message starts a new conversation.

    Args:
        message: User message
        session: Chat session holding the transcript

    Returns:
        ChatReplyResponse as dict

    Raises:
        ToolError: If the message is blank or a reply is still pending
    """
    if not message or not message.strip():
        raise ToolError("Message cannot be empty")
    if session.is_loading:
        raise ToolError("The assistant is still answering the previous message")

    reply = await session.send(message)

    response = ChatReplyResponse(
        reply=reply or "",
        failed=session.last_failed,
        turns=len(session.transcript),
    )
    return response.model_dump()
