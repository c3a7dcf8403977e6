# automation_advisor/llm/lm_studio.py
"""LM Studio client using OpenAI-compatible API."""

import logging

import httpx

from automation_advisor.errors import CollaboratorError
from automation_advisor.models.plan import ChatMessage

from .conversation import HistoryConversation
from .types import GenerationResult

try:
    from openai import AsyncOpenAI
except ImportError:
    AsyncOpenAI = None  # type: ignore[assignment,misc]

logger = logging.getLogger(__name__)


class LMStudioClient:
    """
    Async LM Studio client using the OpenAI-compatible API.

    LM Studio exposes an OpenAI-compatible endpoint at http://localhost:1234/v1.
    Requires: pip install automation-advisor[lm-studio]
    """

    def __init__(
        self,
        base_url: str = "http://localhost:1234/v1",
        model: str = "local-model",
        chat_model: str | None = None,
        timeout: int = 300,
    ):
        """
        Initialize LM Studio client.

        Args:
            base_url:   LM Studio API base URL
            model:      Model that drafts plans
            chat_model: Model for the chat assistant (defaults to model)
            timeout:    Request timeout in seconds
        """
        if AsyncOpenAI is None:
            raise ImportError(
                "openai package required for LM Studio support. "
                "Install with: pip install automation-advisor[lm-studio]"
            )

        self.base_url = base_url
        self.model = model
        self.chat_model = chat_model or model
        self._timeout = timeout
        self._client = AsyncOpenAI(base_url=base_url, api_key="lm-studio", timeout=timeout)

    async def health_check(self) -> bool:
        """
        Check LM Studio server health by listing available models.

        Returns:
            True if server is reachable, False otherwise.
        """
        try:
            async with httpx.AsyncClient(timeout=5.0) as http:
                response = await http.get(f"{self.base_url}/models")
            return response.status_code == 200
        except Exception as e:
            logger.error(f"LM Studio health check failed: {e}")
            return False

    async def generate(self, messages: list[dict], model: str | None = None) -> str:
        """
        Generate a streaming response from LM Studio.

        Args:
            messages: Chat messages in format [{"role": "user", "content": "..."}]
            model:    Model override (defaults to self.model)

        Returns:
            Full accumulated response text.
        """
        model = model or self.model
        logger.info(f"LMStudio.generate: model={model}, messages={len(messages)}")

        accumulated = []
        stream = await self._client.chat.completions.create(
            model=model,
            messages=messages,
            stream=True,
        )
        async for chunk in stream:
            delta = chunk.choices[0].delta if chunk.choices else None
            if delta and delta.content:
                accumulated.append(delta.content)

        result = "".join(accumulated)
        logger.info(f"LMStudio.generate: {len(result)} chars")
        return result

    async def generate_plan(self, prompt: str) -> GenerationResult:
        """
        Draft a plan from a fully rendered prompt.

        Raises:
            CollaboratorError: On any provider failure
        """
        try:
            text = await self.generate([{"role": "user", "content": prompt}])
        except Exception as e:
            logger.error(f"LM Studio plan generation failed: {e}")
            raise CollaboratorError("Failed to generate automation plan") from e
        return GenerationResult(text=text, sources=[], model=self.model)

    def start_chat(self, history: list[ChatMessage]) -> HistoryConversation:
        """Open a conversation seeded with the transcript so far."""
        return HistoryConversation(self, history, model=self.chat_model)
