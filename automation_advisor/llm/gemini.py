# automation_advisor/llm/gemini.py
"""
Google Gemini client.

Plan generation is grounded with Google Search, so responses carry the web
pages the model consulted; those become the plan's sources.
Requires: pip install automation-advisor[gemini]
"""

import logging
from typing import Any

from automation_advisor.errors import CollaboratorError
from automation_advisor.models.plan import ChatMessage, GroundingSource

from .types import UNTITLED_SOURCE, GenerationResult

try:
    from google import genai
    from google.genai import types as genai_types
except ImportError:
    genai = None  # type: ignore[assignment]
    genai_types = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


def extract_sources(response: Any) -> list[GroundingSource]:
    """
    Collect web citations from a grounded response.

    Chunks without a URI are dropped; blank titles get a generic label.
    Order is preserved and duplicates are kept.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None) or ""
        if not uri:
            continue
        title = getattr(web, "title", None) or UNTITLED_SOURCE
        sources.append(GroundingSource(uri=uri, title=title))
    return sources


def _to_contents(messages: list[dict]) -> list:
    """Chat-completion style messages -> Gemini contents ("assistant" becomes "model")."""
    return [
        genai_types.Content(
            role="model" if m["role"] in ("assistant", "model") else "user",
            parts=[genai_types.Part(text=m["content"])],
        )
        for m in messages
    ]


class GeminiConversation:
    """Wraps a Gemini chat session; the service keeps the context between turns."""

    def __init__(self, chat: Any) -> None:
        self._chat = chat

    async def send_message(self, text: str) -> str:
        """
        Send one user message and return the reply.

        Raises:
            CollaboratorError: On any provider failure
        """
        try:
            response = await self._chat.send_message(text)
        except Exception as e:
            logger.error(f"Gemini API error (chat): {e}")
            raise CollaboratorError("Failed to get chat response from Gemini API") from e
        return response.text or ""


class GeminiClient:
    """Async Gemini client for plan generation and chat."""

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.5-pro",
        chat_model: str = "gemini-2.5-flash",
        thinking_budget: int | None = 32768,
        search_grounding: bool = True,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key:          Gemini API key
            model:            Model that drafts plans
            chat_model:       Model for the chat assistant
            thinking_budget:  Thinking token budget for plans (None = model default)
            search_grounding: Enable the Google Search tool for plans

        Raises:
            ImportError: If google-genai is not installed
            ValueError: If no API key is available
        """
        if genai is None:
            raise ImportError(
                "google-genai package required for Gemini support. "
                "Install with: pip install automation-advisor[gemini]"
            )
        if not api_key:
            raise ValueError("Gemini API key not set (config gemini.api_key or GEMINI_API_KEY)")

        self.model = model
        self.chat_model = chat_model
        self.thinking_budget = thinking_budget
        self.search_grounding = search_grounding
        self.client = genai.Client(api_key=api_key)

    async def health_check(self) -> bool:
        """
        Check that the API key works and the plan model exists.

        Returns:
            True if the model could be looked up, False otherwise.
        """
        try:
            await self.client.aio.models.get(model=self.model)
            return True
        except Exception as e:
            logger.error(f"Gemini health check failed: {e}")
            return False

    async def generate(self, messages: list[dict], model: str | None = None) -> str:
        """
        Single non-grounded generation from a message list.

        Args:
            messages: Chat messages in format [{"role": "user", "content": "..."}]
            model:    Model override (defaults to self.model)
        """
        model = model or self.model
        logger.info(f"Gemini.generate: model={model}, messages={len(messages)}")
        response = await self.client.aio.models.generate_content(
            model=model, contents=_to_contents(messages)
        )
        return response.text or ""

    def _plan_config(self):
        kwargs: dict[str, Any] = {}
        if self.thinking_budget is not None:
            kwargs["thinking_config"] = genai_types.ThinkingConfig(
                thinking_budget=self.thinking_budget
            )
        if self.search_grounding:
            kwargs["tools"] = [genai_types.Tool(google_search=genai_types.GoogleSearch())]
        return genai_types.GenerateContentConfig(**kwargs)

    async def generate_plan(self, prompt: str) -> GenerationResult:
        """
        Draft a grounded plan from a fully rendered prompt.

        Raises:
            CollaboratorError: On any provider failure or an empty response
        """
        logger.info(f"Gemini.generate_plan: model={self.model}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._plan_config(),
            )
            text = response.text
            if not text:
                raise ValueError("response contained no text")
        except Exception as e:
            logger.error(f"Gemini API error (generate_plan): {e}")
            raise CollaboratorError("Failed to generate automation plan from Gemini API") from e

        sources = extract_sources(response)
        logger.info(f"Gemini.generate_plan: {len(text)} chars, {len(sources)} source(s)")
        return GenerationResult(text=text, sources=sources, model=self.model)

    def start_chat(self, history: list[ChatMessage]) -> GeminiConversation:
        """Open a Gemini chat session seeded with the transcript so far."""
        chat = self.client.aio.chats.create(
            model=self.chat_model,
            history=_to_contents([{"role": m.role, "content": m.content} for m in history]),
        )
        return GeminiConversation(chat)
