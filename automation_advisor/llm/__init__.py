# automation_advisor/llm/__init__.py
"""LLM integration module: Ollama, LM Studio and Gemini clients."""

from .client import OllamaClient
from .conversation import HistoryConversation
from .factory import create_llm_client
from .gemini import GeminiClient
from .lm_studio import LMStudioClient
from .types import GenerationResult

__all__ = [
    "OllamaClient",
    "LMStudioClient",
    "GeminiClient",
    "HistoryConversation",
    "create_llm_client",
    "GenerationResult",
]
