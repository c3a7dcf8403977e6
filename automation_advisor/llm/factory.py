# automation_advisor/llm/factory.py
"""Factory for creating the configured LLM client."""

from automation_advisor.config.schema import AdvisorConfig

from .client import OllamaClient
from .gemini import GeminiClient
from .lm_studio import LMStudioClient

LLMClient = OllamaClient | LMStudioClient | GeminiClient


def create_llm_client(config: AdvisorConfig) -> LLMClient:
    """
    Create the appropriate LLM client based on config.provider.

    Args:
        config: Root AdvisorConfig

    Returns:
        OllamaClient for provider="ollama", LMStudioClient for provider="lm_studio",
        GeminiClient for provider="gemini"
    """
    if config.provider == "lm_studio":
        return LMStudioClient(
            base_url=config.lm_studio.base_url,
            model=config.lm_studio.model,
            chat_model=config.lm_studio.chat_model,
            timeout=config.lm_studio.timeout,
        )
    if config.provider == "gemini":
        return GeminiClient(
            api_key=config.gemini.resolve_api_key(),
            model=config.gemini.model,
            chat_model=config.gemini.chat_model,
            thinking_budget=config.gemini.thinking_budget,
            search_grounding=config.gemini.search_grounding,
        )
    return OllamaClient(
        base_url=config.ollama.base_url,
        model=config.ollama.model,
        chat_model=config.ollama.chat_model,
        timeout=config.ollama.timeout,
    )
