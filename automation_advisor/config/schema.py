# automation_advisor/config/schema.py
"""
Pydantic configuration models for automation-advisor.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OllamaConfig(BaseModel):
    """Ollama server configuration."""

    model_config = ConfigDict(extra="ignore")

    base_url: str = Field(
        default="http://localhost:11434", description="Ollama API base URL"
    )
    model: str = Field(
        default="qwen2.5:32b-instruct",
        description="Ollama model used to draft automation plans",
    )
    chat_model: str | None = Field(
        default=None, description="Model for the chat assistant (None = use model)"
    )
    timeout: int = Field(
        default=300, description="Request timeout in seconds (generous for model loading)"
    )


class LMStudioConfig(BaseModel):
    """LM Studio server configuration."""

    model_config = ConfigDict(extra="ignore")

    base_url: str = Field(
        default="http://localhost:1234/v1", description="LM Studio API base URL"
    )
    model: str = Field(default="local-model", description="LM Studio model used to draft plans")
    chat_model: str | None = Field(
        default=None, description="Model for the chat assistant (None = use model)"
    )
    timeout: int = Field(
        default=300, description="Request timeout in seconds"
    )


class GeminiConfig(BaseModel):
    """Google Gemini configuration (plans are grounded with Google Search)."""

    model_config = ConfigDict(extra="ignore")

    api_key: str | None = Field(
        default=None,
        description="Gemini API key (None = read GEMINI_API_KEY or API_KEY from the environment)",
    )
    model: str = Field(
        default="gemini-2.5-pro", description="Model used to draft automation plans"
    )
    chat_model: str = Field(
        default="gemini-2.5-flash", description="Model for the chat assistant"
    )
    thinking_budget: int | None = Field(
        default=32768,
        ge=0,
        description="Thinking token budget for plan generation (None = model default)",
    )
    search_grounding: bool = Field(
        default=True, description="Ground plan generation with Google Search and collect citations"
    )

    def resolve_api_key(self) -> str | None:
        """Return the configured key, falling back to the environment."""
        return self.api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")


class StorageConfig(BaseModel):
    """Plan library storage configuration."""

    model_config = ConfigDict(extra="ignore")

    data_dir: str | None = Field(
        default=None,
        description="Directory holding the plan library (None = platform user data dir)",
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(extra="ignore")

    export_dir: str = Field(
        default=".", description="Default directory for exported plan files"
    )
    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class AdvisorConfig(BaseModel):
    """Root configuration for automation-advisor."""

    model_config = ConfigDict(extra="ignore")

    provider: Literal["ollama", "lm_studio", "gemini"] = Field(
        default="ollama", description="AI provider to use"
    )
    ollama: OllamaConfig = Field(default_factory=OllamaConfig)
    lm_studio: LMStudioConfig = Field(default_factory=LMStudioConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
