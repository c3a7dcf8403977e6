# automation_advisor/config/__init__.py
"""Configuration system for automation-advisor."""

from .loader import get_config_path, load_config
from .schema import (
    AdvisorConfig,
    GeminiConfig,
    LMStudioConfig,
    OllamaConfig,
    OutputConfig,
    StorageConfig,
)

__all__ = [
    "AdvisorConfig",
    "OllamaConfig",
    "LMStudioConfig",
    "GeminiConfig",
    "StorageConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
