# automation_advisor/llm/types.py
"""Normalized LLM result types shared by all client implementations."""

from dataclasses import dataclass, field

from automation_advisor.models.plan import GroundingSource

UNTITLED_SOURCE = "Fuente sin título"


@dataclass
class GenerationResult:
    """Plan text plus any citations the provider returned."""

    text: str
    sources: list[GroundingSource] = field(default_factory=list)
    model: str = ""
