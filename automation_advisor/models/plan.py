# automation_advisor/models/plan.py
"""
Plan data models.

Serialized field names follow the stored library layout (camelCase), Python
attributes are snake_case. All models are frozen: edits produce new copies.
"""

from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

# Fixed section order: parsing position, rendering and export order.
SECTION_KEYS: tuple[str, ...] = ("analysis", "flows", "stack", "implementation", "roi")


class PlanSection(BaseModel):
    """One titled part of an automation plan."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Section heading (may be empty)")
    content: str = Field(default="", description="Section body text (may be empty)")


class GroundingSource(BaseModel):
    """A citation returned by the plan generator."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(description="Source URL")
    title: str = Field(default="", description="Source title")


class Plan(BaseModel):
    """The five-section automation recommendation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    analysis: PlanSection = Field(default_factory=PlanSection, description="Manual process analysis")
    flows: PlanSection = Field(default_factory=PlanSection, description="Agent flow design")
    stack: PlanSection = Field(default_factory=PlanSection, description="Recommended tech stack")
    implementation: PlanSection = Field(
        default_factory=PlanSection, description="Step-by-step implementation"
    )
    roi: PlanSection = Field(default_factory=PlanSection, description="Estimated ROI")

    def section(self, key: str) -> PlanSection:
        """Return the section stored under ``key``."""
        if key not in SECTION_KEYS:
            raise KeyError(f"Unknown plan section '{key}'. Must be one of: {', '.join(SECTION_KEYS)}")
        return getattr(self, key)

    def sections(self) -> list[tuple[str, PlanSection]]:
        """All sections as (key, section) pairs in fixed order."""
        return [(key, getattr(self, key)) for key in SECTION_KEYS]


class SavedPlan(Plan):
    """A persisted plan with identity, timestamp, input description and citations."""

    id: str = Field(description="Unique plan identifier (UUID4)")
    created_at: int = Field(alias="createdAt", description="Creation time, epoch milliseconds")
    business_description: str = Field(
        alias="businessDescription", description="Free-text input that produced the plan"
    )
    sources: list[GroundingSource] = Field(
        default_factory=list, description="Citations in the order returned (duplicates allowed)"
    )

    def to_storage(self) -> dict:
        """Serialize using the stored (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)

    def with_sections_from(self, other: Plan) -> "SavedPlan":
        """Copy of this plan carrying ``other``'s section contents; identity untouched."""
        return self.model_copy(update={key: getattr(other, key) for key in SECTION_KEYS})


class ChatMessage(BaseModel):
    """One transcript entry of the chat assistant."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(description="Who wrote the message")
    content: str = Field(description="Message text")


def generate_plan_id() -> str:
    """
    Generate a unique plan ID.

    Returns:
        UUID4 string (36 characters)
    """
    return str(uuid4())
