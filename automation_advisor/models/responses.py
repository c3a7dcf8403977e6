# automation_advisor/models/responses.py
"""
Pydantic response models for tool outputs.

All tools return structured responses using these models for consistency.
"""

from pydantic import BaseModel, Field


class SectionView(BaseModel):
    """A plan section as returned to callers."""

    key: str = Field(description="Section key (analysis/flows/stack/implementation/roi)")
    title: str = Field(description="Section heading")
    content: str = Field(description="Section body")


class SourceView(BaseModel):
    """A citation as returned to callers."""

    uri: str = Field(description="Source URL")
    title: str = Field(description="Source title")


class PlanDetailResponse(BaseModel):
    """Response from get_plan and edit_plan_section tools."""

    plan_id: str = Field(description="Plan identifier")
    business_description: str = Field(description="Business description the plan was generated from")
    created_at: str = Field(description="Creation timestamp (ISO format)")
    sections: list[SectionView] = Field(description="The five sections in fixed order")
    sources: list[SourceView] = Field(default_factory=list, description="Cited sources")
    structured: bool = Field(
        description="False when the generator ignored the heading convention and the plan fell back to one section"
    )


class GeneratePlanResponse(PlanDetailResponse):
    """Response from generate_plan tool."""

    model: str = Field(description="Model that drafted the plan")
    next_steps: str = Field(
        default="Use get_plan with plan_id to view it, or edit_plan_section to refine a section",
        description="What to do next",
    )


class PlanSummary(BaseModel):
    """Summary information for a single plan (used in list_plans)."""

    plan_id: str = Field(description="Plan identifier")
    description: str = Field(description="Business description (truncated to 60 chars)")
    created_at: str = Field(description="Creation timestamp (ISO format)")
    source_count: int = Field(default=0, ge=0, description="Number of cited sources")


class ListPlansResponse(BaseModel):
    """Response from list_plans tool."""

    plans: list[PlanSummary] = Field(
        default_factory=list, description="Saved plans, newest first"
    )
    total: int = Field(description="Total number of plans")


class DeletePlanResponse(BaseModel):
    """Response from delete_plan tool."""

    plan_id: str = Field(description="Plan identifier that was deleted")
    deleted: bool = Field(description="False when no plan had this id (no-op)")
    message: str = Field(description="Human-readable confirmation message")


class ExportPlanResponse(BaseModel):
    """Response from export_plan tool."""

    plan_id: str = Field(description="Plan identifier")
    filename: str = Field(description="Suggested file name for the export")
    content: str = Field(description="Plain-text export")
    file_path: str | None = Field(default=None, description="Where the export was written, if written")


class ChatReplyResponse(BaseModel):
    """Response from ask_assistant tool."""

    reply: str = Field(description="Assistant reply (an apology text if the call failed)")
    failed: bool = Field(default=False, description="True when the reply is the fixed error text")
    turns: int = Field(description="Number of messages in the transcript")
