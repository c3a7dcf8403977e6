# automation_advisor/models/__init__.py
"""
Data models for automation-advisor.

Provides the plan models and Pydantic response models for tools.
"""

from automation_advisor.models.plan import (
    SECTION_KEYS,
    ChatMessage,
    GroundingSource,
    Plan,
    PlanSection,
    SavedPlan,
    generate_plan_id,
)
from automation_advisor.models.responses import (
    ChatReplyResponse,
    DeletePlanResponse,
    ExportPlanResponse,
    GeneratePlanResponse,
    ListPlansResponse,
    PlanDetailResponse,
    PlanSummary,
)

__all__ = [
    # Plan models
    "SECTION_KEYS",
    "PlanSection",
    "Plan",
    "SavedPlan",
    "GroundingSource",
    "ChatMessage",
    "generate_plan_id",
    # Response models
    "GeneratePlanResponse",
    "PlanDetailResponse",
    "PlanSummary",
    "ListPlansResponse",
    "DeletePlanResponse",
    "ExportPlanResponse",
    "ChatReplyResponse",
]
