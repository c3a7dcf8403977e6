# automation_advisor/tools/get_plan.py
"""
get_plan tool implementation.

Selects a saved plan in the workspace and returns its content.
"""

import logging
from datetime import datetime, timezone

from fastmcp.exceptions import ToolError

from automation_advisor.errors import PlanValidationError
from automation_advisor.models.plan import SavedPlan
from automation_advisor.models.responses import PlanDetailResponse, SectionView, SourceView
from automation_advisor.planning.parser import is_fallback
from automation_advisor.planning.store import PlanStore
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.validation.sanitize import sanitize_plan_id

logger = logging.getLogger(__name__)


def resolve_plan(plan_id: str, store: PlanStore) -> SavedPlan:
    """
    Validate a plan ID (or unique prefix) and look it up.

    Raises:
        ToolError: If the ID is malformed, unknown or ambiguous
    """
    try:
        sanitized_id = sanitize_plan_id(plan_id)
    except PlanValidationError as e:
        raise ToolError(str(e))

    plan = store.find(sanitized_id)
    if plan is None:
        raise ToolError(
            f"Plan '{sanitized_id}' not found. Use list_plans to see available plans."
        )
    return plan


def plan_detail_fields(plan: SavedPlan) -> dict:
    """Response fields shared by every tool that returns a whole plan."""
    return {
        "plan_id": plan.id,
        "business_description": plan.business_description,
        "created_at": datetime.fromtimestamp(plan.created_at / 1000, tz=timezone.utc).isoformat(),
        "sections": [
            SectionView(key=key, title=section.title, content=section.content)
            for key, section in plan.sections()
        ],
        "sources": [SourceView(uri=s.uri, title=s.title) for s in plan.sources],
        "structured": not is_fallback(plan),
    }


async def get_plan(plan_id: str, store: PlanStore, workspace: PlanWorkspace) -> dict:
    """
    Retrieve a saved plan and make it the selected plan.

    Any unsaved edits of the previously selected plan are discarded.

    Args:
        plan_id: Plan identifier (or unique prefix) from list_plans
        store: Plan library
        workspace: Edit/view workspace

    Returns:
        PlanDetailResponse as dict

    Raises:
        ToolError: If plan_id is invalid or not found
    """
    plan = resolve_plan(plan_id, store)
    draft = workspace.select(plan.id)

    response = PlanDetailResponse(**plan_detail_fields(draft))
    return response.model_dump()
