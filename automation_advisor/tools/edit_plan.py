# automation_advisor/tools/edit_plan.py
"""
edit_plan_section tool implementation.

Edits one section of a saved plan through the workspace and saves it.
"""

import logging

from fastmcp.exceptions import ToolError

from automation_advisor.errors import PersistenceError, WorkspaceError
from automation_advisor.models.responses import PlanDetailResponse
from automation_advisor.planning.store import PlanStore
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.tools.get_plan import plan_detail_fields, resolve_plan

logger = logging.getLogger(__name__)


async def edit_plan_section(
    plan_id: str,
    section: str,
    content: str,
    store: PlanStore,
    workspace: PlanWorkspace,
) -> dict:
    """
    Replace the content of one plan section and save.

    Selects the plan first when it is not already selected; edits already
    pending on the selected plan are saved along with this one.

    Args:
        plan_id: Plan identifier (or unique prefix)
        section: Section key (analysis/flows/stack/implementation/roi)
        content: New section content
        store: Plan library
        workspace: Edit/view workspace

    Returns:
        PlanDetailResponse as dict

    Raises:
        ToolError: If the plan or section is unknown, or saving failed
    """
    plan = resolve_plan(plan_id, store)

    try:
        if workspace.selected_id != plan.id:
            workspace.select(plan.id)
        workspace.start_editing()
        workspace.edit_section(section, content)
        saved = workspace.save()
    except (WorkspaceError, PersistenceError) as e:
        workspace.cancel_editing()
        raise ToolError(str(e))

    logger.info(f"Edited section '{section}' of plan {saved.id}")
    response = PlanDetailResponse(**plan_detail_fields(saved))
    return response.model_dump()
