# automation_advisor/tools/delete_plan.py
"""
delete_plan tool implementation.

Removes a plan from the library; deleting an unknown id is a no-op.
"""

import logging

from fastmcp.exceptions import ToolError

from automation_advisor.errors import PersistenceError, PlanValidationError
from automation_advisor.models.responses import DeletePlanResponse
from automation_advisor.planning.store import PlanStore
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.validation.sanitize import sanitize_plan_id

logger = logging.getLogger(__name__)


async def delete_plan(plan_id: str, store: PlanStore, workspace: PlanWorkspace) -> dict:
    """
    Delete a saved plan.

    Clears the workspace selection if the deleted plan was selected.

    Args:
        plan_id: Plan identifier (or unique prefix)
        store: Plan library
        workspace: Edit/view workspace

    Returns:
        DeletePlanResponse as dict

    Raises:
        ToolError: If plan_id is malformed or the library could not be saved
    """
    try:
        sanitized_id = sanitize_plan_id(plan_id)
    except PlanValidationError as e:
        raise ToolError(str(e))

    plan = store.find(sanitized_id)
    target_id = plan.id if plan else sanitized_id

    try:
        deleted = workspace.delete(target_id)
    except PersistenceError as e:
        raise ToolError(str(e))

    message = f"Plan {target_id} deleted." if deleted else f"No plan with id {target_id}; nothing deleted."
    response = DeletePlanResponse(plan_id=target_id, deleted=deleted, message=message)
    return response.model_dump()
