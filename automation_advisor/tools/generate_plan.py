# automation_advisor/tools/generate_plan.py
"""
generate_plan tool implementation.

Runs the generation workflow and returns the stored plan.
"""

import logging

from fastmcp.exceptions import ToolError

from automation_advisor.errors import PersistenceError
from automation_advisor.models.responses import GeneratePlanResponse
from automation_advisor.planning.workflow import GenerationWorkflow
from automation_advisor.tools.get_plan import plan_detail_fields

logger = logging.getLogger(__name__)


async def generate_plan(description: str, workflow: GenerationWorkflow) -> dict:
    """
    Generate an automation plan for a business description.

    Args:
        description: Free-text description of the business
        workflow: Generation workflow bound to a client, library and workspace

    Returns:
        GeneratePlanResponse as dict

    Raises:
        ToolError: If the description is blank, another generation is
                   running, the AI service failed, or the library could not be saved
    """
    if workflow.is_loading:
        raise ToolError("A plan is already being generated. Wait for it to finish.")

    try:
        plan = await workflow.generate(description)
    except PersistenceError as e:
        raise ToolError(str(e))

    if plan is None:
        raise ToolError(workflow.error or "Plan generation did not complete")

    response = GeneratePlanResponse(
        **plan_detail_fields(plan),
        model=getattr(workflow.client, "model", ""),
    )
    return response.model_dump()
