# automation_advisor/tools/export_plan.py
"""
export_plan tool implementation.

Renders a saved plan as plain text and optionally writes it to a directory.
"""

import logging

from fastmcp.exceptions import ToolError

from automation_advisor.errors import PlanValidationError
from automation_advisor.models.responses import ExportPlanResponse
from automation_advisor.planning.export import PlanRenderer, export_filename
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.planning.store import PlanStore
from automation_advisor.tools.get_plan import resolve_plan
from automation_advisor.validation.sanitize import resolve_export_dir

logger = logging.getLogger(__name__)


async def export_plan(
    plan_id: str,
    store: PlanStore,
    workspace: PlanWorkspace | None = None,
    output_dir: str | None = None,
) -> dict:
    """
    Export a plan as a text document.

    When the plan is the one open in the workspace, the draft is exported
    (unsaved edits included), otherwise the stored version.

    Args:
        plan_id: Plan identifier (or unique prefix)
        store: Plan library
        workspace: Edit/view workspace (optional)
        output_dir: Existing directory to write the file into (None = don't write)

    Returns:
        ExportPlanResponse as dict

    Raises:
        ToolError: If the plan is unknown, the directory is invalid or the write failed
    """
    plan = resolve_plan(plan_id, store)
    if workspace is not None and workspace.selected_id == plan.id and workspace.draft is not None:
        plan = workspace.draft

    content = PlanRenderer().render(plan)
    filename = export_filename(plan)

    file_path = None
    if output_dir is not None:
        try:
            directory = resolve_export_dir(output_dir)
        except PlanValidationError as e:
            raise ToolError(str(e))

        target = directory / filename
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ToolError(f"Could not write export file '{target}': {e}")
        file_path = str(target)
        logger.info(f"Exported plan {plan.id} to {file_path}")

    response = ExportPlanResponse(
        plan_id=plan.id, filename=filename, content=content, file_path=file_path
    )
    return response.model_dump()
