# automation_advisor/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

# Configure logging FIRST before any other imports
from automation_advisor.logging_config import configure_logging

configure_logging()

import logging

from fastmcp import FastMCP

from automation_advisor.config.loader import load_config
from automation_advisor.runtime import AdvisorRuntime
from automation_advisor.tools.ask_assistant import ask_assistant as _ask_assistant
from automation_advisor.tools.delete_plan import delete_plan as _delete_plan
from automation_advisor.tools.edit_plan import edit_plan_section as _edit_plan_section
from automation_advisor.tools.export_plan import export_plan as _export_plan
from automation_advisor.tools.generate_plan import generate_plan as _generate_plan
from automation_advisor.tools.get_plan import get_plan as _get_plan
from automation_advisor.tools.list_plans import list_plans as _list_plans

logger = logging.getLogger(__name__)

mcp = FastMCP("automation-advisor")

_runtime: AdvisorRuntime | None = None


def get_runtime() -> AdvisorRuntime:
    """
    Get the process-wide runtime.

    Raises:
        RuntimeError: If initialize_runtime() has not been called
    """
    if _runtime is None:
        raise RuntimeError("Server runtime not initialized. Call initialize_runtime() first.")
    return _runtime


def initialize_runtime(runtime: AdvisorRuntime | None = None) -> AdvisorRuntime:
    """
    Initialize the runtime (config + plan library).

    Must be called before any tool calls. Called by __main__.py on startup.
    """
    global _runtime
    if runtime is None:
        config = load_config()
        logger.info(f"Loaded configuration: provider={config.provider}")
        runtime = AdvisorRuntime(config)
    _runtime = runtime
    logger.info(f"Runtime initialized with {len(runtime.store)} saved plan(s)")
    return runtime


def shutdown_runtime() -> None:
    global _runtime
    if _runtime is not None:
        _runtime.shutdown()
        _runtime = None


@mcp.tool()
async def generate_plan(description: str) -> dict:
    """Generate a five-section automation plan for a business description and save it."""
    runtime = get_runtime()
    return await _generate_plan(description, workflow=runtime.workflow)


@mcp.tool()
async def list_plans() -> dict:
    """List saved automation plans, newest first."""
    return await _list_plans(store=get_runtime().store)


@mcp.tool()
async def get_plan(plan_id: str) -> dict:
    """Open a saved plan and return its sections and sources."""
    runtime = get_runtime()
    return await _get_plan(plan_id, store=runtime.store, workspace=runtime.workspace)


@mcp.tool()
async def edit_plan_section(plan_id: str, section: str, content: str) -> dict:
    """Replace the content of one section (analysis/flows/stack/implementation/roi) and save."""
    runtime = get_runtime()
    return await _edit_plan_section(
        plan_id, section, content, store=runtime.store, workspace=runtime.workspace
    )


@mcp.tool()
async def delete_plan(plan_id: str) -> dict:
    """Delete a saved plan. Unknown ids are a no-op."""
    runtime = get_runtime()
    return await _delete_plan(plan_id, store=runtime.store, workspace=runtime.workspace)


@mcp.tool()
async def export_plan(plan_id: str, output_dir: str | None = None) -> dict:
    """Render a plan as plain text, optionally writing it into an existing directory."""
    runtime = get_runtime()
    return await _export_plan(
        plan_id, store=runtime.store, workspace=runtime.workspace, output_dir=output_dir
    )


@mcp.tool()
async def ask_assistant(message: str) -> dict:
    """Ask the automation assistant a follow-up question."""
    return await _ask_assistant(message, session=get_runtime().chat)
