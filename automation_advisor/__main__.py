# automation_advisor/__main__.py
"""
Entry point for the automation-advisor MCP server.

CRITICAL: Server imports configure_logging() first to prevent stdout pollution.
"""

import asyncio
import logging

# Import server (which configures logging before anything else)
from automation_advisor.server import initialize_runtime, mcp, shutdown_runtime

logger = logging.getLogger(__name__)


async def main() -> None:
    """
    Main entry point.

    Initializes the runtime and then runs the MCP server on stdio.
    """
    initialize_runtime()

    logger.info("Starting MCP server on stdio transport")
    try:
        await mcp.run_stdio_async()
    finally:
        shutdown_runtime()


if __name__ == "__main__":
    asyncio.run(main())
