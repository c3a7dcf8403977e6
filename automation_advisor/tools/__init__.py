# automation_advisor/tools/__init__.py
"""Service layer shared by the CLI and the MCP server."""
