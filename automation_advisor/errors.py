# automation_advisor/errors.py
"""
Error taxonomy for automation-advisor.

Tools translate these into ToolError; the CLI prints them and exits non-zero.
"""


class AdvisorError(Exception):
    """Base class for all automation-advisor errors."""


class PlanValidationError(AdvisorError):
    """User input rejected before any network call."""


class CollaboratorError(AdvisorError):
    """Any failure from an external AI service call."""


class WorkspaceError(AdvisorError):
    """Invalid edit/view transition (editing while not in edit mode, unknown plan, ...)."""


class PersistenceError(AdvisorError):
    """Plan library could not be written to storage."""
