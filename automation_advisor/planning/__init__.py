# automation_advisor/planning/__init__.py
"""Plan parsing, library, edit/view workspace, generation workflow and export."""

from .export import PlanRenderer, export_filename
from .parser import parse_plan
from .store import PlanStore
from .workflow import GenerationWorkflow
from .workspace import PlanWorkspace, ViewState

__all__ = [
    "parse_plan",
    "PlanStore",
    "PlanWorkspace",
    "ViewState",
    "GenerationWorkflow",
    "PlanRenderer",
    "export_filename",
]
