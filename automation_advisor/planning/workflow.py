# automation_advisor/planning/workflow.py
"""
Plan generation: description -> AI collaborator -> parser -> library.

One generation may run at a time. Failures leave the library untouched and
set a fixed user-facing message; the cause is only logged.
"""

import logging
import time
from typing import Any

from automation_advisor.errors import CollaboratorError, PersistenceError, PlanValidationError
from automation_advisor.models.plan import SavedPlan, generate_plan_id
from automation_advisor.planning.parser import parse_plan
from automation_advisor.planning.store import PlanStore
from automation_advisor.planning.workspace import PlanWorkspace
from automation_advisor.prompts import load_prompt
from automation_advisor.validation.sanitize import sanitize_description

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Por favor, describe tu negocio."
GENERATION_FAILED_MESSAGE = "Hubo un error al generar el plan. Por favor, inténtalo de nuevo."


def build_plan_prompt(business_description: str) -> str:
    """Render the plan prompt for a business description."""
    return load_prompt("plan").format(business_description=business_description)


class GenerationWorkflow:
    """
    Drives a single plan generation request.

    Attributes:
        is_loading: True while a request is in flight
        error: User-facing message from the last attempt, or None
    """

    def __init__(self, client: Any, store: PlanStore, workspace: PlanWorkspace) -> None:
        """
        Args:
            client: LLM client exposing generate_plan(prompt)
            store: Plan library to commit into
            workspace: Selection to update on success
        """
        self._client = client
        self._store = store
        self._workspace = workspace
        self.is_loading = False
        self.error: str | None = None

    @property
    def client(self) -> Any:
        return self._client

    async def generate(self, business_description: str) -> SavedPlan | None:
        """
        Generate, parse and store a plan.

        Returns:
            The stored plan, or None when the input was blank, a request was
            already running, or the collaborator failed (see ``error``)
        """
        if self.is_loading:
            logger.info("Generation already in progress; ignoring new request")
            return None

        try:
            description = sanitize_description(business_description)
        except PlanValidationError:
            self.error = VALIDATION_MESSAGE
            return None

        self.is_loading = True
        self.error = None
        epoch = self._workspace.selection_epoch

        try:
            result = await self._client.generate_plan(build_plan_prompt(description))
            plan = parse_plan(result.text)
            saved = SavedPlan(
                **dict(plan.sections()),
                id=generate_plan_id(),
                created_at=int(time.time() * 1000),
                business_description=description,
                sources=result.sources or [],
            )
            self._store.create(saved)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Error generating plan: {e}", exc_info=not isinstance(e, CollaboratorError))
            self.error = GENERATION_FAILED_MESSAGE
            return None
        finally:
            self.is_loading = False

        if self._workspace.selection_epoch == epoch:
            self._workspace.select(saved.id)
        else:
            logger.info(f"Selection changed during generation; plan {saved.id} stored without selecting it")

        logger.info(f"Generated plan {saved.id} with {len(saved.sources)} source(s)")
        return saved
