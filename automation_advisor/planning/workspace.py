# automation_advisor/planning/workspace.py
"""
Edit/view state for the currently selected plan.

The workspace keeps a draft copy of the selected plan. Section edits change
only the draft; save() commits the draft to the store. Selecting another
plan replaces the draft unconditionally, so unsaved edits are dropped.
"""

import logging
from enum import Enum

from automation_advisor.errors import PersistenceError, WorkspaceError
from automation_advisor.models.plan import SECTION_KEYS, SavedPlan
from automation_advisor.planning.store import PlanStore

logger = logging.getLogger(__name__)


class ViewState(Enum):
    """Workspace states."""

    NONE_SELECTED = "none_selected"
    VIEWING = "viewing"
    EDITING = "editing"


class PlanWorkspace:
    """
    Selection and draft tracking over a PlanStore.

    Transitions:
        none_selected/viewing/editing --select()--> viewing
        viewing --start_editing()--> editing
        editing --edit_section()--> editing (draft only)
        editing --save()--> viewing (draft committed)
        editing --cancel_editing()--> viewing (draft reset)
        any --delete(selected)/new_plan()--> none_selected
    """

    def __init__(self, store: PlanStore) -> None:
        self._store = store
        self._state = ViewState.NONE_SELECTED
        self._committed: SavedPlan | None = None
        self._draft: SavedPlan | None = None
        self._selection_epoch = 0

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def selected_id(self) -> str | None:
        return self._committed.id if self._committed else None

    @property
    def committed(self) -> SavedPlan | None:
        """The stored version of the selected plan."""
        return self._committed

    @property
    def draft(self) -> SavedPlan | None:
        """Working copy shown to the user (equals committed until edited)."""
        return self._draft

    @property
    def is_dirty(self) -> bool:
        return self._draft is not None and self._draft != self._committed

    @property
    def selection_epoch(self) -> int:
        """Increments on every selection change; used to spot stale async results."""
        return self._selection_epoch

    def select(self, plan_id: str) -> SavedPlan:
        """
        Select a plan for viewing.

        Any unsaved draft of the previously selected plan is discarded.

        Raises:
            WorkspaceError: If the plan is not in the store
        """
        plan = self._store.get(plan_id)
        if plan is None:
            raise WorkspaceError(f"Plan '{plan_id}' not found")

        if self.is_dirty:
            logger.info(f"Discarding unsaved edits of plan {self.selected_id}")

        self._committed = plan
        self._draft = plan.model_copy(deep=True)
        self._state = ViewState.VIEWING
        self._selection_epoch += 1
        return self._draft

    def new_plan(self) -> None:
        """Clear the selection so a new plan can be generated."""
        self._clear()

    def start_editing(self) -> None:
        """
        Enter edit mode for the selected plan.

        Raises:
            WorkspaceError: If no plan is selected
        """
        if self._state is ViewState.NONE_SELECTED:
            raise WorkspaceError("No plan selected")
        self._state = ViewState.EDITING

    def edit_section(self, key: str, content: str) -> SavedPlan:
        """
        Replace one section's content in the draft. Titles are not editable.

        Raises:
            WorkspaceError: If not editing or the key is unknown
        """
        if self._state is not ViewState.EDITING or self._draft is None:
            raise WorkspaceError("Plan is not in edit mode")
        if key not in SECTION_KEYS:
            raise WorkspaceError(
                f"Unknown section '{key}'. Must be one of: {', '.join(SECTION_KEYS)}"
            )

        section = self._draft.section(key).model_copy(update={"content": content})
        self._draft = self._draft.model_copy(update={key: section})
        return self._draft

    def save(self) -> SavedPlan:
        """
        Commit the draft to the store and return to viewing.

        Raises:
            WorkspaceError: If not editing, or the plan vanished from the store
            PersistenceError: If storage could not be written
        """
        if self._state is not ViewState.EDITING or self._draft is None:
            raise WorkspaceError("Plan is not in edit mode")

        try:
            updated = self._store.update(self._draft)
        except PersistenceError:
            # The store keeps the new content in memory; follow it
            stored = self._store.get(self._draft.id)
            if stored is not None:
                self._committed = stored
                self._draft = stored.model_copy(deep=True)
            self._state = ViewState.VIEWING
            raise
        if updated is None:
            self._clear()
            raise WorkspaceError("Selected plan no longer exists")

        self._committed = updated
        self._draft = updated.model_copy(deep=True)
        self._state = ViewState.VIEWING
        return updated

    def cancel_editing(self) -> None:
        """Drop draft changes and return to viewing."""
        if self._state is not ViewState.EDITING or self._committed is None:
            return
        self._draft = self._committed.model_copy(deep=True)
        self._state = ViewState.VIEWING

    def delete(self, plan_id: str) -> bool:
        """
        Delete a plan; clears the selection when it was the selected one.

        Returns:
            True if the store removed a plan

        Raises:
            PersistenceError: If storage could not be written (selection is still cleared)
        """
        was_selected = plan_id == self.selected_id
        try:
            removed = self._store.delete(plan_id)
        finally:
            # The plan is gone from memory even when the write failed
            if was_selected:
                self._clear()
        return removed

    def _clear(self) -> None:
        if self._committed is not None:
            self._selection_epoch += 1
        self._committed = None
        self._draft = None
        self._state = ViewState.NONE_SELECTED
