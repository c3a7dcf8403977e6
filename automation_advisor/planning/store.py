# automation_advisor/planning/store.py
"""
Plan library backed by a key-value storage.

The whole collection lives under one key, is loaded once on construction and
is rewritten after every change.
"""

import json
import logging

from pydantic import ValidationError

from automation_advisor.errors import PersistenceError
from automation_advisor.models.plan import SavedPlan
from automation_advisor.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "automationPlans"


class PlanStore:
    """
    Ordered collection of saved plans, newest first.

    Owns the canonical plan records. Callers receive immutable models, so
    nothing outside the store can change a stored plan without calling
    update().
    """

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY) -> None:
        """
        Initialize the store and load any persisted plans.

        Args:
            storage: Storage backend
            key: Storage key holding the serialized collection
        """
        self._storage = storage
        self._key = key
        self._plans: list[SavedPlan] = self._load()
        logger.info(f"Initialized PlanStore with {len(self._plans)} plan(s)")

    def _load(self) -> list[SavedPlan]:
        """Read the collection; absent or unreadable data yields an empty list."""
        raw = self._storage.get(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            plans = [SavedPlan.model_validate(item) for item in data]
        except (ValueError, ValidationError) as e:
            logger.warning(f"Discarding unreadable plan library under '{self._key}': {e}")
            return []

        # Keep the first occurrence if a hand-edited file repeats an id
        seen: set[str] = set()
        unique = []
        for plan in plans:
            if plan.id in seen:
                logger.warning(f"Dropping duplicate plan id {plan.id} from library")
                continue
            seen.add(plan.id)
            unique.append(plan)
        return unique

    def _persist(self) -> None:
        payload = json.dumps([plan.to_storage() for plan in self._plans], ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to persist plan library: {e}")
            raise PersistenceError(f"Could not save plan library: {e}") from e

    def list_all(self) -> list[SavedPlan]:
        """
        List all plans.

        Returns:
            New list of plans, newest first
        """
        return list(self._plans)

    def get(self, plan_id: str) -> SavedPlan | None:
        """
        Get a plan by ID.

        Returns:
            SavedPlan if found, None otherwise
        """
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def find(self, id_or_prefix: str) -> SavedPlan | None:
        """
        Look a plan up by full id or by a unique id prefix.

        Returns:
            SavedPlan if exactly one plan matches, None otherwise
        """
        exact = self.get(id_or_prefix)
        if exact is not None:
            return exact
        matches = [plan for plan in self._plans if plan.id.startswith(id_or_prefix)]
        if len(matches) > 1:
            logger.info(f"Plan id prefix '{id_or_prefix}' is ambiguous ({len(matches)} matches)")
        return matches[0] if len(matches) == 1 else None

    def __len__(self) -> int:
        return len(self._plans)

    def __contains__(self, plan_id: object) -> bool:
        return any(plan.id == plan_id for plan in self._plans)

    def create(self, plan: SavedPlan) -> None:
        """
        Insert a plan at the front of the collection and persist.

        Raises:
            ValueError: If a plan with the same id already exists
            PersistenceError: If storage could not be written
        """
        if plan.id in self:
            raise ValueError(f"Plan {plan.id} already exists")

        self._plans.insert(0, plan)
        logger.info(f"Added plan {plan.id} to library")
        self._persist()

    def update(self, plan: SavedPlan) -> SavedPlan | None:
        """
        Replace the sections of the stored plan with the same id.

        Identity fields (id, created_at, business_description) and sources
        are kept from the stored record. Unknown ids are ignored.

        Returns:
            The updated record, or None if no plan matched

        Raises:
            PersistenceError: If storage could not be written
        """
        for index, existing in enumerate(self._plans):
            if existing.id == plan.id:
                updated = existing.with_sections_from(plan)
                self._plans[index] = updated
                logger.info(f"Updated plan {plan.id}")
                self._persist()
                return updated

        logger.info(f"Ignored update for unknown plan {plan.id}")
        return None

    def delete(self, plan_id: str) -> bool:
        """
        Remove the plan with this id.

        Clearing a selection that points at it is the workspace's job.

        Returns:
            True if a plan was removed, False if the id was unknown (no-op)

        Raises:
            PersistenceError: If storage could not be written
        """
        remaining = [plan for plan in self._plans if plan.id != plan_id]
        if len(remaining) == len(self._plans):
            logger.info(f"Ignored delete for unknown plan {plan_id}")
            return False

        self._plans = remaining
        logger.info(f"Deleted plan {plan_id}")
        self._persist()
        return True
