# automation_advisor/tools/list_plans.py
"""
list_plans tool implementation.

Lists all saved plans, newest first.
"""

import logging
from datetime import datetime, timezone

from automation_advisor.models.responses import ListPlansResponse, PlanSummary
from automation_advisor.planning.store import PlanStore

logger = logging.getLogger(__name__)


async def list_plans(store: PlanStore) -> dict:
    """
    List all saved plans.

    Args:
        store: Plan library

    Returns:
        ListPlansResponse as dict
    """
    summaries = []
    for plan in store.list_all():
        desc = plan.business_description
        if len(desc) > 60:
            desc = desc[:60] + "..."

        summary = PlanSummary(
            plan_id=plan.id,
            description=desc,
            created_at=datetime.fromtimestamp(plan.created_at / 1000, tz=timezone.utc).isoformat(),
            source_count=len(plan.sources),
        )
        summaries.append(summary)

    response = ListPlansResponse(plans=summaries, total=len(summaries))

    logger.info(f"Listed {len(summaries)} plans")
    return response.model_dump()
