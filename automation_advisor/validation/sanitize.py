# automation_advisor/validation/sanitize.py
"""
Input sanitization and validation utilities.

Provides input validation for descriptions, plan IDs and export directories.
"""

import logging
import re
from pathlib import Path

from automation_advisor.errors import PlanValidationError

logger = logging.getLogger(__name__)


def resolve_export_dir(user_path: str) -> Path:
    """
    Resolve the directory an exported plan file is written into.

    Exports always go into an existing directory under the generated file
    name, so a path naming a file (e.g. ``Plan_Automatizacion_xxxx.txt``)
    is rejected rather than overwritten.

    Raises:
        PlanValidationError: If the path is a file, is missing or cannot be resolved
    """
    try:
        directory = Path(user_path).expanduser().resolve()
    except (ValueError, OSError) as e:
        raise PlanValidationError(f"Invalid export directory '{user_path}': {e}")

    if directory.is_file():
        raise PlanValidationError(
            f"Export path {directory} is a file, not a directory; "
            f"pass the directory the plan file should be written into"
        )
    if not directory.is_dir():
        raise PlanValidationError(f"Export directory does not exist: {directory}")

    return directory


def sanitize_description(text: str, max_length: int = 5000) -> str:
    """
    Sanitize and validate a business description.

    Strips whitespace and validates non-empty.
    Truncates to max_length if needed.

    Args:
        text: User-provided description text
        max_length: Maximum allowed length (default 5000)

    Returns:
        Cleaned description string

    Raises:
        PlanValidationError: If description is empty after stripping
    """
    cleaned = (text or "").strip()

    if not cleaned:
        raise PlanValidationError("Description cannot be empty")

    if len(cleaned) > max_length:
        logger.warning(
            f"Description truncated from {len(cleaned)} to {max_length} characters"
        )
        cleaned = cleaned[:max_length]

    return cleaned


def sanitize_plan_id(plan_id: str) -> str:
    """
    Sanitize and validate a plan ID or ID prefix.

    Plan IDs are UUID4 strings; any hex/hyphen prefix of 4+ characters is accepted.

    Args:
        plan_id: User-provided plan ID

    Returns:
        Validated, lower-cased plan ID

    Raises:
        PlanValidationError: If plan ID format is invalid
    """
    cleaned = (plan_id or "").strip().lower()
    pattern = r"^[0-9a-f-]{4,36}$"
    if not re.match(pattern, cleaned):
        raise PlanValidationError(
            f"Invalid plan ID '{plan_id}': must be 4-36 hex characters or hyphens"
        )

    return cleaned
