# automation_advisor/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import resolve_export_dir, sanitize_description, sanitize_plan_id

__all__ = [
    "resolve_export_dir",
    "sanitize_description",
    "sanitize_plan_id",
]
