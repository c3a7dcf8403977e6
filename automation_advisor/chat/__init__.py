# automation_advisor/chat/__init__.py
"""Floating chat assistant session."""

from .session import ERROR_REPLY, GREETING, ChatSession

__all__ = ["ChatSession", "GREETING", "ERROR_REPLY"]
