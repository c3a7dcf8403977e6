# automation_advisor/__init__.py
"""
automation-advisor: business automation plans from a plain-language description.

A generative model drafts a five-section automation plan, plans are kept in a
local library, and a chat assistant answers follow-up questions.
"""

__version__ = "0.3.0"
