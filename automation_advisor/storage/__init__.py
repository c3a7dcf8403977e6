# automation_advisor/storage/__init__.py
"""Key-value storage backends for the plan library."""

from .base import InMemoryStorage, KeyValueStorage
from .json_file import JsonFileStorage

__all__ = ["KeyValueStorage", "InMemoryStorage", "JsonFileStorage"]
