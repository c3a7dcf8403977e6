# automation_advisor/storage/base.py
"""
Key-value storage protocol definition.

Defines the abstract interface that both InMemoryStorage and JsonFileStorage implement.
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    Abstract base class for durable string storage keyed by name.

    The plan library is stored as one serialized value under one key,
    read once at startup and overwritten wholesale on every change.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if the key is absent or unreadable
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Storage key
            value: Serialized value

        Raises:
            OSError: If the value could not be written
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Missing keys are ignored.

        Args:
            key: Storage key
        """


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
