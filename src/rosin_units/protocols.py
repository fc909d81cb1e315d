"""
Abstract protocols for preference storage backends.

The preference store only needs a small string key/value interface, so it
can sit on top of a JSON file, an in-memory dict, or a host application's
own session storage.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class PreferenceStorage(Protocol):
    """
    Protocol for durable storage of user preferences.

    Implemented by: MemoryStorage, JsonFileStorage
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read a stored value.

        Args:
            key: Preference key

        Returns:
            The stored value, or None if nothing is stored

        Raises:
            StorageError: If the backend cannot be read
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value.

        Args:
            key: Preference key
            value: Value to store

        Raises:
            StorageError: If the backend cannot be written
        """
        ...
