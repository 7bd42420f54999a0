"""Key-value storage interface"""

from abc import ABC, abstractmethod
from typing import Optional


class PersistentKeyValueStore(ABC):
    """
    Asynchronous string key-value store.

    Backends raise StorageError when the underlying medium cannot be
    read or written. Values are opaque strings.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent"""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete key; deleting an absent key is not an error"""
