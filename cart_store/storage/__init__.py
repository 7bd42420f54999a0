# Storage backends

from .base import PersistentKeyValueStore
from .memory import InMemoryKeyValueStore
from .file import FileKeyValueStore


def get_storage(settings) -> PersistentKeyValueStore:
    """Build the storage backend named by settings.storage_backend"""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage_backend == "file":
        return FileKeyValueStore(settings.storage_path)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "PersistentKeyValueStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "get_storage",
]
