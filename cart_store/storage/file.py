"""JSON file key-value storage"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.errors import CorruptStorageError, StorageError
from .base import PersistentKeyValueStore

logger = logging.getLogger(__name__)


class FileKeyValueStore(PersistentKeyValueStore):
    """
    Durable storage backed by a single JSON document on disk.

    The document maps keys to string values. Every write rewrites the
    whole document through a temp file and an atomic replace, so a crash
    mid-write leaves the previous document intact. Disk I/O runs on a
    worker thread to keep the event loop free.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    async def get(self, key: str) -> Optional[str]:
        document = await asyncio.to_thread(self._read)
        value = document.get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Value under {key!r} is not a string", key=key)
        return value

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        try:
            document = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise CorruptStorageError(f"Cannot decode {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise CorruptStorageError(f"{self.path} does not hold a JSON object")
        return document

    def _update(self, key: str, value: Optional[str]) -> None:
        try:
            document = self._read()
        except CorruptStorageError:
            logger.warning(f"Discarding undecodable storage file {self.path}")
            document = {}

        if value is None:
            document.pop(key, None)
        else:
            document[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}", key=key) from e
