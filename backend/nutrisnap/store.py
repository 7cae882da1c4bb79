"""
NutriSnap Backend - Record Store
==================================

What:  Durable load/save of one JSON collection file.
How:   Whole-file reads and rewrites through aiofiles, guarded by a per-collection
       asyncio.Lock that repositories hold across each read-modify-write cycle.
Who:   Wrapped by MealRepository and CalorieRepository.
When:  One JsonFileStore per collection, created by the application factory.

File Layout:
    data/
    ├── meals.json      → [{"name": "Oatmeal", "calories": 150}, ...]
    └── calories.json   → {"banana": 105, "oatmeal": 150}

Write Semantics:
    Every save overwrites the file in full (no append, no temp-file rename).
    A crash mid-write can leave a truncated file; the next read then raises
    RecordStoreError for meals, or falls back to an empty mapping for calories.

Locking:
    The lock serializes every operation on one collection within this process.
    Two collections never share a lock. Multiple worker processes are not
    coordinated.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Union

import aiofiles

from nutrisnap.exceptions import RecordStoreError

logger = logging.getLogger(__name__)

# Literal on-disk text of an empty collection
EMPTY_LIST = "[]"
EMPTY_MAPPING = "{}"


class JsonFileStore:
    """
    File-backed storage engine for a single JSON document.

    Attributes:
        path:        Location of the collection file
        empty_text:  Text written when the file is created or reset
        lock:        Exclusive lock held by repositories for every operation
    """

    def __init__(self, path: Union[str, Path], empty_text: str):
        self.path = Path(path)
        self.empty_text = empty_text
        self.lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"JsonFileStore(path={str(self.path)!r})"

    def ensure_initialized(self) -> bool:
        """
        Create the collection file with empty contents if it does not exist.

        Runs synchronously while the application is being built, before the
        event loop serves any request.

        Returns:
            True if the file was created, False if it already existed.
        """
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.empty_text, encoding="utf-8")
        logger.info("Created empty collection file: %s", self.path)
        return True

    async def read(self) -> Any:
        """
        Read and parse the whole file.

        Raises:
            RecordStoreError: file missing or unreadable, or content is not valid JSON
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except OSError as e:
            raise RecordStoreError(
                message="Could not read collection file",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        try:
            return json.loads(raw)
        except ValueError as e:
            raise RecordStoreError(
                message="Collection file is not valid JSON",
                context={"path": str(self.path), "parse_error": str(e)},
            ) from e

    async def write(self, value: Any) -> None:
        """
        Serialize `value` as pretty-printed JSON and overwrite the file.

        Raises:
            RecordStoreError: the file could not be written
        """
        text = json.dumps(value, indent=2, ensure_ascii=False)
        await self._write_text(text)

    async def reset(self) -> None:
        """Overwrite the file with the empty-collection text."""
        await self._write_text(self.empty_text)

    async def _write_text(self, text: str) -> None:
        try:
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(text)
        except OSError as e:
            raise RecordStoreError(
                message="Could not write collection file",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e
        logger.debug("Wrote %d chars to %s", len(text), self.path)

    async def probe(self) -> bool:
        """Health probe: True if the file can be read and parsed. Never raises."""
        try:
            async with self.lock:
                await self.read()
        except RecordStoreError as e:
            logger.warning("Probe failed for %s: %s | Context: %s", self.path, e.message, e.context)
            return False
        return True
