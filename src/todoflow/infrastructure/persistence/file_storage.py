"""
File-Based Todo Storage

This module provides a file-based implementation of TodoStorageProtocol,
keeping the snapshot as a single JSON file:

    {work_dir}/{storage_key}.json

The implementation provides:
- Async file I/O using aiofiles
- Atomic writes (write to temp file, then rename)
- Load-time validation and repair via the snapshot codec
- Failure absorption: load degrades to an empty list, save returns False
"""

from __future__ import annotations

from pathlib import Path

import aiofiles
import structlog

from todoflow.core.domain.todo import EMPTY_TODO_LIST, TodoList
from todoflow.core.interfaces.storage import TodoStorageProtocol
from todoflow.infrastructure.persistence.snapshot import dump_snapshot, parse_snapshot

DEFAULT_STORAGE_KEY = "todos"


class FileTodoStorage(TodoStorageProtocol):
    """
    File-based snapshot persistence implementing TodoStorageProtocol.

    The work directory is created lazily on the first save, so loading from a
    directory that does not exist yet simply yields an empty list.

    Example:
        >>> storage = FileTodoStorage(work_dir=".todoflow")
        >>> await storage.save((Todo(id="a", title="Buy milk"),))
        True
        >>> (await storage.load())[0].title
        'Buy milk'
    """

    def __init__(self, work_dir: str | Path = ".todoflow", storage_key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize the file-based storage.

        Args:
            work_dir: Directory holding the snapshot file
            storage_key: Snapshot name; the file is ``{storage_key}.json``
        """
        self.work_dir = Path(work_dir)
        self.storage_key = storage_key
        self.logger = structlog.get_logger().bind(
            component="file_todo_storage", storage_key=storage_key
        )

    @property
    def snapshot_path(self) -> Path:
        return self.work_dir / f"{self.storage_key}.json"

    async def load(self) -> TodoList:
        """
        Load the snapshot from disk.

        Returns:
            Persisted TodoList; empty if the file is missing or unreadable
        """
        path = self.snapshot_path
        if not path.exists():
            self.logger.debug("todo_snapshot_missing", path=str(path))
            return EMPTY_TODO_LIST

        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("todo_snapshot_load_failed", path=str(path), error=str(exc))
            return EMPTY_TODO_LIST

        todos = parse_snapshot(content)
        self.logger.info("todo_snapshot_loaded", count=len(todos))
        return todos

    async def save(self, todos: TodoList) -> bool:
        """
        Replace the snapshot file with ``todos``.

        Implements atomic write pattern:
        1. Serialize the full list
        2. Write to a temporary file next to the target
        3. Rename over the target

        Args:
            todos: Complete TodoList to persist

        Returns:
            True if the snapshot was written, False otherwise
        """
        path = self.snapshot_path
        temp_path = path.with_suffix(".json.tmp")

        try:
            payload = dump_snapshot(todos)
        except (TypeError, ValueError) as exc:
            self.logger.error("todo_snapshot_save_failed", stage="serialize", error=str(exc))
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(payload)
            temp_path.replace(path)
        except OSError as exc:
            self.logger.error("todo_snapshot_save_failed", stage="write", error=str(exc))
            return False

        self.logger.info("todo_snapshot_saved", count=len(todos))
        return True
