"""In-memory snapshot storage for tests and throwaway sessions."""

from __future__ import annotations

import structlog

from todoflow.core.domain.todo import TodoList
from todoflow.core.interfaces.storage import TodoStorageProtocol
from todoflow.infrastructure.persistence.file_storage import DEFAULT_STORAGE_KEY
from todoflow.infrastructure.persistence.snapshot import dump_snapshot, parse_snapshot


class InMemoryTodoStorage(TodoStorageProtocol):
    """
    Key/value storage holding serialized snapshot text, like a browser's
    local storage. Keeping text rather than tuples means loads go through the
    same validation and repair as the file backend.
    """

    def __init__(
        self,
        storage_key: str = DEFAULT_STORAGE_KEY,
        records: dict[str, str] | None = None,
    ) -> None:
        self.storage_key = storage_key
        self.records: dict[str, str] = records if records is not None else {}
        self.save_count = 0
        self.logger = structlog.get_logger().bind(
            component="memory_todo_storage", storage_key=storage_key
        )

    async def load(self) -> TodoList:
        return parse_snapshot(self.records.get(self.storage_key))

    async def save(self, todos: TodoList) -> bool:
        self.records[self.storage_key] = dump_snapshot(todos)
        self.save_count += 1
        self.logger.debug("todo_snapshot_saved", count=len(todos))
        return True
