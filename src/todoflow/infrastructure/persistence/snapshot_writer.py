"""
Serialized Snapshot Writer

Funnels snapshot saves through a single asyncio task so that writes land in
dispatch order. The queue has depth one with latest-wins coalescing: while a
save is in flight, newer snapshots replace each other in the pending slot and
only the newest is written next. A slow write therefore can never be followed
by a stale one.

Failures are absorbed here: the in-memory state stays authoritative and the
next successful save reconciles durable state. Nothing is retried.
"""

from __future__ import annotations

import asyncio

import structlog

from todoflow.core.domain.todo import TodoList
from todoflow.core.interfaces.logging import LoggerProtocol
from todoflow.core.interfaces.storage import TodoStorageProtocol


class SnapshotWriter:
    """
    Depth-one, latest-wins save queue in front of a TodoStorageProtocol.

    ``submit`` never blocks. When called without a running event loop the
    snapshot is kept pending until the next ``flush``.
    """

    def __init__(self, storage: TodoStorageProtocol, logger: LoggerProtocol | None = None):
        self._storage = storage
        self._pending: TodoList | None = None
        self._task: asyncio.Task[None] | None = None
        self.logger = logger or structlog.get_logger().bind(component="snapshot_writer")
        self.saved_count = 0
        self.failed_count = 0
        self.coalesced_count = 0

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    @property
    def is_writing(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit(self, todos: TodoList) -> None:
        """
        Queue ``todos`` as the next snapshot to write.

        Args:
            todos: Complete TodoList; replaces any snapshot still waiting
        """
        if self._pending is not None:
            self.coalesced_count += 1
        self._pending = todos

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.logger.debug("snapshot_write_deferred", count=len(todos))
            return

        if not self.is_writing:
            self._task = loop.create_task(self._drain())

    async def flush(self) -> None:
        """Wait until every submitted snapshot has been handed to storage."""
        while True:
            if self.is_writing:
                await self._task  # type: ignore[misc]
            elif self._pending is not None:
                await self._drain()
            else:
                return

    async def _drain(self) -> None:
        while self._pending is not None:
            snapshot = self._pending
            self._pending = None
            await self._write(snapshot)

    async def _write(self, snapshot: TodoList) -> None:
        try:
            saved = await self._storage.save(snapshot)
        except Exception as exc:
            # save() is contracted not to raise
            self.logger.error(
                "todo_snapshot_save_failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            saved = False

        if saved:
            self.saved_count += 1
        else:
            self.failed_count += 1
