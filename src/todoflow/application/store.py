"""
Todo Store - Dispatch Surface

``TodoStore`` owns the session's TodoList. It is the only path through which
the list changes: callers submit actions with ``dispatch`` and read immutable
snapshots through ``state``. Every accepted change is handed to a
``SnapshotWriter`` without waiting for storage.

Example:
    >>> async with TodoStore(FileTodoStorage(".todoflow")) as store:
    ...     store.dispatch(add_todo("Buy milk"))
    ...     print(store.state[0].title)
    Buy milk
"""

from __future__ import annotations

from types import TracebackType

import structlog

from todoflow.core.domain.actions import Action, action_name
from todoflow.core.domain.errors import StoreNotOpenError
from todoflow.core.domain.reducer import reduce_todos
from todoflow.core.domain.todo import EMPTY_TODO_LIST, TodoList
from todoflow.core.interfaces.identity import IdGenerator
from todoflow.core.interfaces.logging import LoggerProtocol
from todoflow.core.interfaces.storage import TodoStorageProtocol
from todoflow.infrastructure.identity import uuid_id_generator
from todoflow.infrastructure.persistence.snapshot_writer import SnapshotWriter


class TodoStore:
    """
    Session-scoped owner of the TodoList.

    Lifecycle:
        1. ``open()`` seeds state from storage (once)
        2. ``dispatch()`` applies actions and queues saves
        3. ``close()`` flushes outstanding saves and rejects further actions
    """

    def __init__(
        self,
        storage: TodoStorageProtocol,
        id_generator: IdGenerator | None = None,
        logger: LoggerProtocol | None = None,
    ):
        """
        Initialize the store.

        Args:
            storage: Snapshot persistence backend
            id_generator: Source of fresh todo ids (defaults to uuid4)
            logger: Optional logger; defaults to a bound structlog logger
        """
        self._storage = storage
        self._id_generator: IdGenerator = id_generator or uuid_id_generator
        self.logger = logger or structlog.get_logger().bind(component="todo_store")
        self._writer = SnapshotWriter(storage, logger=self.logger)
        self._state: TodoList = EMPTY_TODO_LIST
        self._opened = False
        self._closed = False

    @property
    def state(self) -> TodoList:
        """Current TodoList. Tuples are immutable, so this is always a snapshot."""
        return self._state

    @property
    def writer(self) -> SnapshotWriter:
        return self._writer

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    async def open(self) -> TodoList:
        """
        Seed state from storage. Subsequent calls are no-ops.

        Returns:
            The seeded TodoList
        """
        if self._closed:
            raise StoreNotOpenError("Store has been closed")
        if not self._opened:
            self._state = await self._storage.load()
            self._opened = True
            self.logger.info("todo_store_opened", count=len(self._state))
        return self._state

    def dispatch(self, action: Action) -> TodoList:
        """
        Apply ``action`` and queue a save if the list changed.

        Args:
            action: Action to apply

        Returns:
            The state after the action

        Raises:
            StoreNotOpenError: If the store is not open
            UnknownActionError: If the action type is unknown
            InvalidActionError: If the action is missing its target id
        """
        if not self.is_open:
            raise StoreNotOpenError()

        current = self._state
        next_state = reduce_todos(current, action, self._id_generator)
        if next_state is current or next_state == current:
            self.logger.debug("action_ignored", action_type=action_name(action))
            return current

        self._state = next_state
        self._writer.submit(next_state)
        self.logger.debug(
            "action_dispatched",
            action_type=action_name(action),
            count=len(next_state),
        )
        return next_state

    async def flush(self) -> None:
        """Wait for every queued save to reach storage."""
        await self._writer.flush()

    async def close(self) -> None:
        """Flush outstanding saves and stop accepting actions."""
        if self._closed:
            return
        await self.flush()
        self._closed = True
        self.logger.info(
            "todo_store_closed",
            saved=self._writer.saved_count,
            failed=self._writer.failed_count,
        )

    async def __aenter__(self) -> TodoStore:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
