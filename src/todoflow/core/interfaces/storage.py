"""
Todo Storage Protocol

This module defines the protocol interface for todo snapshot persistence.
A storage backend holds exactly one snapshot under a fixed key and replaces
it wholesale on every save.

Protocol implementations must be async-compatible. The store issues at most
one save at a time, so backends need no locking of their own.
"""

from typing import Protocol

from todoflow.core.domain.todo import TodoList


class TodoStorageProtocol(Protocol):
    """
    Protocol defining the contract for todo snapshot persistence.

    Error Handling:
        - load: Returns an empty TodoList when the snapshot is missing,
          unreadable or corrupt. Never raises.
        - save: Returns False on failure and logs the error internally.
          Never raises.
    """

    async def load(self) -> TodoList:
        """
        Load the last saved snapshot.

        Records that fail validation are repaired or dropped; a payload that
        cannot be parsed at all yields an empty list.

        Returns:
            The persisted TodoList, or an empty tuple

        Example:
            >>> todos = await storage.load()
            >>> print(f"Loaded {len(todos)} todos")
        """
        ...

    async def save(self, todos: TodoList) -> bool:
        """
        Replace the persisted snapshot with ``todos``.

        Args:
            todos: Complete TodoList to persist

        Returns:
            True if the snapshot was written, False otherwise
        """
        ...
