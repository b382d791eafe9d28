"""
Core Domain - Todo Model

Defines the immutable ``Todo`` record and the ``TodoList`` alias used by the
reducer, the persistence layer and the view layer alike.

A TodoList is a plain tuple: insertion order is display order, and holding
one never gives the holder a way to mutate store state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Todo:
    """
    Single task in the list.

    Attributes:
        id: Opaque identifier, assigned once at creation
        title: Trimmed, non-empty task text
        completed: Completion flag
    """

    id: str
    title: str
    completed: bool = False

    def with_completed(self, completed: bool) -> Todo:
        """Return a copy with the completion flag set to ``completed``."""
        if completed == self.completed:
            return self
        return replace(self, completed=completed)

    def with_title(self, title: str) -> Todo:
        """Return a copy carrying ``title``."""
        if title == self.title:
            return self
        return replace(self, title=title)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the Todo to a serializable dict.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"id": self.id, "title": self.title, "completed": self.completed}


TodoList = tuple[Todo, ...]

EMPTY_TODO_LIST: TodoList = ()


def normalize_title(title: Any) -> str:
    """Trim surrounding whitespace; non-string input normalizes to ``""``."""
    if not isinstance(title, str):
        return ""
    return title.strip()


def find_todo(todos: TodoList, todo_id: str) -> Todo | None:
    """Return the todo with ``todo_id`` or None."""
    for todo in todos:
        if todo.id == todo_id:
            return todo
    return None
