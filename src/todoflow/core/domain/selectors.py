"""Derived values computed from a TodoList snapshot. Nothing here is stored."""

from __future__ import annotations

from todoflow.core.domain.todo import TodoList


def active_count(todos: TodoList) -> int:
    """Number of todos not yet completed."""
    return sum(1 for todo in todos if not todo.completed)


def completed_count(todos: TodoList) -> int:
    return len(todos) - active_count(todos)


def has_completed(todos: TodoList) -> bool:
    """Whether "clear completed" has anything to remove."""
    return any(todo.completed for todo in todos)


def all_completed(todos: TodoList) -> bool:
    """Checked state of the toggle-all control; False for an empty list."""
    return bool(todos) and all(todo.completed for todo in todos)


def items_left_label(count: int) -> str:
    noun = "item" if count == 1 else "items"
    return f"{count} {noun} left"
