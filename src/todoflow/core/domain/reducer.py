"""
Core Domain - Todo Reducer

``reduce_todos`` computes the next TodoList from the current one and an
action. It performs no I/O and never mutates its input: every accepted change
produces a new tuple, and every no-op returns the input object itself, so
callers can detect changes cheaply.

The only non-determinism is the id generator, which is passed in by the
caller (see ``todoflow.core.interfaces.identity``).
"""

from __future__ import annotations

from collections.abc import Callable

from todoflow.core.domain.actions import Action, ActionType, action_name
from todoflow.core.domain.errors import (
    InvalidActionError,
    TodoflowError,
    UnknownActionError,
)
from todoflow.core.domain.todo import Todo, TodoList, normalize_title
from todoflow.core.interfaces.identity import IdGenerator

MAX_ID_ATTEMPTS = 8

_Handler = Callable[[TodoList, Action, IdGenerator], TodoList]


def _require_id(action: Action) -> str:
    if not isinstance(action.id, str) or not action.id:
        raise InvalidActionError(
            f"{action_name(action)} requires a todo id",
            details={"action_type": action_name(action)},
        )
    return action.id


def _fresh_id(todos: TodoList, id_generator: IdGenerator) -> str:
    existing = {todo.id for todo in todos}
    for _ in range(MAX_ID_ATTEMPTS):
        todo_id = id_generator()
        if todo_id and todo_id not in existing:
            return todo_id
    raise TodoflowError(
        message="Id generator did not produce a unique id",
        code="id_collision",
        details={"attempts": MAX_ID_ATTEMPTS},
    )


def _add_todo(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    title = normalize_title(action.title)
    if not title:
        return todos
    return (*todos, Todo(id=_fresh_id(todos, id_generator), title=title))


def _toggle_completed(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    todo_id = _require_id(action)
    if not any(todo.id == todo_id for todo in todos):
        return todos
    return tuple(
        todo.with_completed(not todo.completed) if todo.id == todo_id else todo
        for todo in todos
    )


def _toggle_all(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    if not todos:
        return todos
    completed = any(not todo.completed for todo in todos)
    return tuple(todo.with_completed(completed) for todo in todos)


def _destroy(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    todo_id = _require_id(action)
    remaining = tuple(todo for todo in todos if todo.id != todo_id)
    if len(remaining) == len(todos):
        return todos
    return remaining


def _edit_todo(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    todo_id = _require_id(action)
    title = normalize_title(action.title)
    if not title:
        # Editing all text away deletes the todo
        return _destroy(todos, action, id_generator)
    updated = tuple(todo.with_title(title) if todo.id == todo_id else todo for todo in todos)
    if all(new is old for new, old in zip(updated, todos)):
        return todos
    return updated


def _destroy_completed(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    remaining = tuple(todo for todo in todos if not todo.completed)
    if len(remaining) == len(todos):
        return todos
    return remaining


_HANDLERS: dict[ActionType, _Handler] = {
    ActionType.ADD_TODO: _add_todo,
    ActionType.TOGGLE_COMPLETED: _toggle_completed,
    ActionType.TOGGLE_ALL: _toggle_all,
    ActionType.DESTROY: _destroy,
    ActionType.EDIT_TODO: _edit_todo,
    ActionType.DESTROY_COMPLETED: _destroy_completed,
}


def reduce_todos(todos: TodoList, action: Action, id_generator: IdGenerator) -> TodoList:
    """
    Compute the next TodoList for ``action``.

    Args:
        todos: Current state
        action: Action to apply
        id_generator: Source of fresh ids for ADD_TODO

    Returns:
        A new TodoList when the action changes state, otherwise ``todos`` itself

    Raises:
        UnknownActionError: If the action type is not an ``ActionType``
        InvalidActionError: If a targeted action carries no id
    """
    raw_type = getattr(action, "type", action)
    try:
        action_type = ActionType(raw_type)
    except (TypeError, ValueError):
        raise UnknownActionError(raw_type) from None
    return _HANDLERS[action_type](todos, action, id_generator)
