"""
Domain Models and Business Logic

This package contains the core domain of todoflow:
- Todo model and TodoList alias
- Actions and the pure reducer
- Derived values (selectors)
- Domain errors
"""

from todoflow.core.domain.actions import (
    Action,
    ActionType,
    add_todo,
    destroy,
    destroy_completed,
    edit_todo,
    toggle_all,
    toggle_completed,
)
from todoflow.core.domain.errors import (
    ConfigError,
    InvalidActionError,
    StoreNotOpenError,
    TodoflowError,
    UnknownActionError,
)
from todoflow.core.domain.reducer import reduce_todos
from todoflow.core.domain.todo import EMPTY_TODO_LIST, Todo, TodoList

__all__ = [
    "Action",
    "ActionType",
    "ConfigError",
    "EMPTY_TODO_LIST",
    "InvalidActionError",
    "StoreNotOpenError",
    "Todo",
    "TodoList",
    "TodoflowError",
    "UnknownActionError",
    "add_todo",
    "destroy",
    "destroy_completed",
    "edit_todo",
    "reduce_todos",
    "toggle_all",
    "toggle_completed",
]
