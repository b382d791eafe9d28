"""
Core Domain - Actions

Actions are the only way to request a change to the todo list. They are
plain immutable values; parsing raw input into actions is the job of the
view layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActionType(str, Enum):
    """Types of actions understood by the reducer."""

    ADD_TODO = "ADD_TODO"
    TOGGLE_COMPLETED = "TOGGLE_COMPLETED"
    TOGGLE_ALL = "TOGGLE_ALL"
    DESTROY = "DESTROY"
    EDIT_TODO = "EDIT_TODO"
    DESTROY_COMPLETED = "DESTROY_COMPLETED"


@dataclass(frozen=True)
class Action:
    """
    A request to change the todo list.

    Attributes:
        type: Action type; anything outside ``ActionType`` is rejected by the reducer
        id: Target todo id (TOGGLE_COMPLETED, DESTROY, EDIT_TODO)
        title: Todo text (ADD_TODO, EDIT_TODO)
    """

    type: ActionType | str
    id: str | None = None
    title: str | None = None


def add_todo(title: str) -> Action:
    return Action(ActionType.ADD_TODO, title=title)


def toggle_completed(todo_id: str) -> Action:
    return Action(ActionType.TOGGLE_COMPLETED, id=todo_id)


def toggle_all() -> Action:
    return Action(ActionType.TOGGLE_ALL)


def destroy(todo_id: str) -> Action:
    return Action(ActionType.DESTROY, id=todo_id)


def edit_todo(todo_id: str, title: str) -> Action:
    return Action(ActionType.EDIT_TODO, id=todo_id, title=title)


def destroy_completed() -> Action:
    return Action(ActionType.DESTROY_COMPLETED)


def action_name(action: Action) -> str:
    """Plain action type name for logs and error messages."""
    action_type = getattr(action, "type", action)
    return str(getattr(action_type, "value", action_type))
