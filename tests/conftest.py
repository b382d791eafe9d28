"""Test configuration and shared fixtures."""

from __future__ import annotations

import pytest
import structlog

from todoflow.core.domain.todo import Todo
from todoflow.infrastructure.identity import SequentialIdGenerator
from todoflow.infrastructure.persistence.memory_storage import InMemoryTodoStorage


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests reconfigure structlog; restore defaults between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator(prefix="todo")


@pytest.fixture
def memory_storage() -> InMemoryTodoStorage:
    return InMemoryTodoStorage()


@pytest.fixture
def mixed_todos() -> tuple[Todo, ...]:
    """Three todos: active, completed, active."""
    return (
        Todo(id="a", title="Buy milk"),
        Todo(id="b", title="Walk dog", completed=True),
        Todo(id="c", title="Write report"),
    )
