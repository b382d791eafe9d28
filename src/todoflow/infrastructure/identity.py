"""Id generators implementing ``IdGenerator``."""

from __future__ import annotations

import itertools
import uuid


def uuid_id_generator() -> str:
    """Return a random 128-bit id rendered as canonical UUID text."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Deterministic id generator for tests and reproducible sessions.

    Example:
        >>> ids = SequentialIdGenerator(prefix="todo")
        >>> ids(), ids()
        ('todo-1', 'todo-2')
    """

    def __init__(self, prefix: str = "todo", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"
