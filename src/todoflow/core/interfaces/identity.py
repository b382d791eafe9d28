"""Identifier generation protocol for new todos."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Produces a fresh, opaque identifier on every call."""

    def __call__(self) -> str:
        ...
