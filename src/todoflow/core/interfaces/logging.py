"""
Logger seam for the todo store.

``TodoStore`` and ``SnapshotWriter`` accept any object with these four
methods, so the dispatch path can report ``action_dispatched``,
``action_ignored`` and snapshot write failures without importing
structlog. Production wiring passes a bound structlog logger; tests may
pass their own recorder.
"""

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Keyword-context logger used by the store and its snapshot writer."""

    def info(self, event: str, **kwargs: Any) -> None: ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, **kwargs: Any) -> None:
        """Report a failure the caller absorbs, such as a failed snapshot save."""
        ...

    def debug(self, event: str, **kwargs: Any) -> None:
        """Report a per-action detail, such as a dispatched or ignored action."""
        ...
