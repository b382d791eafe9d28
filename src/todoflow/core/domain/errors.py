"""Domain-specific exception types for todoflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TodoflowError(Exception):
    """Base exception for todoflow domain errors."""

    message: str
    code: str = "todoflow_error"
    details: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class UnknownActionError(TodoflowError):
    """Raised when the reducer receives an action type it does not handle.

    Signals a caller defect, never a legitimate no-op.
    """

    def __init__(self, action_type: Any) -> None:
        self.action_type = action_type
        super().__init__(
            message=f"Unknown action type: {action_type!r}",
            code="unknown_action",
            details={"action_type": str(action_type)},
        )


class InvalidActionError(TodoflowError):
    """Raised when a known action is missing a required payload field."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="invalid_action", details=details)


class StoreNotOpenError(TodoflowError):
    """Raised when an action is dispatched before open() or after close()."""

    def __init__(self, message: str = "Store is not open") -> None:
        super().__init__(message=message, code="store_not_open")


class ConfigError(TodoflowError):
    """Error raised for configuration failures."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)
