"""
Snapshot Codec

Serializes a TodoList to its persisted JSON form and parses it back with
validation and repair. Parsing never raises: a payload that cannot be read
degrades to an empty list, and individual bad records are dropped.

Persisted form (a JSON array, order significant):

    [{"id": "...", "title": "...", "completed": false}, ...]
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from todoflow.core.domain.todo import EMPTY_TODO_LIST, Todo, TodoList

logger = structlog.get_logger(component="snapshot_codec")


class TodoRecord(BaseModel):
    """Validation schema for one persisted todo record."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    completed: bool = False

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("id must not be empty")
        return value

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("completed", mode="before")
    @classmethod
    def default_null_completed(cls, value: Any) -> Any:
        return False if value is None else value

    def to_todo(self) -> Todo:
        return Todo(id=self.id, title=self.title, completed=self.completed)


def dump_snapshot(todos: TodoList) -> str:
    """Serialize ``todos`` to snapshot JSON."""
    return json.dumps([todo.to_dict() for todo in todos], indent=2, ensure_ascii=False)


def parse_snapshot(payload: str | bytes | None) -> TodoList:
    """
    Parse snapshot JSON into a TodoList, repairing what can be repaired.

    Repair rules:
    - missing ``completed`` becomes False
    - missing or blank ``title`` drops the record
    - missing or blank ``id`` drops the record
    - a repeated ``id`` keeps the first occurrence only
    - a payload that is not a JSON array, or nests too deeply to decode,
      yields an empty list

    Args:
        payload: Raw snapshot text, or None when nothing is stored

    Returns:
        The repaired TodoList
    """
    if payload is None:
        return EMPTY_TODO_LIST

    try:
        data = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("todo_snapshot_corrupt", error=str(exc))
        return EMPTY_TODO_LIST

    if not isinstance(data, list):
        logger.warning("todo_snapshot_corrupt", error="snapshot is not a JSON array")
        return EMPTY_TODO_LIST

    todos: list[Todo] = []
    seen: set[str] = set()
    for index, raw in enumerate(data):
        try:
            record = TodoRecord.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "todo_record_dropped",
                index=index,
                error_count=exc.error_count(),
            )
            continue
        if record.id in seen:
            logger.warning("todo_record_dropped", index=index, reason="duplicate_id")
            continue
        seen.add(record.id)
        todos.append(record.to_todo())

    return tuple(todos)
