"""Todo snapshot persistence implementations."""

from todoflow.infrastructure.persistence.file_storage import DEFAULT_STORAGE_KEY, FileTodoStorage
from todoflow.infrastructure.persistence.memory_storage import InMemoryTodoStorage
from todoflow.infrastructure.persistence.snapshot import dump_snapshot, parse_snapshot
from todoflow.infrastructure.persistence.snapshot_writer import SnapshotWriter

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "FileTodoStorage",
    "InMemoryTodoStorage",
    "SnapshotWriter",
    "dump_snapshot",
    "parse_snapshot",
]
