"""Wiring of storage, id generator and store from settings."""

from __future__ import annotations

from todoflow.application.settings import TodoflowSettings
from todoflow.application.store import TodoStore
from todoflow.core.interfaces.identity import IdGenerator
from todoflow.core.interfaces.storage import TodoStorageProtocol
from todoflow.infrastructure.persistence.file_storage import FileTodoStorage
from todoflow.infrastructure.persistence.memory_storage import InMemoryTodoStorage


def create_storage(settings: TodoflowSettings, *, ephemeral: bool = False) -> TodoStorageProtocol:
    """Return the snapshot backend selected by ``settings``."""
    if ephemeral:
        return InMemoryTodoStorage(storage_key=settings.storage_key)
    return FileTodoStorage(work_dir=settings.work_dir, storage_key=settings.storage_key)


def create_store(
    settings: TodoflowSettings,
    *,
    ephemeral: bool = False,
    id_generator: IdGenerator | None = None,
) -> TodoStore:
    """Build an unopened TodoStore for ``settings``."""
    return TodoStore(create_storage(settings, ephemeral=ephemeral), id_generator=id_generator)
