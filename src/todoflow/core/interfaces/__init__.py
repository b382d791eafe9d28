"""
Core Protocol Interfaces

This package defines protocol interfaces for the external dependencies of the
todoflow core. Protocols keep the reducer and the store independent of any
concrete storage backend, randomness source or logging library.

Available Protocols:
    - TodoStorageProtocol: Snapshot persistence
    - IdGenerator: Fresh todo identifiers
    - LoggerProtocol: Structured logging

Usage:
    from todoflow.core.interfaces import TodoStorageProtocol, IdGenerator

    def create_store(storage: TodoStorageProtocol, id_generator: IdGenerator):
        # Store implementation uses protocols, not concrete classes
        pass
"""

from todoflow.core.interfaces.identity import IdGenerator
from todoflow.core.interfaces.logging import LoggerProtocol
from todoflow.core.interfaces.storage import TodoStorageProtocol

__all__ = [
    "IdGenerator",
    "LoggerProtocol",
    "TodoStorageProtocol",
]
