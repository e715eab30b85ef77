"""
Session persistence layer.

Provides pluggable key/value stores for the active session:
- MemorySessionStore (default, process lifetime)
- FileSessionStore (JSON file, survives restarts)
"""

from core.session_store.base import BaseSessionStore, SessionStoreError
from core.session_store.factory import (
    SessionBackend,
    create_session_store,
    get_session_backend,
)
from core.session_store.file import FileSessionStore
from core.session_store.memory import MemorySessionStore

__all__ = [
    # Abstract interface
    "BaseSessionStore",
    "SessionStoreError",
    # Implementations
    "FileSessionStore",
    "MemorySessionStore",
    # Factory functions
    "create_session_store",
    "get_session_backend",
    "SessionBackend",
]
