"""
Session store factory.

Maps the configured backend name to a builder. Builders import their
implementation lazily so unused backends cost nothing at import time.
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable

from core.logging import get_logger
from core.session_store.base import BaseSessionStore


if TYPE_CHECKING:
    from core.config import Settings


logger = get_logger(__name__)


class SessionBackend(str, Enum):
    """Supported session store backends."""
    MEMORY = "memory"
    FILE = "file"


def _build_memory(settings: "Settings") -> BaseSessionStore:
    from core.session_store.memory import MemorySessionStore

    return MemorySessionStore()


def _build_file(settings: "Settings") -> BaseSessionStore:
    from core.session_store.file import FileSessionStore

    return FileSessionStore(settings.session_file_path)


_BUILDERS: dict[SessionBackend, Callable[["Settings"], BaseSessionStore]] = {
    SessionBackend.MEMORY: _build_memory,
    SessionBackend.FILE: _build_file,
}


def get_session_backend(settings: "Settings") -> SessionBackend:
    """
    Resolve settings.session_backend to a SessionBackend.

    Raises:
        ValueError: If the name is not a supported backend
    """
    name = settings.session_backend.lower()
    try:
        return SessionBackend(name)
    except ValueError:
        raise ValueError(
            f"Unsupported session backend: {name}. "
            f"Supported backends: {[b.value for b in SessionBackend]}"
        )


def create_session_store(settings: "Settings") -> BaseSessionStore:
    """Build the session store selected by settings."""
    backend = get_session_backend(settings)
    store = _BUILDERS[backend](settings)

    logger.info(
        "Session store created",
        backend=backend.value,
        store=type(store).__name__,
    )
    return store
