"""
Abstract base class for session stores.

A session store is a small scoped key/value store of strings, the same
shape as a browser's localStorage. The session manager keeps exactly one
key in it; the store itself knows nothing about sessions.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseSessionStore(ABC):
    """
    Abstract interface for persisting the active session.

    Implementations must be safe to call from a single event loop; no
    cross-process locking is expected.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store value under key.

        Overwrites any existing value.
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """
        Delete key.

        Removing a missing key is not an error.
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        pass


class SessionStoreError(Exception):
    """Session store could not be read or written."""
    pass
