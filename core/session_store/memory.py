"""In-memory session store for tests and short-lived processes."""

from typing import Optional

from core.session_store.base import BaseSessionStore


class MemorySessionStore(BaseSessionStore):
    """Dict-backed store. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Copy of the current contents (for testing)."""
        return dict(self._data)
