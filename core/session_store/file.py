"""
JSON file session store.

Keeps every key of the scope in a single JSON object on disk so the
session survives process restarts, like localStorage survives page
reloads.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from core.logging import get_logger
from core.session_store.base import BaseSessionStore, SessionStoreError


logger = get_logger(__name__)


class FileSessionStore(BaseSessionStore):
    """
    Session store backed by one JSON file.

    File I/O runs in a worker thread so the event loop is not blocked.
    Writes go to a temporary file, are fsynced and moved into place with
    os.replace(), so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the file store.

        Args:
            path: Location of the JSON file. Parent directories are created
                on first write.
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> Optional[str]:
        data = await asyncio.to_thread(self._read)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)
        logger.debug("Session store key written", key=key, path=str(self._path))

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)
        logger.debug("Session store key removed", key=key, path=str(self._path))

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise SessionStoreError(f"Cannot read session file {self._path}: {e}") from e

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            raise SessionStoreError(f"Corrupt session file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise SessionStoreError(
                f"Corrupt session file {self._path}: expected a JSON object"
            )
        for key, value in data.items():
            if not isinstance(value, str):
                raise SessionStoreError(
                    f"Corrupt session file {self._path}: value of {key!r} is not a string"
                )
        return data

    def _update(self, key: str, value: Optional[str]) -> None:
        data = self._read()
        if value is None:
            if key not in data:
                return
            del data[key]
        else:
            data[key] = value
        self._write(data)

    def _write(self, data: dict[str, str]) -> None:
        tmp_name: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(data, tmp)
                tmp.flush()
                os.fsync(tmp.fileno())

            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SessionStoreError(f"Cannot write session file {self._path}: {e}") from e
