# ABOUTME: Key/value persistence adapters used to remember the last chosen city.
# ABOUTME: JsonFileStore keeps all keys in one JSON object file; MemoryStore is process-local.

import asyncio
import json
import logging
from pathlib import Path

from weather_session.errors import PersistenceError

logger = logging.getLogger(__name__)


class MemoryStore:
    """Persistence port held in a dict, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Persistence port backed by a single JSON object on disk.

    Reads and writes run in a worker thread so the event loop never blocks on disk I/O.
    Writes go to a sibling temp file that replaces the original.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_key, key, value)

    def _read(self) -> dict:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceError(f"Could not read {self.path}: {e}", {"path": str(self.path)}) from e
        except UnicodeDecodeError as e:
            raise PersistenceError(f"Store file {self.path} is not UTF-8", {"path": str(self.path)}) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Corrupt store file {self.path}", {"path": str(self.path)}) from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Store file {self.path} does not hold a JSON object", {"path": str(self.path)})
        return data

    def _write_key(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except PersistenceError:
            logger.warning("Overwriting unreadable store file %s", self.path)
            data = {}
        data[key] = value

        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            raise PersistenceError(f"Could not write {self.path}: {e}", {"path": str(self.path)}) from e
