"""JSON-file implementation of KeyValueStore.
The whole store is one JSON object; every write rewrites the file.
"""

import asyncio
import json
import logging
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Persists values to a single JSON file. Missing file means an empty store."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        # Writes run in worker threads and share one temp file.
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self._path} must contain a JSON object")
        return data

    def _save(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self._path)

    async def get_item(self, key: str) -> Any | None:
        data = await asyncio.to_thread(self._load)
        logger.debug("Read %s from %s", key, self._path)
        return data.get(key)

    async def set_item(self, key: str, value: Any) -> Any:
        await asyncio.to_thread(self._save, key, value)
        logger.debug("Wrote %s to %s", key, self._path)
        return value
