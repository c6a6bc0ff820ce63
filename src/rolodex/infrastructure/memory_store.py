"""In-memory implementation of KeyValueStore (no disk)."""

import asyncio
import copy
import logging
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Keeps values in a dict. Values are deep-copied in and out, like a serializing store."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = copy.deepcopy(initial or {})

    async def get_item(self, key: str) -> Any | None:
        await asyncio.sleep(0)
        logger.debug("Read %s from memory", key)
        return copy.deepcopy(self._items.get(key))

    async def set_item(self, key: str, value: Any) -> Any:
        await asyncio.sleep(0)
        self._items[key] = copy.deepcopy(value)
        logger.debug("Wrote %s to memory", key)
        return value

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of everything stored. For tests and debugging."""
        return copy.deepcopy(self._items)
