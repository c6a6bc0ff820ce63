"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Opaque async key-value store. No transactions; the last write wins."""

    async def get_item(self, key: str) -> Any | None:
        """Return a copy of the value stored under key, or None."""
        ...

    async def set_item(self, key: str, value: Any) -> Any:
        """Store value under key and return it."""
        ...


class NetworkDelay(Protocol):
    """Awaited before every repository call. key is the request fingerprint, or None."""

    async def __call__(self, key: str | None = None) -> None:
        ...
