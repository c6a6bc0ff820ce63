"""Infrastructure layer: concrete implementations of application ports."""

from rolodex.infrastructure.latency import LatencySimulator
from rolodex.infrastructure.memory_store import InMemoryKeyValueStore
from rolodex.infrastructure.persistence.json_file_store import JsonFileKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "LatencySimulator",
]
