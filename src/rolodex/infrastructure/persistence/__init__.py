"""Disk-backed store adapters."""

from rolodex.infrastructure.persistence.json_file_store import JsonFileKeyValueStore

__all__ = ["JsonFileKeyValueStore"]
