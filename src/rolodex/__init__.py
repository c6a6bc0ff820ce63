"""
Rolodex core: clean-architecture layout.

- domain: the Contact entity. No outer dependencies.
- application: ContactRepository, ports (KeyValueStore), search ranking.
- infrastructure: store adapters and the latency simulator.
- navigation: route table, loaders/actions, controller and fetchers.
"""

from rolodex.app import create_app
from rolodex.application import ContactNotFound, ContactRepository, KeyValueStore
from rolodex.config import Settings
from rolodex.domain import Contact
from rolodex.infrastructure import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    LatencySimulator,
)
from rolodex.navigation import NavigationController, RoutingError

__all__ = [
    "Contact",
    "ContactNotFound",
    "ContactRepository",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LatencySimulator",
    "NavigationController",
    "RoutingError",
    "Settings",
    "create_app",
]
