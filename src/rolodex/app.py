"""Wire store, latency simulator, repository and route table into a controller."""

import logging

from rolodex.application import ContactRepository, KeyValueStore
from rolodex.config import Settings, configure_logging
from rolodex.infrastructure import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    LatencySimulator,
)
from rolodex.navigation import NavigationController
from rolodex.navigation.route_loader import get_routes, load_routes

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> KeyValueStore:
    if settings.store_path is not None:
        return JsonFileKeyValueStore(settings.store_path)
    return InMemoryKeyValueStore()


def create_app(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
) -> NavigationController:
    """Return a controller over a fresh repository. Nothing is loaded until the first navigate()."""
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)
    simulator = LatencySimulator(
        settings.min_delay_ms / 1000, settings.max_delay_ms / 1000
    )
    repository = ContactRepository(store or build_store(settings), delay=simulator)
    routes = load_routes(settings.routes_path) if settings.routes_path else get_routes()
    logger.info(
        "Contacts app ready (store=%s, delay=%d-%d ms)",
        settings.store_path or "memory",
        settings.min_delay_ms,
        settings.max_delay_ms,
    )
    return NavigationController(routes, context=repository)
