"""Navigation layer: route table, loaders/actions, controller and fetchers."""

from rolodex.navigation.controller import NavigationController
from rolodex.navigation.fetcher import Fetcher, displayed_favorite, favorite_fetcher_key
from rolodex.navigation.route_loader import get_routes, load_routes
from rolodex.navigation.routing import (
    ActionArgs,
    LoaderArgs,
    Redirect,
    Request,
    Route,
    RouteMatch,
    RoutingError,
    match_routes,
    not_found,
    redirect,
)

__all__ = [
    "ActionArgs",
    "Fetcher",
    "LoaderArgs",
    "NavigationController",
    "Redirect",
    "Request",
    "Route",
    "RouteMatch",
    "RoutingError",
    "displayed_favorite",
    "favorite_fetcher_key",
    "get_routes",
    "load_routes",
    "match_routes",
    "not_found",
    "redirect",
]
