"""Load and validate the YAML route table. Used by the navigation controller."""

import importlib
import os
from pathlib import Path
from typing import Any

import yaml

from rolodex.navigation.routing import Route


def get_routes_path() -> Path:
    """Return path to the route table (ROLODEX_ROUTES_PATH env or packaged routes.yaml)."""
    default = Path(__file__).resolve().parent / "routes.yaml"
    path = os.environ.get("ROLODEX_ROUTES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def resolve_handler(ref: str) -> Any:
    """Import 'package.module:attr' and return the attribute. Raises ValueError if missing."""
    module_name, sep, attr = (ref or "").partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Handler reference '{ref}' must look like 'module:attr'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Handler module '{module_name}' cannot be imported") from e
    handler = getattr(module, attr, None)
    if not callable(handler):
        raise ValueError(f"Handler '{ref}' is not callable")
    return handler


def _build_route(node: Any, seen: set[str], *, is_root: bool) -> Route:
    if not isinstance(node, dict):
        raise ValueError("Every route must be a mapping")
    route_id = node.get("id")
    if not route_id:
        raise ValueError("Every route must have 'id'")
    if route_id in seen:
        raise ValueError(f"Duplicate route id '{route_id}'")
    seen.add(route_id)
    path = node.get("path")
    if not isinstance(path, str):
        raise ValueError(f"Route '{route_id}' must have a string 'path'")
    if is_root and not path.startswith("/"):
        raise ValueError(f"Root route '{route_id}' path must start with '/'")
    if not is_root and path.startswith("/"):
        raise ValueError(f"Child route '{route_id}' path must be relative")
    loader = resolve_handler(node["loader"]) if node.get("loader") else None
    action = resolve_handler(node["action"]) if node.get("action") else None
    children = [
        _build_route(child, seen, is_root=False) for child in node.get("children") or []
    ]
    return Route(
        id=route_id,
        path=path,
        loader=loader,
        action=action,
        error_boundary=bool(node.get("error_boundary", False)),
        children=children,
    )


def load_routes(path: Path | None = None) -> Route:
    """Load the route table YAML and return the root Route."""
    if path is None:
        path = get_routes_path()
    raw = path.read_text(encoding="utf-8")
    table = yaml.safe_load(raw)
    if not isinstance(table, dict):
        raise ValueError("Route table YAML must be a dict")
    routes = table.get("routes")
    if not routes or not isinstance(routes, list):
        raise ValueError("Route table must have a non-empty 'routes' list")
    if len(routes) != 1:
        raise ValueError("Route table must have exactly one root route")
    return _build_route(routes[0], set(), is_root=True)


# Module-level cache for the loaded route table
_routes_cache: Route | None = None


def get_routes(cache: bool = True) -> Route:
    """Load the route table (cached by default). Pass cache=False to reload."""
    global _routes_cache
    if cache and _routes_cache is not None:
        return _routes_cache
    _routes_cache = load_routes()
    return _routes_cache
