"""Route tree, URL matching, and the values loaders and actions exchange with the controller."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs, urlsplit


class RoutingError(Exception):
    """A routing-level failure (e.g. 404) handled by the nearest error boundary."""

    def __init__(self, status: int, reason: str, data: Any = None) -> None:
        super().__init__(f"{status} {reason}")
        self.status = status
        self.reason = reason
        self.data = data


def not_found(data: Any = None) -> RoutingError:
    return RoutingError(404, "Not Found", data)


@dataclass(frozen=True)
class Redirect:
    """Returned by an action to send the user to another location."""

    location: str


def redirect(location: str) -> Redirect:
    return Redirect(location=location)


@dataclass(frozen=True)
class Request:
    url: str
    path: str
    query: dict[str, str]
    method: str = "GET"

    @classmethod
    def from_url(cls, url: str, method: str = "GET") -> "Request":
        parts = urlsplit(url)
        query = {k: v[-1] for k, v in parse_qs(parts.query, keep_blank_values=True).items()}
        return cls(url=url, path=parts.path or "/", query=query, method=method)


@dataclass(frozen=True)
class LoaderArgs:
    params: dict[str, str]
    request: Request
    context: Any = None


@dataclass(frozen=True)
class ActionArgs:
    params: dict[str, str]
    form: dict[str, str]
    request: Request
    context: Any = None


Loader = Callable[[LoaderArgs], Awaitable[Any]]
Action = Callable[[ActionArgs], Awaitable[Any]]


@dataclass
class Route:
    """A node in the route tree. Child paths are relative to their parent."""

    id: str
    path: str
    loader: Loader | None = None
    action: Action | None = None
    error_boundary: bool = False
    children: list["Route"] = field(default_factory=list)

    @property
    def segments(self) -> list[str]:
        return [s for s in self.path.split("/") if s]


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: dict[str, str]


def _split(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


def _match_segments(pattern: list[str], segments: list[str]) -> dict[str, str] | None:
    """Match pattern against the start of segments. Returns captured params or None."""
    if len(pattern) > len(segments):
        return None
    params: dict[str, str] = {}
    for part, seg in zip(pattern, segments):
        if part.startswith(":"):
            params[part[1:]] = seg
        elif part != seg:
            return None
    return params


def _match(route: Route, segments: list[str], params: dict[str, str]) -> list[RouteMatch] | None:
    own = _match_segments(route.segments, segments)
    if own is None:
        return None
    merged = {**params, **own}
    rest = segments[len(route.segments):]
    here = RouteMatch(route=route, params=merged)
    if not rest:
        return [here]
    for child in route.children:
        below = _match(child, rest, merged)
        if below is not None:
            return [here] + below
    return None


def match_routes(root: Route, url: str) -> list[RouteMatch]:
    """Return matches from root to leaf for url's path, or [] when nothing matches."""
    path = urlsplit(url).path or "/"
    return _match(root, _split(path), {}) or []


def nearest_boundary(matches: list[RouteMatch], index: int) -> RouteMatch:
    """The closest match at or above index with an error boundary. Falls back to the root."""
    for match in reversed(matches[: index + 1]):
        if match.route.error_boundary:
            return match
    return matches[0]
