"""
Navigation data controller.

Runs the loaders of every matched route when the location changes and the
matched route's action when a form is submitted. Each navigation gets a key;
results of a navigation whose key is no longer current are dropped, so the
most recently started navigation is the only one that commits.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlencode

from rolodex.navigation.fetcher import Fetcher
from rolodex.navigation.routing import (
    ActionArgs,
    LoaderArgs,
    Redirect,
    Request,
    Route,
    RouteMatch,
    RoutingError,
    match_routes,
    nearest_boundary,
    not_found,
)
from rolodex.navigation.xstate_machine import MachineState, get_machine

logger = logging.getLogger(__name__)

Subscriber = Callable[["NavigationController"], None]


class NavigationController:
    """Owns the committed view state: location, matches, loader data and boundary errors."""

    def __init__(
        self,
        routes: Route,
        context: Any = None,
        *,
        machine: dict | None = None,
        fetcher_machine: dict | None = None,
    ) -> None:
        self.routes = routes
        self.context = context
        self._state = MachineState(machine or get_machine("navigation"))
        self._fetcher_machine = fetcher_machine or get_machine("fetcher")
        self.location: str | None = None
        self.pending_location: str | None = None
        self.matches: list[RouteMatch] = []
        self.loader_data: dict[str, Any] = {}
        self.errors: dict[str, BaseException] = {}
        self.action_data: Any = None
        self.history: list[str] = []
        self._key = 0
        self._pending_history: str | None = None
        self._subscribers: list[Subscriber] = []
        self._fetchers: dict[str, Fetcher] = {}

    # --- state ---

    @property
    def state(self) -> str:
        """idle, loading, submitting, rendered or error."""
        return self._state.value

    @property
    def navigation_key(self) -> int:
        return self._key

    @property
    def active_loaders(self) -> list[str]:
        """Ids of committed routes whose loaders run again on revalidation."""
        return [m.route.id for m in self.matches if m.route.loader is not None]

    @property
    def searching(self) -> bool:
        """True while a navigation carrying a search query is loading."""
        if self.state != "loading" or not self.pending_location:
            return False
        return "query" in Request.from_url(self.pending_location).query

    @property
    def error(self) -> BaseException | None:
        for match in self.matches:
            if match.route.id in self.errors:
                return self.errors[match.route.id]
        return None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call callback after every state change. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    def fetcher(self, key: str) -> Fetcher:
        """Return the fetcher for key, creating it on first use."""
        if key not in self._fetchers:
            self._fetchers[key] = Fetcher(self, key, self._fetcher_machine)
        return self._fetchers[key]

    # --- navigation ---

    def _begin(self, event: str, url: str) -> int:
        self._key += 1
        self.pending_location = url
        self._state.send(event)
        self.notify()
        return self._key

    def _is_current(self, key: int) -> bool:
        return key == self._key

    async def navigate(self, url: str, *, replace: bool = False) -> bool:
        """Load url. Returns False if a newer navigation superseded this one."""
        key = self._begin("NAVIGATE", url)
        self._pending_history = "replace" if replace else "push"
        return await self._load(url, key, self._pending_history)

    async def revalidate(self) -> bool:
        """Run the active loaders again (or the pending navigation's, if one is in flight).

        Does nothing while a form submission is in flight.
        """
        if self.state == "submitting":
            # The submission loads fresh data itself once its action returns.
            logger.debug("Skipping revalidation during submission to %s", self.pending_location)
            return False
        url = self.pending_location or self.location
        if url is None:
            return False
        history = None if url == self.location else self._pending_history
        key = self._begin("NAVIGATE", url)
        return await self._load(url, key, history)

    async def back(self) -> bool:
        """Return to the previous history entry."""
        if len(self.history) < 2:
            return False
        self.history.pop()
        return await self.navigate(self.history[-1], replace=True)

    async def search(self, query: str) -> bool:
        """Navigate to the contact list filtered by query.

        Once a search is showing, further keystrokes replace the history entry.
        """
        url = f"/?{urlencode({'query': query})}" if query else "/"
        current = Request.from_url(self.location or "/").query
        return await self.navigate(url, replace="query" in current)

    async def _run_loader(self, match: RouteMatch, request: Request) -> tuple[bool, Any]:
        if match.route.loader is None:
            return True, None
        args = LoaderArgs(params=dict(match.params), request=request, context=self.context)
        try:
            return True, await match.route.loader(args)
        except Exception as e:
            return False, e

    async def _load(
        self,
        url: str,
        key: int,
        history: str | None,
        action_data: Any = None,
    ) -> bool:
        matches = match_routes(self.routes, url)
        loader_data: dict[str, Any] = {}
        errors: dict[str, BaseException] = {}
        if not matches:
            matches = [RouteMatch(route=self.routes, params={})]
            errors[self.routes.id] = not_found()
        else:
            request = Request.from_url(url)
            results = await asyncio.gather(*(self._run_loader(m, request) for m in matches))
            for index, (match, (ok, value)) in enumerate(zip(matches, results)):
                if match.route.loader is None:
                    continue
                if ok:
                    loader_data[match.route.id] = value
                else:
                    boundary = nearest_boundary(matches, index)
                    errors.setdefault(boundary.route.id, value)
        if not self._is_current(key):
            logger.warning("Discarding stale navigation to %s", url)
            return False
        self._commit(url, matches, loader_data, errors, history, action_data)
        return True

    def _commit(
        self,
        url: str,
        matches: list[RouteMatch],
        loader_data: dict[str, Any],
        errors: dict[str, BaseException],
        history: str | None,
        action_data: Any = None,
    ) -> None:
        self.location = url
        self.pending_location = None
        self.matches = matches
        self.loader_data = loader_data
        self.errors = errors
        self.action_data = action_data
        if history == "push" or (history == "replace" and not self.history):
            self.history.append(url)
        elif history == "replace":
            self.history[-1] = url
        for route_id, err in errors.items():
            logger.warning("Route %s captured error: %s", route_id, err)
        self._state.send("FAILED" if errors else "LOADED")
        logger.info("Committed %s (%s)", url, self.state)
        self.notify()

    # --- actions ---

    async def run_action(self, url: str, form: Mapping[str, Any]) -> Any:
        """Call the action of the route url matches. Raises RoutingError 404/405."""
        matches = match_routes(self.routes, url)
        if not matches:
            raise not_found()
        leaf = matches[-1]
        if leaf.route.action is None:
            raise RoutingError(405, "Method Not Allowed")
        args = ActionArgs(
            params=dict(leaf.params),
            form=dict(form),
            request=Request.from_url(url, method="POST"),
            context=self.context,
        )
        return await leaf.route.action(args)

    async def submit(self, url: str, form: Mapping[str, Any] | None = None) -> bool:
        """Submit a form to url as a navigation.

        A Redirect result navigates to its location. Any other result lands on
        url with fresh loader data. Errors are committed to the nearest boundary.
        """
        key = self._begin("SUBMIT", url)
        history = None if url == self.location else "push"
        self._pending_history = history
        try:
            result = await self.run_action(url, form or {})
        except Exception as e:
            if not self._is_current(key):
                logger.warning("Discarding stale submission error for %s: %s", url, e)
                return False
            matches = match_routes(self.routes, url) or [RouteMatch(route=self.routes, params={})]
            self._commit_error(url, matches, e, history)
            return False
        if not self._is_current(key):
            logger.warning("Discarding stale submission result for %s", url)
            return False
        if isinstance(result, Redirect):
            return await self.navigate(result.location)
        return await self._load(url, key, history, action_data=result)

    def capture_error(self, error: BaseException) -> None:
        """Commit error to the nearest boundary of the current location (fetcher failures)."""
        matches = self.matches or [RouteMatch(route=self.routes, params={})]
        pending = self.pending_location
        self._commit_error(self.location or "/", matches, error, None)
        self.pending_location = pending

    def _commit_error(
        self,
        url: str,
        matches: list[RouteMatch],
        error: BaseException,
        history: str | None,
    ) -> None:
        index = len(matches) - 1
        boundary = nearest_boundary(matches, index)
        above = {m.route.id for m in matches[: matches.index(boundary)]}
        loader_data = {k: v for k, v in self.loader_data.items() if k in above}
        self._commit(url, matches, loader_data, {boundary.route.id: error}, history)
