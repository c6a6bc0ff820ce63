"""
Out-of-band submissions (fetchers) and the optimistic favorite toggle.

A fetcher runs an action without changing the location. While its submission
is in flight, form_data holds the submitted fields, so the view can show the
target value before the round trip completes. form_data is cleared only after
the follow-up revalidation, so the confirmed value replaces it without flicker.
"""

import logging
from collections.abc import Mapping
from typing import Any

from rolodex.domain import Contact
from rolodex.navigation.routing import Redirect
from rolodex.navigation.xstate_machine import MachineState

logger = logging.getLogger(__name__)


class Fetcher:
    """One keyed submission channel. Fetchers with different keys never share state."""

    def __init__(self, controller: Any, key: str, machine: dict) -> None:
        self.key = key
        self._controller = controller
        self._state = MachineState(machine)
        self.form_data: dict[str, Any] | None = None
        self.data: Any = None
        self.error: BaseException | None = None
        self._submission = 0

    @property
    def state(self) -> str:
        """idle, submitting, loading, settled or failed."""
        return self._state.value

    @property
    def pending(self) -> bool:
        return self.form_data is not None

    async def submit(self, url: str, form: Mapping[str, Any]) -> Any:
        """Run url's action with form. Only the latest submission settles this fetcher."""
        self._submission += 1
        token = self._submission
        self.form_data = dict(form)
        self.error = None
        self._state.send("SUBMIT")
        self._controller.notify()
        try:
            result = await self._controller.run_action(url, self.form_data)
        except Exception as e:
            logger.warning("Fetcher %s submission to %s failed: %s", self.key, url, e)
            if token == self._submission:
                self.form_data = None
                self.error = e
                self._state.send("FAILED")
                self._controller.capture_error(e)
            return None
        if token == self._submission:
            self.data = result
            self._state.send("RESOLVED")
        if isinstance(result, Redirect):
            await self._controller.navigate(result.location)
        else:
            await self._controller.revalidate()
        if token == self._submission:
            self.form_data = None
            self._state.send("SETTLED")
            self._controller.notify()
        return result


def favorite_fetcher_key(contact_id: str) -> str:
    return f"favorite:{contact_id}"


def displayed_favorite(contact: Contact, fetcher: Fetcher | None = None) -> bool:
    """The favorite value to show: the in-flight target if any, else the confirmed field."""
    if fetcher is not None and fetcher.form_data is not None:
        return fetcher.form_data.get("favorite") == "true"
    return contact.is_favorite
