"""Artificial network latency with per-fingerprint memoization.

A keyed call delays once per generation; repeating the key within the same
generation resolves at once. An unkeyed call clears every key and starts a
new generation before delaying.
"""

import asyncio
import logging
import random

logger = logging.getLogger(__name__)

DEFAULT_MAX_DELAY = 0.8


class LatencySimulator:
    """Awaitable delay with a resettable fingerprint cache. Delays are in seconds."""

    def __init__(
        self,
        min_delay: float = 0.0,
        max_delay: float = DEFAULT_MAX_DELAY,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError(
                f"Invalid delay range: min={min_delay} max={max_delay}"
            )
        self.min_delay = min_delay
        self.max_delay = max_delay
        self._rng = rng or random.Random()
        self.generation = 0
        self._seen: dict[str, bool] = {}

    def seen(self, key: str) -> bool:
        return self._seen.get(key, False)

    def reset(self) -> None:
        self._seen = {}
        self.generation += 1

    def next_delay(self) -> float:
        return self._rng.uniform(self.min_delay, self.max_delay)

    async def __call__(self, key: str | None = None) -> None:
        if key is None:
            self.reset()
        elif self._seen.get(key):
            logger.debug("Latency cache hit for %s (generation %d)", key, self.generation)
            return
        else:
            self._seen[key] = True
        await asyncio.sleep(self.next_delay())
