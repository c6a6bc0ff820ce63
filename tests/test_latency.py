"""Tests for the latency simulator's fingerprint cache and generations."""

import random

import pytest

from rolodex.infrastructure import LatencySimulator


class _CountingSimulator(LatencySimulator):
    """Zero-length delays; counts how many times a delay was taken."""

    def __init__(self) -> None:
        super().__init__(0.0, 0.0)
        self.delays = 0

    def next_delay(self) -> float:
        self.delays += 1
        return 0.0


@pytest.mark.asyncio
async def test_repeated_key_delays_once_per_generation() -> None:
    sim = _CountingSimulator()
    await sim("getContacts:")
    await sim("getContacts:")
    await sim("contact:1")
    await sim("contact:1")
    assert sim.delays == 2
    assert sim.seen("getContacts:")
    assert sim.generation == 0


@pytest.mark.asyncio
async def test_unkeyed_call_starts_new_generation() -> None:
    sim = _CountingSimulator()
    await sim("contact:1")
    await sim()
    assert sim.generation == 1
    assert not sim.seen("contact:1")
    assert sim.delays == 2

    await sim("contact:1")
    assert sim.delays == 3


@pytest.mark.asyncio
async def test_unkeyed_calls_always_delay() -> None:
    sim = _CountingSimulator()
    await sim()
    await sim()
    assert sim.delays == 2
    assert sim.generation == 2


def test_delay_within_bounds() -> None:
    sim = LatencySimulator(0.1, 0.3, rng=random.Random(7))
    for _ in range(50):
        assert 0.1 <= sim.next_delay() <= 0.3


def test_zero_delay_allowed() -> None:
    sim = LatencySimulator(0.0, 0.0)
    assert sim.next_delay() == 0.0


def test_invalid_range_rejected() -> None:
    with pytest.raises(ValueError):
        LatencySimulator(0.5, 0.1)
    with pytest.raises(ValueError):
        LatencySimulator(-1.0, 0.1)


def test_instances_do_not_share_cache() -> None:
    a = LatencySimulator(0, 0)
    b = LatencySimulator(0, 0)
    a._seen["contact:1"] = True
    assert not b.seen("contact:1")
