"""
XState-compatible state machines using xstate-python.

Loads standard XState JSON (id, initial, states with on: { EVENT: target })
from the machines/ directory next to this module and uses the library for
transitions. The navigation and fetcher lifecycles are defined there.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine


def _machines_dir() -> Path:
    return Path(__file__).resolve().parent / "machines"


def get_machine_path(name: str) -> Path:
    """Return path for machine name (ROLODEX_MACHINES_DIR env or packaged machines/)."""
    base = os.environ.get("ROLODEX_MACHINES_DIR", "").strip()
    root = Path(base).resolve() if base else _machines_dir()
    return root / f"{name}.json"


def load_machine(path: Path) -> dict:
    raw = path.read_text(encoding="utf-8")
    config = json.loads(raw)
    if "id" not in config or "initial" not in config or "states" not in config:
        raise ValueError("Machine must have 'id', 'initial' and 'states'")
    if config["initial"] not in config["states"]:
        raise ValueError(f"initial state '{config['initial']}' must be a state")
    return config


_instances: dict[str, Machine] = {}


def _machine_instance(config: dict) -> Machine:
    """Return a Machine instance for this config. Cached per machine id."""
    key = config["id"]
    if key not in _instances:
        _instances[key] = Machine(config)
    return _instances[key]


def transition(machine: dict, state_value: str, event: str) -> str | None:
    """
    Return next state value for (state_value, event), or None if no transition.
    Uses xstate-python for full XState semantics.
    """
    try:
        instance = _machine_instance(machine)
        state = instance.state_from(state_value)
        next_state = instance.transition(state, event)
        if next_state.value == state_value:
            return None
        return next_state.value
    except (ValueError, KeyError):
        return None


_machine_cache: dict[str, dict] = {}


def get_machine(name: str, cache: bool = True) -> dict:
    if cache and name in _machine_cache:
        return _machine_cache[name]
    config = load_machine(get_machine_path(name))
    _machine_cache[name] = config
    _instances.pop(config["id"], None)
    return config


class MachineState:
    """Current state value of one machine instance. Unknown events leave it unchanged."""

    def __init__(self, machine: dict) -> None:
        self._machine = machine
        self.value: str = machine["initial"]

    def send(self, event: str) -> str:
        next_value = transition(self._machine, self.value, event)
        if next_value is not None:
            self.value = next_value
        return self.value
