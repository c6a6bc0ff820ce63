"""Tests for Settings and create_app wiring."""

from pathlib import Path

import pytest

from rolodex import create_app
from rolodex.config import Settings
from rolodex.infrastructure import InMemoryKeyValueStore

_ENV_KEYS = (
    "ROLODEX_STORE_PATH",
    "ROLODEX_MIN_DELAY_MS",
    "ROLODEX_MAX_DELAY_MS",
    "ROLODEX_ROUTES_PATH",
    "ROLODEX_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = Settings.from_env()
    assert settings.store_path is None
    assert settings.min_delay_ms == 0
    assert settings.max_delay_ms == 800
    assert settings.routes_path is None
    assert settings.log_level == "INFO"


def test_from_env(clean_env, tmp_path) -> None:
    clean_env.setenv("ROLODEX_STORE_PATH", str(tmp_path / "contacts.json"))
    clean_env.setenv("ROLODEX_MIN_DELAY_MS", "10")
    clean_env.setenv("ROLODEX_MAX_DELAY_MS", "20")
    clean_env.setenv("ROLODEX_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.store_path == Path(tmp_path / "contacts.json")
    assert settings.min_delay_ms == 10
    assert settings.max_delay_ms == 20
    assert settings.log_level == "DEBUG"


def test_bad_integer(clean_env) -> None:
    clean_env.setenv("ROLODEX_MAX_DELAY_MS", "soon")
    with pytest.raises(ValueError, match="ROLODEX_MAX_DELAY_MS"):
        Settings.from_env()


def test_inverted_delay_range() -> None:
    with pytest.raises(ValueError, match="Invalid delay range"):
        Settings(min_delay_ms=500, max_delay_ms=100)


@pytest.mark.asyncio
async def test_create_app_round_trip() -> None:
    controller = create_app(Settings(max_delay_ms=0), store=InMemoryKeyValueStore())
    await controller.navigate("/")
    assert controller.state == "rendered"
    await controller.submit("/")
    assert controller.location.endswith("/edit")
    contact_id = controller.loader_data["edit"]["contact"].id
    await controller.submit(f"/contacts/{contact_id}/edit", {"first": "Ada"})
    assert controller.loader_data["contact"]["contact"].first == "Ada"


@pytest.mark.asyncio
async def test_create_app_with_json_store(tmp_path) -> None:
    settings = Settings(store_path=tmp_path / "contacts.json", max_delay_ms=0)
    controller = create_app(settings)
    await controller.submit("/")
    assert (tmp_path / "contacts.json").exists()

    reopened = create_app(settings)
    await reopened.navigate("/")
    assert len(reopened.loader_data["root"]["contacts"]) == 1
