"""
Configuration: reads settings from environment variables.
A .env file at the repo root (or cwd) is loaded first with python-dotenv.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env() -> None:
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            break


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    store_path: Path | None = None  # None: in-memory store
    min_delay_ms: int = 0
    max_delay_ms: int = 800
    routes_path: Path | None = None  # None: packaged routes.yaml
    log_level: str = "INFO"

    def __post_init__(self):
        if self.min_delay_ms < 0 or self.max_delay_ms < self.min_delay_ms:
            raise ValueError(
                f"Invalid delay range: {self.min_delay_ms}..{self.max_delay_ms} ms"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        store_path = os.getenv("ROLODEX_STORE_PATH", "").strip()
        routes_path = os.getenv("ROLODEX_ROUTES_PATH", "").strip()
        return cls(
            store_path=Path(store_path) if store_path else None,
            min_delay_ms=_int_env("ROLODEX_MIN_DELAY_MS", 0),
            max_delay_ms=_int_env("ROLODEX_MAX_DELAY_MS", 800),
            routes_path=Path(routes_path) if routes_path else None,
            log_level=os.getenv("ROLODEX_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level, logging.INFO))
