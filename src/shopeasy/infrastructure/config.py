"""Runtime settings, read from the environment (or a .env / settings.ini).

Settings are looked up on every ``load_settings()`` call rather than at
import time, so a changed environment is picked up by the next command.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from decouple import config

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "shop.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


@dataclass(frozen=True)
class Settings:

    data_file: Path
    log_level: str = "WARNING"
    log_json: bool = False


def load_settings() -> Settings:
    return Settings(
        data_file=config("SHOPEASY_DATA_FILE", default=str(DEFAULT_DATA_FILE), cast=Path),
        log_level=config("SHOPEASY_LOG_LEVEL", default="WARNING", cast=_log_level),
        log_json=config("SHOPEASY_LOG_JSON", default=False, cast=bool),
    )
