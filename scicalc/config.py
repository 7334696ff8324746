"""Settings read from the environment (and a .env file, if present)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from scicalc.errors import ConfigError
from scicalc.history import HISTORY_LIMIT
from scicalc.modes import AngleUnit

DEFAULT_STORAGE_PATH = "~/.scicalc/state.json"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    storage_path: Path = Path(DEFAULT_STORAGE_PATH).expanduser()
    history_limit: int = HISTORY_LIMIT
    angle_unit: AngleUnit = AngleUnit.DEGREES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        raw_limit = os.getenv("SCICALC_HISTORY_LIMIT", str(HISTORY_LIMIT))
        try:
            history_limit = int(raw_limit)
        except ValueError:
            raise ConfigError(f"SCICALC_HISTORY_LIMIT must be an integer, got {raw_limit!r}")
        if history_limit < 1:
            raise ConfigError("SCICALC_HISTORY_LIMIT must be at least 1")

        raw_unit = os.getenv("SCICALC_ANGLE_UNIT", AngleUnit.DEGREES.value).strip().lower()
        try:
            angle_unit = AngleUnit(raw_unit)
        except ValueError:
            raise ConfigError(f"SCICALC_ANGLE_UNIT must be 'deg' or 'rad', got {raw_unit!r}")

        log_level = os.getenv("SCICALC_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Unknown SCICALC_LOG_LEVEL {log_level!r}")

        return cls(
            storage_path=Path(os.getenv("SCICALC_STORAGE_PATH", DEFAULT_STORAGE_PATH)).expanduser(),
            history_limit=history_limit,
            angle_unit=angle_unit,
            log_level=log_level,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
