"""Durable storage for calculator history and theme."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from scicalc.errors import StorageError
from scicalc.modes import Theme

logger = logging.getLogger(__name__)

HISTORY_KEY = "calculator_history"
THEME_KEY = "calculator_theme"


class MemoryStorage:
    """Keeps state in-process; nothing survives the session."""

    def __init__(self, history: Optional[Sequence[str]] = None, theme: Optional[Theme] = None):
        self._data: Dict[str, Any] = {}
        if history is not None:
            self._data[HISTORY_KEY] = list(history)
        if theme is not None:
            self._data[THEME_KEY] = Theme(theme).value

    def load_history(self) -> List[str]:
        return list(self._data.get(HISTORY_KEY, []))

    def save_history(self, history: Sequence[str]) -> None:
        self._data[HISTORY_KEY] = list(history)

    def load_theme(self) -> Optional[Theme]:
        value = self._data.get(THEME_KEY)
        return Theme(value) if value is not None else None

    def save_theme(self, theme: Theme) -> None:
        self._data[THEME_KEY] = Theme(theme).value


class JsonFileStorage:
    """One JSON document holding every persisted key.

    Reads tolerate a missing or damaged file (defaults are used); writes
    replace the file atomically and raise StorageError on failure. Several
    sessions sharing a path simply overwrite each other.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected an object")
            return {}
        return data

    def _write(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error(f"Could not write {key} to {self.path}: {e}")
            raise StorageError(f"Could not save {key}: {e}") from e
        logger.debug(f"Saved {key} to {self.path}")

    def load_history(self) -> List[str]:
        history = self._read().get(HISTORY_KEY, [])
        if not isinstance(history, list):
            logger.warning(f"Ignoring malformed {HISTORY_KEY} in {self.path}")
            return []
        return [entry for entry in history if isinstance(entry, str)]

    def save_history(self, history: Sequence[str]) -> None:
        self._write(HISTORY_KEY, list(history))

    def load_theme(self) -> Optional[Theme]:
        value = self._read().get(THEME_KEY)
        if value is None:
            return None
        try:
            return Theme(value)
        except ValueError:
            logger.warning(f"Ignoring unknown theme {value!r} in {self.path}")
            return None

    def save_theme(self, theme: Theme) -> None:
        self._write(THEME_KEY, Theme(theme).value)
