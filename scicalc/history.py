"""Bounded, de-duplicated, most-recent-first calculation history."""

import logging
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 15


def record(history: Sequence[str], expression: str, limit: int = HISTORY_LIMIT) -> Tuple[str, ...]:
    """Move `expression` to the front, dropping any older copy, and keep `limit` entries."""
    rest = [entry for entry in history if entry != expression]
    return tuple([expression] + rest)[:limit]


class HistoryStore:
    """History mirrored to durable storage: loaded once, saved after each change."""

    def __init__(self, storage, limit: int = HISTORY_LIMIT):
        self._storage = storage
        self.limit = limit
        self._entries = tuple(storage.load_history())[:limit]
        logger.debug(f"Loaded {len(self._entries)} history entries")

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def replace(self, entries: Sequence[str]) -> Tuple[str, ...]:
        self._entries = tuple(entries)[: self.limit]
        self._storage.save_history(list(self._entries))
        return self._entries

    def record(self, expression: str) -> Tuple[str, ...]:
        return self.replace(record(self._entries, expression, self.limit))

    def clear(self) -> Tuple[str, ...]:
        return self.replace(())
