"""One calculator session: buffer, modes, memory and history behind explicit commands.

Each command builds a fresh CalculatorState and swaps it in; the caller
reads `state.cursor` to place the caret on its display.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from scicalc import editor
from scicalc.config import Settings
from scicalc.evaluator import evaluate
from scicalc.history import HistoryStore
from scicalc.modes import ModeState
from scicalc.storage import MemoryStorage
from scicalc.tokens import select_function

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    buffer: str = ""
    cursor: int = 0
    modes: ModeState = field(default_factory=ModeState)
    memory: Optional[str] = None
    history: Tuple[str, ...] = ()


class Calculator:
    def __init__(self, storage=None, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._storage = storage if storage is not None else MemoryStorage()
        self._history = HistoryStore(self._storage, self.settings.history_limit)

        modes = ModeState(angle_unit=self.settings.angle_unit)
        theme = self._storage.load_theme()
        if theme is not None:
            modes = replace(modes, theme=theme)
        self.state = CalculatorState(modes=modes, history=self._history.entries)

    def _update(self, **changes) -> CalculatorState:
        self.state = replace(self.state, **changes)
        return self.state

    # ---------- Editing ----------
    def press(self, token: str, is_function: bool = False, cursor: Optional[int] = None) -> CalculatorState:
        """Insert `token` at `cursor` (default: the session's own caret)."""
        if cursor is None:
            cursor = self.state.cursor
        buffer, new_cursor = editor.insert(self.state.buffer, token, is_function, cursor)
        return self._update(buffer=buffer, cursor=new_cursor)

    def press_function(self, pair: Tuple[str, str], cursor: Optional[int] = None) -> CalculatorState:
        """Insert the primary or inverse member of a trig/hyperbolic pair, per shift."""
        return self.press(select_function(pair, self.state.modes.shift), True, cursor)

    def move_cursor(self, delta: int) -> CalculatorState:
        cursor = max(0, min(len(self.state.buffer), self.state.cursor + delta))
        return self._update(cursor=cursor)

    def backspace(self) -> CalculatorState:
        buffer = editor.remove(self.state.buffer)
        return self._update(buffer=buffer, cursor=min(self.state.cursor, len(buffer)))

    def clear(self) -> CalculatorState:
        return self._update(buffer=editor.clear(), cursor=0)

    def memory_save(self) -> CalculatorState:
        return self._update(memory=editor.save_memory(self.state.buffer))

    def memory_recall(self) -> CalculatorState:
        recalled = editor.recall_memory(self.state.memory)
        if recalled is None:
            return self.state
        return self._update(buffer=recalled, cursor=len(recalled))

    # ---------- Evaluation ----------
    def calculate(self) -> CalculatorState:
        result = evaluate(
            self.state.buffer,
            self.state.modes.angle_unit,
            self._history.entries,
            limit=self.settings.history_limit,
        )
        self._update(buffer=result.buffer, cursor=result.cursor, history=result.history)
        if result.ok:
            self._history.replace(result.history)
        return self.state

    # ---------- History ----------
    def recall_history(self, expression: str) -> CalculatorState:
        return self._update(buffer=expression, cursor=len(expression))

    def clear_history(self) -> CalculatorState:
        self._update(history=())
        self._history.clear()
        return self.state

    # ---------- Modes ----------
    def toggle_angle_unit(self) -> CalculatorState:
        return self._update(modes=self.state.modes.toggle_angle_unit())

    def toggle_shift(self) -> CalculatorState:
        return self._update(modes=self.state.modes.toggle_shift())

    def toggle_history(self) -> CalculatorState:
        return self._update(modes=self.state.modes.toggle_history())

    def toggle_theme(self) -> CalculatorState:
        self._update(modes=self.state.modes.toggle_theme())
        self._storage.save_theme(self.state.modes.theme)
        logger.debug(f"Theme switched to {self.state.modes.theme.value}")
        return self.state
