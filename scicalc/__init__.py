"""SciCalc • cursor-aware scientific calculator core (SymPy-powered)."""

from scicalc.errors import (
    CalculatorError,
    ConfigError,
    CursorError,
    EvaluationError,
    StorageError,
)
from scicalc.evaluator import ERROR_SENTINEL, EvaluationResult, evaluate
from scicalc.modes import AngleUnit, ModeState, Theme
from scicalc.normalizer import normalize
from scicalc.session import Calculator, CalculatorState

__version__ = "0.1.0"

__all__ = [
    "AngleUnit",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "ConfigError",
    "CursorError",
    "ERROR_SENTINEL",
    "EvaluationError",
    "EvaluationResult",
    "ModeState",
    "StorageError",
    "Theme",
    "evaluate",
    "normalize",
]
