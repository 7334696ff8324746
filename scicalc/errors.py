"""Exception types raised by the calculator core."""


class CalculatorError(Exception):
    """Base class for calculator errors."""


class CursorError(CalculatorError, ValueError):
    """Raised when a cursor offset falls outside the buffer."""


class EvaluationError(CalculatorError):
    """Raised when an expression cannot be reduced to a finite real number."""


class StorageError(CalculatorError):
    """Raised when persisted state cannot be written."""


class ConfigError(CalculatorError, ValueError):
    """Raised for invalid configuration values."""
