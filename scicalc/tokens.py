"""Static catalog of the symbols the keypad can insert."""

import re
from enum import Enum
from typing import Tuple

# ---------- Symbols ----------
DECIMAL_POINT = "."
BINARY_OPERATORS = frozenset("+-*/")
NUMBER_DELIMITERS = frozenset("+-*/^()")
POWER = "^"
EXPONENT_SUFFIXES = frozenset({"^2", "^3"})
FACTORIAL = "!"
OPEN_PAREN = "("
CLOSE_PAREN = ")"
PI_GLYPH = "π"
E_CONSTANT = "e"

# ---------- Functions ----------
# (primary, inverse) pairs; shift picks the inverse
TRIG_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("sin", "asin"),
    ("cos", "acos"),
    ("tan", "atan"),
    ("csc", "acsc"),
    ("sec", "asec"),
    ("cot", "acot"),
)
HYPERBOLIC_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("sinh", "asinh"),
    ("cosh", "acosh"),
    ("tanh", "atanh"),
    ("csch", "acsch"),
    ("sech", "asech"),
    ("coth", "acoth"),
)
OTHER_FUNCTIONS = ("sqrt", "log", "ln")

FUNCTION_NAMES = frozenset(
    [name for pair in TRIG_PAIRS + HYPERBOLIC_PAIRS for name in pair]
    + list(OTHER_FUNCTIONS)
)

_NUMERIC = re.compile(r"\d+(\.\d*)?|\.\d+")


class TokenKind(Enum):
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    BINARY_OPERATOR = "binary_operator"
    UNARY_SUFFIX = "unary_suffix"
    FUNCTION = "function"
    CONSTANT = "constant"
    GROUPING = "grouping"


def is_numeric(literal: str) -> bool:
    """True when the literal is a plain number such as ``7`` or ``2.5``."""
    return bool(_NUMERIC.fullmatch(literal))


def classify(literal: str) -> TokenKind:
    if is_numeric(literal):
        return TokenKind.DIGIT
    if literal == DECIMAL_POINT:
        return TokenKind.DECIMAL_POINT
    if literal in BINARY_OPERATORS or literal == POWER:
        return TokenKind.BINARY_OPERATOR
    if literal in EXPONENT_SUFFIXES or literal == FACTORIAL:
        return TokenKind.UNARY_SUFFIX
    if literal in FUNCTION_NAMES:
        return TokenKind.FUNCTION
    if literal in (PI_GLYPH, E_CONSTANT):
        return TokenKind.CONSTANT
    if literal in (OPEN_PAREN, CLOSE_PAREN):
        return TokenKind.GROUPING
    raise ValueError(f"Unknown token: {literal!r}")


def select_function(pair: Tuple[str, str], shift: bool) -> str:
    primary, inverse = pair
    return inverse if shift else primary


def function_label(pair: Tuple[str, str], shift: bool) -> str:
    """Keypad caption: ``sin`` normally, ``sin⁻¹`` while shift is on."""
    primary, _ = pair
    return f"{primary}⁻¹" if shift else primary
