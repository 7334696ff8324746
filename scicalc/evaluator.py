"""Numeric evaluation with SymPy and the evaluate-button orchestration."""

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication,
    parse_expr,
    standard_transformations,
)

from scicalc.editor import ERROR_SENTINEL
from scicalc.errors import EvaluationError
from scicalc.history import HISTORY_LIMIT, record
from scicalc.modes import AngleUnit
from scicalc.normalizer import normalize

logger = logging.getLogger(__name__)

# Names the normalized expression may use; anything else is an unknown symbol.
NAMESPACE = {
    "pi": sp.pi,
    "e": sp.E,
    "sqrt": sp.sqrt,
    "log": sp.log,     # natural log; the normalizer maps ln -> log
    "log10": lambda z: sp.log(z, 10),
    "factorial": sp.factorial,
    "sin": sp.sin, "cos": sp.cos, "tan": sp.tan,
    "csc": sp.csc, "sec": sp.sec, "cot": sp.cot,
    "asin": sp.asin, "acos": sp.acos, "atan": sp.atan,
    "acsc": sp.acsc, "asec": sp.asec, "acot": sp.acot,
    "sinh": sp.sinh, "cosh": sp.cosh, "tanh": sp.tanh,
    "csch": sp.csch, "sech": sp.sech, "coth": sp.coth,
    "asinh": sp.asinh, "acosh": sp.acosh, "atanh": sp.atanh,
    "acsch": sp.acsch, "asech": sp.asech, "acoth": sp.acoth,
}

# 2π and 3(4) read as products, ^ as power
TRANSFORMATIONS = standard_transformations + (implicit_multiplication, convert_xor)

SIGNIFICANT_DIGITS = 15
_EXACT_INTEGER_LIMIT = 10 ** 15
# 05 -> 5; the tokenizer would otherwise read 05 as 0 times 5
_LEADING_ZEROS = re.compile(r"(?<![\d.])0+(?=\d)")


def evaluate_numeric(expression: str) -> sp.Expr:
    """Reduce `expression` to a finite real SymPy number or raise EvaluationError."""
    try:
        sym = parse_expr(
            _LEADING_ZEROS.sub("", expression),
            local_dict=dict(NAMESPACE),
            transformations=TRANSFORMATIONS,
        )
        value = sym if sym.is_Integer else sp.N(sym, SIGNIFICANT_DIGITS)
    except Exception as e:
        raise EvaluationError(f"Cannot evaluate {expression!r}: {e}") from e

    if not getattr(value, "is_number", False):
        raise EvaluationError(f"Expression {expression!r} is not numeric")
    if value.is_real is not True or value.is_finite is not True:
        raise EvaluationError(f"Expression {expression!r} is not a finite real number: {value}")
    return value


def format_result(value) -> str:
    """Canonical display text: exact integers, else 15 significant digits."""
    if isinstance(value, sp.Integer) and abs(value) < _EXACT_INTEGER_LIMIT:
        return str(int(value))
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        # beyond double range: let SymPy round it
        mantissa, _, exponent = str(sp.Float(value, SIGNIFICANT_DIGITS)).partition("e")
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}e{exponent}" if exponent else mantissa
    if number.is_integer() and abs(number) < _EXACT_INTEGER_LIMIT:
        return str(int(number))
    return f"{number:.{SIGNIFICANT_DIGITS}g}"


@dataclass(frozen=True)
class EvaluationResult:
    buffer: str
    cursor: int
    ok: bool
    history: Tuple[str, ...]


def evaluate(
    buffer: str,
    angle_unit: Union[AngleUnit, str],
    history: Sequence[str] = (),
    evaluator: Callable[[str], object] = evaluate_numeric,
    limit: int = HISTORY_LIMIT,
) -> EvaluationResult:
    """Run the evaluate button.

    On success the buffer becomes the result with the cursor at its end and
    the pre-evaluation expression is recorded in history. Any failure turns
    the buffer into the "Error" sentinel and leaves history untouched.
    """
    if buffer == ERROR_SENTINEL:
        buffer = ""

    expression = normalize(buffer, angle_unit)
    try:
        result = format_result(evaluator(expression))
    except Exception as e:
        logger.warning(f"Evaluation failed for {buffer!r} (normalized {expression!r}): {e}")
        return EvaluationResult(ERROR_SENTINEL, len(ERROR_SENTINEL), False, tuple(history))

    logger.info(f"Evaluated {buffer!r} = {result}")
    return EvaluationResult(result, len(result), True, record(history, buffer, limit))
