"""Rewrite keypad notation into the syntax the SymPy evaluator understands."""

import re
from typing import Union

from scicalc.modes import AngleUnit
from scicalc.tokens import PI_GLYPH


def _call(name: str) -> "re.Pattern[str]":
    # whole names only, so acot( / asec( / acsc( survive the reciprocal rules
    return re.compile(rf"(?<![A-Za-z]){name}\(")


# Order matters: reciprocals first, then log before ln so ln's output is not re-mapped.
_RENAMES = (
    (_call("cot"), "1/tan("),
    (_call("sec"), "1/cos("),
    (_call("csc"), "1/sin("),
    (_call("log"), "log10("),
    (_call("ln"), "log("),
)
_FACTORIAL = re.compile(r"(\d+)!")
# Stops at the first ')': sin(cos(30)) is not converted.
_DEGREE_TRIG = re.compile(r"(?<![A-Za-z])(sin|cos|tan)\(([^)]+)\)")


def normalize(expression: str, angle_unit: Union[AngleUnit, str]) -> str:
    """Translate a display expression, e.g. ``cot(30)`` -> ``1/tan(30 * pi/180)`` in degrees."""
    for pattern, replacement in _RENAMES:
        expression = pattern.sub(replacement, expression)

    # Factorial: 5! -> factorial(5)
    expression = _FACTORIAL.sub(r"factorial(\1)", expression)
    expression = expression.replace(PI_GLYPH, "pi")

    if AngleUnit(angle_unit) is AngleUnit.DEGREES:
        expression = _DEGREE_TRIG.sub(r"\1(\2 * pi/180)", expression)
    return expression
