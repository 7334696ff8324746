"""Cursor-aware editing of the expression buffer.

Every operation is a pure function of the buffer text: it returns the new
text (and, for insertions, the caret offset the display should apply).
Rejected insertions are silent no-ops.
"""

import re
from typing import Optional, Tuple

from scicalc.errors import CursorError
from scicalc.tokens import (
    BINARY_OPERATORS,
    DECIMAL_POINT,
    EXPONENT_SUFFIXES,
    NUMBER_DELIMITERS,
    POWER,
    is_numeric,
)

ERROR_SENTINEL = "Error"

_DELIMITER = re.compile("[" + re.escape("".join(sorted(NUMBER_DELIMITERS))) + "]")


def _current_number(prefix: str) -> str:
    """Trailing run of `prefix` that contains no operator or parenthesis."""
    return _DELIMITER.split(prefix)[-1]


def insert(buffer: str, token: str, is_function: bool, cursor: int) -> Tuple[str, int]:
    """Splice `token` into `buffer` at `cursor`.

    Returns ``(new_buffer, new_cursor)``. When the insertion is rejected
    (second decimal point in a number, operator after an operator) the
    inputs come back unchanged.
    """
    if not 0 <= cursor <= len(buffer):
        raise CursorError(f"Cursor {cursor} outside buffer of length {len(buffer)}")

    prior = buffer
    if prior == ERROR_SENTINEL:
        prior = ""
        cursor = min(cursor, len(prior))

    if token in EXPONENT_SUFFIXES:
        literal = token
        new_cursor = cursor + len(literal)
    elif token == POWER:
        literal = "^()"
        new_cursor = cursor + 2
    elif is_function and not is_numeric(token):
        literal = f"{token}()"
        new_cursor = cursor + len(token) + 1
    else:
        literal = token
        new_cursor = cursor + 1

    prefix, suffix = prior[:cursor], prior[cursor:]

    if token == DECIMAL_POINT and DECIMAL_POINT in _current_number(prefix):
        return buffer, cursor
    if token in BINARY_OPERATORS and prefix[-1:] in BINARY_OPERATORS:
        return buffer, cursor

    return prefix + literal + suffix, new_cursor


def remove(buffer: str) -> str:
    return buffer[:-1]


def clear() -> str:
    return ""


def save_memory(buffer: str) -> str:
    return buffer


def recall_memory(memory: Optional[str]) -> Optional[str]:
    """Stored snapshot, or None when nothing was saved (leave the buffer alone)."""
    return memory
