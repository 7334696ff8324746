# test_editor.py

import pytest

from scicalc.editor import ERROR_SENTINEL, clear, insert, recall_memory, remove, save_memory
from scicalc.errors import CursorError
from scicalc.tokens import (
    NUMBER_DELIMITERS,
    TokenKind,
    classify,
    function_label,
    is_numeric,
    select_function,
)

# ---------------------------
# Token catalog
# ---------------------------

def test_is_numeric():
    assert is_numeric("7")
    assert is_numeric("2.5")
    assert is_numeric(".5")
    assert not is_numeric(".")
    assert not is_numeric("sin")
    assert not is_numeric("^2")


def test_classify_tokens():
    assert classify("3") is TokenKind.DIGIT
    assert classify(".") is TokenKind.DECIMAL_POINT
    assert classify("*") is TokenKind.BINARY_OPERATOR
    assert classify("!") is TokenKind.UNARY_SUFFIX
    assert classify("^3") is TokenKind.UNARY_SUFFIX
    assert classify("acosh") is TokenKind.FUNCTION
    assert classify("π") is TokenKind.CONSTANT
    assert classify(")") is TokenKind.GROUPING
    with pytest.raises(ValueError):
        classify("$")


def test_shift_selects_inverse_and_label():
    assert select_function(("sin", "asin"), False) == "sin"
    assert select_function(("sin", "asin"), True) == "asin"
    assert function_label(("cosh", "acosh"), False) == "cosh"
    assert function_label(("cosh", "acosh"), True) == "cosh⁻¹"

# ---------------------------
# Insertion
# ---------------------------

def test_insert_digit_at_end():
    assert insert("12", "3", False, 2) == ("123", 3)


def test_insert_in_middle():
    assert insert("13", "2", False, 1) == ("123", 2)


def test_function_insertion_places_cursor_inside_parens():
    assert insert("1+", "sin", True, 2) == ("1+sin()", 6)


def test_function_insertion_in_middle_of_buffer():
    assert insert("12", "sqrt", True, 1) == ("1sqrt()2", 6)


def test_numeric_token_flagged_as_function_is_literal():
    assert insert("", "7", True, 0) == ("7", 1)


def test_exponent_suffixes_are_verbatim():
    assert insert("5", "^2", False, 1) == ("5^2", 3)
    assert insert("5", "^3", True, 1) == ("5^3", 3)


def test_bare_power_opens_parentheses():
    assert insert("5", "^", False, 1) == ("5^()", 3)
    assert insert("5", "^", True, 1) == ("5^()", 3)


def test_second_decimal_point_rejected():
    assert insert("3.14", ".", False, 4) == ("3.14", 4)


def test_decimal_point_allowed_in_new_number():
    assert insert("3.1+2", ".", False, 5) == ("3.1+2.", 6)


def test_decimal_guard_scans_back_from_cursor():
    # cursor right after "1.5"
    assert insert("1.5+2", ".", False, 3) == ("1.5+2", 3)
    # cursor after "2" in "2+1.5"
    assert insert("2+1.5", ".", False, 1) == ("2.+1.5", 2)


def test_decimal_guard_stops_at_parenthesis():
    assert insert("sin(1.5)", ".", False, 8) == ("sin(1.5).", 9)


@pytest.mark.parametrize("op", ["+", "-", "*", "/"])
def test_consecutive_operator_rejected(op):
    assert insert("1+", op, False, 2) == ("1+", 2)
    assert insert("4*", op, False, 2) == ("4*", 2)


def test_operator_guard_looks_before_cursor():
    assert insert("1+2", "-", False, 2) == ("1+2", 2)
    assert insert("1+2", "-", False, 1) == ("1-+2", 2)


def test_operator_allowed_after_power_or_paren():
    assert insert("2^(", "-", False, 3) == ("2^(-", 4)
    assert insert("", "-", False, 0) == ("-", 1)


def test_error_sentinel_cleared_on_insert():
    assert insert(ERROR_SENTINEL, "7", False, 0) == ("7", 1)
    assert insert(ERROR_SENTINEL, "7", False, 5) == ("7", 1)
    assert insert(ERROR_SENTINEL, "cos", True, 5) == ("cos()", 4)


def test_cursor_out_of_bounds_raises():
    with pytest.raises(CursorError):
        insert("12", "3", False, 3)
    with pytest.raises(ValueError):
        insert("12", "3", False, -1)

# ---------------------------
# Deletion / memory
# ---------------------------

def test_remove_trailing_character():
    assert remove("12+") == "12"


def test_remove_and_clear_on_empty_buffer():
    assert remove("") == ""
    assert clear() == ""


def test_memory_save_and_recall():
    slot = save_memory("2*pi")
    assert slot == "2*pi"
    assert recall_memory(slot) == "2*pi"
    assert recall_memory(None) is None


@pytest.mark.parametrize("delimiter", sorted(NUMBER_DELIMITERS))
def test_every_delimiter_starts_a_new_number(delimiter):
    buffer = f"1.5{delimiter}"
    assert insert(buffer, ".", False, 4) == (buffer + ".", 5)
