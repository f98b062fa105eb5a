"""
Tests for the calculator state machine
"""
import math
import random
from fractions import Fraction

import pytest

import config
from calculator import Calculator, key_to_token, divide_truncate, parse_int, NONE, ADD, SUBTRACT, MULTIPLY, DIVIDE


def press(calc, *tokens):
    for token in tokens:
        calc.handle_input(token)
    return calc.display


@pytest.fixture
def calc():
    return Calculator()


def test_starts_at_zero(calc):
    assert calc.display == "0"
    assert calc.pending_operand == 0
    assert calc.pending_operation == NONE
    assert calc.awaiting_new_entry is False


@pytest.mark.parametrize("digits", ["7", "123", "9081", "1000000"])
def test_digits_concatenate(calc, digits):
    assert press(calc, *digits) == digits


def test_leading_zero_collapses(calc):
    assert press(calc, "0", "0", "5", "0") == "50"


def test_clear_resets_everything(calc):
    press(calc, "4", "2", "×", "3")
    assert press(calc, "AC") == "0"
    assert calc.pending_operation == NONE
    assert calc.pending_operand == 0


def test_clear_after_error(calc):
    press(calc, "5", "÷", "0", "=")
    assert press(calc, "AC") == "0"
    assert calc.pending_operation == NONE


@pytest.mark.parametrize("a,op,b,expected", [
    (12, "+", 30, "42"),
    (5, "−", 9, "-4"),
    (7, "×", 8, "56"),
    (20, "÷", 6, "3"),
    (9, "÷", 3, "3"),
    (0, "×", 123, "0"),
])
def test_binary_operations(calc, a, op, b, expected):
    assert press(calc, *str(a), op, *str(b), "=") == expected


def test_division_truncates_toward_zero(calc):
    # -7 ÷ 2 is -3, not floor division's -4
    press(calc, "7", "−", "1", "4", "=")
    assert calc.display == "-7"
    assert press(calc, "÷", "2", "=") == "-3"


def test_divide_truncate():
    assert divide_truncate(7, 2) == 3
    assert divide_truncate(-7, 2) == -3
    assert divide_truncate(7, -2) == -3
    assert divide_truncate(-7, -2) == 3


def test_divide_by_zero_shows_error(calc):
    assert press(calc, "8", "÷", "0", "=") == config.ERROR_SENTINEL
    assert calc.is_error()


def test_digit_recovers_from_error(calc):
    press(calc, "8", "÷", "0", "=")
    assert press(calc, "4") == "4"
    assert press(calc, "2") == "42"


def test_operator_after_error_uses_zero(calc):
    press(calc, "8", "÷", "0", "=")
    assert press(calc, "+", "3", "=") == "3"


def test_backspace(calc):
    press(calc, "1", "2", "3")
    assert press(calc, "⌫") == "12"
    assert press(calc, "⌫") == "1"
    assert press(calc, "⌫") == "0"
    assert press(calc, "⌫") == "0"


def test_backspace_never_leaves_lone_minus(calc):
    press(calc, "2", "−", "7", "=")
    assert calc.display == "-5"
    assert press(calc, "⌫") == "0"


def test_backspace_on_error(calc):
    press(calc, "1", "÷", "0", "=")
    assert press(calc, "⌫") == "0"


def test_seven_times_eight(calc):
    assert press(calc, "7", "×", "8", "=") == "56"


def test_last_operator_wins(calc):
    # The first − and its operand are dropped: 9 − 3
    assert press(calc, "9", "−", "9", "−", "3", "=") == "6"


def test_replacing_operator_before_second_operand(calc):
    assert press(calc, "6", "+", "×", "7", "=") == "42"


def test_digit_after_result_starts_new_entry(calc):
    press(calc, "2", "+", "3", "=")
    assert press(calc, "9") == "9"


def test_repeated_equals_reapplies_pending_operand(calc):
    assert press(calc, "2", "+", "3", "=") == "5"
    assert press(calc, "=") == "7"


def test_equals_without_operation_is_noop(calc):
    assert press(calc, "4", "5", "=") == "45"
    assert calc.awaiting_new_entry is True


def test_operator_sets_pending_state(calc):
    press(calc, "1", "5", "+")
    assert calc.pending_operand == 15
    assert calc.pending_operation == ADD
    assert calc.awaiting_new_entry is True
    assert calc.get_expression() == "15 +"


def test_ascii_aliases(calc):
    assert press(calc, "9", "/", "2", "=") == "4"
    assert calc.pending_operation == DIVIDE
    assert press(calc, "AC", "3", "*", "3", "=") == "9"
    assert press(calc, "AC", "3", "-", "5", "=") == "-2"


def test_unknown_tokens_ignored(calc):
    press(calc, "4")
    assert press(calc, "%", ".", "", "12") == "4"


def test_display_never_empty(calc):
    for token in ["⌫", "1", "⌫", "⌫", "+", "⌫", "=", "AC", "⌫"]:
        calc.handle_input(token)
        assert calc.display != ""


def test_parse_int_fallback():
    assert parse_int("12") == 12
    assert parse_int("-3") == -3
    assert parse_int("Error") == 0
    assert parse_int("") == 0
    assert parse_int(None) == 0


@pytest.mark.parametrize("char,keysym,token", [
    ("5", "5", "5"),
    ("*", "asterisk", "×"),
    ("/", "slash", "÷"),
    ("-", "minus", "−"),
    ("+", "plus", "+"),
    ("=", "equal", "="),
    ("\r", "Return", "="),
    ("", "BackSpace", "⌫"),
    ("", "Escape", "AC"),
    ("c", "c", "AC"),
    ("q", "q", None),
    ("", "Shift_L", None),
])
def test_key_to_token(char, keysym, token):
    assert key_to_token(char, keysym) == token


# ── Arithmetic over random operands ──────────────────────────────────────────

OPERATIONS = {
    "+": lambda a, b: a + b,
    "−": lambda a, b: a - b,
    "×": lambda a, b: a * b,
    "÷": lambda a, b: math.trunc(Fraction(a, b)),
}

OPERATIONS_BY_SYMBOL = {"+": ADD, "−": SUBTRACT, "×": MULTIPLY, "÷": DIVIDE}


def enter(calc, n):
    """Key in n; negatives are reached as 0 − |n| ="""
    if n < 0:
        return press(calc, "0", "−", *str(-n), "=")
    return press(calc, *str(n))


def expected_display(a, op, b):
    if op == "÷" and b == 0:
        return config.ERROR_SENTINEL
    return str(OPERATIONS[op](a, b))


def random_cases(seed, count, low, high):
    rng = random.Random(seed)
    return [(rng.randint(low, high), rng.choice(list(OPERATIONS)), rng.randint(0, high))
            for _ in range(count)]


@pytest.mark.parametrize("a,op,b", random_cases(1234, 200, -10 ** 12, 10 ** 12))
def test_random_binary_operations(calc, a, op, b):
    enter(calc, a)
    assert press(calc, op, *str(b), "=") == expected_display(a, op, b)


@pytest.mark.parametrize("a,op,b", random_cases(99, 60, -50, 50))
def test_small_operands_with_zero_and_negatives(calc, a, op, b):
    enter(calc, a)
    assert press(calc, op, *str(b), "=") == expected_display(a, op, b)


@pytest.mark.parametrize("a,b", [(-7, -2), (-7, 2), (7, -2), (-9, -3), (-1, -5), (-123456789, -1000)])
@pytest.mark.parametrize("op", list(OPERATIONS))
def test_negative_right_operand(calc, a, op, b):
    # The keypad cannot type a negative second operand; load it as the display
    enter(calc, b)
    calc.pending_operand = a
    calc.pending_operation = OPERATIONS_BY_SYMBOL[op]
    assert press(calc, "=") == expected_display(a, op, b)


def test_negative_divided_by_negative_from_keys(calc):
    # -7 becomes both operands: -7 ÷ -7
    assert press(calc, "0", "−", "7", "=") == "-7"
    assert press(calc, "÷", "=") == "1"
    assert press(calc, "AC", "0", "−", "8", "=", "÷", "=", "=") == "-8"


def test_truncating_division_matches_exact_quotient():
    rng = random.Random(7)
    for _ in range(500):
        a = rng.randint(-10 ** 30, 10 ** 30)
        b = rng.choice([-1, 1]) * rng.randint(1, 10 ** 15)
        assert divide_truncate(a, b) == math.trunc(Fraction(a, b))


@pytest.mark.parametrize("op", list(OPERATIONS))
def test_multi_thousand_digit_operands(calc, op):
    rng = random.Random(2024)
    a = -rng.randrange(10 ** 1999, 10 ** 2000)
    b = rng.randrange(10 ** 1999, 10 ** 2000)
    enter(calc, a)
    assert press(calc, op, *str(b), "=") == expected_display(a, op, b)


# ── Length limits ────────────────────────────────────────────────────────────

def test_entry_stops_at_max_digits(calc):
    assert press(calc, *"9" * (config.MAX_DIGITS + 100)) == "9" * config.MAX_DIGITS


def test_longest_entry_is_kept_as_left_operand(calc):
    press(calc, *"9" * (config.MAX_DIGITS + 400), "+", "1")
    assert calc.pending_operand == int("9" * config.MAX_DIGITS)
    # One more digit than can be shown
    assert press(calc, "=") == config.ERROR_SENTINEL


def test_oversized_product_shows_error(calc):
    assert press(calc, *"9" * 2200, "×", *"9" * 2200, "=") == config.ERROR_SENTINEL
    assert calc.is_error()
    assert press(calc, "4", "+", "2", "=") == "6"


def test_largest_result_still_shown(calc):
    press(calc, *"9" * (config.MAX_DIGITS - 1), "+", "9", "=")
    assert calc.display == "1" + "0" * (config.MAX_DIGITS - 2) + "8"


def test_negative_overflow_shows_error(calc):
    enter(calc, -int("9" * config.MAX_DIGITS))
    assert calc.display == "-" + "9" * config.MAX_DIGITS
    assert press(calc, "−", "1", "=") == config.ERROR_SENTINEL


def test_repeated_equals_overflows_to_error(calc):
    press(calc, *"9" * 1500, "×", *"9" * 1500, "=")
    assert calc.display != config.ERROR_SENTINEL
    assert press(calc, "=") == config.ERROR_SENTINEL
