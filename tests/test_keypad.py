import pytest

from backend.engine import CalculatorState, Operation
from backend.keypad import KEYPAD, OPERATORS, UnknownKeyError, key_for_event, press


def press_all(state, labels):
    text = None
    for label in labels:
        text = press(state, label)
    return text


@pytest.fixture
def state():
    return CalculatorState()


def test_keypad_layout():
    labels = [k.label for k in KEYPAD]
    assert len(labels) == len(set(labels)) == 19
    assert set("0123456789.") <= set(labels)
    assert set(OPERATORS) <= set(labels)

    zero = next(k for k in KEYPAD if k.label == "0")
    assert (zero.row, zero.column, zero.span) == (4, 0, 2)

    # every cell of the 4x5 grid is covered exactly once
    cells = [(k.row, k.column + i) for k in KEYPAD for i in range(k.span)]
    assert sorted(cells) == [(r, c) for r in range(5) for c in range(4)]


def test_keypad_styles():
    styles = {k.label: k.style for k in KEYPAD}
    assert styles["AC"] == "clear-button"
    assert styles["="] == "equals-button"
    assert styles["7"] == "digit-button"
    assert styles["."] == "digit-button"
    for label in ("+/-", "%", "/", "×", "-", "+"):
        assert styles[label] == "op-button"


def test_add_sequence_shows_20(state):
    assert press_all(state, ["1", "2", "+", "8", "="]) == "20"


def test_multiply_sequence(state):
    assert press_all(state, ["6", "×", "7", "="]) == "42"


def test_digits_show_buffer(state):
    assert press(state, "1") == "1"
    assert press(state, ".") == "1."
    assert press(state, "5") == "1.5"
    assert press(state, ".") == "1.5"


def test_operator_shows_accumulator(state):
    press_all(state, ["1", "2"])
    assert press(state, "+") == "12"
    assert state.operation is Operation.ADD
    assert press(state, "-") == "12"
    assert state.operation is Operation.SUBTRACT


def test_clear_shows_zero(state):
    press_all(state, ["9", "/", "3"])
    assert press(state, "AC") == "0"
    assert state.operation is Operation.NONE
    assert state.buffer == ""


def test_sign_and_percent_show_buffer_or_accumulator(state):
    assert press_all(state, ["5", "+/-"]) == "-5"
    assert press(state, "=") == "-5"
    assert press(state, "+/-") == "5"
    assert press_all(state, ["2", "0", "0", "%"]) == "2"
    press(state, "AC")
    state.accumulator = 50.0
    assert press(state, "%") == "0.5"


def test_divide_by_zero_shows_zero(state):
    assert press_all(state, ["1", "0", "/", "0", "="]) == "0"


def test_equals_repeated_passes_through(state):
    press_all(state, ["4", "+", "4", "="])
    # nothing pending and nothing typed
    assert press(state, "=") == "0"


def test_unknown_key(state):
    with pytest.raises(UnknownKeyError):
        press(state, "sqrt")
    with pytest.raises(KeyError):
        press(state, "")


@pytest.mark.parametrize("char, keysym, label", [
    ("7", "7", "7"),
    (".", "period", "."),
    ("+", "plus", "+"),
    ("-", "minus", "-"),
    ("*", "asterisk", "×"),
    ("/", "slash", "/"),
    ("%", "percent", "%"),
    ("=", "equal", "="),
    ("\r", "Return", "="),
    ("\r", "KP_Enter", "="),
    ("\x1b", "Escape", "AC"),
    ("a", "a", None),
    ("", "Shift_L", None),
])
def test_key_for_event(char, keysym, label):
    assert key_for_event(char, keysym) == label
