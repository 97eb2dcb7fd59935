"""
Keypad definition and event dispatch.

The GUI builds its button grid from KEYPAD and routes every click or key
press through press(), which applies one event to the CalculatorState and
returns the text to show in the display.
"""
from typing import NamedTuple, Optional

from backend.engine import CalculatorState, Operation, format_number


class UnknownKeyError(KeyError):
    pass


class Key(NamedTuple):
    label: str
    row: int
    column: int
    span: int
    style: str


DIGITS = "0123456789."

OPERATORS = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "×": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
}

CLEAR = "AC"
SIGN = "+/-"
PERCENT = "%"
EQUALS = "="

KEYPAD = [
    Key("AC", 0, 0, 1, "clear-button"),
    Key("+/-", 0, 1, 1, "op-button"),
    Key("%", 0, 2, 1, "op-button"),
    Key("/", 0, 3, 1, "op-button"),
    Key("7", 1, 0, 1, "digit-button"),
    Key("8", 1, 1, 1, "digit-button"),
    Key("9", 1, 2, 1, "digit-button"),
    Key("×", 1, 3, 1, "op-button"),
    Key("4", 2, 0, 1, "digit-button"),
    Key("5", 2, 1, 1, "digit-button"),
    Key("6", 2, 2, 1, "digit-button"),
    Key("-", 2, 3, 1, "op-button"),
    Key("1", 3, 0, 1, "digit-button"),
    Key("2", 3, 1, 1, "digit-button"),
    Key("3", 3, 2, 1, "digit-button"),
    Key("+", 3, 3, 1, "op-button"),
    Key("0", 4, 0, 2, "digit-button"),
    Key(".", 4, 2, 1, "digit-button"),
    Key("=", 4, 3, 1, "equals-button"),
]

# keysym -> keypad label, for keys whose char is not already a label
_KEYSYMS = {
    "Return": EQUALS,
    "KP_Enter": EQUALS,
    "Escape": CLEAR,
}

_CHARS = {
    "*": "×",
    "=": EQUALS,
    "%": PERCENT,
}


def press(state: CalculatorState, label: str) -> str:
    """
    Apply the keypad event `label` to state and return the display text.

    Digits show the buffer, operators show the committed accumulator, and
    '=' shows the result.
    """
    if len(label) == 1 and label in DIGITS:
        state.input_digit(label)
        return state.buffer
    if label in OPERATORS:
        state.set_operation(OPERATORS[label])
        return format_number(state.accumulator)
    if label == CLEAR:
        state.clear()
        return "0"
    if label == SIGN:
        state.toggle_sign()
        return state.display()
    if label == PERCENT:
        state.percent()
        return state.display()
    if label == EQUALS:
        return format_number(state.calculate())
    raise UnknownKeyError(label)


def key_for_event(char: str, keysym: str = "") -> Optional[str]:
    """Map a keyboard event (char, keysym) to a keypad label, or None to ignore it."""
    if keysym in _KEYSYMS:
        return _KEYSYMS[keysym]
    if not char or len(char) != 1:
        return None
    if char in DIGITS or char in OPERATORS:
        return char
    return _CHARS.get(char)
