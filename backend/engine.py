import enum
import logging
from typing import Optional

import numpy as np


logger = logging.getLogger("fredulator.engine")

# Divisors smaller than this are treated as zero.
EPSILON = float(np.finfo(np.float64).eps)


class Operation(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "/"
    NONE = ""


def parse_number(text: str) -> Optional[float]:
    """Parse the typed buffer; None when it is not a number (e.g. a lone '.')."""
    try:
        return float(text)
    except ValueError:
        return None


def format_number(value: float) -> str:
    """
    Text shown for a float: shortest round-trip digits in positional
    notation (never an exponent) with an integral '.0' dropped, so
    20.0 -> "20", 0.5 -> "0.5" and 1e-06 -> "0.000001". The text is written
    back into the buffer by toggle_sign/percent, so it must stay typeable.
    """
    return np.format_float_positional(float(value), trim="-")


class CalculatorState:
    """
    Four-function calculator state.

    accumulator holds the running result, buffer the digits typed since the
    last operator/clear/compute, and operation the operator waiting for its
    second operand. There is no precedence: '=' applies the one pending
    operation to (accumulator, buffer).
    """

    def __init__(self):
        self.accumulator = 0.0
        self.buffer = ""
        self.operation = Operation.NONE

    def __repr__(self):
        return (f"CalculatorState(accumulator={self.accumulator!r}, "
                f"buffer={self.buffer!r}, operation={self.operation.name})")

    def clear(self):
        self.accumulator = 0.0
        self.buffer = ""
        self.operation = Operation.NONE
        logger.debug("clear -> %r", self)

    def input_digit(self, digit: str) -> bool:
        """Append a digit or '.' to the buffer. A second '.' is ignored (returns False)."""
        if digit == "." and "." in self.buffer:
            logger.debug("ignored extra decimal point in %r", self.buffer)
            return False
        self.buffer += digit
        logger.debug("digit %r -> buffer=%r", digit, self.buffer)
        return True

    def set_operation(self, op: Operation):
        """
        Commit the buffer (if any) into the accumulator and make op pending.
        A previously pending operator is replaced, not applied.
        """
        if self.buffer:
            self.accumulator = self._buffer_value()
            self.buffer = ""
        self.operation = op
        logger.debug("operation %s -> %r", op.name, self)

    def calculate(self) -> float:
        operand = self._buffer_value() if self.buffer else 0.0
        self.buffer = ""

        op = self.operation
        if op is Operation.ADD:
            result = self.accumulator + operand
        elif op is Operation.SUBTRACT:
            result = self.accumulator - operand
        elif op is Operation.MULTIPLY:
            result = self.accumulator * operand
        elif op is Operation.DIVIDE:
            if abs(operand) < EPSILON:
                logger.warning("division by zero: %s / %s, result set to 0", format_number(self.accumulator),
                               format_number(operand))
                result = 0.0
            else:
                result = self.accumulator / operand
        else:
            # nothing pending: '=' just commits the typed value
            result = operand

        logger.debug("calculate %s %s %s = %s", format_number(self.accumulator), op.value or "=",
                     format_number(operand), format_number(result))
        self.accumulator = result
        self.operation = Operation.NONE
        return result

    def toggle_sign(self):
        if self.buffer:
            value = parse_number(self.buffer)
            if value is not None:
                self.buffer = format_number(-value)
        else:
            self.accumulator = -self.accumulator
        logger.debug("toggle sign -> %r", self)

    def percent(self):
        if self.buffer:
            value = parse_number(self.buffer)
            if value is not None:
                self.buffer = format_number(value / 100.0)
        else:
            self.accumulator /= 100.0
        logger.debug("percent -> %r", self)

    def display(self) -> str:
        """Buffer while typing, otherwise the accumulator."""
        if self.buffer:
            return self.buffer
        return format_number(self.accumulator)

    def _buffer_value(self) -> float:
        value = parse_number(self.buffer)
        return 0.0 if value is None else value


# Quick local demo
if __name__ == "__main__":
    s = CalculatorState()
    for d in "12":
        s.input_digit(d)
    s.set_operation(Operation.ADD)
    s.input_digit("8")
    print(format_number(s.calculate()))  # 20
