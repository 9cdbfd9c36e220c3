"""Editing operations applied to the expression being typed."""
from typing import FrozenSet, Optional

from arithmetic_calculator.common.formatter import format_number
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.engine.state import CalculatorState

NUMBER_TOKENS: FrozenSet[str] = frozenset("0123456789.")
OPERATOR_TOKENS: FrozenSet[str] = frozenset({"+", "-", "−", "×", "÷", "%"})


def is_number_token(token: str) -> bool:
    """Return True for a single digit or the decimal point."""
    return token in NUMBER_TOKENS


def is_operator_token(token: str) -> bool:
    """Return True for an operator key, as a display glyph or ASCII minus."""
    return token in OPERATOR_TOKENS


class InputAccumulator:
    """
    Edit the expression held by a :class:`CalculatorState`.

    Edits are plain text operations: nothing here checks whether the expression is
    well formed, that is left to evaluation.
    """

    @staticmethod
    def append_token(state: CalculatorState, token: str) -> None:
        """
        Append a digit, decimal point or operator to the expression.

        Right after equals, an operator continues from the displayed result while a
        digit or decimal point starts a new expression.

        :param CalculatorState state: State to edit
        :param str token: Single number or operator key

        :raises ValueError: If the token is neither a number nor an operator key
        """
        if not (is_number_token(token) or is_operator_token(token)):
            raise ValueError(f"Cannot append token: {token!r}")

        if state.just_evaluated:
            if is_number_token(token):
                state.expression = ""
            state.just_evaluated = False

        state.expression += token

    @staticmethod
    def clear(state: CalculatorState) -> None:
        """
        Reset the expression and the post-equals flag.

        :param CalculatorState state: State to reset
        """
        state.expression = ""
        state.just_evaluated = False

    @staticmethod
    def backspace(state: CalculatorState) -> None:
        """
        Remove the last character of the expression, if any.

        :param CalculatorState state: State to edit
        """
        if not state.expression:
            return
        state.expression = state.expression[:-1]
        state.just_evaluated = False

    @staticmethod
    def trailing_number(expr: str) -> Optional[str]:
        """
        Find the number at the end of an expression.

        Scans backwards over digits and at most one decimal point, stopping at the
        first other character or at the start of the expression.

        :param str expr: Expression text

        :return: The trailing run of digits, or None if the expression does not end with one
        :rtype: Optional[str]
        """
        start = len(expr)
        seen_point = False
        while start > 0:
            char = expr[start - 1]
            if char == ".":
                if seen_point:
                    break
                seen_point = True
            elif char not in NUMBER_TOKENS:
                break
            start -= 1
        run = expr[start:]
        return run or None

    @staticmethod
    def toggle_sign(state: CalculatorState) -> None:
        """
        Negate the number at the end of the expression.

        ``12+7`` becomes ``12+-7``. Does nothing on an empty expression, right after
        equals, or when the expression does not end with a number.

        :param CalculatorState state: State to edit
        """
        if not state.expression or state.just_evaluated:
            return

        run = InputAccumulator.trailing_number(state.expression)
        if run is None:
            return

        try:
            value = float(run)
        except ValueError:
            logger.debug(f"± Ignored, trailing {run!r} is not a number")
            return

        state.expression = state.expression[: -len(run)] + format_number(-value)
