"""Dispatch key presses to the engine and evaluate on equals."""
from typing import Callable, Dict, List, Optional

from arithmetic_calculator.common.config import CalculatorSettings
from arithmetic_calculator.common.evaluator import ExpressionEvaluator
from arithmetic_calculator.common.formatter import format_number
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import EvaluationFailure, EvaluationResult, EvaluationSuccess
from arithmetic_calculator.engine.accumulator import InputAccumulator, is_number_token, is_operator_token
from arithmetic_calculator.engine.state import CalculatorState

EQUALS: str = "equals"
CLEAR: str = "clear"
BACKSPACE: str = "backspace"
TOGGLE_SIGN: str = "toggleSign"

# Keypad labels accepted in place of the control action names
CONTROL_ALIASES: Dict[str, str] = {
    "=": EQUALS,
    "C": CLEAR,
    "←": BACKSPACE,
    "±": TOGGLE_SIGN,
}

DEFAULT_ERROR_TEXT: str = "Error"

# Control actions that only edit the expression
EDITING_ACTIONS: Dict[str, Callable[[CalculatorState], None]] = {
    CLEAR: InputAccumulator.clear,
    BACKSPACE: InputAccumulator.backspace,
    TOGGLE_SIGN: InputAccumulator.toggle_sign,
}


def resolve_control(token: str) -> Optional[str]:
    """
    Map a token to its control action name.

    :param str token: Key pressed

    :return: Control action name, or None if the token is not a control key
    :rtype: Optional[str]
    """
    if token in (EQUALS, CLEAR, BACKSPACE, TOGGLE_SIGN):
        return token
    return CONTROL_ALIASES.get(token)


def handle_equals(state: CalculatorState, error_text: str = DEFAULT_ERROR_TEXT) -> None:
    """
    Evaluate the expression and replace it with the result.

    Does nothing on an empty expression or right after equals. On success the
    calculation is added to the history; on failure the display shows ``error_text``
    and nothing is recorded. Either way the next digit starts a new expression.

    :param CalculatorState state: State to evaluate
    :param str error_text: Display text used when evaluation fails
    """
    if not state.expression or state.just_evaluated:
        return

    expression: str = state.expression
    outcome: EvaluationResult = ExpressionEvaluator.evaluate(expression)

    if isinstance(outcome, EvaluationSuccess):
        formatted: str = format_number(outcome.value)
        state.history.record(expression, formatted)
        state.expression = formatted
        logger.info(f"🧮✅ {expression} = {formatted}")
    elif isinstance(outcome, EvaluationFailure):
        state.expression = error_text
        logger.warning(f"🧮❌ Could not evaluate {expression!r}: {outcome.error.value} {outcome.message}")

    state.just_evaluated = True


def handle_input(state: CalculatorState, token: str, error_text: str = DEFAULT_ERROR_TEXT) -> None:
    """
    Apply one key press to the state.

    Unknown keys are logged and ignored; no error ever reaches the caller.

    :param CalculatorState state: State to update
    :param str token: Digit, decimal point, operator glyph or control action
    :param str error_text: Display text used when evaluation fails
    """
    control = resolve_control(token)

    if control == EQUALS:
        handle_equals(state, error_text)
    elif control is not None:
        EDITING_ACTIONS[control](state)
    elif is_number_token(token) or is_operator_token(token):
        InputAccumulator.append_token(state, token)
    else:
        logger.warning(f"⌨️ Ignoring unknown key {token!r}")


class CalculatorSession:
    """
    The calculator as seen by a host shell.

    Holds one :class:`CalculatorState` and exposes the three calls a screen needs:
    forward a key press, read the display and read the history.
    """

    def __init__(self, settings: Optional[CalculatorSettings] = None, state: Optional[CalculatorState] = None):
        self.settings = settings or CalculatorSettings()
        self.state = state or CalculatorState()

    def handle_input(self, token: str) -> str:
        """
        Apply a key press and return the new display text.

        :param str token: Key pressed

        :return: Display text after the key press
        :rtype: str
        """
        handle_input(self.state, token, self.settings.error_text)
        return self.get_display_text()

    def get_display_text(self) -> str:
        return self.state.display_text

    def get_history(self) -> List[str]:
        return self.state.history.as_lines()
