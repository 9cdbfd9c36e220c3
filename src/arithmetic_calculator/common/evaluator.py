"""Evaluate calculator expressions strictly left to right."""
import math
import operator
from typing import Callable, Dict

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import (
    ErrorKind,
    EvaluationFailure,
    EvaluationResult,
    EvaluationSuccess,
    TokenStream,
)
from arithmetic_calculator.common.tokenizer import ExpressionTokenizer

# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


def remainder(dividend: float, divisor: float) -> float:
    """
    Floating remainder with the sign of the dividend.

    A zero divisor gives NaN instead of raising.
    """
    if divisor == 0:
        return math.nan
    return math.fmod(dividend, divisor)


# Mapping of operator symbols to functions, all with the same precedence
OPERATORS: Dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": remainder,
}

# Operators whose right operand must not be zero
DIVIDING_OPERATORS: str = "/"


class ExpressionEvaluator:
    """
    Evaluate calculator expressions without operator precedence.

    Each operator is applied immediately to the running result and the next operand,
    so ``2+3*5`` is ``(2+3)*5 = 25``.

    Failures are returned as :class:`EvaluationFailure` values instead of being raised.
    """

    @staticmethod
    def reduce(tokens: TokenStream) -> EvaluationResult:
        """
        Reduce a token stream left to right into a single value.

        An empty token stream evaluates to zero.

        :param TokenStream tokens: Numbers and operators in input order

        :return: The value, or the reason it could not be computed
        :rtype: EvaluationResult
        """
        if not tokens.numbers:
            return EvaluationSuccess(value=0.0)

        if not tokens.is_balanced:
            return EvaluationFailure(
                error=ErrorKind.MALFORMED_EXPRESSION,
                message=f"{len(tokens.operators)} operator(s) for {len(tokens.numbers)} number(s)",
            )

        result: float = tokens.numbers[0]
        for symbol, operand in zip(tokens.operators, tokens.numbers[1:]):
            if symbol in DIVIDING_OPERATORS and operand == 0:
                return EvaluationFailure(error=ErrorKind.DIVISION_BY_ZERO, message=f"{result} {symbol} 0")
            try:
                result = OPERATORS[symbol](result, operand)
            except (ArithmeticError, ValueError) as exc:
                return EvaluationFailure(error=ErrorKind.MALFORMED_EXPRESSION, message=str(exc))

        return EvaluationSuccess(value=result)

    @staticmethod
    def evaluate(expr: str) -> EvaluationResult:
        """
        Sanitize, tokenize and reduce an expression as shown on the display.

        :param str expr: Expression text, possibly containing display glyphs

        :return: The value, or the reason it could not be computed
        :rtype: EvaluationResult
        """
        try:
            tokens: TokenStream = ExpressionTokenizer.tokenize(ExpressionTokenizer.sanitize(expr))
        except ValueError as exc:
            return EvaluationFailure(error=ErrorKind.MALFORMED_EXPRESSION, message=str(exc))

        logger.debug(f"🔢 Tokens for {expr!r}: {tokens.numbers} {tokens.operators}")
        return ExpressionEvaluator.reduce(tokens)
