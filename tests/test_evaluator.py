"""Test class ExpressionEvaluator."""
import math

import pytest

from arithmetic_calculator.common.evaluator import ExpressionEvaluator
from arithmetic_calculator.common.operations import (
    ErrorKind,
    EvaluationFailure,
    EvaluationSuccess,
    TokenStream,
)


@pytest.mark.parametrize("expr,expected", [
    ("3+4", 7.0),
    ("10-2", 8.0),
    ("3×5", 15.0),
    ("8÷2", 4.0),
    ("9−4", 5.0),
    ("2+3*5", 25.0),       # left to right, no precedence
    ("7+3×2−4÷2", 8.0),
    ("7%3", 1.0),
    ("12+-7", 5.0),
    ("-3+2", -1.0),
    ("2.5*2", 5.0),
    ("42", 42.0),
])
def test_evaluate_valid(expr, expected):
    """Evaluate reduces the expression left to right."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationSuccess)
    assert outcome.value == pytest.approx(expected)


@pytest.mark.parametrize("expr,expected", [
    ("-7%3", -1.0),
    ("7%-3", 1.0),
    ("5.5%2", 1.5),
])
def test_remainder_follows_dividend_sign(expr, expected):
    """The remainder keeps the sign of the dividend."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationSuccess)
    assert outcome.value == pytest.approx(expected)


@pytest.mark.parametrize("expr", ["8/0", "8÷0", "1+2÷0.0"])
def test_evaluate_division_by_zero(expr):
    """Dividing by exactly zero is reported as DIVISION_BY_ZERO."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationFailure)
    assert outcome.error == ErrorKind.DIVISION_BY_ZERO


@pytest.mark.parametrize("expr", [
    "2+",        # Trailing operator
    "×3",        # Leading operator
    "2++3",      # Consecutive operators
    "1.2.3",     # Unparseable number
    "Error+5",
    "Error+",    # Letters other than an exponent
    "nan+1",
    "1e",        # Exponent without digits
])
def test_evaluate_malformed(expr):
    """Malformed expressions are reported, never raised."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationFailure)
    assert outcome.error == ErrorKind.MALFORMED_EXPRESSION


@pytest.mark.parametrize("expr", ["+", "−"])
def test_evaluate_without_numbers_is_zero(expr):
    """An expression holding no number evaluates to zero."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert outcome == EvaluationSuccess(value=0.0)


def test_reduce_token_stream():
    """Reduce applies each operator to the running result and the next number."""
    tokens = TokenStream(numbers=[10.0, 4.0, 3.0, 2.0], operators=["-", "*", "/"])
    assert ExpressionEvaluator.reduce(tokens) == EvaluationSuccess(value=9.0)


def test_reduce_rejects_extra_operators():
    """More operators than gaps between numbers is malformed."""
    tokens = TokenStream(numbers=[1.0, 2.0], operators=["+", "-"])
    outcome = ExpressionEvaluator.reduce(tokens)
    assert isinstance(outcome, EvaluationFailure)
    assert outcome.error == ErrorKind.MALFORMED_EXPRESSION


@pytest.mark.parametrize("expr", ["5%0", "5%0.0", "2+3%0"])
def test_remainder_by_zero_is_nan(expr):
    """The remainder by zero is NaN, not a division error."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationSuccess)
    assert math.isnan(outcome.value)


@pytest.mark.parametrize("expr,expected", [
    ("1e-05+1", 1.00001),
    ("1e+20÷1e+19", 10.0),
    ("2.5E3-500", 2000.0),
])
def test_evaluate_exponent_numbers(expr, expected):
    """Numbers written with an exponent evaluate as their full value."""
    outcome = ExpressionEvaluator.evaluate(expr)
    assert isinstance(outcome, EvaluationSuccess)
    assert outcome.value == pytest.approx(expected)
