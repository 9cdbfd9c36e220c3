"""Pydantic models for token streams, evaluation results and history entries."""
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ASCII operators understood by the tokenizer and the evaluator
OPERATOR_SYMBOLS: str = "+-*/%"


class ErrorKind(str, Enum):
    """Reasons an evaluation can fail."""

    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_EXPRESSION = "malformed_expression"


class TokenStream(BaseModel):
    """Numbers and operators extracted from a sanitized expression, in input order."""

    model_config = ConfigDict(frozen=True)

    numbers: List[float] = Field(default_factory=list, description="Operands in input order")
    operators: List[str] = Field(default_factory=list, description="Single-character ASCII operators")

    @field_validator("operators")
    def operators_must_be_known(cls, v: List[str]) -> List[str]:
        """Ensure that every operator is one of the supported ASCII symbols."""
        for symbol in v:
            if symbol not in OPERATOR_SYMBOLS:
                raise ValueError(f"Unknown operator: {symbol!r}")
        return v

    @property
    def is_balanced(self) -> bool:
        """True when there is exactly one operator between each pair of numbers."""
        return len(self.operators) == len(self.numbers) - 1


class EvaluationSuccess(BaseModel):
    """Numeric value of a successfully evaluated expression."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Evaluated numeric result")


class EvaluationFailure(BaseModel):
    """Typed reason why an expression could not be evaluated."""

    model_config = ConfigDict(frozen=True)

    error: ErrorKind = Field(..., description="Failure category")
    message: str = Field(default="", description="Human readable detail, for logs only")


EvaluationResult = Union[EvaluationSuccess, EvaluationFailure]


class HistoryEntry(BaseModel):
    """A completed calculation as shown in the history list."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., min_length=1, description="Expression text as it was displayed")
    result: str = Field(..., min_length=1, description="Formatted result")

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"
