"""Split calculator expressions into numbers and operators."""
from typing import Dict, List

from arithmetic_calculator.common.operations import OPERATOR_SYMBOLS, TokenStream

# Display glyphs and the ASCII operator they stand for
DISPLAY_GLYPHS: Dict[str, str] = {
    "×": "*",
    "÷": "/",
    "−": "-",
}

NUMBER_CHARS: str = "0123456789."

EXPONENT_CHARS: str = "eE"


class ExpressionTokenizer:
    """
    Turn the text shown on the calculator display into a token stream.

    Algorithm:
        1. Replace display glyphs (× ÷ −) with their ASCII operators
        2. Scan left to right, collecting digits and decimal points into a number buffer
        3. On an operator, flush the buffer into the numbers and record the operator

    A minus sign is read as the sign of the next number when an operand is expected
    (start of the expression or right after another operator) and a digit or decimal
    point follows it, so ``12+-7`` yields numbers ``[12, -7]`` and operators ``["+"]``.
    A number may carry an exponent (``1e-05``); any other character is rejected.

    Examples:
        - ``2+3×5``  -> numbers ``[2.0, 3.0, 5.0]``, operators ``["+", "*"]``
        - ``-3+2``   -> numbers ``[-3.0, 2.0]``, operators ``["+"]``
    """

    @staticmethod
    def sanitize(expr: str) -> str:
        """
        Replace display glyphs with the ASCII operators used for evaluation.

        :param str expr: Expression as displayed

        :return: Expression using only ASCII operators
        :rtype: str
        """
        for glyph, symbol in DISPLAY_GLYPHS.items():
            expr = expr.replace(glyph, symbol)
        return expr

    @staticmethod
    def _flush(buffer: str, numbers: List[float]) -> None:
        """
        Append the buffered number, if any, to the numbers.

        :param str buffer: Pending number characters
        :param List[float] numbers: Numbers collected so far

        :raises ValueError: If the buffer is not a valid number (e.g. ``1.2.3``)
        """
        if buffer:
            try:
                numbers.append(float(buffer))
            except ValueError:
                raise ValueError(f"Invalid number: {buffer!r}") from None

    @staticmethod
    def tokenize(expr: str) -> TokenStream:
        """
        Split a sanitized expression into numbers and operators.

        :param str expr: Expression using ASCII operators

        :return: Token stream in input order
        :rtype: TokenStream
        :raises ValueError: If a number cannot be parsed or a character is not part of the grammar
        """
        numbers: List[float] = []
        operators: List[str] = []
        buffer: str = ""
        operand_expected: bool = True

        for index, char in enumerate(expr):
            if char in NUMBER_CHARS:
                buffer += char
                operand_expected = False
            elif char in EXPONENT_CHARS and buffer and buffer[-1] in NUMBER_CHARS:
                # Exponent of a result rendered as 1e-05
                buffer += char
            elif char in "+-" and buffer and buffer[-1] in EXPONENT_CHARS:
                buffer += char
            elif char in OPERATOR_SYMBOLS:
                next_char = expr[index + 1] if index + 1 < len(expr) else ""
                if char == "-" and not buffer and operand_expected and next_char and next_char in NUMBER_CHARS:
                    # Sign of the upcoming number
                    buffer = char
                    continue
                ExpressionTokenizer._flush(buffer, numbers)
                buffer = ""
                operators.append(char)
                operand_expected = True
            else:
                raise ValueError(f"Unexpected character {char!r} in {expr!r}")

        ExpressionTokenizer._flush(buffer, numbers)
        return TokenStream(numbers=numbers, operators=operators)
