"""Explicit calculator state owned by the host."""
from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.engine.history import HistoryLog


class CalculatorState(BaseModel):
    """
    Everything the calculator remembers between two key presses.

    The host creates one state per calculator screen and passes it to every
    engine operation.
    """

    model_config = ConfigDict(validate_assignment=True)

    expression: str = Field(default="", description="Characters currently on the display")
    just_evaluated: bool = Field(default=False, description="True right after equals, until the next edit")
    history: HistoryLog = Field(default_factory=HistoryLog, description="Completed calculations")

    @property
    def display_text(self) -> str:
        """The expression as displayed, ``"0"`` when empty."""
        return self.expression or "0"
