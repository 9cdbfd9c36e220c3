"""Session-scoped log of completed calculations."""
from typing import List

from pydantic import BaseModel, Field

from arithmetic_calculator.common.operations import HistoryEntry


class HistoryLog(BaseModel):
    """
    Completed calculations, newest first.

    The log only grows during a session; it is never persisted.
    """

    entries: List[HistoryEntry] = Field(default_factory=list, description="Entries, most recent first")

    def record(self, expression: str, result: str) -> HistoryEntry:
        """
        Add a calculation at the front of the log.

        :param str expression: Expression text as it was displayed
        :param str result: Formatted result

        :return: The new entry
        :rtype: HistoryEntry
        """
        entry = HistoryEntry(expression=expression, result=result)
        self.entries.insert(0, entry)
        return entry

    def as_lines(self) -> List[str]:
        """Entries rendered as ``"<expr> = <result>"``, newest first."""
        return [str(entry) for entry in self.entries]
