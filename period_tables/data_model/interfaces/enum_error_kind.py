from enum import Enum


class ErrorKind(Enum):
    """
    Kinds of validation errors attached to a table.
    """
    PERIOD_MISMATCH = "PeriodMismatch"
    GAP_IN_PERIOD = "GapInPeriod"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.PERIOD_MISMATCH: "The tables are filled for different periods.",
    ErrorKind.GAP_IN_PERIOD: "The row should not contain spaces between months",
}
