from enum import Enum


class ColumnRole(Enum):
    """
    Role of a column in a yearly table.
    """
    IDENTIFIER = "identifier"  # Year: shown, never entered or computed
    INPUT = "input"  # monthly amounts entered by the user
    COMPUTED = "computed"  # quarterly / year-to-date aggregates

    @property
    def is_editable(self) -> bool:
        return self is ColumnRole.INPUT
