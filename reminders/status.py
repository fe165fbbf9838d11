"""Status enum for reminder urgency levels."""

from enum import Enum


class Status(Enum):
    """Reminder status categories. Lower value = more urgent."""

    OVERDUE = 1
    DUE_SOON = 2
    UPCOMING = 3
    NO_DUE_CONDITION = 4  # Neither dueByMileage nor dueByDate set
    INACTIVE = 5  # Soft-disabled or already completed

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Due Soon'."""
        return self.name.replace("_", " ").title()
