"""ClassifiedReminder dataclass for a reminder's calculated status."""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .status import Status

if TYPE_CHECKING:
    from .reminder import Reminder


def format_distance(miles: float, unit: str = "mi") -> str:
    """Format a distance with thousands separators and a unit label."""
    return f"{miles:,.0f} {unit}"


def format_days(days: int) -> str:
    return "1 day" if days == 1 else f"{days} days"


@dataclass
class ClassifiedReminder:
    """Calculated status for one reminder against a vehicle snapshot."""

    reminder: "Reminder"
    status: Status
    miles_remaining: Optional[float] = None
    days_remaining: Optional[int] = None

    @property
    def is_alarmed(self) -> bool:
        """True when the reminder should count toward dashboard badges."""
        return self.status in (Status.OVERDUE, Status.DUE_SOON)

    @property
    def message(self) -> str:
        return self.describe()

    def describe(self, unit: str = "mi") -> str:
        """
        One-line summary, e.g. 'Overdue by 100 mi' or 'Due in 10 days (2026-10-27)'.

        When overdue, the dimension that crossed the line is reported, mileage
        first if both did. When due soon, only dimensions within their
        reminder threshold are listed.
        """
        miles = self.miles_remaining
        days = self.days_remaining
        due_date = self.reminder.due_by_date

        if self.status == Status.INACTIVE:
            return "Inactive"
        if self.status == Status.NO_DUE_CONDITION:
            return "No due condition set"

        if self.status == Status.OVERDUE:
            if miles is not None and miles <= 0:
                return f"Overdue by {format_distance(abs(miles), unit)}"
            return f"Overdue by {format_days(abs(days))}"

        if self.status == Status.DUE_SOON:
            # Only the dimensions inside their threshold; all present ones
            # if neither is (a hand-built result).
            near_miles = miles is not None and miles <= self.reminder.reminder_threshold_miles
            near_days = days is not None and days <= self.reminder.reminder_threshold_days
            if not (near_miles or near_days):
                near_miles, near_days = miles is not None, days is not None
            parts = []
            if near_miles:
                parts.append(format_distance(miles, unit))
            if near_days:
                parts.append(f"{format_days(days)} ({due_date.isoformat()})")
            return "Due in " + " or in ".join(parts)

        if miles is not None:
            return f"Due at {format_distance(self.reminder.due_by_mileage, unit)}"
        return f"Due on {due_date.isoformat()}"
