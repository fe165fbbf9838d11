"""Reminder dataclass for a scheduled service obligation."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Reminder:
    """
    A scheduled service for one vehicle.

    Due whenever either condition triggers first: the odometer reaching
    due_by_mileage or the calendar reaching due_by_date. The thresholds set
    how early the reminder turns DUE_SOON; 0 means no advance warning.
    """

    id: Optional[str]
    vehicle_id: str
    service_type: str
    description: Optional[str] = None
    due_by_mileage: Optional[float] = None
    due_by_date: Optional[date] = None
    reminder_threshold_miles: float = 0
    reminder_threshold_days: int = 0
    is_recurring: bool = False
    recurring_interval_miles: Optional[float] = None
    recurring_interval_months: Optional[float] = None
    last_completed_date: Optional[date] = None
    last_completed_mileage: Optional[float] = None
    is_active: bool = True

    @property
    def has_due_condition(self) -> bool:
        return self.due_by_mileage is not None or self.due_by_date is not None

    @property
    def has_interval(self) -> bool:
        """True when at least one recurring interval is configured."""
        return bool(self.recurring_interval_miles) or bool(
            self.recurring_interval_months
        )
