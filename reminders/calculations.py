"""Helper functions for reminder due calculations."""

from datetime import date, datetime
from dateutil.relativedelta import relativedelta
from typing import Optional, Union

from .status import Status


def as_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def calc_remaining_miles(
    due_miles: Optional[float], current_miles: float
) -> Optional[float]:
    """Miles left until due. Negative when overdue, None without a mileage."""
    if due_miles is None:
        return None
    return due_miles - current_miles


def calc_remaining_days(
    due_date: Optional[date], now: Union[date, datetime]
) -> Optional[int]:
    """Whole calendar days left until due. Negative when overdue."""
    if due_date is None:
        return None
    return (as_date(due_date) - as_date(now)).days


def calc_next_due_miles(
    completed_miles: Optional[float], interval: Optional[float]
) -> Optional[float]:
    """Next due mileage: completion mileage + interval."""
    if not interval or completed_miles is None:
        return None
    return completed_miles + interval


def calc_next_due_date(
    completed_date: Optional[date], interval_months: Optional[float]
) -> Optional[date]:
    """
    Next due date: completion date + interval months.

    Month ends clamp (Jan 31 + 1 month = Feb 28). Fractional months are
    converted to days at 30 days per month.
    """
    if not interval_months or completed_date is None:
        return None
    months = int(interval_months)
    days = int((interval_months - months) * 30)
    return as_date(completed_date) + relativedelta(months=months, days=days)


def check_status(remaining: float, soon_threshold: float) -> Status:
    """Determine status of a single dimension from what is left until due."""
    if remaining <= 0:
        return Status.OVERDUE
    if remaining <= (soon_threshold or 0):
        return Status.DUE_SOON
    return Status.UPCOMING
