"""
Status classification for maintenance reminders.

A reminder is classified fresh on every read against the vehicle's current
mileage and the current date; nothing here is stored.

Logic:
- Inactive reminders are INACTIVE and never counted
- Mileage and date are independent signals, either may be absent
- Neither signal present: NO_DUE_CONDITION
- Any signal at or past due: OVERDUE (dimensions are OR'd)
- Any signal within its threshold: DUE_SOON
- Otherwise UPCOMING
"""

import logging
import math
from datetime import date, datetime
from typing import Dict, Iterable, List, NamedTuple, Optional, Union

from .calculations import as_date, calc_remaining_days, calc_remaining_miles, check_status
from .classified_reminder import ClassifiedReminder
from .reminder import Reminder
from .status import Status
from .vehicle import Vehicle

logger = logging.getLogger(__name__)

Now = Union[date, datetime]


class ReminderCounts(NamedTuple):
    """Badge counts for a set of classified reminders."""

    overdue: int = 0
    due_soon: int = 0

    @property
    def total(self) -> int:
        return self.overdue + self.due_soon


def _today(now: Optional[Now]) -> date:
    return as_date(now) if now is not None else date.today()


def classify_reminder(
    vehicle: Vehicle, reminder: Reminder, now: Optional[Now] = None
) -> ClassifiedReminder:
    """Classify one reminder and keep the remaining miles/days alongside."""
    if not reminder.is_active:
        return ClassifiedReminder(reminder=reminder, status=Status.INACTIVE)

    today = _today(now)
    miles_remaining = calc_remaining_miles(
        reminder.due_by_mileage, vehicle.current_mileage
    )
    days_remaining = calc_remaining_days(reminder.due_by_date, today)

    if miles_remaining is None and days_remaining is None:
        status = Status.NO_DUE_CONDITION
    else:
        status = Status.UPCOMING
        if miles_remaining is not None:
            status = check_status(miles_remaining, reminder.reminder_threshold_miles)
        if days_remaining is not None:
            date_status = check_status(
                days_remaining, reminder.reminder_threshold_days
            )
            # Escalate status if date check is worse
            if date_status.value < status.value:
                status = date_status

    logger.debug(
        "reminder=%s vehicle=%s status=%s miles_remaining=%s days_remaining=%s",
        reminder.id,
        vehicle.id,
        status.name,
        miles_remaining,
        days_remaining,
    )
    return ClassifiedReminder(
        reminder=reminder,
        status=status,
        miles_remaining=miles_remaining,
        days_remaining=days_remaining,
    )


def classify(vehicle: Vehicle, reminder: Reminder, now: Optional[Now] = None) -> Status:
    """Classify one reminder against the vehicle's current mileage and date."""
    return classify_reminder(vehicle, reminder, now).status


def urgency_key(classified: ClassifiedReminder):
    """
    Sort key: status urgency, then nearer due condition, then id.

    Days are compared before miles; a missing dimension sorts after any
    present one.
    """
    days = classified.days_remaining
    miles = classified.miles_remaining
    return (
        classified.status.value,
        days if days is not None else math.inf,
        miles if miles is not None else math.inf,
        str(classified.reminder.id or ""),
    )


def classify_all(
    vehicle: Vehicle, reminders: Iterable[Reminder], now: Optional[Now] = None
) -> List[ClassifiedReminder]:
    """
    Classify every reminder for a vehicle, most urgent first.

    OVERDUE, DUE_SOON and UPCOMING come first in that order, followed by
    NO_DUE_CONDITION and INACTIVE.
    """
    # One clock reading for the whole pass
    today = _today(now)
    classified = [classify_reminder(vehicle, r, today) for r in reminders]
    return sorted(classified, key=urgency_key)


def count_by_status(classified: Iterable[ClassifiedReminder]) -> ReminderCounts:
    """Overdue and due-soon counts for badge display."""
    overdue = 0
    due_soon = 0
    for c in classified:
        if c.status == Status.OVERDUE:
            overdue += 1
        elif c.status == Status.DUE_SOON:
            due_soon += 1
    return ReminderCounts(overdue=overdue, due_soon=due_soon)


def active_reminders(
    vehicles: Iterable[Vehicle],
    reminders: Iterable[Reminder],
    now: Optional[Now] = None,
) -> List[ClassifiedReminder]:
    """
    Classify reminders across a fleet, most urgent first.

    Inactive reminders are skipped. Reminders whose vehicle is not in
    `vehicles` are skipped with a warning.
    """
    today = _today(now)
    by_id: Dict[str, Vehicle] = {v.id: v for v in vehicles}

    result = []
    for reminder in reminders:
        if not reminder.is_active:
            continue
        vehicle = by_id.get(reminder.vehicle_id)
        if vehicle is None:
            logger.warning(
                "Skipping reminder %s: vehicle %s not found",
                reminder.id,
                reminder.vehicle_id,
            )
            continue
        result.append(classify_reminder(vehicle, reminder, today))

    return sorted(result, key=urgency_key)


def badge_counts(
    vehicles: Iterable[Vehicle],
    reminders: Iterable[Reminder],
    now: Optional[Now] = None,
) -> ReminderCounts:
    """Fleet-wide overdue and due-soon counts."""
    return count_by_status(active_reminders(vehicles, reminders, now))


def active_reminder_count(
    vehicles: Iterable[Vehicle],
    reminders: Iterable[Reminder],
    now: Optional[Now] = None,
) -> int:
    """Number of reminders that are OVERDUE or DUE_SOON across the fleet."""
    return badge_counts(vehicles, reminders, now).total
