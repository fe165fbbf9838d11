"""Completion handling and regeneration of recurring reminders."""

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Tuple, Union

from .calculations import as_date, calc_next_due_date, calc_next_due_miles
from .errors import ConfigurationError
from .reminder import Reminder

logger = logging.getLogger(__name__)


def new_reminder_id() -> str:
    return str(uuid.uuid4())


def check_recurrence(reminder: Reminder) -> None:
    """Raise ConfigurationError if a recurring reminder has no interval."""
    if reminder.is_recurring and not reminder.has_interval:
        logger.error(
            "Recurring reminder %s (%s) has no recurring interval",
            reminder.id,
            reminder.service_type,
        )
        raise ConfigurationError(
            f"Recurring reminder '{reminder.service_type}' needs "
            "recurringIntervalMiles or recurringIntervalMonths"
        )


def complete_and_regenerate(
    reminder: Reminder,
    completion_mileage: Optional[float],
    completion_date: Optional[Union[date, datetime]] = None,
) -> Tuple[Reminder, Optional[Reminder]]:
    """
    Retire a completed reminder and build its next occurrence.

    Returns (updated_original, next_reminder). The original comes back
    inactive with its last-completed fields set; the input is not modified.
    next_reminder is None for non-recurring reminders. Persisting either
    record is up to the caller.

    Logic:
    - Next due mileage = completion mileage + recurringIntervalMiles
    - Next due date = completion date + recurringIntervalMonths
    - Thresholds, description and intervals carry forward

    Raises:
        ConfigurationError: reminder is recurring but no due condition can
            be derived from its intervals.
    """
    completed_on = as_date(completion_date) if completion_date else date.today()

    # Validate before building anything so a bad config returns nothing
    check_recurrence(reminder)

    updated = replace(
        reminder,
        last_completed_mileage=completion_mileage,
        last_completed_date=completed_on,
        is_active=False,
    )
    logger.info(
        "Completed reminder %s (%s) at mileage=%s date=%s",
        reminder.id,
        reminder.service_type,
        completion_mileage,
        completed_on.isoformat(),
    )

    if not reminder.is_recurring:
        return updated, None

    due_miles = calc_next_due_miles(
        completion_mileage, reminder.recurring_interval_miles
    )
    due_date = calc_next_due_date(completed_on, reminder.recurring_interval_months)
    if due_miles is None and due_date is None:
        logger.error(
            "Reminder %s: interval miles set but no completion mileage given",
            reminder.id,
        )
        raise ConfigurationError(
            f"Cannot schedule next '{reminder.service_type}': "
            "a completion mileage is required for a mileage-only interval"
        )

    next_reminder = Reminder(
        id=new_reminder_id(),
        vehicle_id=reminder.vehicle_id,
        service_type=reminder.service_type,
        description=reminder.description,
        due_by_mileage=due_miles,
        due_by_date=due_date,
        reminder_threshold_miles=reminder.reminder_threshold_miles,
        reminder_threshold_days=reminder.reminder_threshold_days,
        is_recurring=True,
        recurring_interval_miles=reminder.recurring_interval_miles,
        recurring_interval_months=reminder.recurring_interval_months,
        is_active=True,
    )
    logger.info(
        "Scheduled next %s for vehicle %s: due_miles=%s due_date=%s",
        next_reminder.service_type,
        next_reminder.vehicle_id,
        due_miles,
        due_date.isoformat() if due_date else None,
    )
    return updated, next_reminder
