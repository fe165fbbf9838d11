"""
Maintenance reminder status engine.

This package classifies scheduled vehicle services and regenerates
recurring ones:
- Status: Urgency levels (OVERDUE, DUE_SOON, UPCOMING, etc.)
- Vehicle: Odometer snapshot reminders are checked against
- Reminder: A scheduled service with mileage and/or date due conditions
- ClassifiedReminder: Calculated status for one reminder
- Fleet: Vehicles and reminders loaded together
- classify / classify_all: Status Classifier
- complete_and_regenerate: Recurrence Generator
"""

from .status import Status
from .errors import ReminderError, ConfigurationError, PayloadError
from .vehicle import Vehicle
from .reminder import Reminder
from .classified_reminder import ClassifiedReminder
from .calculations import (
    calc_remaining_miles,
    calc_remaining_days,
    calc_next_due_miles,
    calc_next_due_date,
    check_status,
)
from .classifier import (
    ReminderCounts,
    classify,
    classify_reminder,
    classify_all,
    count_by_status,
    active_reminders,
    badge_counts,
    active_reminder_count,
)
from .recurrence import check_recurrence, complete_and_regenerate
from .fleet import Fleet
from .loader import (
    load_fleet,
    reminder_from_dict,
    reminder_to_dict,
    vehicle_from_dict,
    vehicle_to_dict,
    save_completion,
    save_current_mileage,
)

__all__ = [
    "Status",
    "ReminderError",
    "ConfigurationError",
    "PayloadError",
    "Vehicle",
    "Reminder",
    "ClassifiedReminder",
    "calc_remaining_miles",
    "calc_remaining_days",
    "calc_next_due_miles",
    "calc_next_due_date",
    "check_status",
    "ReminderCounts",
    "classify",
    "classify_reminder",
    "classify_all",
    "count_by_status",
    "active_reminders",
    "badge_counts",
    "active_reminder_count",
    "check_recurrence",
    "complete_and_regenerate",
    "Fleet",
    "load_fleet",
    "reminder_from_dict",
    "reminder_to_dict",
    "vehicle_from_dict",
    "vehicle_to_dict",
    "save_completion",
    "save_current_mileage",
]
