#!/usr/bin/env python3
"""Tests for ClassifiedReminder dataclass."""
from datetime import date

import pytest

from reminders import ClassifiedReminder, Reminder, Status


@pytest.fixture
def reminder():
    return Reminder(
        id="r1",
        vehicle_id="truck-1",
        service_type="oil_change",
        due_by_mileage=50000,
        due_by_date=date(2026, 10, 27),
    )


class TestIsAlarmed:
    """Tests for ClassifiedReminder.is_alarmed."""

    @pytest.mark.parametrize("status", [Status.OVERDUE, Status.DUE_SOON])
    def test_alarmed(self, reminder, status):
        assert ClassifiedReminder(reminder=reminder, status=status).is_alarmed is True

    @pytest.mark.parametrize(
        "status", [Status.UPCOMING, Status.NO_DUE_CONDITION, Status.INACTIVE]
    )
    def test_not_alarmed(self, reminder, status):
        assert ClassifiedReminder(reminder=reminder, status=status).is_alarmed is False


class TestDescribe:
    """Tests for ClassifiedReminder.describe / message."""

    def test_overdue_by_miles(self, reminder):
        item = ClassifiedReminder(reminder, Status.OVERDUE, miles_remaining=-100, days_remaining=10)
        assert item.message == "Overdue by 100 mi"

    def test_overdue_by_days(self, reminder):
        item = ClassifiedReminder(reminder, Status.OVERDUE, miles_remaining=500, days_remaining=-3)
        assert item.message == "Overdue by 3 days"

    def test_overdue_single_day(self, reminder):
        item = ClassifiedReminder(reminder, Status.OVERDUE, days_remaining=-1)
        assert item.message == "Overdue by 1 day"

    def test_due_soon_miles_only(self, reminder):
        item = ClassifiedReminder(reminder, Status.DUE_SOON, miles_remaining=1500)
        assert item.message == "Due in 1,500 mi"

    def test_due_soon_days_only(self, reminder):
        item = ClassifiedReminder(reminder, Status.DUE_SOON, days_remaining=10)
        assert item.message == "Due in 10 days (2026-10-27)"

    def test_due_soon_both(self, reminder):
        item = ClassifiedReminder(
            reminder, Status.DUE_SOON, miles_remaining=1500, days_remaining=10
        )
        assert item.message == "Due in 1,500 mi or in 10 days (2026-10-27)"

    def test_upcoming_by_miles(self, reminder):
        item = ClassifiedReminder(reminder, Status.UPCOMING, miles_remaining=9000, days_remaining=90)
        assert item.message == "Due at 50,000 mi"

    def test_upcoming_by_date(self, reminder):
        item = ClassifiedReminder(reminder, Status.UPCOMING, days_remaining=90)
        assert item.message == "Due on 2026-10-27"

    def test_km_label(self, reminder):
        item = ClassifiedReminder(reminder, Status.DUE_SOON, miles_remaining=1500)
        assert item.describe("km") == "Due in 1,500 km"

    def test_no_due_condition(self, reminder):
        item = ClassifiedReminder(reminder, Status.NO_DUE_CONDITION)
        assert item.message == "No due condition set"

    def test_inactive(self, reminder):
        assert ClassifiedReminder(reminder, Status.INACTIVE).message == "Inactive"

    def test_due_soon_lists_only_dimensions_within_threshold(self):
        reminder = Reminder(
            "r2",
            "truck-1",
            "oil_change",
            due_by_mileage=68500,
            due_by_date=date(2026, 10, 27),
            reminder_threshold_miles=1000,
            reminder_threshold_days=14,
        )
        item = ClassifiedReminder(
            reminder, Status.DUE_SOON, miles_remaining=20000, days_remaining=10
        )
        assert item.message == "Due in 10 days (2026-10-27)"

    def test_due_soon_both_within_threshold(self):
        reminder = Reminder(
            "r2",
            "truck-1",
            "oil_change",
            due_by_mileage=50000,
            due_by_date=date(2026, 10, 27),
            reminder_threshold_miles=2000,
            reminder_threshold_days=14,
        )
        item = ClassifiedReminder(
            reminder, Status.DUE_SOON, miles_remaining=1500, days_remaining=10
        )
        assert item.message == "Due in 1,500 mi or in 10 days (2026-10-27)"
