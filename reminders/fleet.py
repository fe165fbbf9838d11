"""Fleet class - vehicles and their reminders loaded together."""

from typing import Dict, List, Optional

from .classified_reminder import ClassifiedReminder
from .classifier import Now, ReminderCounts, active_reminders, classify_all, count_by_status
from .reminder import Reminder
from .vehicle import Vehicle


class Fleet:
    """A snapshot of fleet vehicles and the reminders attached to them."""

    def __init__(
        self,
        vehicles: Optional[List[Vehicle]] = None,
        reminders: Optional[List[Reminder]] = None,
    ):
        self.vehicles = vehicles or []
        self.reminders = reminders or []

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Find a vehicle by id."""
        for vehicle in self.vehicles:
            if str(vehicle.id) == str(vehicle_id):
                return vehicle
        return None

    def get_reminder(self, reminder_id: str) -> Optional[Reminder]:
        """Find a reminder by id."""
        for reminder in self.reminders:
            if str(reminder.id) == str(reminder_id):
                return reminder
        return None

    def reminders_for(self, vehicle_id: str) -> List[Reminder]:
        """Get all reminders owned by a vehicle, active or not."""
        return [r for r in self.reminders if str(r.vehicle_id) == str(vehicle_id)]

    def classify_vehicle(
        self, vehicle: Vehicle, now: Optional[Now] = None
    ) -> List[ClassifiedReminder]:
        """Classify all reminders for one vehicle, most urgent first."""
        return classify_all(vehicle, self.reminders_for(vehicle.id), now)

    def classify_active(self, now: Optional[Now] = None) -> List[ClassifiedReminder]:
        """Classify active reminders across every vehicle, most urgent first."""
        return active_reminders(self.vehicles, self.reminders, now)

    def counts_by_vehicle(self, now: Optional[Now] = None) -> Dict[str, ReminderCounts]:
        """Overdue/due-soon badge counts keyed by vehicle id."""
        return {
            v.id: count_by_status(self.classify_vehicle(v, now)) for v in self.vehicles
        }

