"""Payload conversion and YAML fleet file utilities."""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dateutil.parser import isoparse

from .errors import PayloadError
from .fleet import Fleet
from .reminder import Reminder
from .vehicle import Vehicle

# Reminder attribute -> camelCase key used by the UI and fleet files.
# The backend's REST payloads use the attribute names (snake_case).
REMINDER_KEYS = {
    "id": "id",
    "vehicle_id": "vehicleId",
    "service_type": "serviceType",
    "description": "description",
    "due_by_mileage": "dueByMileage",
    "due_by_date": "dueByDate",
    "reminder_threshold_miles": "reminderThresholdMiles",
    "reminder_threshold_days": "reminderThresholdDays",
    "is_recurring": "isRecurring",
    "recurring_interval_miles": "recurringIntervalMiles",
    "recurring_interval_months": "recurringIntervalMonths",
    "last_completed_date": "lastCompletedDate",
    "last_completed_mileage": "lastCompletedMileage",
    "is_active": "isActive",
}

_DATE_FIELDS = ("due_by_date", "last_completed_date")
_NUMBER_FIELDS = (
    "due_by_mileage",
    "reminder_threshold_miles",
    "reminder_threshold_days",
    "recurring_interval_miles",
    "recurring_interval_months",
    "last_completed_mileage",
)


def _get(dct: Dict[str, Any], name: str, camel: Optional[str] = None) -> Any:
    """Look up a value under its snake_case or camelCase key."""
    if name in dct:
        return dct[name]
    if camel and camel in dct:
        return dct[camel]
    return None


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date from a payload value.

    Accepts date objects (YAML loads unquoted dates this way), datetimes and
    ISO strings with or without a time part. The time part is dropped.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except ValueError as e:
        raise PayloadError(f"Invalid date: {value!r}") from e


def parse_number(value: Any) -> Optional[float]:
    """Parse an optional number. Empty values become None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise PayloadError(f"Invalid number: {value!r}")
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Invalid number: {value!r}") from e
    return int(number) if number.is_integer() else number


def parse_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def reminder_from_dict(dct: Dict[str, Any]) -> Reminder:
    """Build a Reminder from a REST payload (snake_case) or UI dict (camelCase)."""
    if not isinstance(dct, dict):
        raise PayloadError("Reminder must be an object")
    values = {name: _get(dct, name, camel) for name, camel in REMINDER_KEYS.items()}
    if values["id"] is None:
        values["id"] = dct.get("_id")

    for required in ("vehicle_id", "service_type"):
        if values[required] in (None, ""):
            raise PayloadError(f"Reminder is missing '{REMINDER_KEYS[required]}'")

    for name in _DATE_FIELDS:
        values[name] = parse_date(values[name])
    for name in _NUMBER_FIELDS:
        values[name] = parse_number(values[name])

    values["reminder_threshold_miles"] = values["reminder_threshold_miles"] or 0
    values["reminder_threshold_days"] = values["reminder_threshold_days"] or 0
    values["is_recurring"] = parse_bool(values["is_recurring"], False)
    values["is_active"] = parse_bool(values["is_active"], True)
    values["vehicle_id"] = str(values["vehicle_id"])
    if values["id"] is not None:
        values["id"] = str(values["id"])

    return Reminder(**values)


def reminder_to_dict(reminder: Reminder, camel_case: bool = False) -> Dict[str, Any]:
    """
    Serialize a Reminder for the REST API (snake_case) or a fleet file.

    Dates are written as ISO strings. None values are omitted.
    """
    d: Dict[str, Any] = {}
    for name, camel in REMINDER_KEYS.items():
        value = getattr(reminder, name)
        if value is None:
            continue
        if isinstance(value, date):
            value = value.isoformat()
        d[camel if camel_case else name] = value
    return d


def vehicle_from_dict(dct: Dict[str, Any]) -> Vehicle:
    """Build a Vehicle from a REST payload or fleet file entry."""
    if not isinstance(dct, dict):
        raise PayloadError("Vehicle must be an object")
    vehicle_id = dct.get("id", dct.get("_id"))
    if vehicle_id in (None, ""):
        raise PayloadError("Vehicle is missing 'id'")
    return Vehicle(
        str(vehicle_id),
        parse_number(_get(dct, "current_mileage", "currentMileage")) or 0,
        dct.get("make"),
        dct.get("model"),
        dct.get("year"),
    )


def vehicle_to_dict(vehicle: Vehicle) -> Dict[str, Any]:
    """Serialize a Vehicle to the fleet file format (camelCase keys)."""
    d: Dict[str, Any] = {"id": vehicle.id, "currentMileage": vehicle.current_mileage}
    if vehicle.make is not None:
        d["make"] = vehicle.make
    if vehicle.model is not None:
        d["model"] = vehicle.model
    if vehicle.year is not None:
        d["year"] = vehicle.year
    return d


def _read(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader) or {}


def _write(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load vehicles and reminders from a fleet YAML file."""
    data = _read(filename)
    vehicles = [vehicle_from_dict(v) for v in data.get("vehicles") or []]
    reminders = [reminder_from_dict(r) for r in data.get("reminders") or []]
    return Fleet(vehicles, reminders)


def dump_reminders(reminders: List[Reminder]) -> str:
    """Render reminders as a YAML list in fleet file format."""
    return yaml.dump(
        [reminder_to_dict(r, camel_case=True) for r in reminders],
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=120,
    )


def save_completion(
    filename: Union[str, Path],
    updated: Reminder,
    next_reminder: Optional[Reminder] = None,
) -> None:
    """
    Write a completed reminder back to a fleet YAML file.

    Loads the raw YAML, replaces the reminder with a matching id, appends the
    regenerated reminder (if any), and writes back to the file.
    """
    data = _read(filename)
    reminders = data.get("reminders") or []

    for i, raw in enumerate(reminders):
        if str(raw.get("id", raw.get("_id"))) == str(updated.id):
            reminders[i] = reminder_to_dict(updated, camel_case=True)
            break
    else:
        raise KeyError(f"Reminder {updated.id} not found in {filename}")

    if next_reminder is not None:
        reminders.append(reminder_to_dict(next_reminder, camel_case=True))

    data["reminders"] = reminders
    _write(filename, data)


def save_current_mileage(
    filename: Union[str, Path], vehicle_id: str, miles: float
) -> None:
    """Update one vehicle's currentMileage in a fleet YAML file."""
    data = _read(filename)

    for raw in data.get("vehicles") or []:
        if str(raw.get("id")) == str(vehicle_id):
            raw["currentMileage"] = miles
            break
    else:
        raise KeyError(f"Vehicle {vehicle_id} not found in {filename}")

    _write(filename, data)
