#!/usr/bin/env python3
"""Validate fleet YAML files against the schema."""
import sys
from datetime import date
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError

from reminders import ReminderError, check_recurrence, reminder_from_dict
from reminders import config


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def dates_to_iso(value):
    """Render YAML-native dates as ISO strings, as the loader accepts both."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: dates_to_iso(v) for k, v in value.items()}
    if isinstance(value, list):
        return [dates_to_iso(v) for v in value]
    return value


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = dates_to_iso(yaml.safe_load(f))
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
        return errors
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
        return errors
    except OSError as e:
        errors.append(f"Error: {e}")
        return errors

    # Checks the schema can't express
    vehicle_ids = {str(v["id"]) for v in data.get("vehicles") or []}
    for i, raw in enumerate(data.get("reminders") or []):
        try:
            reminder = reminder_from_dict(raw)
            check_recurrence(reminder)
        except ReminderError as e:
            errors.append(f"Reminder {i}: {e}")
            continue
        if reminder.vehicle_id not in vehicle_ids:
            errors.append(f"Reminder {i}: unknown vehicleId '{reminder.vehicle_id}'")
    return errors


def main():
    """Validate all fleet YAML files in the fleets directory."""
    schema = load_schema()
    fleets_dir = config.fleets_dir()

    if not fleets_dir.exists():
        print(f"Error: fleets directory not found: {fleets_dir}")
        return 1

    yaml_files = list(fleets_dir.glob("*.yaml")) + list(fleets_dir.glob("*.yml"))

    if not yaml_files:
        print(f"Warning: No YAML files found in {fleets_dir}")
        return 0

    all_valid = True
    for filepath in sorted(yaml_files):
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
