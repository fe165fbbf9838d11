#!/usr/bin/env python3
"""
Unified CLI for fleet maintenance reminders.

Commands:
  status       - Show which reminders are overdue, due soon, or upcoming
  counts       - Show overdue/due-soon badge counts per vehicle
  complete     - Mark a reminder complete and schedule the next one
  update-miles - Update a vehicle's current mileage
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

import yaml

from reminders import (
    ClassifiedReminder,
    ReminderError,
    Status,
    complete_and_regenerate,
    load_fleet,
    save_completion,
    save_current_mileage,
)
from reminders import config
from reminders.loader import dump_reminders, parse_date
from reminders.log import setup_logging

# =============================================================================
# Formatting helpers
# =============================================================================


def format_miles(miles: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{miles:,.0f}" if miles is not None else "-"


def format_remaining(item: ClassifiedReminder) -> str:
    """Format remaining miles for display."""
    if item.miles_remaining is None:
        return "-"
    if item.miles_remaining < 0:
        return f"-{abs(item.miles_remaining):,.0f}"
    return f"{item.miles_remaining:,.0f}"


def format_time_remaining(item: ClassifiedReminder) -> str:
    """Format remaining time for display (e.g., '3mo 15d' or '-2mo 5d')."""
    if item.days_remaining is None:
        return "-"

    days = abs(item.days_remaining)
    sign = "-" if item.days_remaining < 0 else ""
    months = days // 30
    remaining_days = days % 30
    if months > 0:
        return f"{sign}{months}mo {remaining_days}d"
    return f"{sign}{days}d"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def mileage(value: str) -> float:
    """argparse type for odometer readings; whole numbers stay ints."""
    number = float(value)
    return int(number) if number.is_integer() else number


def parse_as_of(value: Optional[str]) -> date:
    """Parse the --as-of / --date option, defaulting to today."""
    return parse_date(value) if value else date.today()


# =============================================================================
# Status command
# =============================================================================


def make_status_table(items: List[ClassifiedReminder], unit: str = "mi") -> List[List[str]]:
    """Convert classified reminders to table rows."""
    rows = []
    for item in items:
        reminder = item.reminder
        rows.append(
            [
                reminder.id or "-",
                truncate(reminder.service_type),
                format_miles(reminder.due_by_mileage),
                reminder.due_by_date.isoformat() if reminder.due_by_date else "-",
                format_remaining(item),
                format_time_remaining(item),
                item.describe(unit),
            ]
        )
    return rows


STATUS_SECTIONS = [Status.OVERDUE, Status.DUE_SOON, Status.UPCOMING]


def cmd_status(args):
    """Show which reminders are overdue, due soon, or upcoming."""
    fleet = load_fleet(args.fleet_file)
    now = parse_as_of(args.as_of)
    unit = config.distance_unit()

    vehicles = fleet.vehicles
    if args.vehicle:
        vehicle = fleet.get_vehicle(args.vehicle)
        if vehicle is None:
            print(f"Error: Unknown vehicle '{args.vehicle}'")
            return 1
        vehicles = [vehicle]

    headers = [
        "ID",
        "Service",
        f"Due ({unit})",
        "Due (date)",
        f"Remaining ({unit})",
        "Remaining (time)",
        "Message",
    ]

    for vehicle in vehicles:
        classified = fleet.classify_vehicle(vehicle, now)

        # Header
        print(f"Vehicle: {vehicle.name}")
        print(f"Current mileage: {vehicle.current_mileage:,.0f} {unit} (as of {now.isoformat()})")
        print(f"Reminders: {len(classified)}")
        print()

        for status in STATUS_SECTIONS:
            group = [c for c in classified if c.status == status]
            if group:
                print(f"{status.label.upper()}:")
                print(tabulate(make_status_table(group, unit), headers=headers, tablefmt="simple"))
                print()

        no_due = [c for c in classified if c.status == Status.NO_DUE_CONDITION]
        if no_due:
            print("NO DUE CONDITION:")
            for item in no_due:
                print(f"  {item.reminder.service_type}")
            print()

        inactive = [c for c in classified if c.status == Status.INACTIVE]
        if inactive:
            if args.all:
                print("INACTIVE:")
                for item in inactive:
                    print(f"  {item.reminder.service_type}")
            else:
                print(f"INACTIVE: {len(inactive)} (use --all to list)")
            print()

    return 0


# =============================================================================
# Counts command
# =============================================================================


def cmd_counts(args):
    """Show overdue/due-soon badge counts per vehicle and for the fleet."""
    fleet = load_fleet(args.fleet_file)
    now = parse_as_of(args.as_of)

    counts = fleet.counts_by_vehicle(now)
    rows = []
    for vehicle in fleet.vehicles:
        c = counts[vehicle.id]
        rows.append([vehicle.id, vehicle.name, c.overdue, c.due_soon, c.total])

    overdue = sum(c.overdue for c in counts.values())
    due_soon = sum(c.due_soon for c in counts.values())
    rows.append(["", "Fleet total", overdue, due_soon, overdue + due_soon])

    headers = ["ID", "Vehicle", "Overdue", "Due Soon", "Active"]
    print(f"As of: {now.isoformat()}")
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Complete command
# =============================================================================


def cmd_complete(args):
    """Mark a reminder complete and schedule the next occurrence."""
    fleet = load_fleet(args.fleet_file)

    reminder = fleet.get_reminder(args.reminder_id)
    if reminder is None:
        print(f"Error: Unknown reminder '{args.reminder_id}'")
        return 1
    if not reminder.is_active:
        print(f"Error: Reminder '{args.reminder_id}' is already inactive")
        return 1

    completion_date = parse_as_of(args.date)
    updated, next_reminder = complete_and_regenerate(
        reminder, args.mileage, completion_date
    )

    # Show what will be saved
    print(f"Completing reminder in {args.fleet_file}:")
    print(f"  Service: {reminder.service_type}")
    print(f"  Date:    {completion_date.isoformat()}")
    if args.mileage is not None:
        print(f"  Mileage: {args.mileage:,.0f}")
    print()
    if next_reminder is not None:
        print("Next reminder:")
        print(dump_reminders([next_reminder]))
    else:
        print("Not recurring - no new reminder.")
        print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_completion(args.fleet_file, updated, next_reminder)
    print("Reminder saved.")
    return 0


# =============================================================================
# Update Miles command
# =============================================================================


def cmd_update_miles(args):
    """Update a vehicle's current mileage."""
    fleet = load_fleet(args.fleet_file)
    vehicle = fleet.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle_id}'")
        return 1

    # Show what will be updated
    print(f"Vehicle: {vehicle.name}")
    print(f"Current mileage: {vehicle.current_mileage:,.0f}")
    print(f"New mileage:     {args.mileage:,.0f}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_current_mileage(args.fleet_file, vehicle.id, args.mileage)
    print("Mileage updated.")
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fleet maintenance reminders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/demo.yaml status
  %(prog)s fleets/demo.yaml status --vehicle truck-1 --all
  %(prog)s fleets/demo.yaml status --as-of 2026-12-01
  %(prog)s fleets/demo.yaml counts
  %(prog)s fleets/demo.yaml complete oil-1 --mileage 50000 --date 2026-10-17
  %(prog)s fleets/demo.yaml update-miles truck-1 51200
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: REMINDERS_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="Show which reminders are overdue, due soon, or upcoming"
    )
    status_parser.add_argument(
        "--vehicle",
        type=str,
        help="Only show reminders for this vehicle id",
    )
    status_parser.add_argument(
        "--as-of",
        type=str,
        help="Classify as of date YYYY-MM-DD (default: today)",
    )
    status_parser.add_argument(
        "--all",
        action="store_true",
        help="List inactive reminders too",
    )

    # Counts subcommand
    counts_parser = subparsers.add_parser(
        "counts", help="Show overdue/due-soon counts per vehicle"
    )
    counts_parser.add_argument(
        "--as-of",
        type=str,
        help="Classify as of date YYYY-MM-DD (default: today)",
    )

    # Complete subcommand
    complete_parser = subparsers.add_parser(
        "complete", help="Mark a reminder complete and schedule the next one"
    )
    complete_parser.add_argument(
        "reminder_id",
        type=str,
        help="Reminder id",
    )
    complete_parser.add_argument(
        "--mileage",
        type=mileage,
        help="Odometer reading at time of service",
    )
    complete_parser.add_argument(
        "--date",
        type=str,
        help="Service date in YYYY-MM-DD format (default: today)",
    )
    complete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    # Update Miles subcommand
    update_miles_parser = subparsers.add_parser(
        "update-miles", help="Update a vehicle's current mileage"
    )
    update_miles_parser.add_argument(
        "vehicle_id",
        type=str,
        help="Vehicle id",
    )
    update_miles_parser.add_argument(
        "mileage",
        type=mileage,
        help="Current mileage",
    )
    update_miles_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without saving",
    )

    return parser


COMMANDS = {
    "status": cmd_status,
    "counts": cmd_counts,
    "complete": cmd_complete,
    "update-miles": cmd_update_miles,
}


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    try:
        return COMMANDS[args.command](args)
    except (ReminderError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
