"""Settings read from environment variables."""

import os
from pathlib import Path

# Project root (one level up from this package)
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DISTANCE_UNITS = ("mi", "km")


def distance_unit() -> str:
    """Distance label for messages and tables. Labels only, no conversion."""
    unit = os.environ.get("REMINDERS_DISTANCE_UNIT", "mi").strip().lower()
    if unit in ("miles", "mile"):
        return "mi"
    if unit in ("kilometers", "kilometres"):
        return "km"
    return unit if unit in DISTANCE_UNITS else "mi"


def log_level() -> str:
    return os.environ.get("REMINDERS_LOG_LEVEL", "WARNING").upper()


def fleets_dir() -> Path:
    """Directory holding fleet snapshot YAML files."""
    return Path(os.environ.get("REMINDERS_FLEETS_DIR", PROJECT_ROOT / "fleets"))


def secret_key() -> str:
    return os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")
