"""Flask JSON API exposing reminder classification and completion."""

from datetime import date

from flask import Flask, jsonify, request

from reminders import (
    ClassifiedReminder,
    ConfigurationError,
    PayloadError,
    classify_all,
    complete_and_regenerate,
    count_by_status,
    reminder_from_dict,
    reminder_to_dict,
    vehicle_from_dict,
    vehicle_to_dict,
)
from reminders import config
from reminders.loader import parse_date, parse_number
from reminders.log import setup_logging

app = Flask(__name__)
app.secret_key = config.secret_key()
setup_logging()


def classified_to_dict(item: ClassifiedReminder, unit: str) -> dict:
    """Serialize a classified reminder for the UI."""
    return {
        "reminder": reminder_to_dict(item.reminder),
        "status": item.status.name.lower(),
        "miles_remaining": item.miles_remaining,
        "days_remaining": item.days_remaining,
        "message": item.describe(unit),
        "is_alarmed": item.is_alarmed,
    }


def get_json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise PayloadError("Request body must be a JSON object")
    return body


@app.errorhandler(PayloadError)
def handle_payload_error(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(ConfigurationError)
def handle_configuration_error(e):
    return jsonify({"error": str(e)}), 422


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/classify", methods=["POST"])
def classify_reminders():
    """Classify a vehicle's reminders, most urgent first, with badge counts."""
    body = get_json_body()
    if "vehicle" not in body:
        raise PayloadError("Missing 'vehicle'")

    vehicle = vehicle_from_dict(body["vehicle"])
    raw_reminders = body.get("reminders") or []
    if not isinstance(raw_reminders, list):
        raise PayloadError("'reminders' must be a list")
    reminders = [reminder_from_dict(r) for r in raw_reminders]
    now = parse_date(body.get("now")) or date.today()
    unit = config.distance_unit()

    classified = classify_all(vehicle, reminders, now)
    counts = count_by_status(classified)

    return jsonify({
        "vehicle": vehicle_to_dict(vehicle),
        "now": now.isoformat(),
        "reminders": [classified_to_dict(c, unit) for c in classified],
        "overdue": counts.overdue,
        "due_soon": counts.due_soon,
        "active_count": counts.total,
    })


@app.route("/complete", methods=["POST"])
def complete_reminder():
    """Retire a completed reminder and return its next occurrence, if any."""
    body = get_json_body()
    if "reminder" not in body:
        raise PayloadError("Missing 'reminder'")

    reminder = reminder_from_dict(body["reminder"])
    mileage = parse_number(body.get("completionMileage", body.get("completion_mileage")))
    completed_on = parse_date(
        body.get("completionDate", body.get("completion_date"))
    ) or date.today()

    updated, next_reminder = complete_and_regenerate(reminder, mileage, completed_on)

    return jsonify({
        "updated": reminder_to_dict(updated),
        "next": reminder_to_dict(next_reminder) if next_reminder else None,
    })


if __name__ == "__main__":
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
