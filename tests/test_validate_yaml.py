#!/usr/bin/env python3
"""Tests for validate_yaml schema validation."""

from validate_yaml import load_schema, main, validate_fleet_file

VALID = """
vehicles:
  - id: truck-1
    currentMileage: 48500

reminders:
  - id: oil-1
    vehicleId: truck-1
    serviceType: oil_change
    dueByMileage: 50000
    isRecurring: true
    recurringIntervalMiles: 5000
"""


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        assert isinstance(load_schema(), dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "vehicles" in schema["properties"]
        assert "reminders" in schema["properties"]


class TestValidateFleetFile:
    """Tests for validate_fleet_file function."""

    def test_valid_minimal_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text(VALID)
        assert validate_fleet_file(path, load_schema()) == []

    def test_missing_required_field_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID.replace("    serviceType: oil_change\n", ""))
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)

    def test_unknown_field_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID + "    colour: red\n")
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)

    def test_recurring_without_interval(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID.replace("    recurringIntervalMiles: 5000\n", ""))
        errors = validate_fleet_file(path, load_schema())
        assert len(errors) == 1
        assert "recurringIntervalMiles" in errors[0]

    def test_unquoted_dates_are_valid(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text(
            VALID
            + "    dueByDate: 2027-01-01\n"
            + "    lastCompletedDate: 2026-07-01\n"
        )
        assert validate_fleet_file(path, load_schema()) == []

    def test_malformed_date_still_rejected(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID + "    dueByDate: next spring\n")
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)

    def test_unknown_vehicle(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID.replace("vehicleId: truck-1", "vehicleId: bus-9"))
        errors = validate_fleet_file(path, load_schema())
        assert errors == ["Reminder 0: unknown vehicleId 'bus-9'"]

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("vehicles: [unclosed\n")
        errors = validate_fleet_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        errors = validate_fleet_file(tmp_path / "does_not_exist.yaml", load_schema())
        assert len(errors) == 1
        assert errors[0].startswith("Error:")


class TestMain:
    """Tests for validating a whole fleets directory."""

    def test_all_valid(self, tmp_path, monkeypatch, capsys):
        (tmp_path / "a.yaml").write_text(VALID)
        monkeypatch.setenv("REMINDERS_FLEETS_DIR", str(tmp_path))
        assert main() == 0
        assert "OK: a.yaml" in capsys.readouterr().out

    def test_one_invalid(self, tmp_path, monkeypatch, capsys):
        (tmp_path / "a.yaml").write_text(VALID)
        (tmp_path / "b.yml").write_text("vehicles: []\n")
        monkeypatch.setenv("REMINDERS_FLEETS_DIR", str(tmp_path))
        assert main() == 1
        assert "FAIL: b.yml" in capsys.readouterr().out

    def test_missing_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REMINDERS_FLEETS_DIR", str(tmp_path / "nope"))
        assert main() == 1

    def test_bundled_demo_fleet_is_valid(self, monkeypatch, capsys):
        monkeypatch.delenv("REMINDERS_FLEETS_DIR", raising=False)
        assert main() == 0
