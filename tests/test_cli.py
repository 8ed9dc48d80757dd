"""Tests for CLI module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from schedule_validator.cli import app
from schedule_validator.data.presets import get_preset_data
from schedule_validator.settings import reset_settings


runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


def write_json(path: Path, data) -> Path:
    with open(path, "w") as f:
        json.dump(data, f)
    return path


@pytest.fixture
def config_file(tmp_path) -> Path:
    return write_json(tmp_path / "config.json", get_preset_data("standard"))


@pytest.fixture
def new_config_file(tmp_path) -> Path:
    data = get_preset_data("standard")
    data["workingDays"] = [1, 3, 4, 5]
    del data["breakSlots"]["2"]
    return write_json(tmp_path / "new.json", data)


@pytest.fixture
def schedules_file(tmp_path) -> Path:
    return write_json(tmp_path / "schedules.json", [
        {"id": 1, "dayOfWeek": 1, "startTime": "07:00", "endTime": "07:45", "teacherId": 5},
        {"id": 2, "dayOfWeek": 2, "startTime": "07:00", "endTime": "07:45", "teacherId": 5},
    ])


class TestSlotsCommand:
    """Tests for the slots command."""

    def test_all_days(self, config_file):
        result = runner.invoke(app, ["slots", str(config_file)])
        assert result.exit_code == 0
        assert "Monday" in result.output
        assert "Friday" in result.output

    def test_single_day(self, config_file):
        result = runner.invoke(app, ["slots", str(config_file), "--day", "2"])
        assert result.exit_code == 0
        assert "Tuesday" in result.output
        assert "Monday" not in result.output
        assert "07:00-07:45" in result.output

    def test_non_working_day(self, config_file):
        result = runner.invoke(app, ["slots", str(config_file), "-d", "6"])
        assert result.exit_code == 1
        assert "not a working day" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["slots", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error loading configuration" in result.output

    def test_storage_days(self, tmp_path):
        data = get_preset_data("standard")
        data["workingDays"] = [0]
        data["breakSlots"] = {"0": data["breakSlots"]["1"]}
        path = write_json(tmp_path / "sunday.json", data)

        result = runner.invoke(app, ["--storage-days", "slots", str(path)])

        assert result.exit_code == 0
        assert "Sunday" in result.output


class TestGridCommand:
    """Tests for the grid command."""

    def test_grid(self, config_file):
        result = runner.invoke(app, ["grid", str(config_file), "--day", "1"])
        assert result.exit_code == 0
        assert "RECREO" in result.output
        assert "Instructional minutes:" in result.output

    def test_day_required(self, config_file):
        result = runner.invoke(app, ["grid", str(config_file)])
        assert result.exit_code != 0


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid_config(self, config_file):
        result = runner.invoke(app, ["check", str(config_file)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Class duration: 45 min" in result.output

    def test_legacy_config(self, tmp_path):
        path = write_json(tmp_path / "legacy.json", get_preset_data("legacy"))
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 0

    def test_invalid_config(self, tmp_path):
        data = get_preset_data("standard")
        data["startTime"] = "18:00"
        path = write_json(tmp_path / "bad.json", data)

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "Error loading configuration" in result.output

    def test_stray_day_warning(self, tmp_path):
        data = get_preset_data("standard")
        data["breakSlots"]["6"] = data["breakSlots"]["1"]
        path = write_json(tmp_path / "stray.json", data)

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0
        assert "non-working days" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_unchanged(self, config_file, schedules_file):
        result = runner.invoke(app, ["validate", str(config_file), str(config_file), str(schedules_file)])
        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_affected(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, ["validate", str(config_file), str(new_config_file), str(schedules_file)])
        assert result.exit_code == 1
        assert "1 AFFECTED" in result.output
        assert "Outside working days" in result.output

    def test_json_format(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, [
            "validate", str(config_file), str(new_config_file), str(schedules_file),
            "--format", "json",
        ])
        assert result.exit_code == 1
        assert '"isValid": false' in result.output
        assert '"workingDaysChanged": true' in result.output

    def test_report_format(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, [
            "validate", str(config_file), str(new_config_file), str(schedules_file),
            "-f", "report",
        ])
        assert result.exit_code == 1
        assert "SCHEDULE CONFIGURATION CHANGE REPORT" in result.output

    def test_bad_schedules(self, config_file, tmp_path):
        path = write_json(tmp_path / "bad.json", {"nope": 1})
        result = runner.invoke(app, ["validate", str(config_file), str(config_file), str(path)])
        assert result.exit_code == 1
        assert "Error loading schedules" in result.output


class TestSuggestCommand:
    """Tests for the suggest command."""

    def test_adjust(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, ["suggest", str(config_file), str(new_config_file), str(schedules_file)])
        assert result.exit_code == 0
        assert "UPDATE #2 TUE 07:00-07:45 -> MON 07:00-07:45" in result.output

    def test_delete(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, [
            "suggest", str(config_file), str(new_config_file), str(schedules_file),
            "--action", "delete",
        ])
        assert result.exit_code == 0
        assert "DELETE #2 Tuesday 07:00-07:45" in result.output

    def test_json(self, config_file, new_config_file, schedules_file):
        result = runner.invoke(app, [
            "suggest", str(config_file), str(new_config_file), str(schedules_file),
            "--json", "--scope", "same_day",
        ])
        assert result.exit_code == 0
        assert '"action": "update"' in result.output

    @pytest.fixture
    def assembly_files(self, tmp_path) -> tuple[Path, Path, Path]:
        """Tuesday opens with an assembly; one Monday class starts too early."""
        new = {
            "sectionId": 1,
            "workingDays": [1, 2],
            "startTime": "07:00",
            "endTime": "10:00",
            "classDuration": 45,
            "breakSlots": {"2": [{"start": "07:00", "end": "07:45", "label": "ASAMBLEA", "type": "activity"}]},
        }
        old = dict(new, startTime="06:00")
        return (
            write_json(tmp_path / "old.json", old),
            write_json(tmp_path / "new.json", new),
            write_json(tmp_path / "early.json", [
                {"id": 1, "dayOfWeek": 1, "startTime": "06:00", "endTime": "06:45"},
            ]),
        )

    def test_scope_defaults_to_all_days(self, assembly_files):
        result = runner.invoke(app, ["suggest", *map(str, assembly_files)])
        assert result.exit_code == 0
        assert "UPDATE #1 MON 06:00-06:45 -> MON 07:45-08:30" in result.output

    def test_scope_from_environment(self, assembly_files, monkeypatch):
        monkeypatch.setenv("SCHEDULE_VALIDATOR_SUGGESTION_SCOPE", "same_day")
        result = runner.invoke(app, ["suggest", *map(str, assembly_files)])
        assert result.exit_code == 0
        assert "UPDATE #1 MON 06:00-06:45 -> MON 07:00-07:45" in result.output

    def test_scope_option_overrides_environment(self, assembly_files, monkeypatch):
        monkeypatch.setenv("SCHEDULE_VALIDATOR_SUGGESTION_SCOPE", "same_day")
        result = runner.invoke(app, ["suggest", *map(str, assembly_files), "--scope", "all_days"])
        assert result.exit_code == 0
        assert "MON 07:45-08:30" in result.output

    def test_nothing_to_change(self, config_file, schedules_file):
        result = runner.invoke(app, ["suggest", str(config_file), str(config_file), str(schedules_file)])
        assert result.exit_code == 0
        assert "Nothing to change" in result.output


class TestConvertCommand:
    """Tests for the convert command."""

    def test_writes_per_day(self, tmp_path):
        source = write_json(tmp_path / "legacy.json", get_preset_data("legacy"))
        target = tmp_path / "out" / "config.json"

        result = runner.invoke(app, ["convert", str(source), "-o", str(target)])

        assert result.exit_code == 0
        assert target.exists()
        with open(target) as f:
            data = json.load(f)
        assert sorted(data["breakSlots"]) == ["1", "2", "3", "4", "5"]
        assert data["breakSlots"]["3"][0]["label"] == "RECREO"

    def test_prints_json(self, config_file):
        result = runner.invoke(app, ["convert", str(config_file)])
        assert result.exit_code == 0
        assert '"breakSlots"' in result.output


class TestConflictsCommand:
    """Tests for the conflicts command."""

    def test_no_conflicts(self, schedules_file):
        result = runner.invoke(app, ["conflicts", str(schedules_file)])
        assert result.exit_code == 0
        assert "No conflicts found" in result.output

    def test_conflict(self, tmp_path):
        path = write_json(tmp_path / "clash.json", [
            {"id": 1, "dayOfWeek": 1, "startTime": "07:00", "endTime": "07:45", "teacherId": 5},
            {"id": 2, "dayOfWeek": 1, "startTime": "07:30", "endTime": "08:15", "teacherId": 5},
        ])
        result = runner.invoke(app, ["conflicts", str(path)])
        assert result.exit_code == 1
        assert "teacher" in result.output


class TestPresetsCommand:
    """Tests for the presets command."""

    def test_list(self):
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        for name in ("standard", "complex", "intensive", "legacy"):
            assert name in result.output

    def test_show(self):
        result = runner.invoke(app, ["presets", "complex", "--section", "7"])
        assert result.exit_code == 0
        assert '"sectionId": 7' in result.output
        assert "CLASE ESPECIAL" in result.output

    def test_unknown(self):
        result = runner.invoke(app, ["presets", "weekend"])
        assert result.exit_code == 1
        assert "Unknown preset" in result.output
