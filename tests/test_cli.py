"""
Tests for the beacon-cli entry point.
"""

import json
import logging

from beacon_cli.cli import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, main
from beacon_zone.logging import LogEvent


def _stdout_json(capsys):
    return json.loads(capsys.readouterr().out.strip())


def test_count_row(sample_report_path, capsys):
    assert main(["count-row", str(sample_report_path), "--row", "10"]) == EXIT_OK
    assert _stdout_json(capsys) == {"row": 10, "covered": 26}


def test_bbox(sample_report_path, capsys):
    assert main(["bbox", str(sample_report_path)]) == EXIT_OK
    assert _stdout_json(capsys) == {"min_x": -8, "min_y": -10, "max_x": 28, "max_y": 26}


def test_find_gap(sample_report_path, capsys):
    argv = ["find-gap", str(sample_report_path), "--bounds", "0", "0", "20", "20", "--strategy", "step"]
    assert main(argv) == EXIT_OK
    assert _stdout_json(capsys) == {"x": 14, "y": 11}


def test_tuning_frequency_from_config(sample_report_path, tmp_path, capsys):
    config = tmp_path / "engine.yaml"
    config.write_text("search:\n  max_x: 20\n  max_y: 20\n")
    argv = ["--config", str(config), "tuning-frequency", str(sample_report_path)]
    assert main(argv) == EXIT_OK
    assert _stdout_json(capsys) == {"x": 14, "y": 11, "tuning_frequency": 56_000_011}


def test_find_gap_not_found(sample_report_path, capsys):
    argv = ["find-gap", str(sample_report_path), "--bounds", "0", "0", "13", "10"]
    assert main(argv) == EXIT_NOT_FOUND
    assert _stdout_json(capsys) == {"found": False, "bounds": [0, 0, 13, 10]}


def test_missing_report(tmp_path, capsys):
    assert main(["bbox", str(tmp_path / "missing.txt")]) == EXIT_ERROR
    assert "not found" in capsys.readouterr().err


def test_malformed_report(tmp_path, capsys):
    report = tmp_path / "bad.txt"
    report.write_text("Sensor somewhere\n")
    assert main(["bbox", str(report)]) == EXIT_ERROR
    assert "line 1" in capsys.readouterr().err


def test_empty_report(tmp_path, capsys):
    report = tmp_path / "empty.txt"
    report.write_text("")
    assert main(["bbox", str(report)]) == EXIT_ERROR
    assert "at least one sensor" in capsys.readouterr().err


def test_invalid_config(sample_report_path, tmp_path, capsys):
    config = tmp_path / "engine.yaml"
    config.write_text("search:\n  strategy: jump\n")
    assert main(["--config", str(config), "bbox", str(sample_report_path)]) == EXIT_ERROR
    assert "Invalid strategy" in capsys.readouterr().err


def test_malformed_config(sample_report_path, tmp_path, capsys):
    config = tmp_path / "engine.yaml"
    config.write_text("search: [unclosed\n")
    assert main(["--config", str(config), "bbox", str(sample_report_path)]) == EXIT_ERROR
    assert "Invalid YAML" in capsys.readouterr().err


def test_not_found_logs_warning(sample_report_path, caplog):
    argv = ["find-gap", str(sample_report_path), "--bounds", "0", "0", "13", "10"]
    with caplog.at_level(logging.WARNING, logger="beacon_zone.cli"):
        assert main(argv) == EXIT_NOT_FOUND

    entries = [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == "beacon_zone.cli"
    ]
    [entry] = [e for e in entries if e["event"] == LogEvent.SEARCH_EXHAUSTED.value]
    assert entry["level"] == "WARNING"
    assert entry["metadata"] == {"bounds": [0, 0, 13, 10]}


def test_engine_logs_under_environment_component(sample_report_path, caplog):
    caplog.set_level(logging.DEBUG, logger="beacon_zone.environment")
    assert main(["--log-level", "DEBUG", "count-row", str(sample_report_path), "--row", "10"]) == EXIT_OK

    components = {
        json.loads(record.getMessage())["component"]
        for record in caplog.records
        if record.name == "beacon_zone.environment"
    }
    assert components == {"environment"}


def test_no_command(capsys):
    assert main([]) == EXIT_ERROR
