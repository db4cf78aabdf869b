"""Smoke tests for the report-style console entry points."""

from __future__ import annotations

import pytest

from robolab.cli import arm, fleet, sensors


def test_sensors_report_is_reproducible(capsys) -> None:
    assert sensors.main(["--timestamps", "3", "--seed", "11"]) == 0
    first = capsys.readouterr().out
    assert sensors.main(["--timestamps", "3", "--seed", "11"]) == 0
    second = capsys.readouterr().out

    assert first == second
    assert "=== ROBOT MULTI-SENSOR SYSTEM ===" in first
    assert "Generating sensor data for 3 timestamps..." in first
    assert first.count("Processing Timestamp:") == 3
    assert "Total Readings Processed: 9" in first


def test_sensors_rejects_bad_config() -> None:
    with pytest.raises(SystemExit):
        sensors.main(["--lidar-readings", "0"])


def test_arm_demo_output(capsys) -> None:
    assert arm.main([]) == 0
    out = capsys.readouterr().out

    assert "Trajectory points: 21" in out
    assert "Before rate filter" in out
    assert "After rate filter" in out
    assert "[0]  x = 0.8000 m | y = 0.0000 m" in out
    assert "[20]  x = -0.7598 m | y = 0.1500 m" in out
    assert "dθ1 = -1.0000 rad/s" in out


def test_arm_demo_respects_sample_count(capsys) -> None:
    assert arm.main(["--samples", "3", "--decimate", "1"]) == 0
    out = capsys.readouterr().out
    assert "Trajectory points: 3" in out
    assert "[2]  x = " in out
    assert "[3]  x = " not in out


def test_fleet_demo(capsys) -> None:
    assert fleet.main([]) == 0
    out = capsys.readouterr().out

    assert "Dispatched ROBOTAXI-001 for Jane Doe" in out
    assert "ROBOTAXI-001 is available" in out
    assert "Taxi TAXI-001 driven by John Smith" in out
