"""Generate synthetic multi-sensor data and print the reliability report."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from robolab.cli._common import add_verbose_flag, configure_logging, section
from robolab.config import RobolabConfig
from robolab.exceptions import RobolabConfigError
from robolab.sensing import SensorDataGenerator, SensorReport, format_summary, format_timestamp

_logger = logging.getLogger(__name__)


def run_report(config: RobolabConfig) -> list[str]:
    """Generate ``config.num_timestamps`` readings and return the full report as lines."""
    out: list[str] = [section("ROBOT MULTI-SENSOR SYSTEM"), ""]
    out.append(f"Generating sensor data for {config.num_timestamps} timestamps...")
    out.append("")

    generator = SensorDataGenerator(config.sensors, lidar_readings=config.lidar_readings, seed=config.seed)
    readings = generator.generate(config.num_timestamps)

    report = SensorReport(config.sensors)
    for assessment in report.extend(readings):
        out.extend(format_timestamp(assessment))

    out.extend(format_summary(report.summary()))
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate LIDAR, camera and IMU readings and report their quality.")
    parser.add_argument("--timestamps", "-n", type=int, help="Number of timestamps to generate")
    parser.add_argument("--lidar-readings", type=int, help="Distance samples per LIDAR scan")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    add_verbose_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    overrides: dict[str, Any] = {}
    if args.timestamps is not None:
        overrides["num_timestamps"] = args.timestamps
    if args.lidar_readings is not None:
        overrides["lidar_readings"] = args.lidar_readings
    if args.seed is not None:
        overrides["seed"] = args.seed

    try:
        config = RobolabConfig.from_env(**overrides)
    except RobolabConfigError as exc:
        parser.error(str(exc))

    _logger.debug("Running sensor report with %s", config)
    print("\n".join(run_report(config)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
