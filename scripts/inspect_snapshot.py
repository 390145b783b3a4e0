#!/usr/bin/env python3
"""Inspect a recorded Limelight telemetry dump.

Loads a flat JSON dump of the sensor's table, prints the derived target
quantities and dashboard values, and optionally toggles the pipeline or runs
the LED self-test against the loaded table.
"""

from __future__ import annotations

import argparse
import asyncio
import math
import sys
from pathlib import Path

from limelight_tracker.core.config import get_settings
from limelight_tracker.core.exceptions import LimelightTrackerError
from limelight_tracker.core.logging import get_logger, setup_logging
from limelight_tracker.diagnostics.reporter import DiagnosticsReporter
from limelight_tracker.diagnostics.self_test import check_connections
from limelight_tracker.telemetry.store import InMemoryTelemetryStore
from limelight_tracker.vision.estimator import VisionEstimator

logger = get_logger(__name__)


def describe_target(estimator: VisionEstimator) -> list[str]:
    """Summarize the target quantities derived from the table.

    Args:
        estimator: Estimator bound to the loaded table

    Returns:
        Printable lines
    """
    snapshot = estimator.read_snapshot()
    if not snapshot.has_target:
        return [f"No target (pipeline {estimator.pipeline_mode()})"]

    lines = [
        f"Pipeline          : {snapshot.pipeline}",
        f"Skew              : {estimator.skew():.2f} deg",
        f"Area              : {estimator.target_area():.2f} %",
        f"Looking left      : {estimator.is_looking_left()}",
    ]

    target_id = estimator.target_id()
    if target_id is not None:
        lines.append(f"Fiducial id       : {target_id:.0f}")

    transform = estimator.pose_transform()
    lines.append(
        "Pose transform    : "
        f"({transform.translation.x:.2f}, {transform.translation.y:.2f}) "
        f"@ {transform.rotation.degrees:.1f} deg"
    )

    distance = estimator.forward_distance()
    if not math.isnan(distance):
        band = estimator.distance_model.band_for(estimator.vertical_offset())
        lines.append(f"Distance band     : {band.value if band else 'out of range'}")
    return lines


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Inspect a Limelight telemetry dump")
    parser.add_argument("dump", type=Path, help="JSON file with the table's fields")
    parser.add_argument("--toggle-pipeline", action="store_true", help="Toggle pipeline first")
    parser.add_argument("--self-test", action="store_true", help="Run the LED self-test")
    parser.add_argument("--save", type=Path, help="Write the table back out after changes")
    parser.add_argument("--log-level", default=None, help="Override log level")

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(
        args.log_level or settings.logging.level,
        settings.logging.file,
        settings.logging.repeat_interval_s,
    )

    try:
        store = InMemoryTelemetryStore.from_json(args.dump)
        estimator = VisionEstimator(
            store,
            telemetry=settings.telemetry,
            distance=settings.distance,
            self_test=settings.self_test,
        )

        for name, ok in check_connections(estimator).items():
            print(f"{name}: {'connected' if ok else 'MISSING'}")

        if args.toggle_pipeline:
            estimator.toggle_pipeline_mode()
            logger.info("Pipeline now %d", estimator.pipeline_mode())

        if args.self_test:
            asyncio.run(estimator.test_routine())

        print()
        for line in describe_target(estimator):
            print(line)

        print()
        reporter = DiagnosticsReporter(estimator)
        print(f"[{reporter.dashboard_type}]")
        for line in reporter.format_lines():
            print(line)

        if args.save:
            store.to_json(args.save)
            logger.info("Saved table to %s", args.save)

    except LimelightTrackerError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
