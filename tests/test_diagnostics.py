"""Tests for dashboard diagnostics and the self-test routine."""

from __future__ import annotations

import asyncio
import math
from typing import Any

import pytest

from limelight_tracker.core.types import LedMode
from limelight_tracker.diagnostics.reporter import (
    DiagnosticsBuilder,
    DiagnosticsReporter,
    PropertyKind,
)
from limelight_tracker.diagnostics.self_test import blink_indicator, check_connections
from limelight_tracker.telemetry.store import InMemoryTelemetryStore
from limelight_tracker.vision.estimator import VisionEstimator


class RecordingStore(InMemoryTelemetryStore):
    """Store that remembers every numeric write."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        super().__init__(values)
        self.writes: list[tuple[str, float]] = []

    def set_number(self, key: str, value: float) -> None:
        self.writes.append((key, value))
        super().set_number(key, value)


class TestDiagnosticsReporter:
    """Tests for polled dashboard properties."""

    def test_registered_properties(self, estimator: VisionEstimator) -> None:
        reporter = DiagnosticsReporter(estimator)
        assert reporter.dashboard_type == "Limelight"
        assert reporter.property_names == [
            "Has Targets",
            "Horizontal Offset",
            "Vertical Offset",
            "Forward Distance From Target",
            "Current Pipeline",
        ]

    def test_poll_values(self, estimator: VisionEstimator) -> None:
        values = DiagnosticsReporter(estimator).poll()
        assert values["Has Targets"] is True
        assert values["Horizontal Offset"] == -12.5
        assert values["Vertical Offset"] == 15.0
        assert values["Forward Distance From Target"] == pytest.approx(
            1.0 / math.tan(math.radians(15.0))
        )
        assert values["Current Pipeline"] == 0

    def test_poll_rereads_telemetry(
        self, estimator: VisionEstimator, target_store: InMemoryTelemetryStore
    ) -> None:
        reporter = DiagnosticsReporter(estimator)
        reporter.poll()
        target_store.put("tv", False)
        values = reporter.poll()
        assert values["Has Targets"] is False
        assert math.isnan(values["Horizontal Offset"])

    @pytest.mark.parametrize("has_target", [True, False])
    def test_poll_survives_non_finite_pipeline(
        self, target_store: InMemoryTelemetryStore, has_target: bool
    ) -> None:
        target_store.update({"tv": has_target, "pipeline": math.nan})
        values = DiagnosticsReporter(VisionEstimator(target_store)).poll()
        assert values["Current Pipeline"] == 0
        assert values["Has Targets"] is has_target

    def test_format_lines_marks_nan(self, blind_estimator: VisionEstimator) -> None:
        lines = DiagnosticsReporter(blind_estimator).format_lines()
        assert len(lines) == 5
        assert lines[1].endswith(": ---")
        assert lines[4].endswith(": 1")

    def test_duplicate_property_rejected(self) -> None:
        builder = DiagnosticsBuilder()
        builder.add_integer_property("Current Pipeline", lambda: 0)
        with pytest.raises(ValueError):
            builder.add_double_property("Current Pipeline", lambda: 0.0)

    def test_property_kind_coercion(self) -> None:
        builder = DiagnosticsBuilder()
        builder.add_integer_property("Mode", lambda: 1.0)
        prop = builder.properties[0]
        assert prop.kind is PropertyKind.INTEGER
        assert prop.read() == 1


class TestSelfTest:
    """Tests for hardware checks and the LED routine."""

    def test_hardware_connections(self, estimator: VisionEstimator) -> None:
        connections = estimator.hardware_connections()
        assert len(connections) == 1
        assert connections[0].name == "Limelight (limelight)"
        assert connections[0].is_connected

    def test_disconnected_store_reported(self) -> None:
        estimator = VisionEstimator(InMemoryTelemetryStore(connected=False))
        assert check_connections(estimator) == {"Limelight (limelight)": False}

    def test_routine_blinks_then_restores(self, self_test_settings: Any) -> None:
        store = RecordingStore()
        estimator = VisionEstimator(store, self_test=self_test_settings)

        asyncio.run(estimator.test_routine())

        assert store.writes == [("ledMode", LedMode.BLINK), ("ledMode", LedMode.PIPELINE_DEFAULT)]

    def test_routine_waits_configured_duration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        store = RecordingStore()

        asyncio.run(VisionEstimator(store).test_routine())

        assert slept == [2.0]
        assert store.get_number("ledMode", -1) == LedMode.PIPELINE_DEFAULT

    def test_cancelled_routine_restores_leds(self) -> None:
        modes: list[int] = []

        async def run() -> None:
            task = asyncio.create_task(blink_indicator(modes.append, 10.0))
            await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(run())

        assert modes == [LedMode.BLINK, LedMode.PIPELINE_DEFAULT]
