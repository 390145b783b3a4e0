"""Pytest fixtures for Limelight Tracker tests."""

from __future__ import annotations

import pytest

from limelight_tracker.core.config import (
    DistanceSettings,
    SelfTestSettings,
    TelemetrySettings,
)
from limelight_tracker.telemetry.store import InMemoryTelemetryStore
from limelight_tracker.vision.estimator import VisionEstimator


@pytest.fixture
def telemetry_settings() -> TelemetrySettings:
    """Default field names."""
    return TelemetrySettings()


@pytest.fixture
def distance_settings() -> DistanceSettings:
    """Bands at 30/60/90 degrees with heights 1, 2 and 3."""
    return DistanceSettings(
        height_low=1.0,
        height_med=2.0,
        height_high=3.0,
        max_offset_low=30.0,
        max_offset_med=60.0,
        max_offset_high=90.0,
    )


@pytest.fixture
def self_test_settings() -> SelfTestSettings:
    """Self-test that does not actually wait."""
    return SelfTestSettings(blink_duration_s=0.0)


@pytest.fixture
def empty_store() -> InMemoryTelemetryStore:
    """Table with nothing published."""
    return InMemoryTelemetryStore()


@pytest.fixture
def no_target_store() -> InMemoryTelemetryStore:
    """Table where the sensor reports no target but stale values remain."""
    return InMemoryTelemetryStore(
        {
            "tv": False,
            "tx": -12.5,
            "ty": 15.0,
            "ts": -45.0,
            "ta": 3.2,
            "tid": 7.0,
            "pipeline": 1,
            "botpose": [2.0, 3.0, 0.0, 10.0, 20.0, 0.0],
        }
    )


@pytest.fixture
def target_store() -> InMemoryTelemetryStore:
    """Table with a tape target in view."""
    return InMemoryTelemetryStore(
        {
            "tv": True,
            "tx": -12.5,
            "ty": 15.0,
            "ts": -45.0,
            "ta": 3.2,
            "tid": 7.0,
            "pipeline": 0,
            "botpose": [2.0, 3.0, 0.0, 10.0, 20.0, 0.0],
        }
    )


def _make_estimator(
    store: InMemoryTelemetryStore,
    telemetry_settings: TelemetrySettings,
    distance_settings: DistanceSettings,
    self_test_settings: SelfTestSettings,
) -> VisionEstimator:
    return VisionEstimator(
        store,
        telemetry=telemetry_settings,
        distance=distance_settings,
        self_test=self_test_settings,
    )


@pytest.fixture
def estimator(
    target_store: InMemoryTelemetryStore,
    telemetry_settings: TelemetrySettings,
    distance_settings: DistanceSettings,
    self_test_settings: SelfTestSettings,
) -> VisionEstimator:
    """Estimator over a table with a target in view."""
    return _make_estimator(target_store, telemetry_settings, distance_settings, self_test_settings)


@pytest.fixture
def blind_estimator(
    no_target_store: InMemoryTelemetryStore,
    telemetry_settings: TelemetrySettings,
    distance_settings: DistanceSettings,
    self_test_settings: SelfTestSettings,
) -> VisionEstimator:
    """Estimator over a table without a target."""
    return _make_estimator(no_target_store, telemetry_settings, distance_settings, self_test_settings)
