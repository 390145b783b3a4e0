"""Telemetry table access."""

from limelight_tracker.telemetry.store import InMemoryTelemetryStore, TelemetryStore

__all__ = ["TelemetryStore", "InMemoryTelemetryStore"]
