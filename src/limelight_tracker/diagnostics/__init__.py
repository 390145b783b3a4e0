"""Dashboard diagnostics and hardware self-test."""

from limelight_tracker.diagnostics.reporter import (
    DiagnosticProperty,
    DiagnosticsBuilder,
    DiagnosticsReporter,
    PropertyKind,
)
from limelight_tracker.diagnostics.self_test import (
    HardwareConnection,
    blink_indicator,
    check_connections,
)

__all__ = [
    "DiagnosticProperty",
    "DiagnosticsBuilder",
    "DiagnosticsReporter",
    "PropertyKind",
    "HardwareConnection",
    "blink_indicator",
    "check_connections",
]
