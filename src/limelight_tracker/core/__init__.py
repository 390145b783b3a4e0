"""Core infrastructure: config, types, exceptions, and logging."""

from limelight_tracker.core.config import Settings, get_settings
from limelight_tracker.core.exceptions import (
    ConfigurationError,
    LimelightTrackerError,
    TelemetryError,
)
from limelight_tracker.core.logging import get_logger, setup_logging
from limelight_tracker.core.types import (
    DistanceBand,
    LedMode,
    PipelineMode,
    TargetSnapshot,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "PipelineMode",
    "LedMode",
    "DistanceBand",
    "TargetSnapshot",
    # Exceptions
    "LimelightTrackerError",
    "TelemetryError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "get_logger",
]
