"""Custom exceptions for Limelight Tracker."""


class LimelightTrackerError(Exception):
    """Base exception for all Limelight Tracker errors."""

    pass


class TelemetryError(LimelightTrackerError):
    """Telemetry was published in a shape that cannot be interpreted."""

    def __init__(self, message: str = "Malformed telemetry") -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(LimelightTrackerError):
    """Configuration values are inconsistent or out of range."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        self.message = message
        super().__init__(self.message)
