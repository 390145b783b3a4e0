"""Vision target estimation from Limelight-style telemetry."""

from limelight_tracker.vision.estimator import VisionEstimator

__all__ = ["VisionEstimator"]
