"""Target estimation: geometry, distance model and the estimator."""

from limelight_tracker.vision.distance import DistanceModel
from limelight_tracker.vision.estimator import VisionEstimator
from limelight_tracker.vision.geometry import Rotation2D, Transform2D, Translation2D

__all__ = [
    "VisionEstimator",
    "DistanceModel",
    "Rotation2D",
    "Translation2D",
    "Transform2D",
]
