"""Core data types and structures."""

import math
from dataclasses import dataclass
from enum import Enum, IntEnum


class PipelineMode(IntEnum):
    """Detection pipeline selected on the vision sensor."""

    TAPE = 0
    FIDUCIAL = 1

    def toggled(self) -> "PipelineMode":
        """The other pipeline."""
        return PipelineMode.FIDUCIAL if self is PipelineMode.TAPE else PipelineMode.TAPE


class LedMode(IntEnum):
    """Indicator LED modes accepted by the vision sensor."""

    PIPELINE_DEFAULT = 0
    OFF = 1
    BLINK = 2
    ON = 3


class DistanceBand(Enum):
    """Vertical-angle bands of the forward-distance model, nearest row first."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


# Pose array layout published by the sensor
POSE_X = 0
POSE_Y = 1
POSE_Z = 2
POSE_PITCH = 3
POSE_YAW = 4
POSE_ROLL = 5
POSE_LENGTH = 6


@dataclass(frozen=True, slots=True)
class TargetSnapshot:
    """One gated read of the target fields.

    Optional fields are None whenever no target is visible. ``target_id`` is
    additionally None unless the fiducial pipeline is active. The pipeline is
    only read once a target is known to be visible.

    Attributes:
        has_target: Whether the sensor reports a visible target
        pipeline: Pipeline index read with the target fields, None without a target
        horizontal_offset: Crosshair-to-target horizontal angle (degrees)
        vertical_offset: Crosshair-to-target vertical angle (degrees)
        skew: Target skew (degrees, within (-90, 0])
        area: Target area as a percentage of the frame
        target_id: Fiducial marker id
    """

    has_target: bool
    pipeline: int | None = None
    horizontal_offset: float | None = None
    vertical_offset: float | None = None
    skew: float | None = None
    area: float | None = None
    target_id: float | None = None

    @classmethod
    def no_target(cls) -> "TargetSnapshot":
        """Snapshot for a frame without a visible target."""
        return cls(has_target=False)


def or_nan(value: float | None) -> float:
    """Map a missing reading to the NaN sentinel used by scalar queries."""
    return math.nan if value is None else value
