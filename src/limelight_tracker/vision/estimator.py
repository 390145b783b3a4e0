"""Target estimation from vision-sensor telemetry."""

from __future__ import annotations

import math
from collections.abc import Coroutine
from typing import Any

import numpy as np
from numpy.typing import NDArray

from limelight_tracker.core.config import (
    DistanceSettings,
    SelfTestSettings,
    TelemetrySettings,
)
from limelight_tracker.core.exceptions import TelemetryError
from limelight_tracker.core.logging import get_logger
from limelight_tracker.core.types import (
    POSE_LENGTH,
    POSE_PITCH,
    POSE_X,
    POSE_Y,
    POSE_YAW,
    PipelineMode,
    TargetSnapshot,
    or_nan,
)
from limelight_tracker.diagnostics.reporter import DiagnosticsBuilder
from limelight_tracker.diagnostics.self_test import HardwareConnection, blink_indicator
from limelight_tracker.telemetry.store import TelemetryStore
from limelight_tracker.vision.distance import DistanceModel
from limelight_tracker.vision.geometry import Rotation2D, Transform2D, Translation2D

logger = get_logger(__name__)

DEFAULT_POSE = (0.0,) * POSE_LENGTH


class VisionEstimator:
    """Derives target offsets, identity, pose and distance from telemetry.

    Holds no state between calls: every query reads the telemetry store
    again. Scalar queries return NaN when no target is visible, since 0.0 is
    a legitimate reading; ``target_id`` returns None instead.
    """

    def __init__(
        self,
        store: TelemetryStore,
        telemetry: TelemetrySettings | None = None,
        distance: DistanceSettings | None = None,
        self_test: SelfTestSettings | None = None,
    ) -> None:
        """Initialize estimator with a telemetry table handle.

        Args:
            store: Telemetry table the sensor publishes into
            telemetry: Table and field names (uses defaults if None)
            distance: Forward-distance band settings (uses defaults if None)
            self_test: Self-test timing (uses defaults if None)
        """
        self.store = store
        self.fields = telemetry or TelemetrySettings()
        self.distance_model = DistanceModel(distance)
        self.self_test_settings = self_test or SelfTestSettings()

    # Pipeline and LEDs

    def pipeline_mode(self) -> int:
        """Current pipeline index (0 = tape, 1 = fiducial).

        A NaN or infinite value in the table reads as the default pipeline 0.
        """
        value = self.store.get_number(self.fields.pipeline_key, 0)
        if not math.isfinite(value):
            logger.warning("Ignoring non-finite pipeline value %r", value)
            return int(PipelineMode.TAPE)
        return int(value)

    def set_pipeline_mode(self, mode: int) -> None:
        """Select a pipeline. The value is written unchecked."""
        logger.debug("Setting pipeline to %d", mode)
        self.store.set_number(self.fields.pipeline_key, int(mode))

    def toggle_pipeline_mode(self) -> None:
        """Switch between the tape and fiducial pipelines."""
        current = self.pipeline_mode()
        if current == PipelineMode.TAPE:
            self.set_pipeline_mode(PipelineMode.FIDUCIAL)
        else:
            self.set_pipeline_mode(PipelineMode.TAPE)

    def set_led_mode(self, mode: int) -> None:
        """Set the LED mode: 0 pipeline default, 1 off, 2 blink, 3 on."""
        self.store.set_number(self.fields.led_mode_key, int(mode))

    # Target fields

    def has_target(self) -> bool:
        """Whether the sensor currently sees a target."""
        return self.store.get_boolean(self.fields.has_target_key, False)

    def read_snapshot(self) -> TargetSnapshot:
        """Read the target fields, gated on presence and pipeline.

        Returns:
            Snapshot whose optional fields are None when no target is visible
        """
        if not self.has_target():
            return TargetSnapshot.no_target()

        f = self.fields
        pipeline = self.pipeline_mode()
        target_id = None
        if pipeline == PipelineMode.FIDUCIAL:
            target_id = self.store.get_number(f.target_id_key, 0.0)

        return TargetSnapshot(
            has_target=True,
            pipeline=pipeline,
            horizontal_offset=self.store.get_number(f.horizontal_offset_key, 0.0),
            vertical_offset=self.store.get_number(f.vertical_offset_key, 0.0),
            skew=self.store.get_number(f.skew_key, 0.0),
            area=self.store.get_number(f.area_key, 0.0),
            target_id=target_id,
        )

    def horizontal_offset(self) -> float:
        """Horizontal angle from crosshair to target in degrees, or NaN."""
        return or_nan(self.read_snapshot().horizontal_offset)

    def vertical_offset(self) -> float:
        """Vertical angle from crosshair to target in degrees, or NaN."""
        return or_nan(self.read_snapshot().vertical_offset)

    def skew(self) -> float:
        """Target skew in degrees within (-90, 0], or NaN."""
        return or_nan(self.read_snapshot().skew)

    def target_area(self) -> float:
        """Percentage of the frame covered by the target, or NaN."""
        return or_nan(self.read_snapshot().area)

    def is_looking_left(self) -> bool:
        """Whether the target is left of the crosshair. False without a target."""
        offset = self.read_snapshot().horizontal_offset
        return offset is not None and offset < 0

    def target_id(self) -> float | None:
        """Fiducial id of the target, only in the fiducial pipeline."""
        return self.read_snapshot().target_id

    # Pose

    def robot_position_3d(self) -> NDArray[np.float64]:
        """Raw pose array: x, y, z, pitch, yaw, roll.

        Not gated on target presence.

        Raises:
            TelemetryError: If fewer than six values are published
        """
        values = self.store.get_number_array(self.fields.bot_pose_key, DEFAULT_POSE)
        if len(values) < POSE_LENGTH:
            logger.warning("Pose array has %d values, expected %d", len(values), POSE_LENGTH)
            raise TelemetryError(
                f"Pose array {self.fields.bot_pose_key!r} has {len(values)} values, "
                f"expected {POSE_LENGTH}"
            )
        return np.asarray(values[:POSE_LENGTH], dtype=np.float64)

    def rotation(self) -> Rotation2D:
        """Rotation towards the target from the pose pitch and yaw."""
        pose = self.robot_position_3d()
        pitch = np.radians(pose[POSE_PITCH])
        yaw = np.radians(pose[POSE_YAW])
        return Rotation2D.from_components(float(pitch), float(yaw))

    def translation(self) -> Translation2D:
        """Displacement to the target from the pose x and y."""
        pose = self.robot_position_3d()
        return Translation2D(float(pose[POSE_X]), float(pose[POSE_Y]))

    @staticmethod
    def transform(translation: Translation2D, rotation: Rotation2D) -> Transform2D:
        """Combine a translation and rotation into one transform."""
        return Transform2D(translation, rotation)

    def pose_transform(self) -> Transform2D:
        """Transform built from the current translation and rotation."""
        return self.transform(self.translation(), self.rotation())

    # Distance

    def forward_distance(self) -> float:
        """Forward distance to the target, or NaN without a target.

        Vertical offsets outside the configured bands give 0.0.
        """
        vertical = self.read_snapshot().vertical_offset
        if vertical is None:
            return math.nan
        return self.distance_model.distance_for(vertical)

    # Diagnostics and self-test

    def init_diagnostics(self, builder: DiagnosticsBuilder) -> None:
        """Register the polled dashboard properties."""
        builder.set_dashboard_type("Limelight")
        builder.add_boolean_property("Has Targets", self.has_target)
        builder.add_double_property("Horizontal Offset", self.horizontal_offset)
        builder.add_double_property("Vertical Offset", self.vertical_offset)
        builder.add_double_property("Forward Distance From Target", self.forward_distance)
        builder.add_integer_property("Current Pipeline", self.pipeline_mode)

    def hardware_connections(self) -> list[HardwareConnection]:
        """Devices this estimator depends on."""
        return [HardwareConnection.from_store(self.fields.table, self.store)]

    def test_routine(self) -> Coroutine[Any, Any, None]:
        """Blink the LEDs, wait, then restore the pipeline default."""
        return blink_indicator(self.set_led_mode, self.self_test_settings.blink_duration_s)
