"""Piecewise forward-distance model.

Each target row sits at a known height above the camera. The row in view is
inferred from the band the vertical offset falls in, and the horizontal
distance follows from ``height / tan(angle)``.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

import math

from limelight_tracker.core.config import DistanceSettings
from limelight_tracker.core.exceptions import ConfigurationError
from limelight_tracker.core.types import DistanceBand


class DistanceModel:
    """Maps a vertical offset angle to a forward distance.

    Bands (upper bounds inclusive):
        LOW:  0 < v <= max_offset_low
        MID:  max_offset_low < v <= max_offset_med
        HIGH: max_offset_med < v <= max_offset_high

    Angles outside every band give a distance of 0.0.
    """

    def __init__(self, settings: DistanceSettings | None = None) -> None:
        """Initialize model with settings.

        Args:
            settings: Band heights and thresholds (uses defaults if None)

        Raises:
            ConfigurationError: If the thresholds are not strictly increasing
        """
        self.settings = settings or DistanceSettings()
        s = self.settings
        # Settings are mutable, so the validator may have been bypassed
        if not 0.0 < s.max_offset_low < s.max_offset_med < s.max_offset_high:
            raise ConfigurationError(
                "Distance bands must be contiguous and increasing: "
                f"{s.max_offset_low}, {s.max_offset_med}, {s.max_offset_high}"
            )

        self._bands: list[tuple[DistanceBand, float, float]] = [
            (DistanceBand.LOW, s.max_offset_low, s.height_low),
            (DistanceBand.MID, s.max_offset_med, s.height_med),
            (DistanceBand.HIGH, s.max_offset_high, s.height_high),
        ]

    @property
    def max_offset(self) -> float:
        """Largest vertical offset covered by any band."""
        return self.settings.max_offset_high

    def band_for(self, vertical_offset: float) -> DistanceBand | None:
        """Select the band containing a vertical offset (degrees).

        Returns:
            Matching band, or None when the angle is not positive, beyond the
            highest band, or NaN
        """
        if not vertical_offset > 0.0:
            return None

        for band, upper, _ in self._bands:
            if vertical_offset <= upper:
                return band
        return None

    def height_for(self, band: DistanceBand) -> float:
        """Mounting height associated with a band."""
        for candidate, _, height in self._bands:
            if candidate is band:
                return height
        raise KeyError(band)

    def distance_for(self, vertical_offset: float) -> float:
        """Forward distance for a vertical offset in degrees.

        Args:
            vertical_offset: Angle from the crosshair up to the target

        Returns:
            Distance in the units of the configured heights, or 0.0 when the
            angle is outside every band
        """
        band = self.band_for(vertical_offset)
        if band is None:
            return 0.0
        return self.height_for(band) / math.tan(math.radians(vertical_offset))
