"""Planar rigid-body geometry used for target pose estimates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rotation2D:
    """A rotation in the plane, stored as an angle in radians."""

    radians: float = 0.0

    @classmethod
    def from_components(cls, x: float, y: float) -> Rotation2D:
        """Build the rotation pointing along the vector (x, y).

        A zero-length vector gives the identity rotation.
        """
        if math.hypot(x, y) < 1e-6:
            return cls(0.0)
        return cls(math.atan2(y, x))

    @property
    def degrees(self) -> float:
        """Angle in degrees."""
        return math.degrees(self.radians)


@dataclass(frozen=True, slots=True)
class Translation2D:
    """A displacement in the plane, in the units it was published in."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Transform2D:
    """A translation and a rotation applied together.

    Attributes:
        translation: Displacement applied first
        rotation: Heading change applied with it
    """

    translation: Translation2D
    rotation: Rotation2D
