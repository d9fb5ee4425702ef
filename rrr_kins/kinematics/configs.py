"""
Dataclass configurations for kinematics solvers.

Each config describes fixed machine geometry and is frozen once built, so a
solver's geometry cannot change for the lifetime of the process.

Classes:
    KinematicsConfig: Abstract base configuration shared by all solvers.
    RRRArmConfig: Link geometry of a base/shoulder/elbow RRR arm.
"""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass

from rrr_kins.utils.constants import (
    BASE_LINK_LENGTH,
    BASE_LINK_TILT,
    DEFAULT_KINEMATICS,
    DEFAULT_REACH_TOLERANCE,
    DEFAULT_WRIST_AXES,
    ELBOW_LINK_LENGTH,
    SHOULDER_LINK_LENGTH,
    KinematicsType,
)


@dataclass(frozen=True)
class KinematicsConfig(abc.ABC):
    """Base configuration shared by all kinematics solvers.

    Attributes:
        name: Registry name of the machine this config describes.
    """

    name: str = "base"

    @property
    @abc.abstractmethod
    def kinematics_type(self) -> KinematicsType:
        """Return which solving directions this geometry supports."""
        raise NotImplementedError


def _validate_positive(field_name: str, value: float) -> None:
    """Raise unless *value* is a finite, strictly positive number.

    Args:
        field_name: Name used in the error message.
        value: The value to check.

    Raises:
        ValueError: When *value* is non-finite or not greater than zero.
    """
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{field_name} must be a finite positive number, got {value!r}")


@dataclass(frozen=True)
class RRRArmConfig(KinematicsConfig):
    """Link geometry for an RRR elbow manipulator.

    Defaults describe a Scorbot ER-III.  Lengths are in mm, the tilt in
    degrees above horizontal.

    Attributes:
        name: Fixed to ``'scorbot-er3'`` by default.
        base_length: Length of link 0, origin to shoulder joint.
        base_tilt: Elevation of link 0 above the horizontal plane.
        shoulder_length: Length of link 1, shoulder to elbow.
        elbow_length: Length of link 2, elbow to wrist (tool point).
        wrist_axes: Number of unsolved wrist joints reported after the elbow.
        reach_tolerance: Slack (mm) accepted at the reachability boundaries.
    """

    name: str = DEFAULT_KINEMATICS
    base_length: float = BASE_LINK_LENGTH
    base_tilt: float = BASE_LINK_TILT
    shoulder_length: float = SHOULDER_LINK_LENGTH
    elbow_length: float = ELBOW_LINK_LENGTH
    wrist_axes: int = DEFAULT_WRIST_AXES
    reach_tolerance: float = DEFAULT_REACH_TOLERANCE

    def __post_init__(self) -> None:
        """Validate the link geometry."""
        _validate_positive("base_length", self.base_length)
        _validate_positive("shoulder_length", self.shoulder_length)
        _validate_positive("elbow_length", self.elbow_length)
        if not math.isfinite(self.base_tilt):
            raise ValueError(f"base_tilt must be finite, got {self.base_tilt!r}")
        if self.wrist_axes < 0:
            raise ValueError(f"wrist_axes must be non-negative, got {self.wrist_axes}")
        if not math.isfinite(self.reach_tolerance) or self.reach_tolerance < 0.0:
            raise ValueError(
                f"reach_tolerance must be finite and non-negative, got {self.reach_tolerance!r}"
            )

    @property
    def kinematics_type(self) -> KinematicsType:
        """Both directions are solved in closed form."""
        return KinematicsType.BOTH

    @property
    def max_reach(self) -> float:
        """Largest shoulder-to-target distance the arm can span (mm)."""
        return self.shoulder_length + self.elbow_length

    @property
    def min_reach(self) -> float:
        """Radius of the unreachable zone around the shoulder (mm)."""
        return abs(self.shoulder_length - self.elbow_length)
