"""
Value types exchanged with kinematics solvers.

All types are immutable and recomputed on every call; nothing here holds
state across invocations.

Classes:
    Unsupported: Marker type for joint axes the solver does not compute.
    Orientation: Tool orientation sub-record (reported, never solved).
    CartesianPose: Tool-point translation (mm) plus orientation.
    JointVector: Ordered joint angles (degrees) with unsupported wrist axes.
    PlanarPoint: (radius, height) point in the arm's vertical half-plane.
    Capabilities: Which solving directions a solver supports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple, Sequence, Tuple, Union

import numpy as np

from rrr_kins.utils.constants import DEFAULT_WRIST_AXES, NUM_SOLVED_JOINTS, KinematicsType
from rrr_kins.utils.helpers import all_finite


class Unsupported(Enum):
    """Single-member enum marking a joint axis as not solved."""

    UNSUPPORTED = "unsupported"

    def __repr__(self) -> str:
        return "UNSUPPORTED"


UNSUPPORTED = Unsupported.UNSUPPORTED

JointValue = Union[float, Unsupported]


@dataclass(frozen=True)
class Orientation:
    """Tool orientation angles, accepted and reported but never solved."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class CartesianPose:
    """Position of the tool point in the arm's base frame.

    Attributes:
        x: Translation along X (mm).
        y: Translation along Y (mm).
        z: Translation along Z (mm).
        orientation: Orientation sub-record; zero on forward output.
    """

    x: float
    y: float
    z: float
    orientation: Orientation = field(default_factory=Orientation)

    @classmethod
    def from_xyz(cls, xyz: Sequence[float]) -> "CartesianPose":
        """Build a pose with zero orientation from an ``(x, y, z)`` sequence.

        Args:
            xyz: Three translation components in mm.

        Returns:
            A new ``CartesianPose``.

        Raises:
            ValueError: If *xyz* does not hold exactly three values.
        """
        if len(xyz) != 3:
            raise ValueError(f"Expected 3 translation components, got {len(xyz)}")
        x, y, z = (float(v) for v in xyz)
        return cls(x, y, z)

    @property
    def translation(self) -> np.ndarray:
        """Return the translation as a float64 array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


def _validate_solved_angles(values: Sequence[float]) -> None:
    """Raise unless *values* holds at least three finite angles.

    Args:
        values: Joint values whose first three entries are read.

    Raises:
        ValueError: On too few entries or a non-finite solved angle.
    """
    if len(values) < NUM_SOLVED_JOINTS:
        raise ValueError(
            f"Expected at least {NUM_SOLVED_JOINTS} joint values, got {len(values)}"
        )
    head = list(values[:NUM_SOLVED_JOINTS])
    if any(isinstance(v, Unsupported) for v in head) or not all_finite(head):
        raise ValueError(f"Joint values must be finite numbers, got {head}")


@dataclass(frozen=True)
class JointVector:
    """Joint angles in degrees, indexed base, shoulder, elbow, wrist...

    The three arm joints always carry numbers.  Wrist axes beyond index 2
    carry ``UNSUPPORTED`` so callers cannot mistake them for commands.

    Attributes:
        base: Rotation about the vertical axis (J0).
        shoulder: Elevation of the shoulder-to-elbow link (J1).
        elbow: Elevation of the elbow-to-wrist link (J2).
        wrist_axes: Number of unsolved wrist positions after the elbow.
    """

    base: float
    shoulder: float
    elbow: float
    wrist_axes: int = DEFAULT_WRIST_AXES

    def __post_init__(self) -> None:
        if self.wrist_axes < 0:
            raise ValueError(f"wrist_axes must be non-negative, got {self.wrist_axes}")

    @classmethod
    def from_sequence(
        cls, values: Sequence[float], wrist_axes: int = DEFAULT_WRIST_AXES
    ) -> "JointVector":
        """Build a vector from the first three entries of *values*.

        Args:
            values: Joint angles in degrees; entries past index 2 are ignored.
            wrist_axes: Number of unsupported wrist positions to report.

        Returns:
            A new ``JointVector``.

        Raises:
            ValueError: On fewer than three entries or non-finite angles.
        """
        _validate_solved_angles(values)
        base, shoulder, elbow = (float(v) for v in values[:NUM_SOLVED_JOINTS])
        return cls(base, shoulder, elbow, wrist_axes)

    @property
    def solved(self) -> Tuple[float, float, float]:
        """Return the three solved angles ``(base, shoulder, elbow)``."""
        return (self.base, self.shoulder, self.elbow)

    def as_array(self) -> np.ndarray:
        """Return the solved angles as a float64 array of shape ``(3,)``."""
        return np.array(self.solved, dtype=np.float64)

    def _entries(self) -> Tuple[JointValue, ...]:
        return self.solved + (UNSUPPORTED,) * self.wrist_axes

    def __len__(self) -> int:
        return NUM_SOLVED_JOINTS + self.wrist_axes

    def __getitem__(self, index):
        return self._entries()[index]

    def __iter__(self) -> Iterator[JointValue]:
        return iter(self._entries())


class PlanarPoint(NamedTuple):
    """A point in the vertical half-plane selected by the base angle."""

    radius: float
    height: float


@dataclass(frozen=True)
class Capabilities:
    """Which solving directions a kinematics module supports."""

    forward_supported: bool
    inverse_supported: bool

    @classmethod
    def from_type(cls, kinematics_type: KinematicsType) -> "Capabilities":
        """Derive the capability flags from a ``KinematicsType``.

        Args:
            kinematics_type: The solver's declared type.

        Returns:
            Matching ``Capabilities``.
        """
        return cls(
            forward_supported=kinematics_type is not KinematicsType.INVERSE_ONLY,
            inverse_supported=kinematics_type is not KinematicsType.FORWARD_ONLY,
        )
