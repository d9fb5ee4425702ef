"""
Exceptions raised by kinematics solvers.

Classes:
    KinematicsError: Base class for all solver failures.
    RangeErrorReason: Which reachability limit a target violated.
    RangeError: Raised by inverse kinematics for unreachable targets.
"""

from __future__ import annotations

from enum import Enum


class KinematicsError(ValueError):
    """Base class for errors raised while solving kinematics."""


class RangeErrorReason(Enum):
    """Why an inverse-kinematics target cannot be reached."""

    BEYOND_REACH = "target beyond maximum reach"
    INSIDE_ARMPIT = "target inside unreachable zone near the shoulder"


class RangeError(KinematicsError):
    """The commanded pose is geometrically unreachable.

    Attributes:
        reason: The violated reachability limit.
        distance: Planar shoulder-to-target distance in mm.
        limit: The bound that *distance* violated, in mm.
    """

    def __init__(self, reason: RangeErrorReason, distance: float, limit: float) -> None:
        self.reason = reason
        self.distance = distance
        self.limit = limit
        super().__init__(
            f"{reason.value} (distance {distance:.6f} mm, limit {limit:.6f} mm)"
        )
