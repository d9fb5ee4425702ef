"""
Closed-form kinematics for an RRR elbow manipulator.

Joint 0 rotates the arm about the vertical axis and fixes the vertical
half-plane the rest of the arm moves in.  Joint 1 is the shoulder, joint 2
the elbow.  Joint angles are measured from horizontal, so the tool point is
the sum of three link vectors.  Inverse kinematics reduces to intersecting
two circles in that half-plane.

Classes:
    RRRArmKinematics: Forward, inverse and capability query for RRR arms.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from rrr_kins.kinematics.base import KinematicsSolver
from rrr_kins.kinematics.configs import RRRArmConfig
from rrr_kins.kinematics.errors import KinematicsError, RangeError, RangeErrorReason
from rrr_kins.kinematics.types import CartesianPose, JointVector, PlanarPoint
from rrr_kins.utils.helpers import safe_acos_deg

logger = logging.getLogger(__name__)


class RRRArmKinematics(KinematicsSolver):
    """Kinematics of a base/shoulder/elbow arm with fixed link geometry.

    The inverse solution always takes the elbow-up branch: of the two
    elbow positions reaching a target, the one with the greater height.

    Attributes:
        config: Frozen link geometry.
    """

    config: RRRArmConfig

    def __init__(self, config: Optional[RRRArmConfig] = None) -> None:
        """Initialise the solver.

        Args:
            config: Link geometry; defaults to a Scorbot ER-III.
        """
        super().__init__(config if config is not None else RRRArmConfig())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def forward(self, joints: Union[JointVector, Sequence[float]]) -> CartesianPose:
        """Compute the tool-point pose from joint angles.

        Args:
            joints: Base, shoulder and elbow angles in degrees; further
                entries (wrist axes) are ignored.

        Returns:
            Tool-point pose with zero orientation.

        Raises:
            ValueError: On fewer than three joints or non-finite angles.
        """
        _, _, tool = self.joint_locations(joints)
        return CartesianPose(float(tool[0]), float(tool[1]), float(tool[2]))

    def joint_locations(
        self, joints: Union[JointVector, Sequence[float]]
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return the cartesian locations of the shoulder, elbow and tool point.

        Args:
            joints: Base, shoulder and elbow angles in degrees.

        Returns:
            Three float64 arrays of shape ``(3,)``: shoulder, elbow, tool.
        """
        base, shoulder, elbow = JointVector.from_sequence(joints).solved
        shoulder_loc = self._shoulder_location(base)
        elbow_loc = shoulder_loc + self._link_vector(self.config.shoulder_length, shoulder, base)
        tool_loc = elbow_loc + self._link_vector(self.config.elbow_length, elbow, base)
        return shoulder_loc, elbow_loc, tool_loc

    def inverse(self, pose: CartesianPose) -> JointVector:
        """Compute joint angles placing the tool point at *pose*.

        Orientation fields of *pose* are ignored; wrist joints of the result
        are ``UNSUPPORTED``.

        Args:
            pose: Target tool-point pose.

        Returns:
            Elbow-up joint solution in degrees.

        Raises:
            RangeError: If the target is beyond reach or inside the
                unreachable zone around the shoulder.
        """
        base = float(np.degrees(np.arctan2(pose.y, pose.x)))
        shoulder = self._project(self._shoulder_location(base))
        target = self._project(pose.translation)
        distance = float(
            np.hypot(target.radius - shoulder.radius, target.height - shoulder.height)
        )
        self._check_reachable(distance)
        candidates = self._circle_intersections(shoulder, target, distance)
        elbow = self._select_elbow(candidates)
        return JointVector(
            base,
            self._shoulder_angle(shoulder, elbow),
            self._elbow_angle(elbow, target),
            self.config.wrist_axes,
        )

    # ------------------------------------------------------------------
    # Forward kinematics helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _link_vector(length: float, elevation: float, azimuth: float) -> np.ndarray:
        """Return the vector spanned by a link.

        Args:
            length: Link length (mm).
            elevation: Link angle above horizontal (degrees).
            azimuth: Base rotation the link lies in (degrees).

        Returns:
            Float64 array ``[x, y, z]``.
        """
        elev = np.deg2rad(elevation)
        az = np.deg2rad(azimuth)
        reach = length * np.cos(elev)
        return np.array(
            [reach * np.cos(az), reach * np.sin(az), length * np.sin(elev)],
            dtype=np.float64,
        )

    def _shoulder_location(self, base: float) -> np.ndarray:
        """Return the shoulder joint location for a base angle in degrees."""
        return self._link_vector(self.config.base_length, self.config.base_tilt, base)

    # ------------------------------------------------------------------
    # Inverse kinematics helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _project(point: np.ndarray) -> PlanarPoint:
        """Express a cartesian point as (radius, height) in its vertical half-plane."""
        return PlanarPoint(float(np.hypot(point[0], point[1])), float(point[2]))

    def _check_reachable(self, distance: float) -> None:
        """Raise unless the two links can span *distance*.

        Args:
            distance: Planar shoulder-to-target distance (mm).

        Raises:
            RangeError: When *distance* lies outside [min_reach, max_reach],
                or is zero (the circle intersection is undefined there).
        """
        cfg = self.config
        tol = cfg.reach_tolerance
        if distance > cfg.max_reach + tol:
            logger.debug("Rejecting target %.6f mm from shoulder (max %.6f)", distance, cfg.max_reach)
            raise RangeError(RangeErrorReason.BEYOND_REACH, distance, cfg.max_reach)
        if distance < cfg.min_reach - tol or distance <= tol:
            logger.debug("Rejecting target %.6f mm from shoulder (min %.6f)", distance, cfg.min_reach)
            raise RangeError(RangeErrorReason.INSIDE_ARMPIT, distance, cfg.min_reach)

    def _circle_intersections(
        self, shoulder: PlanarPoint, target: PlanarPoint, distance: float
    ) -> Tuple[PlanarPoint, PlanarPoint]:
        """Intersect the shoulder-link and elbow-link circles.

        The circle of radius L1 around the shoulder and the circle of
        radius L2 around the target meet at the two possible elbow points.

        Args:
            shoulder: Shoulder location in the half-plane.
            target: Target location in the half-plane.
            distance: Distance between the two centres (mm), non-zero.

        Returns:
            The two candidate elbow locations.
        """
        l1 = self.config.shoulder_length
        l2 = self.config.elbow_length
        r1, z1 = shoulder
        r2, z2 = target

        # Heron's form; rounding at the reach limits can make it slightly negative
        product = (
            (distance + l1 + l2)
            * (distance + l1 - l2)
            * (distance - l1 + l2)
            * (l1 + l2 - distance)
        )
        delta = 0.25 * float(np.sqrt(max(product, 0.0)))

        dist_sq = distance * distance
        along = (l1 * l1 - l2 * l2) / (2.0 * dist_sq)
        mid_r = (r1 + r2) / 2.0 + (r2 - r1) * along
        mid_z = (z1 + z2) / 2.0 + (z2 - z1) * along
        off_r = 2.0 * (z1 - z2) * delta / dist_sq
        off_z = 2.0 * (r1 - r2) * delta / dist_sq

        return (
            PlanarPoint(mid_r + off_r, mid_z - off_z),
            PlanarPoint(mid_r - off_r, mid_z + off_z),
        )

    @staticmethod
    def _select_elbow(candidates: Tuple[PlanarPoint, PlanarPoint]) -> PlanarPoint:
        """Pick the elbow-up candidate; ties go to the second one."""
        first, second = candidates
        return first if first.height > second.height else second

    @staticmethod
    def _acos_deg(value: float) -> float:
        """Clamped inverse cosine in degrees.

        Raises:
            KinematicsError: If *value* is far outside [-1, 1].
        """
        try:
            return safe_acos_deg(value)
        except ValueError as exc:
            raise KinematicsError(str(exc)) from exc

    def _shoulder_angle(self, shoulder: PlanarPoint, elbow: PlanarPoint) -> float:
        """Angle of the shoulder-to-elbow link above horizontal (degrees)."""
        angle = self._acos_deg((elbow.radius - shoulder.radius) / self.config.shoulder_length)
        if elbow.height < shoulder.height:
            angle = -angle
        return angle

    def _elbow_angle(self, elbow: PlanarPoint, target: PlanarPoint) -> float:
        """Angle of the elbow-to-wrist link above horizontal (degrees)."""
        angle = self._acos_deg((target.radius - elbow.radius) / self.config.elbow_length)
        if elbow.height > target.height:
            angle = -angle
        return angle
