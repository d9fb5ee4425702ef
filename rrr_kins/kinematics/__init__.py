"""
Kinematics solvers, their value types, configs, and registry.

Provides closed-form forward and inverse kinematics for RRR elbow arms
and a factory that builds solvers by registered machine name.
"""

from rrr_kins.kinematics.base import KinematicsSolver
from rrr_kins.kinematics.configs import KinematicsConfig, RRRArmConfig
from rrr_kins.kinematics.errors import KinematicsError, RangeError, RangeErrorReason
from rrr_kins.kinematics.factory import (
    available_kinematics,
    make_kinematics,
    register_kinematics,
)
from rrr_kins.kinematics.rrr_arm import RRRArmKinematics
from rrr_kins.kinematics.types import (
    UNSUPPORTED,
    Capabilities,
    CartesianPose,
    JointVector,
    Orientation,
    PlanarPoint,
    Unsupported,
)

__all__ = [
    "KinematicsSolver",
    "KinematicsConfig",
    "RRRArmConfig",
    "KinematicsError",
    "RangeError",
    "RangeErrorReason",
    "available_kinematics",
    "make_kinematics",
    "register_kinematics",
    "RRRArmKinematics",
    "UNSUPPORTED",
    "Capabilities",
    "CartesianPose",
    "JointVector",
    "Orientation",
    "PlanarPoint",
    "Unsupported",
]
