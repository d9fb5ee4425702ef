"""
Shared constants and enumerations for the rrr_kins package.

Link geometry defaults describe a Scorbot ER-III style arm.  Lengths are in
millimetres and angles in degrees; conversion to radians happens at the
point of use.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Link geometry defaults (mm, degrees)
# ---------------------------------------------------------------------------
BASE_LINK_LENGTH: float = 355.0  # origin to shoulder (J1)
BASE_LINK_TILT: float = 89.0  # base link elevation above horizontal
SHOULDER_LINK_LENGTH: float = 220.0  # shoulder (J1) to elbow (J2)
ELBOW_LINK_LENGTH: float = 220.0  # elbow (J2) to wrist / tool point

# ---------------------------------------------------------------------------
# Joint layout
# ---------------------------------------------------------------------------
NUM_SOLVED_JOINTS: int = 3
DEFAULT_WRIST_AXES: int = 2
JOINT_NAMES = ("base", "shoulder", "elbow")

# ---------------------------------------------------------------------------
# Numeric tolerances
# ---------------------------------------------------------------------------
DEFAULT_REACH_TOLERANCE: float = 1e-9  # mm of slack at the reach boundaries
ACOS_DOMAIN_TOLERANCE: float = 1e-6  # overshoot of [-1, 1] treated as rounding

# ---------------------------------------------------------------------------
# Registry names
# ---------------------------------------------------------------------------
DEFAULT_KINEMATICS: str = "scorbot-er3"


class KinematicsType(Enum):
    """Which solving directions a kinematics module provides."""

    IDENTITY = "identity"
    FORWARD_ONLY = "forward_only"
    INVERSE_ONLY = "inverse_only"
    BOTH = "both"
