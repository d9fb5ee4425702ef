"""Shared fixtures for the rrr_kins test suite."""

from __future__ import annotations

import pytest

from rrr_kins.kinematics.configs import RRRArmConfig
from rrr_kins.kinematics.rrr_arm import RRRArmKinematics


@pytest.fixture
def solver() -> RRRArmKinematics:
    """Solver with the default Scorbot ER-III geometry."""
    return RRRArmKinematics()


@pytest.fixture
def unequal_solver() -> RRRArmKinematics:
    """Solver whose forearm is shorter than its upper arm (300 mm / 100 mm)."""
    return RRRArmKinematics(RRRArmConfig(shoulder_length=300.0, elbow_length=100.0))
