"""Forward kinematics and capability tests for RRRArmKinematics."""

from __future__ import annotations

import math

import numpy as np
import pytest

from rrr_kins.kinematics.types import Capabilities, JointVector, Orientation

R0 = 355.0 * math.cos(math.radians(89.0))
Z0 = 355.0 * math.sin(math.radians(89.0))


def test_home_pose(solver):
    pose = solver.forward([0.0, 0.0, 0.0])
    assert pose.x == pytest.approx(446.197, abs=2e-3)
    assert pose.y == pytest.approx(0.0, abs=1e-9)
    assert pose.z == pytest.approx(354.946, abs=1e-3)
    assert pose.orientation == Orientation()


def test_base_rotation_swings_the_arm(solver):
    pose = solver.forward([90.0, 0.0, 0.0])
    assert pose.x == pytest.approx(0.0, abs=1e-9)
    assert pose.y == pytest.approx(R0 + 440.0)
    assert pose.z == pytest.approx(Z0)


def test_arm_pointing_straight_up(solver):
    pose = solver.forward([0.0, 90.0, 90.0])
    assert pose.x == pytest.approx(R0)
    assert pose.z == pytest.approx(Z0 + 440.0)


def test_folded_forearm_returns_to_shoulder(solver):
    pose = solver.forward([45.0, 90.0, -90.0])
    shoulder, _, _ = solver.joint_locations([45.0, 90.0, -90.0])
    np.testing.assert_allclose(pose.translation, shoulder, atol=1e-9)


def test_forward_accepts_joint_vector_and_ignores_wrist(solver):
    joints = JointVector(30.0, 45.0, -20.0)
    from_vector = solver.forward(joints)
    from_list = solver.forward([30.0, 45.0, -20.0, 1.234, 0.7071])
    assert from_vector == from_list


def test_joint_locations_are_spaced_by_link_lengths(solver):
    shoulder, elbow, tool = solver.joint_locations([20.0, 35.0, -15.0])
    assert np.linalg.norm(shoulder) == pytest.approx(355.0)
    assert np.linalg.norm(elbow - shoulder) == pytest.approx(220.0)
    assert np.linalg.norm(tool - elbow) == pytest.approx(220.0)


@pytest.mark.parametrize("joints", [[0.0, 0.0], [0.0, float("nan"), 0.0]])
def test_forward_rejects_bad_joints(solver, joints):
    with pytest.raises(ValueError):
        solver.forward(joints)


def test_capabilities_report_both_directions(solver):
    assert solver.capabilities() == Capabilities(
        forward_supported=True, inverse_supported=True
    )
