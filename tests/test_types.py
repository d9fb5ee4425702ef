"""Tests for the pose, joint and capability value types."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from rrr_kins.kinematics.types import (
    UNSUPPORTED,
    Capabilities,
    CartesianPose,
    JointVector,
    Orientation,
    Unsupported,
)
from rrr_kins.utils.constants import KinematicsType


class TestJointVector:
    def test_wrist_axes_are_unsupported(self):
        joints = JointVector(10.0, 20.0, 30.0)
        assert len(joints) == 5
        assert list(joints) == [10.0, 20.0, 30.0, UNSUPPORTED, UNSUPPORTED]
        assert joints[3] is UNSUPPORTED
        assert isinstance(joints[-1], Unsupported)

    def test_no_wrist_axes(self):
        joints = JointVector(1.0, 2.0, 3.0, wrist_axes=0)
        assert len(joints) == 3
        assert list(joints) == [1.0, 2.0, 3.0]

    def test_negative_wrist_axes_rejected(self):
        with pytest.raises(ValueError):
            JointVector(0.0, 0.0, 0.0, wrist_axes=-1)

    def test_from_sequence_ignores_extra_entries(self):
        joints = JointVector.from_sequence([1, 2, 3, 99.0, 98.0, 97.0])
        assert joints.solved == (1.0, 2.0, 3.0)
        assert joints[3] is UNSUPPORTED

    def test_from_sequence_accepts_numpy_and_joint_vectors(self):
        from_array = JointVector.from_sequence(np.array([5.0, 6.0, 7.0]))
        assert from_array.solved == (5.0, 6.0, 7.0)
        assert JointVector.from_sequence(from_array) == from_array

    @pytest.mark.parametrize(
        "values",
        [[1.0, 2.0], [], [1.0, float("nan"), 3.0], [float("inf"), 0.0, 0.0]],
    )
    def test_from_sequence_rejects_bad_input(self, values):
        with pytest.raises(ValueError):
            JointVector.from_sequence(values)

    def test_as_array(self):
        arr = JointVector(1.0, 2.0, 3.0).as_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_is_immutable(self):
        joints = JointVector(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            joints.base = 5.0


class TestCartesianPose:
    def test_orientation_defaults_to_zero(self):
        pose = CartesianPose(1.0, 2.0, 3.0)
        assert pose.orientation == Orientation()
        assert dataclasses.astuple(pose.orientation) == (0.0,) * 6

    def test_from_xyz_and_translation(self):
        pose = CartesianPose.from_xyz([1, 2, 3])
        assert (pose.x, pose.y, pose.z) == (1.0, 2.0, 3.0)
        np.testing.assert_array_equal(pose.translation, [1.0, 2.0, 3.0])

    def test_from_xyz_requires_three_components(self):
        with pytest.raises(ValueError):
            CartesianPose.from_xyz([1.0, 2.0])


class TestCapabilities:
    @pytest.mark.parametrize(
        "kinematics_type, forward, inverse",
        [
            (KinematicsType.BOTH, True, True),
            (KinematicsType.IDENTITY, True, True),
            (KinematicsType.FORWARD_ONLY, True, False),
            (KinematicsType.INVERSE_ONLY, False, True),
        ],
    )
    def test_from_type(self, kinematics_type, forward, inverse):
        caps = Capabilities.from_type(kinematics_type)
        assert caps == Capabilities(forward_supported=forward, inverse_supported=inverse)
