"""
Abstract interface shared by every kinematics solver.

A host controller calls ``forward`` or ``inverse`` once per control cycle,
choosing the direction from ``capabilities()``.

Classes:
    KinematicsSolver: Abstract base class for all solvers.
"""

from __future__ import annotations

import abc
from typing import Sequence, Union

from rrr_kins.kinematics.configs import KinematicsConfig
from rrr_kins.kinematics.types import Capabilities, CartesianPose, JointVector


class KinematicsSolver(abc.ABC):
    """Abstract base class for kinematics solvers.

    Subclasses must implement ``forward`` and ``inverse``.  Solvers hold
    only their frozen config and are safe to share between threads.

    Attributes:
        config: Fixed machine geometry.
    """

    def __init__(self, config: KinematicsConfig) -> None:
        """Initialise the solver.

        Args:
            config: Fixed machine geometry.
        """
        self.config = config

    @abc.abstractmethod
    def forward(self, joints: Union[JointVector, Sequence[float]]) -> CartesianPose:
        """Map joint angles (degrees) to the tool-point pose.

        Args:
            joints: Joint angles; at least the solved joints must be present.

        Returns:
            The tool-point ``CartesianPose``.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def inverse(self, pose: CartesianPose) -> JointVector:
        """Map a tool-point pose to joint angles (degrees).

        Args:
            pose: Target pose.

        Returns:
            The joint angles reaching *pose*.

        Raises:
            RangeError: If *pose* is unreachable.
        """
        raise NotImplementedError

    def capabilities(self) -> Capabilities:
        """Report which solving directions this solver supports."""
        return Capabilities.from_type(self.config.kinematics_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
