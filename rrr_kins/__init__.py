"""
RRR elbow-manipulator kinematics.

Closed-form coordinate-space kinematics for a three-revolute-joint arm
(base rotation, shoulder, elbow): forward kinematics from joint angles to
the tool point, inverse kinematics back to joint angles with explicit
reachability checks, and a capability query for the host controller.

Modules:
    kinematics: Pose/joint types, configs, solvers, and the registry.
    utils: Shared constants, enumerations, and numeric helpers.
"""

__version__ = "0.1.0"
