#!/usr/bin/env python3
"""
Command-line entry point for the RRR arm kinematics solvers.

Builds a solver from the registry (optionally overriding its link
geometry) and runs one forward or inverse solve, or prints the solver's
capabilities.

Usage examples::

    # Tool point for the home pose
    python run_kins.py --mode forward --joints 0 0 0

    # Joint angles for a cartesian target
    python run_kins.py --mode inverse --pose 300 100 400

    # Inverse solve on an arm with a longer forearm
    python run_kins.py --mode inverse --pose 300 0 300 --elbow-length 260
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from rrr_kins.kinematics.base import KinematicsSolver
from rrr_kins.kinematics.configs import KinematicsConfig
from rrr_kins.kinematics.errors import RangeError
from rrr_kins.kinematics.factory import _resolve_config, available_kinematics, make_kinematics
from rrr_kins.kinematics.types import CartesianPose
from rrr_kins.utils.constants import DEFAULT_KINEMATICS, JOINT_NAMES

# ======================================================================
# Configuration builders
# ======================================================================

# Config fields settable from the command line
_GEOMETRY_OVERRIDES = ("base_length", "base_tilt", "shoulder_length", "elbow_length")


def _build_config(args: argparse.Namespace) -> KinematicsConfig:
    """Return the registered config for ``--kinematics`` with CLI overrides.

    Args:
        args: Parsed CLI arguments.

    Returns:
        A frozen ``KinematicsConfig`` instance.
    """
    cfg = _resolve_config(args.kinematics)
    overrides = {
        field: getattr(args, field)
        for field in _GEOMETRY_OVERRIDES
        if getattr(args, field) is not None
    }
    return replace(cfg, **overrides) if overrides else cfg


def _format_joint(value: object) -> str:
    """Render a joint entry, numbers to six decimals."""
    if isinstance(value, float):
        return f"{value:.6f}"
    return repr(value)


# ======================================================================
# Mode runners
# ======================================================================


def _run_forward(solver: KinematicsSolver, args: argparse.Namespace) -> int:
    """Print the tool-point pose for ``--joints``.

    Args:
        solver: Kinematics solver.
        args: Parsed CLI arguments.

    Returns:
        Process exit status.
    """
    if args.joints is None:
        print("--joints is required for --mode forward")
        return 2
    pose = solver.forward(args.joints)
    print(f"x = {pose.x:.6f} mm")
    print(f"y = {pose.y:.6f} mm")
    print(f"z = {pose.z:.6f} mm")
    return 0


def _run_inverse(solver: KinematicsSolver, args: argparse.Namespace) -> int:
    """Print the joint angles for ``--pose``, or why it is unreachable.

    Args:
        solver: Kinematics solver.
        args: Parsed CLI arguments.

    Returns:
        Process exit status; 1 when the target is unreachable.
    """
    if args.pose is None:
        print("--pose is required for --mode inverse")
        return 2
    try:
        joints = solver.inverse(CartesianPose.from_xyz(args.pose))
    except RangeError as exc:
        print(f"Unreachable: {exc}")
        return 1
    for index, value in enumerate(joints):
        label = JOINT_NAMES[index] if index < len(JOINT_NAMES) else f"wrist{index - len(JOINT_NAMES)}"
        print(f"J{index} ({label}) = {_format_joint(value)}")
    return 0


def _run_capabilities(solver: KinematicsSolver, args: argparse.Namespace) -> int:
    """Print which solving directions the solver supports.

    Args:
        solver: Kinematics solver.
        args: Parsed CLI arguments (unused).

    Returns:
        Process exit status.
    """
    caps = solver.capabilities()
    print(f"forward supported: {caps.forward_supported}")
    print(f"inverse supported: {caps.inverse_supported}")
    return 0


# ======================================================================
# CLI
# ======================================================================


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None.

    Returns:
        Parsed ``argparse.Namespace``.
    """
    parser = argparse.ArgumentParser(description="RRR arm kinematics solver")
    parser.add_argument(
        "--mode", choices=["forward", "inverse", "capabilities"], default="capabilities"
    )
    parser.add_argument(
        "--kinematics", choices=available_kinematics(), default=DEFAULT_KINEMATICS
    )
    parser.add_argument("--joints", type=float, nargs=3, metavar=("J0", "J1", "J2"))
    parser.add_argument("--pose", type=float, nargs=3, metavar=("X", "Y", "Z"))
    parser.add_argument("--base-length", type=float)
    parser.add_argument("--base-tilt", type=float)
    parser.add_argument("--shoulder-length", type=float)
    parser.add_argument("--elbow-length", type=float)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


# ======================================================================
# Dispatch
# ======================================================================


# Mapping from mode name to runner function
_MODE_DISPATCH = {
    "forward": _run_forward,
    "inverse": _run_inverse,
    "capabilities": _run_capabilities,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run one solve from the command line.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None.

    Returns:
        Process exit status.
    """
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    solver = make_kinematics(_build_config(args))
    print(f"Kinematics: {args.kinematics} | Mode: {args.mode}")
    print("-" * 60)

    runner = _MODE_DISPATCH[args.mode]
    return runner(solver, args)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
