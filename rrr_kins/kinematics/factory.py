"""
Registry and factory for kinematics solvers.

A host registers each machine's config and solver classes once at startup,
then builds solvers by name or by config.  ``scorbot-er3`` is registered on
import.

Functions:
    register_kinematics: Add a named machine to the registry.
    available_kinematics: List registered machine names.
    make_kinematics: Build a solver from a name or a config.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from rrr_kins.kinematics.base import KinematicsSolver
from rrr_kins.kinematics.configs import KinematicsConfig, RRRArmConfig
from rrr_kins.kinematics.rrr_arm import RRRArmKinematics
from rrr_kins.utils.constants import DEFAULT_KINEMATICS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Look-up tables (name -> config class, config class -> solver class)
# ---------------------------------------------------------------------------
_KINEMATICS_REGISTRY: Dict[str, type] = {}
_SOLVER_DISPATCH: Dict[type, type] = {}


def _validate_classes(config_cls: type, solver_cls: type) -> None:
    """Raise unless the classes derive from the expected bases.

    Args:
        config_cls: Candidate config class.
        solver_cls: Candidate solver class.

    Raises:
        TypeError: When either class has the wrong base.
    """
    if not (isinstance(config_cls, type) and issubclass(config_cls, KinematicsConfig)):
        raise TypeError(f"{config_cls!r} is not a KinematicsConfig subclass")
    if not (isinstance(solver_cls, type) and issubclass(solver_cls, KinematicsSolver)):
        raise TypeError(f"{solver_cls!r} is not a KinematicsSolver subclass")


def register_kinematics(name: str, config_cls: type, solver_cls: type) -> None:
    """Register a named machine so ``make_kinematics`` can build it.

    Re-registering a name with the same classes is a no-op.

    Args:
        name: Registry name, e.g. ``'scorbot-er3'``.
        config_cls: ``KinematicsConfig`` subclass describing the geometry.
        solver_cls: ``KinematicsSolver`` subclass solving that geometry.

    Raises:
        TypeError: If either class has the wrong base.
        ValueError: If *name* or *config_cls* is already bound differently.
    """
    _validate_classes(config_cls, solver_cls)
    existing = _KINEMATICS_REGISTRY.get(name)
    if existing is not None and existing is not config_cls:
        raise ValueError(f"Kinematics '{name}' already registered to {existing.__name__}")
    bound_solver = _SOLVER_DISPATCH.get(config_cls)
    if bound_solver is not None and bound_solver is not solver_cls:
        raise ValueError(
            f"{config_cls.__name__} already dispatches to {bound_solver.__name__}"
        )
    _KINEMATICS_REGISTRY[name] = config_cls
    _SOLVER_DISPATCH[config_cls] = solver_cls
    logger.debug("Registered kinematics '%s' -> %s", name, solver_cls.__name__)


def available_kinematics() -> List[str]:
    """Return the sorted list of registered machine names."""
    return sorted(_KINEMATICS_REGISTRY)


def _resolve_config(cfg: KinematicsConfig | str) -> KinematicsConfig:
    """Convert a registry name to its default config, or pass through a config.

    Args:
        cfg: Either a ``KinematicsConfig`` instance or a registered name.

    Returns:
        A concrete ``KinematicsConfig`` instance.

    Raises:
        ValueError: If the name is not in the registry.
    """
    if isinstance(cfg, KinematicsConfig):
        return cfg
    if cfg not in _KINEMATICS_REGISTRY:
        raise ValueError(f"Unknown kinematics '{cfg}'. Choose from {available_kinematics()}")
    return _KINEMATICS_REGISTRY[cfg](name=cfg)


def _solver_class_for_config(cfg: KinematicsConfig) -> type:
    """Return the solver class matching *cfg*.

    Args:
        cfg: A concrete ``KinematicsConfig`` instance.

    Returns:
        The corresponding ``KinematicsSolver`` subclass.

    Raises:
        ValueError: If the config type is not registered.
    """
    solver_cls = _SOLVER_DISPATCH.get(type(cfg))
    if solver_cls is None:
        raise ValueError(
            f"No solver registered for config type {type(cfg).__name__}"
        )
    return solver_cls


def make_kinematics(cfg: KinematicsConfig | str = DEFAULT_KINEMATICS) -> KinematicsSolver:
    """Build a kinematics solver.

    Args:
        cfg: Either a ``KinematicsConfig`` instance or a registered name
            (default ``'scorbot-er3'``).

    Returns:
        A solver bound to the resolved config.
    """
    resolved_cfg = _resolve_config(cfg)
    solver_cls = _solver_class_for_config(resolved_cfg)
    return solver_cls(resolved_cfg)


register_kinematics(DEFAULT_KINEMATICS, RRRArmConfig, RRRArmKinematics)
