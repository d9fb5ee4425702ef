"""
Small stateless numeric helpers used across the rrr_kins package.

Provides scalar clamping, a domain-safe inverse cosine, and finiteness
checks for joint and pose inputs.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from rrr_kins.utils.constants import ACOS_DOMAIN_TOLERANCE


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def _validate_acos_argument(value: float, tolerance: float) -> None:
    """Raise if *value* lies farther outside [-1, 1] than *tolerance*.

    Args:
        value: Candidate cosine value.
        tolerance: Accepted overshoot caused by floating-point rounding.

    Raises:
        ValueError: When the overshoot exceeds *tolerance* or value is NaN.
    """
    if not abs(value) <= 1.0 + tolerance:
        raise ValueError(f"acos argument {value!r} outside [-1, 1] beyond tolerance {tolerance}")


def safe_acos_deg(value: float, tolerance: float = ACOS_DOMAIN_TOLERANCE) -> float:
    """Return ``acos(value)`` in degrees after clamping *value* to [-1, 1].

    Rounding near the reachability boundary can push a cosine a few ulps
    past +/-1; such values are clamped.  Larger excursions are errors.

    Args:
        value: Cosine of the wanted angle.
        tolerance: Accepted overshoot beyond [-1, 1].

    Returns:
        Angle in degrees within [0, 180].

    Raises:
        ValueError: If *value* is NaN or outside [-1 - tol, 1 + tol].
    """
    _validate_acos_argument(value, tolerance)
    return float(np.degrees(np.arccos(clamp(value, -1.0, 1.0))))


def all_finite(values: Iterable[float]) -> bool:
    """Return True when every entry of *values* is a finite number.

    Args:
        values: Scalars to check.

    Returns:
        ``False`` if any entry is NaN or infinite.
    """
    return bool(np.all(np.isfinite(np.asarray(list(values), dtype=np.float64))))
