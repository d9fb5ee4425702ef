"""Tests for rrr_kins.utils.helpers."""

from __future__ import annotations

import math

import pytest

from rrr_kins.utils.helpers import all_finite, clamp, safe_acos_deg


def test_clamp_inside_and_outside_interval():
    assert clamp(0.5, -1.0, 1.0) == 0.5
    assert clamp(3.0, -1.0, 1.0) == 1.0
    assert clamp(-3.0, -1.0, 1.0) == -1.0


def test_safe_acos_regular_values():
    assert safe_acos_deg(1.0) == pytest.approx(0.0)
    assert safe_acos_deg(0.0) == pytest.approx(90.0)
    assert safe_acos_deg(0.5) == pytest.approx(60.0)
    assert safe_acos_deg(-1.0) == pytest.approx(180.0)


def test_safe_acos_clamps_rounding_overshoot():
    assert safe_acos_deg(1.0 + 1e-12) == 0.0
    assert safe_acos_deg(-1.0 - 1e-12) == pytest.approx(180.0)
    assert not math.isnan(safe_acos_deg(1.0 + 5e-7))


@pytest.mark.parametrize("value", [1.1, -1.01, float("nan")])
def test_safe_acos_rejects_real_domain_errors(value):
    with pytest.raises(ValueError):
        safe_acos_deg(value)


def test_all_finite():
    assert all_finite([0.0, 1.0, -2.5])
    assert not all_finite([0.0, float("nan")])
    assert not all_finite([float("inf"), 1.0])
