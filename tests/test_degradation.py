"""Tests for engine/degradation.py — annual capacity fade."""

from __future__ import annotations

import math

import pytest

from fleet_charging.engine.degradation import capacity_fade_curve, remaining_capacity
from fleet_charging.errors import InvalidInputError


@pytest.mark.parametrize("capacity", [1.0, 60.0, 350.0])
@pytest.mark.parametrize("rate", [0.0, 0.035, 0.2])
def test_no_fade_at_year_zero(capacity, rate):
    assert remaining_capacity(capacity, 0, rate) == capacity


def test_one_year_at_default_rate():
    # 100 × (1 − 0.035) = 96.5
    assert remaining_capacity(100, 1) == pytest.approx(100 * 0.965, rel=1e-12)


def test_compounds_annually():
    # 60 × 0.965³ = 53.924...
    assert remaining_capacity(60, 3, 0.035) == pytest.approx(60 * 0.965 ** 3)


def test_strictly_decreasing_in_years():
    values = [remaining_capacity(60, y) for y in range(11)]
    assert all(b < a for a, b in zip(values, values[1:]))


def test_zero_rate_holds_capacity():
    assert remaining_capacity(60, 8, 0.0) == 60


def test_fractional_years():
    assert remaining_capacity(60, 2.5) == pytest.approx(60 * 0.965 ** 2.5)


class TestFadeCurve:

    def test_default_five_points_over_five_years(self):
        curve = capacity_fade_curve(60)
        assert [p.time for p in curve] == pytest.approx([0, 1.25, 2.5, 3.75, 5])
        assert curve[0].capacity == 60
        assert curve[-1].capacity == pytest.approx(60 * 0.965 ** 5)

    def test_uses_given_rate(self):
        curve = capacity_fade_curve(100, horizon_years=2, num_points=3, annual_degradation=0.1)
        assert [p.capacity for p in curve] == pytest.approx([100, 90, 81])

    def test_single_point(self):
        curve = capacity_fade_curve(60, num_points=1)
        assert len(curve) == 1
        assert curve[0].time == 0
        assert curve[0].capacity == 60


class TestDegradationErrors:

    def test_rate_of_one_rejected(self):
        with pytest.raises(InvalidInputError):
            remaining_capacity(60, 1, 1.0)

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidInputError):
            remaining_capacity(60, 1, -0.01)

    def test_negative_years_rejected(self):
        with pytest.raises(InvalidInputError):
            remaining_capacity(60, -1)

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_capacity_rejected(self, bad):
        with pytest.raises(InvalidInputError, match="initial_capacity"):
            remaining_capacity(bad, 1)

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_years_rejected(self, bad):
        with pytest.raises(InvalidInputError, match="years"):
            remaining_capacity(60, bad)

    def test_nan_rate_rejected(self):
        with pytest.raises(InvalidInputError):
            remaining_capacity(60, 1, math.nan)

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_horizon_rejected(self, bad):
        with pytest.raises(InvalidInputError, match="horizon_years"):
            capacity_fade_curve(60, horizon_years=bad)

    def test_non_finite_curve_capacity_rejected(self):
        with pytest.raises(InvalidInputError):
            capacity_fade_curve(math.nan)

    def test_negative_horizon_rejected(self):
        with pytest.raises(InvalidInputError):
            capacity_fade_curve(60, horizon_years=-5)
