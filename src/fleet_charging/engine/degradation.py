"""Calendar capacity fade.

    remaining = initial × (1 − annual_degradation) ^ years

3.5%/year is the default, typical of the deep daily cycles fleet vehicles
see.  Temperature and depth-of-discharge effects are not modelled.
"""

from __future__ import annotations

from fleet_charging.engine.sampling import linspace
from fleet_charging.errors import InvalidInputError, require_finite_inputs
from fleet_charging.models.results import BatteryCapacityAtTime


def _check_rate(annual_degradation: float) -> None:
    if not 0 <= annual_degradation < 1:
        raise InvalidInputError(
            f"annual_degradation must be in [0, 1), got {annual_degradation}"
        )


def remaining_capacity(
    initial_capacity: float,
    years: float,
    annual_degradation: float = 0.035,
) -> float:
    """Capacity left after ``years`` of service (same units as ``initial_capacity``)."""
    require_finite_inputs(
        initial_capacity=initial_capacity, years=years, annual_degradation=annual_degradation,
    )
    _check_rate(annual_degradation)
    if years < 0:
        raise InvalidInputError(f"years must not be negative, got {years}")
    return initial_capacity * (1 - annual_degradation) ** years


def capacity_fade_curve(
    initial_capacity: float,
    horizon_years: float = 5.0,
    num_points: int = 5,
    annual_degradation: float = 0.035,
) -> list[BatteryCapacityAtTime]:
    """Remaining capacity sampled at ``num_points`` years across [0, horizon_years]."""
    require_finite_inputs(
        initial_capacity=initial_capacity, horizon_years=horizon_years,
        annual_degradation=annual_degradation,
    )
    _check_rate(annual_degradation)
    if horizon_years < 0:
        raise InvalidInputError(f"horizon_years must not be negative, got {horizon_years}")
    return [
        BatteryCapacityAtTime(
            time=year,
            capacity=remaining_capacity(initial_capacity, year, annual_degradation),
        )
        for year in linspace(0.0, horizon_years, num_points)
    ]
