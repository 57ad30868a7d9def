"""Charging cost model — tariff × energy, tariff sweeps, flat vs off-peak.

Off-peak logic (per vehicle, per day):

  cycles/day = daily_energy / usable_capacity

  cycles/day < 1  → one overnight charge covers the day:
                    reduced = daily_energy × off_peak_rate
  otherwise       → one full overnight charge, remainder topped up by day:
                    reduced = usable × off_peak_rate
                            + (daily_energy − usable) × flat_rate
"""

from __future__ import annotations

from fleet_charging.config.engine import TariffConfig
from fleet_charging.engine.sampling import linspace
from fleet_charging.errors import InvalidInputError, NumericDegeneracyError, require_finite_inputs
from fleet_charging.models.results import ChargeCostAtRate, TariffSplit

DAYS_PER_YEAR = 365.25


def charge_cost(energy: float, rate: float) -> float:
    """Cost (£) of ``energy`` kWh at ``rate`` £/kWh."""
    require_finite_inputs(energy=energy, rate=rate)
    return rate * energy


def charge_cost_across_rates(
    energy: float,
    min_rate: float,
    max_rate: float,
    num_points: int = 50,
) -> list[ChargeCostAtRate]:
    """Cost of ``energy`` at ``num_points`` tariffs evenly spaced over [min_rate, max_rate]."""
    require_finite_inputs(energy=energy, min_rate=min_rate, max_rate=max_rate)
    if min_rate > max_rate:
        raise InvalidInputError(f"min_rate ({min_rate}) must not exceed max_rate ({max_rate})")

    return [
        ChargeCostAtRate(rate=rate, cost=energy * rate)
        for rate in linspace(min_rate, max_rate, num_points)
    ]


def split_tariff_cost(
    daily_energy: float,
    usable_capacity: float,
    tariff: TariffConfig | None = None,
) -> TariffSplit:
    """Daily per-vehicle cost at the flat tariff vs charging off-peak first."""
    tariff = tariff or TariffConfig()

    require_finite_inputs(daily_energy=daily_energy, usable_capacity=usable_capacity)
    if daily_energy < 0:
        raise InvalidInputError(f"daily_energy must not be negative, got {daily_energy}")
    if usable_capacity <= 0:
        raise NumericDegeneracyError(
            f"usable capacity is {usable_capacity} kWh; the DoD band has collapsed"
        )

    cycles_per_day = daily_energy / usable_capacity
    off_peak_covers_day = cycles_per_day < 1

    if off_peak_covers_day:
        reduced = charge_cost(daily_energy, tariff.off_peak_rate)
    else:
        reduced = charge_cost(usable_capacity, tariff.off_peak_rate)
        reduced += charge_cost(daily_energy - usable_capacity, tariff.flat_rate)

    return TariffSplit(
        num_discharge_cycles_per_day=cycles_per_day,
        num_discharge_cycles_per_year=cycles_per_day * DAYS_PER_YEAR,
        flat_cost=charge_cost(daily_energy, tariff.flat_rate),
        reduced_cost=reduced,
        off_peak_covers_day=off_peak_covers_day,
    )
