"""Report assembly — FleetInput → Report, plus the dashboard chart series.

Pure aggregation over the engine functions.  Inputs are checked before any
computation and every derived scalar must be finite, so a Report is either
complete or not produced at all.
"""

from __future__ import annotations

import logging

from fleet_charging.config.engine import EngineConfig
from fleet_charging.config.fleet import FleetInput
from fleet_charging.engine.charge_profile import simulate_charge_profile
from fleet_charging.engine.charge_time import charge_time
from fleet_charging.engine.cost import charge_cost, charge_cost_across_rates, split_tariff_cost
from fleet_charging.engine.degradation import capacity_fade_curve
from fleet_charging.errors import InvalidInputError, require_finite
from fleet_charging.models.results import DashboardSeries, Report

_LOGGER = logging.getLogger(__name__)


def build_report(fleet: FleetInput, config: EngineConfig | None = None) -> Report:
    """Compute every report scalar for ``fleet``.

    Raises
    ------
    InvalidInputError
        ``charge_power`` is zero (the charge time would be infinite).
    NumericDegeneracyError
        The DoD band tops out at 100%, or any derived value is not finite.
    """
    config = config or EngineConfig()

    if fleet.charge_power <= 0:
        raise InvalidInputError(f"chargePower must be positive to build a report, got {fleet.charge_power}")

    # ── Per-vehicle energy ─────────────────────────────────────────────
    usable_capacity = fleet.usable_capacity_kwh
    daily_energy_per_ev = fleet.daily_mileage / fleet.efficiency
    mileage_per_charge = usable_capacity * fleet.efficiency

    # ── Charging time across the DoD band ──────────────────────────────
    charge_time_per_ev = charge_time(
        fleet.soc_low,
        fleet.soc_high,
        fleet.battery_capacity,
        fleet.charge_power,
        config.charge_efficiency,
    )

    # ── Fleet totals & tariff split ────────────────────────────────────
    total_fleet_energy_demand = fleet.num_ev * daily_energy_per_ev
    split = split_tariff_cost(daily_energy_per_ev, usable_capacity, config.tariff)

    derived = {
        "usable_capacity": usable_capacity,
        "daily_energy_consumption_per_ev": daily_energy_per_ev,
        "charge_time_per_ev": charge_time_per_ev,
        "mileage_per_charge": mileage_per_charge,
        "total_fleet_energy_demand": total_fleet_energy_demand,
        "total_charging_cost": charge_cost(fleet.battery_capacity, config.tariff.flat_rate),
        "flat_daily_cost": split.flat_cost,
        "reduced_charging_cost": split.reduced_cost,
        "num_discharge_cycles_per_year": split.num_discharge_cycles_per_year,
    }
    for name, value in derived.items():
        require_finite(name, value)

    _LOGGER.debug(
        "Report: %d EVs, %.2f kWh/day each, %.2f h charge, %.2f → %.2f £/day",
        fleet.num_ev, daily_energy_per_ev, charge_time_per_ev,
        split.flat_cost, split.reduced_cost,
    )

    return Report(
        num_ev=fleet.num_ev,
        daily_mileage=fleet.daily_mileage,
        battery_capacity=fleet.battery_capacity,
        charge_power=fleet.charge_power,
        efficiency=fleet.efficiency,
        battery_dod=fleet.battery_dod,
        working_hours=fleet.working_hours,
        **derived,
    )


def build_dashboard_series(fleet: FleetInput, config: EngineConfig | None = None) -> DashboardSeries:
    """Charge profile, fleet cost-vs-tariff curve, and capacity fade for ``fleet``."""
    config = config or EngineConfig()
    start_hour, end_hour = fleet.working_hours

    profile = simulate_charge_profile(
        fleet.battery_capacity,
        fleet.charge_power,
        fleet.daily_mileage,
        fleet.efficiency,
        start_hour,
        end_hour,
        speed=config.speed,
        soc_max=config.soc_max,
        charge_efficiency=config.charge_efficiency,
    )

    fleet_daily_energy = fleet.num_ev * fleet.daily_mileage / fleet.efficiency
    costs = charge_cost_across_rates(
        fleet_daily_energy, config.min_rate, config.max_rate, config.rate_points,
    )

    fade = capacity_fade_curve(
        fleet.battery_capacity,
        horizon_years=config.degradation_horizon_years,
        num_points=config.degradation_points,
        annual_degradation=config.annual_degradation,
    )

    return DashboardSeries(charge_profile=profile, cost_across_rates=costs, capacity_fade=fade)
