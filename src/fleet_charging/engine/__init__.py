"""Engine — charge time, cost, degradation, charge profile, report assembly."""

from fleet_charging.engine.charge_time import charge_time, cv_time_constant
from fleet_charging.engine.cost import charge_cost, charge_cost_across_rates, split_tariff_cost
from fleet_charging.engine.degradation import capacity_fade_curve, remaining_capacity
from fleet_charging.engine.charge_profile import simulate_charge_profile
from fleet_charging.engine.report import build_dashboard_series, build_report
from fleet_charging.engine.sampling import linspace

__all__ = [
    "charge_time",
    "cv_time_constant",
    "charge_cost",
    "charge_cost_across_rates",
    "split_tariff_cost",
    "remaining_capacity",
    "capacity_fade_curve",
    "simulate_charge_profile",
    "build_report",
    "build_dashboard_series",
    "linspace",
]
