"""Tests for engine/report.py — FleetInput → Report and dashboard series.

Default fleet: 100 EVs × 250 mi at 4.5 mi/kWh, 60 kWh packs cycled 10–90%,
50 kW chargers, 0.245 £/kWh flat, half that off-peak.
"""

from __future__ import annotations

import math

import pytest

from fleet_charging.config import EngineConfig, FleetInput, TariffConfig
from fleet_charging.engine.report import build_dashboard_series, build_report
from fleet_charging.errors import InvalidInputError, NumericDegeneracyError


class TestReportScalars:

    def test_usable_capacity(self, fleet: FleetInput, engine_config: EngineConfig):
        # (90 − 10) / 100 × 60 = 48 kWh
        assert build_report(fleet, engine_config).usable_capacity == pytest.approx(48.0)

    def test_daily_energy_per_ev(self, fleet: FleetInput, engine_config: EngineConfig):
        # 250 / 4.5 = 55.56 kWh
        assert build_report(fleet, engine_config).daily_energy_consumption_per_ev == pytest.approx(250 / 4.5)

    def test_charge_time_across_dod_band(self, fleet: FleetInput, engine_config: EngineConfig):
        assert build_report(fleet, engine_config).charge_time_per_ev == pytest.approx(2.0)

    def test_mileage_per_charge(self, fleet: FleetInput, engine_config: EngineConfig):
        # 48 × 4.5 = 216 mi
        assert build_report(fleet, engine_config).mileage_per_charge == pytest.approx(216.0)

    def test_fleet_energy_demand(self, fleet: FleetInput, engine_config: EngineConfig):
        assert build_report(fleet, engine_config).total_fleet_energy_demand == pytest.approx(100 * 250 / 4.5)

    def test_flat_and_reduced_cost(self, fleet: FleetInput, engine_config: EngineConfig):
        report = build_report(fleet, engine_config)
        daily = 250 / 4.5
        # one 60 kWh pack at the flat rate: 60 × 0.245 = 14.70
        assert report.total_charging_cost == pytest.approx(60 * 0.245)
        # daily energy at the flat rate: 55.56 × 0.245 = 13.61
        assert report.flat_daily_cost == pytest.approx(daily * 0.245)
        # 1.157 cycles/day → 48 kWh off-peak + 7.56 kWh flat = 5.88 + 1.85 = 7.73
        assert report.reduced_charging_cost == pytest.approx(48 * 0.1225 + (daily - 48) * 0.245)

    def test_cycles_per_year(self, fleet: FleetInput, engine_config: EngineConfig):
        report = build_report(fleet, engine_config)
        assert report.num_discharge_cycles_per_year == pytest.approx((250 / 4.5) / 48 * 365.25)

    def test_short_day_charges_off_peak_only(self, engine_config: EngineConfig):
        """20 kWh/day against 48 kWh usable → no flat-rate component."""
        fleet = FleetInput(daily_mileage=90, efficiency=4.5)
        report = build_report(fleet, engine_config)
        assert report.reduced_charging_cost == 20.0 * engine_config.tariff.off_peak_rate

    def test_echoes_inputs(self, fleet: FleetInput, engine_config: EngineConfig):
        report = build_report(fleet, engine_config)
        assert report.num_ev == 100
        assert report.battery_dod == (10, 90)
        assert report.working_hours == (7, 19)

    def test_tariff_comes_from_config(self, fleet: FleetInput):
        cheap = EngineConfig(tariff=TariffConfig(flat_rate=0.10, off_peak_ratio=0.5))
        report = build_report(fleet, cheap)
        assert report.total_charging_cost == pytest.approx(60 * 0.10)
        assert report.flat_daily_cost == pytest.approx(250 / 4.5 * 0.10)
        assert report.reduced_charging_cost == pytest.approx(48 * 0.05 + (250 / 4.5 - 48) * 0.10)

    def test_total_cost_prices_one_pack(self, engine_config: EngineConfig):
        """Independent of mileage: a longer day changes the daily cost, not this."""
        short = build_report(FleetInput(daily_mileage=90), engine_config)
        long = build_report(FleetInput(daily_mileage=400), engine_config)
        assert short.total_charging_cost == long.total_charging_cost == pytest.approx(60 * 0.245)
        assert short.flat_daily_cost < long.flat_daily_cost

    def test_default_config(self, fleet: FleetInput, engine_config: EngineConfig):
        assert build_report(fleet) == build_report(fleet, engine_config)

    def test_camel_case_dump(self, fleet: FleetInput):
        dumped = build_report(fleet).model_dump(by_alias=True)
        for key in (
            "numEV", "batteryDOD", "workingHours", "dailyEnergyConsumptionPerEV",
            "chargeTimePerEV", "mileagePerCharge", "totalFleetEnergyDemand",
            "totalChargingCost", "flatDailyCost", "reducedChargingCost", "numDischargeCyclesPerYear",
        ):
            assert key in dumped


class TestReportErrors:

    def test_zero_charge_power_rejected(self):
        with pytest.raises(InvalidInputError):
            build_report(FleetInput(charge_power=0))

    def test_dod_to_full_is_degenerate(self):
        with pytest.raises(NumericDegeneracyError):
            build_report(FleetInput(battery_dod=(10, 100)))

    def test_infinite_battery_rejected_at_engine_boundary(self):
        with pytest.raises(InvalidInputError, match="capacity"):
            build_report(FleetInput(battery_capacity=math.inf))


class TestDashboardSeries:

    def test_series_lengths(self, fleet: FleetInput, engine_config: EngineConfig):
        series = build_dashboard_series(fleet, engine_config)
        assert len(series.cost_across_rates) == 5
        assert len(series.capacity_fade) == 5
        assert len(series.charge_profile) == 10

    def test_cost_curve_is_fleet_level(self, fleet: FleetInput, engine_config: EngineConfig):
        series = build_dashboard_series(fleet, engine_config)
        fleet_daily = 100 * 250 / 4.5
        assert series.cost_across_rates[0].cost == pytest.approx(fleet_daily * 0.1)
        assert series.cost_across_rates[-1].cost == pytest.approx(fleet_daily * 0.3)

    def test_fade_starts_at_nameplate(self, fleet: FleetInput, engine_config: EngineConfig):
        series = build_dashboard_series(fleet, engine_config)
        assert series.capacity_fade[0].capacity == 60

    def test_profile_stays_in_working_hours(self, fleet: FleetInput, engine_config: EngineConfig):
        series = build_dashboard_series(fleet, engine_config)
        assert all(7 <= p.time <= 19 for p in series.charge_profile)

    def test_zero_power_still_charts(self, engine_config: EngineConfig):
        series = build_dashboard_series(FleetInput(charge_power=0, daily_mileage=500), engine_config)
        assert series.charge_profile[-1].time == 19

    def test_camel_case_dump(self, fleet: FleetInput):
        dumped = build_dashboard_series(fleet).model_dump(by_alias=True)
        assert set(dumped) == {"chargeProfile", "costAcrossRates", "capacityFade"}
        assert "SOC" in dumped["chargeProfile"][0]
