"""Shared test fixtures — the web form's default fleet."""

from __future__ import annotations

import pytest

from fleet_charging.config import EngineConfig, FleetInput, TariffConfig


@pytest.fixture
def fleet() -> FleetInput:
    return FleetInput(
        num_ev=100,
        daily_mileage=250,
        battery_capacity=60,
        charge_power=50,
        efficiency=4.5,
        battery_dod=(10, 90),
        working_hours=(7, 19),
    )


@pytest.fixture
def tariff() -> TariffConfig:
    return TariffConfig(flat_rate=0.245, off_peak_ratio=0.5)


@pytest.fixture
def engine_config(tariff: TariffConfig) -> EngineConfig:
    return EngineConfig(
        tariff=tariff,
        charge_efficiency=0.9,
        annual_degradation=0.035,
        speed=40,
        soc_max=0.99,
        min_rate=0.1,
        max_rate=0.3,
        rate_points=5,
        degradation_horizon_years=5,
        degradation_points=5,
    )
