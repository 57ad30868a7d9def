"""Result types — the contract between engine, API, and dashboard.

Every model serialises with the camelCase keys the charting front-end reads
(``model_dump(by_alias=True)``) and accepts snake_case names on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════
# Chart series points
# ═══════════════════════════════════════════════════════════════════════════

class ChargeProfilePoint(BaseModel):
    """Battery state at one simulated hour of the working day."""

    model_config = ConfigDict(populate_by_name=True)

    time: float
    """Hour of day (e.g. 7.0 = 07:00)."""

    capacity: float
    """Energy held in the battery (kWh)."""

    soc: float = Field(alias="SOC")
    """State of charge as a fraction of nameplate capacity (0–1)."""

    mileage: float
    """Miles still to drive today (≥ 0)."""


class ChargeCostAtRate(BaseModel):
    """Charging cost at one sampled tariff."""

    rate: float
    """Tariff (£/kWh)."""

    cost: float
    """energy × rate (£)."""


class BatteryCapacityAtTime(BaseModel):
    """Remaining capacity after some years of cycling."""

    time: float
    """Years in service."""

    capacity: float
    """Remaining capacity (kWh)."""


# ═══════════════════════════════════════════════════════════════════════════
# Cost split
# ═══════════════════════════════════════════════════════════════════════════

class TariffSplit(BaseModel):
    """Daily charging cost for one vehicle: flat tariff vs off-peak-first."""

    num_discharge_cycles_per_day: float
    """daily_energy / usable_capacity."""

    num_discharge_cycles_per_year: float
    """Cycles per day × 365.25."""

    flat_cost: float
    """Whole daily energy bought at the flat tariff (£)."""

    reduced_cost: float
    """One overnight off-peak charge, any remainder topped up at the flat tariff (£)."""

    off_peak_covers_day: bool
    """True when a single overnight charge covers the whole day (cycles/day < 1)."""


# ═══════════════════════════════════════════════════════════════════════════
# Report
# ═══════════════════════════════════════════════════════════════════════════

class Report(BaseModel):
    """Fleet inputs echoed back plus every derived scalar."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # --- Echoed inputs ---
    num_ev: int = Field(alias="numEV")
    daily_mileage: float = Field(alias="dailyMileage")
    battery_capacity: float = Field(alias="batteryCapacity")
    charge_power: float = Field(alias="chargePower")
    efficiency: float = Field(alias="efficiency")
    battery_dod: tuple[float, float] = Field(alias="batteryDOD")
    working_hours: tuple[float, float] = Field(alias="workingHours")

    # --- Derived ---
    usable_capacity: float = Field(alias="usableCapacity")
    """(DoD high − DoD low) / 100 × battery_capacity (kWh)."""

    daily_energy_consumption_per_ev: float = Field(alias="dailyEnergyConsumptionPerEV")
    """daily_mileage / efficiency (kWh)."""

    charge_time_per_ev: float = Field(alias="chargeTimePerEV")
    """Hours to charge from the bottom to the top of the DoD band."""

    mileage_per_charge: float = Field(alias="mileagePerCharge")
    """usable_capacity × efficiency (mi)."""

    total_fleet_energy_demand: float = Field(alias="totalFleetEnergyDemand")
    """num_ev × daily energy per EV (kWh/day)."""

    total_charging_cost: float = Field(alias="totalChargingCost")
    """One full battery charge at the flat tariff: battery_capacity × flat_rate (£)."""

    flat_daily_cost: float = Field(alias="flatDailyCost")
    """Per-EV daily energy, everything at the flat tariff (£)."""

    reduced_charging_cost: float = Field(alias="reducedChargingCost")
    """Per-EV daily cost when charging off-peak first (£)."""

    num_discharge_cycles_per_year: float = Field(alias="numDischargeCyclesPerYear")


class DashboardSeries(BaseModel):
    """Chart data for one fleet input — consumed unmodified by the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    charge_profile: list[ChargeProfilePoint] = Field(alias="chargeProfile")
    cost_across_rates: list[ChargeCostAtRate] = Field(alias="costAcrossRates")
    capacity_fade: list[BatteryCapacityAtTime] = Field(alias="capacityFade")
