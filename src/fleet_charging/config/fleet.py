"""Fleet input record — one request's worth of fleet parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FleetInput(BaseModel):
    """Fleet parameters, immutable for the duration of one computation.

    Field aliases follow the JSON shape the web form posts
    (``numEV``, ``batteryDOD``, ...); snake_case names work too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    num_ev: int = Field(default=100, gt=0, alias="numEV", description="Number of vehicles in the fleet")
    daily_mileage: float = Field(default=250.0, gt=0, alias="dailyMileage", description="Miles driven per vehicle per day (mi)")
    battery_capacity: float = Field(default=60.0, gt=0, alias="batteryCapacity", description="Nameplate battery capacity (kWh)")
    charge_power: float = Field(default=50.0, ge=0, alias="chargePower", description="Charger power (kW)")
    efficiency: float = Field(default=4.5, gt=0, alias="efficiency", description="Vehicle efficiency (mi/kWh)")
    battery_dod: tuple[float, float] = Field(
        default=(10.0, 90.0), alias="batteryDOD",
        description="Usable SOC band [low, high] in percent. The battery is "
                    "cycled between these two levels.",
    )
    working_hours: tuple[float, float] = Field(
        default=(7.0, 19.0), alias="workingHours",
        description="Operating window [start, end] as hour of day (0–24).",
    )

    @model_validator(mode="after")
    def _check_bands(self) -> "FleetInput":
        low, high = self.battery_dod
        if not (0 <= low <= 100 and 0 <= high <= 100):
            raise ValueError(f"batteryDOD must lie within [0, 100], got {list(self.battery_dod)}")
        if low >= high:
            raise ValueError(f"batteryDOD must be ascending, got {list(self.battery_dod)}")
        start, end = self.working_hours
        if not (0 <= start <= 24 and 0 <= end <= 24):
            raise ValueError(f"workingHours must lie within [0, 24], got {list(self.working_hours)}")
        if start >= end:
            raise ValueError(f"workingHours must be ascending, got {list(self.working_hours)}")
        return self

    # ── Derived quantities ─────────────────────────────────────────────

    @property
    def soc_low(self) -> float:
        """Lower edge of the DoD band as a fraction."""
        return self.battery_dod[0] / 100.0

    @property
    def soc_high(self) -> float:
        """Upper edge of the DoD band as a fraction."""
        return self.battery_dod[1] / 100.0

    @property
    def usable_capacity_kwh(self) -> float:
        """Energy available between the two DoD edges (kWh)."""
        return (self.battery_dod[1] - self.battery_dod[0]) / 100.0 * self.battery_capacity
