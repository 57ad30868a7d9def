"""Engine configuration — tariffs and modelling defaults.

Nothing in the engine hard-codes a rate or an efficiency; every such number
lives here and is passed in.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "FLEET_CHARGING_"


class TariffConfig(BaseModel):
    """Electricity tariffs used by the cost model."""

    flat_rate: float = Field(default=0.245, ge=0, description="Flat daytime tariff (£/kWh)")
    off_peak_ratio: float = Field(
        default=0.5, ge=0, le=1.0,
        description="Off-peak tariff as a fraction of the flat tariff "
                    "(0.5 = overnight electricity costs half).",
    )

    @property
    def off_peak_rate(self) -> float:
        """Overnight tariff (£/kWh) = flat_rate × off_peak_ratio."""
        return self.flat_rate * self.off_peak_ratio


class EngineConfig(BaseModel):
    """Modelling defaults plus the sampling used for dashboard series."""

    tariff: TariffConfig = Field(default_factory=TariffConfig)

    # --- Battery behaviour ---
    charge_efficiency: float = Field(default=0.9, gt=0, le=1.0, description="Wall-to-battery charging efficiency")
    annual_degradation: float = Field(
        default=0.035, ge=0, lt=1.0,
        description="Capacity lost per year (fraction). 3.5% is typical for "
                    "the deep daily cycles fleet vehicles see.",
    )

    # --- Charge profile ---
    speed: float = Field(default=40.0, gt=0, description="Average driving speed (mph)")
    soc_max: float = Field(default=0.99, gt=0, lt=1.0, description="SOC the charger stops at (fraction)")

    # --- Cost-vs-tariff curve ---
    min_rate: float = Field(default=0.1, ge=0, description="Lowest tariff sampled (£/kWh)")
    max_rate: float = Field(default=0.3, ge=0, description="Highest tariff sampled (£/kWh)")
    rate_points: int = Field(default=5, ge=1, description="Number of tariff samples")

    # --- Degradation curve ---
    degradation_horizon_years: float = Field(default=5.0, ge=0, description="Years covered by the fade curve")
    degradation_points: int = Field(default=5, ge=1, description="Number of fade-curve samples")

    @model_validator(mode="after")
    def _check_rate_range(self) -> "EngineConfig":
        if self.min_rate > self.max_rate:
            raise ValueError(f"min_rate ({self.min_rate}) must not exceed max_rate ({self.max_rate})")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineConfig":
        """Build a config, overriding defaults from ``FLEET_CHARGING_*`` variables.

        Recognised: ``FLAT_RATE``, ``OFF_PEAK_RATIO``, ``CHARGE_EFFICIENCY``,
        ``ANNUAL_DEGRADATION``.  Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        tariff: dict[str, str] = {}
        engine: dict[str, object] = {}

        for key, target, field in (
            ("FLAT_RATE", tariff, "flat_rate"),
            ("OFF_PEAK_RATIO", tariff, "off_peak_ratio"),
            ("CHARGE_EFFICIENCY", engine, "charge_efficiency"),
            ("ANNUAL_DEGRADATION", engine, "annual_degradation"),
        ):
            value = env.get(ENV_PREFIX + key)
            if value is not None:
                target[field] = value

        return cls(tariff=TariffConfig(**tariff), **engine)
