"""Configuration models — fleet inputs and engine settings."""

from fleet_charging.config.fleet import FleetInput
from fleet_charging.config.engine import EngineConfig, TariffConfig

__all__ = [
    "FleetInput",
    "EngineConfig",
    "TariffConfig",
]
