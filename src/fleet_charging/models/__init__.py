"""Result models — engine output contracts."""

from fleet_charging.models.results import (
    BatteryCapacityAtTime,
    ChargeCostAtRate,
    ChargeProfilePoint,
    DashboardSeries,
    Report,
    TariffSplit,
)

__all__ = [
    "BatteryCapacityAtTime",
    "ChargeCostAtRate",
    "ChargeProfilePoint",
    "DashboardSeries",
    "Report",
    "TariffSplit",
]
