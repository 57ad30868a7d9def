"""Hour-stepped charge profile for one representative vehicle.

The vehicle starts the working day at ``soc_max`` and alternates between two
phases until it has driven its daily mileage or the working day ends:

  Driving   — each hour uses ``speed / efficiency`` kWh and covers ``speed``
              miles, as long as that keeps the battery at or above the floor
              (``battery_capacity × soc_min``).
  Charging  — entered when the next hour of driving would breach the floor.
              Below 80% SOC the battery gains ``charge_efficiency × power``
              kWh per hour; at or above 80% SOC it follows the CV curve
                  SOC = 1 − 0.2 × exp(−hour / τ)
              with τ from the charge-time model.  Charging continues until
              ``soc_max`` or the end of the working day.

One point is recorded per simulated hour, so the run is bounded by the
working-hours window whatever the charger does.

Note: the CV curve is evaluated at the absolute hour of day, not at the time
elapsed since charging began.  This is kept as-is; changing it would shift
every profile above 80% SOC.
"""

from __future__ import annotations

import logging
import math

from fleet_charging.engine.charge_time import CV_THRESHOLD_SOC, cv_time_constant
from fleet_charging.errors import InvalidInputError, require_finite_inputs
from fleet_charging.models.results import ChargeProfilePoint

_LOGGER = logging.getLogger(__name__)


def _validate(
    battery_capacity: float,
    charge_power: float,
    daily_mileage: float,
    efficiency: float,
    start_hour: float,
    end_hour: float,
    speed: float,
    soc_min: float,
    soc_max: float,
    charge_efficiency: float,
    max_charge_power: float,
) -> None:
    require_finite_inputs(
        battery_capacity=battery_capacity, charge_power=charge_power,
        daily_mileage=daily_mileage, efficiency=efficiency, start_hour=start_hour,
        end_hour=end_hour, speed=speed, soc_min=soc_min, soc_max=soc_max,
        charge_efficiency=charge_efficiency, max_charge_power=max_charge_power,
    )
    if battery_capacity <= 0:
        raise InvalidInputError(f"battery_capacity must be positive, got {battery_capacity}")
    if charge_power < 0 or max_charge_power < 0:
        raise InvalidInputError(
            f"charge power must not be negative, got {charge_power} (max {max_charge_power})"
        )
    if daily_mileage < 0:
        raise InvalidInputError(f"daily_mileage must not be negative, got {daily_mileage}")
    if efficiency <= 0:
        raise InvalidInputError(f"efficiency must be positive, got {efficiency}")
    if speed <= 0:
        raise InvalidInputError(f"speed must be positive, got {speed}")
    if not 0 <= soc_min < soc_max <= 1:
        raise InvalidInputError(f"need 0 <= soc_min < soc_max <= 1, got {soc_min}, {soc_max}")
    if not 0 < charge_efficiency <= 1:
        raise InvalidInputError(f"charge_efficiency must be in (0, 1], got {charge_efficiency}")
    if start_hour >= end_hour:
        raise InvalidInputError(f"start_hour must be before end_hour, got {start_hour} → {end_hour}")


def simulate_charge_profile(
    battery_capacity: float,
    charge_power: float,
    daily_mileage: float,
    efficiency: float,
    start_hour: float,
    end_hour: float,
    speed: float = 40,
    soc_min: float = 0,
    soc_max: float = 0.99,
    charge_efficiency: float = 0.9,
    max_charge_power: float = 0,
) -> list[ChargeProfilePoint]:
    """Simulate one working day, one point per hour.

    Parameters
    ----------
    battery_capacity : float
        Nameplate capacity (kWh).
    charge_power : float
        Charger power (kW).  Zero is accepted: a forced charge then makes no
        progress and the day simply runs out.
    daily_mileage : float
        Miles to drive today.
    efficiency : float
        Vehicle efficiency (mi/kWh).
    start_hour, end_hour : float
        Working-hours window (hour of day).
    speed : float
        Average speed (mph).
    soc_min, soc_max : float
        Battery floor and charge ceiling as fractions.
    charge_efficiency : float
        Wall-to-battery efficiency.
    max_charge_power : float
        Vehicle on-board charger limit (kW); 0 means unlimited.

    Returns
    -------
    list[ChargeProfilePoint]
        Points in non-decreasing ``time`` order, all ``time <= end_hour``.
    """
    _validate(
        battery_capacity, charge_power, daily_mileage, efficiency, start_hour,
        end_hour, speed, soc_min, soc_max, charge_efficiency, max_charge_power,
    )

    if max_charge_power != 0:
        charge_power = min(charge_power, max_charge_power)

    capacity = battery_capacity * soc_max
    floor_capacity = battery_capacity * soc_min
    mileage = float(daily_mileage)
    hour = float(start_hour)
    energy_per_hour = speed / efficiency
    delivered_per_hour = charge_efficiency * charge_power
    tau = cv_time_constant(battery_capacity, charge_power, charge_efficiency)

    profile: list[ChargeProfilePoint] = []

    def record() -> None:
        profile.append(ChargeProfilePoint(
            time=hour,
            capacity=capacity,
            soc=capacity / battery_capacity,
            mileage=mileage,
        ))

    while mileage > 0 and hour < end_hour:
        soc = capacity / battery_capacity

        if capacity - energy_per_hour >= floor_capacity:
            # ── Driving ─────────────────────────────────────────────────
            capacity = max(capacity - energy_per_hour, floor_capacity)
            mileage = max(mileage - speed, 0.0)
        else:
            # ── Charging (hour bound checked every iteration) ───────────
            while soc < soc_max and hour < end_hour:
                if soc < CV_THRESHOLD_SOC:
                    capacity = min(capacity + delivered_per_hour, battery_capacity)
                else:
                    cv_soc = 1 - 0.2 * math.exp(-hour / tau)
                    capacity = min(max(cv_soc * battery_capacity, floor_capacity), battery_capacity)
                soc = capacity / battery_capacity
                record()
                hour += 1

        # A fractional start hour can step past end_hour inside the charge loop
        if hour <= end_hour:
            record()
        hour += 1

    if mileage > 0:
        _LOGGER.warning(
            "Working day ended at %.1fh with %.1f mi undriven (SOC %.3f)",
            end_hour, mileage, capacity / battery_capacity,
        )
    _LOGGER.debug("Charge profile: %d points from %.1fh", len(profile), start_hour)
    return profile
