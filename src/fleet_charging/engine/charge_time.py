"""Two-phase charge-time model.

Charging is split at 80% SOC:

  1. Constant current (CC), below 80%: capacity rises linearly at
     ``charge_efficiency × charge_power`` kW.
  2. Constant voltage (CV), above 80%: SOC approaches 100% exponentially,
        SOC(t) = 1 − 0.2 × exp(−t / τ)
     so the time from 80% to ``soc`` is ``τ × ln(0.2 / (1 − soc))``.

τ is tied to the CC phase length:
    t_p1 = 0.8 × capacity / (charge_efficiency × charge_power)
    τ    = t_p1 / ln 2
so the CV climb from 80% to 90% takes exactly ``t_p1``.
"""

from __future__ import annotations

import math

from fleet_charging.errors import InvalidInputError, NumericDegeneracyError, require_finite_inputs

CV_THRESHOLD_SOC = 0.8
"""SOC at which charging switches from constant current to constant voltage."""


def cv_time_constant(capacity: float, charge_power: float, charge_efficiency: float) -> float:
    """τ (hours) for the CV phase.  Infinite when no power is delivered."""
    delivered_kw = charge_efficiency * charge_power
    if delivered_kw <= 0:
        return math.inf
    t_p1 = CV_THRESHOLD_SOC * capacity / delivered_kw
    return t_p1 / math.log(2)


def _cv_hours_from_threshold(soc: float, tau: float) -> float:
    """Hours to climb from 80% to ``soc`` in the CV phase."""
    return tau * math.log((1.0 - CV_THRESHOLD_SOC) / (1.0 - soc))


def charge_time(
    soc_start: float,
    soc_end: float,
    capacity: float,
    charge_power: float,
    charge_efficiency: float = 0.9,
) -> float:
    """Hours needed to charge from ``soc_start`` to ``soc_end``.

    Parameters
    ----------
    soc_start, soc_end : float
        State of charge as fractions (0–1), ``soc_start <= soc_end < 1``.
    capacity : float
        Battery capacity (kWh).
    charge_power : float
        Charger power (kW), must be positive.
    charge_efficiency : float
        Wall-to-battery efficiency (0–1].

    Raises
    ------
    InvalidInputError
        Non-finite or non-positive capacity / power, efficiency outside
        (0, 1], SOC outside [0, 1] or reversed.
    NumericDegeneracyError
        ``soc_end >= 1`` — the CV phase never reaches 100%.
    """
    require_finite_inputs(
        soc_start=soc_start, soc_end=soc_end, capacity=capacity,
        charge_power=charge_power, charge_efficiency=charge_efficiency,
    )
    if capacity <= 0:
        raise InvalidInputError(f"capacity must be positive, got {capacity}")
    if charge_power <= 0:
        raise InvalidInputError(f"charge_power must be positive, got {charge_power}")
    if not 0 < charge_efficiency <= 1:
        raise InvalidInputError(f"charge_efficiency must be in (0, 1], got {charge_efficiency}")
    if not (0 <= soc_start <= 1 and 0 <= soc_end <= 1):
        raise InvalidInputError(f"SOC values must be in [0, 1], got {soc_start} → {soc_end}")
    if soc_start > soc_end:
        raise InvalidInputError(f"soc_start ({soc_start}) must not exceed soc_end ({soc_end})")
    if soc_end >= 1.0:
        raise NumericDegeneracyError("charge time to 100% SOC is unbounded; clamp soc_end below 1")

    delivered_kw = charge_efficiency * charge_power
    hours = 0.0

    # ── CC phase: soc_start → min(soc_end, 0.8) ────────────────────────
    if soc_start < CV_THRESHOLD_SOC:
        cc_end = min(soc_end, CV_THRESHOLD_SOC)
        hours += (cc_end - soc_start) * capacity / delivered_kw

    # ── CV phase: max(soc_start, 0.8) → soc_end ───────────────────────
    if soc_end > CV_THRESHOLD_SOC:
        tau = cv_time_constant(capacity, charge_power, charge_efficiency)
        hours += _cv_hours_from_threshold(soc_end, tau)
        if soc_start > CV_THRESHOLD_SOC:
            hours -= _cv_hours_from_threshold(soc_start, tau)

    return hours
