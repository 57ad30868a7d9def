"""Engine error types.

Two failure families:
  - ``InvalidInputError``       — out-of-range, mis-ordered or non-finite
                                  inputs, rejected at the engine boundary
                                  before any work runs.
  - ``NumericDegeneracyError``  — inputs that are in range but make a formula
                                  blow up (SOC end of 100%, collapsed DoD band,
                                  non-finite intermediates).

Both subclass the matching builtin so callers can also catch ``ValueError``
or ``ArithmeticError``.

``FleetInput`` and ``EngineConfig`` are pydantic models: a malformed record
(reversed ``batteryDOD``, hours outside 0–24, a negative EV count) fails at
construction with pydantic's ``ValidationError``, not ``InvalidInputError``.
Callers building those records should catch both; the HTTP API maps both to
422.
"""

from __future__ import annotations

import math


class FleetChargingError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInputError(FleetChargingError, ValueError):
    """An input is outside its allowed range or ordering."""


class NumericDegeneracyError(FleetChargingError, ArithmeticError):
    """A computation would produce NaN or infinity."""


def require_finite_inputs(**values: float) -> None:
    """Raise ``InvalidInputError`` naming the first NaN / ±inf argument."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be finite, got {value!r}")


def require_finite(name: str, value: float) -> float:
    """Return ``value`` unchanged, or raise if it is NaN / ±inf."""
    if not math.isfinite(value):
        raise NumericDegeneracyError(f"{name} is not finite ({value!r})")
    return value
