# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Editor-style configuration repair.

Optional layer that runs on raw configuration mappings before any core
object is built. Out-of-range values are clamped into the documented
ranges and each repair is logged as a warning. The core types never call
into this module; they reject the same inputs with ConfigurationError.
"""
import logging
from typing import Any, Mapping

import numpy as np

logger = logging.getLogger(__name__)

# Single-precision epsilon: still distinguishable from 1.0 in double precision
EPSILON = float(np.finfo(np.float32).eps)

_ANGLE_RANGES = {
    "inclination_deg": (0.0, 180.0, "Inclination"),
    "raan_deg": (0.0, 360.0, "Longitude of ascending node"),
    "arg_periapsis_deg": (0.0, 360.0, "Argument of periapsis"),
    "epoch_phase_deg": (0.0, 360.0, "Epoch phase"),
}


def _clamp(value: float, lo: float, hi: float) -> float:
    return float(min(max(value, lo), hi))


def clamp_orbit_config(raw: Mapping[str, Any], name: str = "orbit") -> dict[str, Any]:
    """
    Repair orbital element values the way an editor slider would.

    - semi_major_axis_m == 0 is nudged to EPSILON; a negative value is
      replaced by its magnitude.
    - eccentricity is clamped into [0, 1 − EPSILON].
    - inclination into [0, 180], the other angles into [0, 360].

    Args:
        raw: Mapping with OrbitElements field names. Unknown keys are
            passed through untouched.
        name: Label used in log messages.

    Returns:
        New dict with repaired values.
    """
    out = dict(raw)

    a = float(out.get("semi_major_axis_m", 0.0))
    if a == 0:
        logger.warning("%s: semi-major axis cannot be 0, nudging to %g", name, EPSILON)
        a = EPSILON
    elif a < 0:
        logger.warning("%s: semi-major axis %g is negative, using its magnitude", name, a)
        a = -a
    out["semi_major_axis_m"] = a

    e = float(out.get("eccentricity", 0.0))
    if e < 0 or e >= 1:
        repaired = _clamp(e, 0.0, 1.0 - EPSILON)
        logger.warning(
            "%s: eccentricity must be in range [0, 1), clamping %g to %g", name, e, repaired,
        )
        e = repaired
    out["eccentricity"] = e

    for key, (lo, hi, label) in _ANGLE_RANGES.items():
        if key not in out:
            continue
        value = float(out[key])
        if value < lo or value > hi:
            repaired = _clamp(value, lo, hi)
            logger.warning(
                "%s: %s must be in range [%g, %g], clamping %g to %g",
                name, label, lo, hi, value, repaired,
            )
            value = repaired
        out[key] = value

    return out


def clamp_body_config(raw: Mapping[str, Any], name: str = "body") -> dict[str, Any]:
    """Raise non-positive mass or radius to EPSILON, logging each repair."""
    out = dict(raw)
    for key, label in (("mass", "mass"), ("radius", "radius")):
        value = float(out.get(key, 0.0))
        if value <= 0:
            logger.warning("%s: %s must be > 0, raising %g to %g", name, label, value, EPSILON)
            value = EPSILON
        out[key] = value
    return out
