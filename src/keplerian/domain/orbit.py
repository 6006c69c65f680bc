# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Keplerian orbit propagation.

OrbitElements holds the six classical elements (angles in degrees, as
supplied at the configuration boundary). OrbitPropagator binds a set of
elements to a CentralBody and evaluates position, period and apsis
distances as pure functions of time.

Equal-time sampling of position_at_time is not equal arc length: for an
eccentric orbit samples bunch up near apoapsis, where the body is slow.
"""
import math
from dataclasses import dataclass

import numpy as np

from keplerian.domain.central_body import CentralBody
from keplerian.domain.errors import ConfigurationError, PreconditionViolation
from keplerian.domain.orbital_mechanics import (
    KEPLER_ITERATIONS,
    PhysicalConstants,
    apoapsis_distance,
    eccentric_anomaly,
    mean_anomaly,
    mean_motion,
    orbital_period,
    perifocal_position,
    perifocal_to_inertial,
    periapsis_distance,
    radial_distance,
    true_anomaly,
)

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class OrbitElements:
    """
    Classical orbital elements.

    epoch_phase_deg is the mean anomaly at epoch (t = 0). It is added
    linearly to the mean-motion term; it is not a true anomaly.
    """
    semi_major_axis_m: float
    eccentricity: float
    inclination_deg: float = 0.0
    raan_deg: float = 0.0
    arg_periapsis_deg: float = 0.0
    epoch_phase_deg: float = 0.0

    def __post_init__(self) -> None:
        for field_name in (
            "semi_major_axis_m", "eccentricity", "inclination_deg",
            "raan_deg", "arg_periapsis_deg", "epoch_phase_deg",
        ):
            value = getattr(self, field_name)
            if not math.isfinite(value):
                raise ConfigurationError(f"{field_name} must be finite, got {value}")
        if self.semi_major_axis_m == 0:
            raise ConfigurationError("Semi-major axis cannot be 0")
        if self.semi_major_axis_m < 0:
            raise ConfigurationError(
                f"Semi-major axis must be positive for a closed orbit, got {self.semi_major_axis_m}"
            )
        if not 0.0 <= self.eccentricity < 1.0:
            raise ConfigurationError(
                f"Eccentricity must be in range [0, 1), got {self.eccentricity}"
            )

    @property
    def semi_major_axis_cubed(self) -> float:
        a = self.semi_major_axis_m
        return a * a * a

    @property
    def inclination_rad(self) -> float:
        return math.radians(self.inclination_deg)

    @property
    def raan_rad(self) -> float:
        return math.radians(self.raan_deg)

    @property
    def arg_periapsis_rad(self) -> float:
        return math.radians(self.arg_periapsis_deg)

    @property
    def epoch_phase_rad(self) -> float:
        return math.radians(self.epoch_phase_deg)


@dataclass(frozen=True)
class OrbitSnapshot:
    """Intermediate values of one propagation, for diagnostics readouts."""
    time: float
    mean_anomaly: float
    eccentric_anomaly: float
    true_anomaly: float
    distance: float
    perifocal: Vector3
    position: Vector3


def _as_vector(arr: np.ndarray) -> Vector3:
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def _require_non_negative(name: str, value: float) -> None:
    if not (math.isfinite(value) and value >= 0):
        raise PreconditionViolation(f"{name} must be >= 0, got {value}")


class OrbitPropagator:
    """
    Position of a body on a fixed Keplerian orbit.

    Holds references to its elements and central body; owns neither.
    When primary is given, the central body itself moves along that
    orbit and positions are offset by the primary's position at the same
    time instead of the central body's static position.
    """

    def __init__(
        self,
        elements: OrbitElements,
        central_body: CentralBody,
        primary: "OrbitPropagator | None" = None,
    ):
        if central_body is None:
            raise ConfigurationError("Orbit requires a central body reference")
        if not isinstance(central_body, CentralBody):
            raise ConfigurationError(
                f"central_body must be a CentralBody, got {type(central_body).__name__}"
            )
        if not isinstance(elements, OrbitElements):
            raise ConfigurationError(
                f"elements must be OrbitElements, got {type(elements).__name__}"
            )
        self.elements = elements
        self.central_body = central_body
        self.primary = primary

    # ── Derived quantities ───────────────────────────────────────────

    def mean_motion(self) -> float:
        """Mean motion √(μ / a³) in rad/s."""
        return mean_motion(self.central_body.mu, self.elements.semi_major_axis_m)

    def period(self) -> float:
        """Orbital period 2π·√(a³ / μ) in seconds."""
        return orbital_period(self.central_body.mu, self.elements.semi_major_axis_m)

    def apoapsis(self) -> float:
        return apoapsis_distance(self.elements.semi_major_axis_m, self.elements.eccentricity)

    def periapsis(self) -> float:
        return periapsis_distance(self.elements.semi_major_axis_m, self.elements.eccentricity)

    # ── Pipeline stages ──────────────────────────────────────────────

    def mean_anomaly(self, t: float) -> float:
        """Mean anomaly at time t (radians, sign-preserving remainder of 2π)."""
        return mean_anomaly(self.elements.epoch_phase_rad, t, self.mean_motion())

    def eccentric_anomaly(self, mean_anomaly_rad: float) -> float:
        return eccentric_anomaly(mean_anomaly_rad, self.elements.eccentricity, KEPLER_ITERATIONS)

    def true_anomaly(self, eccentric_anomaly_rad: float) -> float:
        return true_anomaly(eccentric_anomaly_rad, self.elements.eccentricity)

    def distance(self, eccentric_anomaly_rad: float) -> float:
        return radial_distance(
            self.elements.semi_major_axis_m, self.elements.eccentricity, eccentric_anomaly_rad,
        )

    def origin_at(self, t: float) -> Vector3:
        """World position of the focus at time t."""
        if self.primary is not None:
            return self.primary.position_at_time(t)
        return self.central_body.position

    def _inertial(self, position_pqw: np.ndarray) -> np.ndarray:
        el = self.elements
        return perifocal_to_inertial(
            position_pqw, el.inclination_rad, el.raan_rad, el.arg_periapsis_rad,
        )

    def _propagate(self, m: float, t: float) -> OrbitSnapshot:
        E = self.eccentric_anomaly(m)
        nu = self.true_anomaly(E)
        r = self.distance(E)
        pqw = perifocal_position(nu, r)
        position = self._inertial(pqw) + np.asarray(self.origin_at(t))
        return OrbitSnapshot(
            time=t,
            mean_anomaly=m,
            eccentric_anomaly=E,
            true_anomaly=nu,
            distance=r,
            perifocal=_as_vector(pqw),
            position=_as_vector(position),
        )

    # ── Positions ────────────────────────────────────────────────────

    def position_at_time(self, t: float) -> Vector3:
        """
        World position at simulated time t.

        Args:
            t: Seconds since epoch, t >= 0.

        Returns:
            (x, y, z) in metres.

        Raises:
            PreconditionViolation: If t is negative or NaN.
        """
        return self.snapshot(t).position

    def position_at_mean_anomaly(
        self,
        mean_anomaly_rad: float,
        t: float = PhysicalConstants.EPOCH,
    ) -> Vector3:
        """
        World position at a given mean anomaly, independent of the clock.

        M = 0 gives periapsis, M = π gives apoapsis. t only selects the
        origin when the orbit is attached to a moving primary.

        Raises:
            PreconditionViolation: If the mean anomaly or t is negative or NaN.
        """
        _require_non_negative("Mean anomaly", mean_anomaly_rad)
        _require_non_negative("Time", t)
        return self._propagate(mean_anomaly_rad, t).position

    def snapshot(self, t: float) -> OrbitSnapshot:
        """Run the full pipeline at time t and keep every intermediate value."""
        _require_non_negative("Time", t)
        return self._propagate(self.mean_anomaly(t), t)

    def __repr__(self) -> str:
        name = self.central_body.name or "central body"
        return f"OrbitPropagator({self.elements!r}, around={name!r})"
