# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics functions.

Pure conversions from classical orbital elements to a Cartesian position:
mean anomaly → eccentric anomaly → true anomaly → perifocal → inertial.
Only stdlib math and numpy.
"""
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class _PhysicalConstants:
    """Fixed constants shared by every body and orbit."""
    G: float = 6.67430e-11              # m³/(kg·s²), gravitational constant
    EPOCH: float = 0.0                  # s, reference zero for epoch phases
    # Reference Earth, used for defaults and examples
    MASS_EARTH: float = 5.972e24        # kg
    R_EARTH: float = 6.371e6            # m, mean radius


PhysicalConstants: _PhysicalConstants = _PhysicalConstants()

# Newton steps per Kepler solve; not iterated to convergence.
KEPLER_ITERATIONS = 2

TWO_PI = 2.0 * math.pi


def mean_motion(mu: float, a: float) -> float:
    """Mean motion n = √(μ / a³) in rad/s."""
    return math.sqrt(mu / (a * a * a))


def mean_anomaly(epoch_phase_rad: float, t: float, n: float) -> float:
    """
    Mean anomaly at time t.

    M(t) = φ₀ + n·t, reduced modulo 2π with a sign-preserving remainder
    (math.fmod), so a negative phase or time yields a negative M rather
    than a value in [0, 2π).

    Args:
        epoch_phase_rad: Mean-anomaly offset at epoch (radians).
        t: Time since epoch (s).
        n: Mean motion (rad/s).

    Returns:
        Mean anomaly in radians, in (-2π, 2π).
    """
    return math.fmod(epoch_phase_rad + t * n, TWO_PI)


def eccentric_anomaly(
    mean_anomaly_rad: float,
    e: float,
    iterations: int = KEPLER_ITERATIONS,
) -> float:
    """
    Solve Kepler's equation E − e·sin(E) = M by Newton–Raphson.

    Seeded at E₀ = M and run for a fixed number of steps. With the
    default two steps the result carries a residual that grows with
    eccentricity; callers that need a converged value pass a larger
    iteration count.

    Args:
        mean_anomaly_rad: Mean anomaly M (radians).
        e: Eccentricity, 0 <= e < 1.
        iterations: Number of Newton steps.

    Returns:
        Eccentric anomaly E in radians.
    """
    E = mean_anomaly_rad
    for _ in range(iterations):
        E = E - (E - e * math.sin(E) - mean_anomaly_rad) / (1.0 - e * math.cos(E))
    return E


def kepler_residual(eccentric_anomaly_rad: float, mean_anomaly_rad: float, e: float) -> float:
    """Residual E − e·sin(E) − M of Kepler's equation."""
    return eccentric_anomaly_rad - e * math.sin(eccentric_anomaly_rad) - mean_anomaly_rad


def true_anomaly(eccentric_anomaly_rad: float, e: float) -> float:
    """
    True anomaly from eccentric anomaly.

    ν = 2·atan2(√(1+e)·sin(E/2), √(1−e)·cos(E/2))
    """
    half_e = eccentric_anomaly_rad / 2.0
    return 2.0 * math.atan2(
        math.sqrt(1.0 + e) * math.sin(half_e),
        math.sqrt(1.0 - e) * math.cos(half_e),
    )


def radial_distance(a: float, e: float, eccentric_anomaly_rad: float) -> float:
    """Distance from the focus, r = a·(1 − e·cos E)."""
    return a * (1.0 - e * math.cos(eccentric_anomaly_rad))


def perifocal_position(true_anomaly_rad: float, r: float) -> np.ndarray:
    """Position in the perifocal frame: (r·cos ν, r·sin ν, 0)."""
    return np.array([
        r * math.cos(true_anomaly_rad),
        r * math.sin(true_anomaly_rad),
        0.0,
    ])


def perifocal_to_inertial_matrix(
    i_rad: float,
    omega_big_rad: float,
    omega_small_rad: float,
) -> np.ndarray:
    """
    3-1-3 rotation from the perifocal frame to the central body's inertial frame.

    Rotation by argument of periapsis ω, inclination i, then longitude of
    ascending node Ω. The first two columns are the coefficients applied
    to the perifocal x and y components.

    Args:
        i_rad: Inclination (radians).
        omega_big_rad: Longitude of ascending node Ω (radians).
        omega_small_rad: Argument of periapsis ω (radians).

    Returns:
        3×3 rotation matrix.
    """
    cO = math.cos(omega_big_rad)
    sO = math.sin(omega_big_rad)
    co = math.cos(omega_small_rad)
    so = math.sin(omega_small_rad)
    ci = math.cos(i_rad)
    si = math.sin(i_rad)

    return np.array([
        [co * cO - so * ci * sO, -(so * cO + co * ci * sO), sO * si],
        [co * sO + so * ci * cO, co * ci * cO - so * sO, -cO * si],
        [so * si, co * si, ci],
    ])


def perifocal_to_inertial(
    position_pqw: np.ndarray,
    i_rad: float,
    omega_big_rad: float,
    omega_small_rad: float,
) -> np.ndarray:
    """Rotate a perifocal vector into the inertial frame."""
    rotation = perifocal_to_inertial_matrix(i_rad, omega_big_rad, omega_small_rad)
    return rotation @ position_pqw


def orbital_period(mu: float, a: float) -> float:
    """Orbital period T = 2π·√(a³ / μ) in seconds."""
    return TWO_PI * math.sqrt(a * a * a / mu)


def apoapsis_distance(a: float, e: float) -> float:
    """Farthest distance from the focus, a·(1 + e)."""
    return a * (1.0 + e)


def periapsis_distance(a: float, e: float) -> float:
    """Nearest distance from the focus, a·(1 − e)."""
    return a * (1.0 - e)
