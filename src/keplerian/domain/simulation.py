# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Frame-driven simulation driver and visualization helpers.

A tick advances the clock once and then recomputes every orbit from a
single read of the clock, so no orbit observes a partially advanced time.
Path sampling and apsis labels are the read-only accessors a renderer or
label overlay consumes.
"""
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from keplerian.domain.clock import SimulationClock
from keplerian.domain.errors import ConfigurationError, PreconditionViolation
from keplerian.domain.orbit import OrbitPropagator, Vector3
from keplerian.domain.orbital_mechanics import PhysicalConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Positions of every orbit at the time reached by one tick."""
    index: int
    time: float
    positions: dict[str, Vector3]


@dataclass(frozen=True)
class ApsisLabels:
    """Periapsis and apoapsis landmarks for a label overlay."""
    periapsis_position: Vector3
    apoapsis_position: Vector3
    periapsis_m: float
    apoapsis_m: float


class Simulation:
    """Owns one clock and a set of named orbits; drives them tick by tick."""

    def __init__(
        self,
        clock: SimulationClock,
        orbits: Optional[dict[str, OrbitPropagator]] = None,
    ):
        self.clock = clock
        self._orbits: dict[str, OrbitPropagator] = {}
        self._ticks = 0
        for name, orbit in (orbits or {}).items():
            self.add_orbit(name, orbit)

    @property
    def orbits(self) -> dict[str, OrbitPropagator]:
        return dict(self._orbits)

    @property
    def tick_count(self) -> int:
        return self._ticks

    def add_orbit(self, name: str, orbit: OrbitPropagator) -> None:
        if name in self._orbits:
            raise ConfigurationError(f"Duplicate orbit name '{name}'")
        self._orbits[name] = orbit

    def positions(self) -> dict[str, Vector3]:
        """Positions of every orbit at the clock's current time."""
        now = self.clock.now()
        return {name: orbit.position_at_time(now) for name, orbit in self._orbits.items()}

    def tick(self, delta_wall_time: float) -> TickResult:
        """
        Advance the clock, then recompute every position.

        Args:
            delta_wall_time: Wall-clock seconds since the previous tick.

        Returns:
            TickResult for the post-advance time.

        Raises:
            PreconditionViolation: If the delta is negative, or the clock
                has been run backward past epoch. In the latter case the
                clock keeps its new time and the tick is not counted.
        """
        self.clock.advance(delta_wall_time)
        now = self.clock.now()
        positions = {name: orbit.position_at_time(now) for name, orbit in self._orbits.items()}
        self._ticks += 1
        logger.debug("tick %d: t=%.3f s, %d orbits", self._ticks, now, len(positions))
        return TickResult(index=self._ticks, time=now, positions=positions)

    def run(
        self,
        max_ticks: int,
        target_fps: float = 60.0,
        on_tick: Optional[Callable[[TickResult], None]] = None,
        wall_clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Blocking driver loop measuring real elapsed time between ticks.

        Args:
            max_ticks: Number of ticks to run.
            target_fps: Frame rate to pace to; 0 disables pacing.
            on_tick: Called with each TickResult.
            wall_clock: Monotonic wall-time source (s).
            sleep: Sleep function used for pacing.

        Returns:
            Number of ticks executed.
        """
        if max_ticks < 0:
            raise PreconditionViolation(f"max_ticks must be >= 0, got {max_ticks}")
        frame_time = 1.0 / target_fps if target_fps > 0 else 0.0

        logger.info(
            "Starting simulation loop: %d ticks, scale=%g, %d orbits",
            max_ticks, self.clock.scale, len(self._orbits),
        )
        last = wall_clock()
        for _ in range(max_ticks):
            if frame_time > 0:
                elapsed = wall_clock() - last
                if elapsed < frame_time:
                    sleep(frame_time - elapsed)
            current = wall_clock()
            result = self.tick(max(0.0, current - last))
            last = current
            if on_tick is not None:
                on_tick(result)
        logger.info("Simulation loop finished at t=%.3f s", self.clock.now())
        return max_ticks


def sample_orbit_path(
    orbit: OrbitPropagator,
    num_points: int,
    start_time: float = PhysicalConstants.EPOCH,
) -> list[Vector3]:
    """
    Sample one full period at equally spaced times, closing the loop.

    Equal time steps are not equal arc length: for eccentric orbits the
    points cluster near apoapsis.

    Args:
        orbit: Orbit to sample.
        num_points: Number of distinct samples (>= 1).
        start_time: Time of the first sample (s, >= 0).

    Returns:
        num_points + 1 positions; the last repeats the first time offset
        shifted by one period.
    """
    if num_points < 1:
        raise PreconditionViolation(f"num_points must be >= 1, got {num_points}")
    period = orbit.period()
    step = period / num_points
    return [orbit.position_at_time(start_time + k * step) for k in range(num_points + 1)]


def apsis_labels(orbit: OrbitPropagator, t: float = PhysicalConstants.EPOCH) -> ApsisLabels:
    """Periapsis (M = 0) and apoapsis (M = π) positions and distances."""
    return ApsisLabels(
        periapsis_position=orbit.position_at_mean_anomaly(0.0, t),
        apoapsis_position=orbit.position_at_mean_anomaly(math.pi, t),
        periapsis_m=orbit.periapsis(),
        apoapsis_m=orbit.apoapsis(),
    )
