# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation clock.

A single simulated time value advanced by wall-clock elapsed time times
a scale factor. The scale may be zero (frozen) or negative (time runs
backward). advance() is the only mutator of the time value.
"""
import math

from keplerian.domain.errors import ConfigurationError, PreconditionViolation
from keplerian.domain.orbital_mechanics import PhysicalConstants


class SimulationClock:
    """Simulated time in seconds since epoch."""

    def __init__(self, scale: float = 1.0, start_time: float = PhysicalConstants.EPOCH):
        """
        Args:
            scale: Simulated seconds per wall second (1.0 = real time,
                3600.0 = one hour per second).
            start_time: Initial simulated time (s).
        """
        if not math.isfinite(start_time):
            raise ConfigurationError(f"Clock start time must be finite, got {start_time}")
        self._time = float(start_time)
        self._scale = 1.0
        self.set_scale(scale)

    @property
    def time(self) -> float:
        return self._time

    @property
    def scale(self) -> float:
        return self._scale

    def advance(self, delta_wall_time: float) -> float:
        """
        Advance simulated time by delta_wall_time × scale.

        Args:
            delta_wall_time: Elapsed wall-clock time since the last tick (s).

        Returns:
            The simulated time increment (s).

        Raises:
            PreconditionViolation: If delta_wall_time is negative or not finite.
        """
        if not math.isfinite(delta_wall_time) or delta_wall_time < 0:
            raise PreconditionViolation(
                f"Wall-clock delta must be finite and >= 0, got {delta_wall_time}"
            )
        delta = delta_wall_time * self._scale
        self._time += delta
        return delta

    def set_scale(self, scale: float) -> None:
        """Replace the time multiplier. Any finite value is accepted."""
        if not math.isfinite(scale):
            raise ConfigurationError(f"Time scale must be finite, got {scale}")
        self._scale = float(scale)

    def now(self) -> float:
        """Current simulated time (s)."""
        return self._time

    def __repr__(self) -> str:
        return f"SimulationClock(time={self._time!r}, scale={self._scale!r})"
