# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Central gravitating body.

Holds mass and radius and derives the standard gravitational parameter.
Radius is carried for display scale only; propagation never reads it.
"""
import math
from dataclasses import dataclass

from keplerian.domain.errors import ConfigurationError
from keplerian.domain.orbital_mechanics import PhysicalConstants


@dataclass(frozen=True)
class CentralBody:
    """Immutable central body. mass in kg, radius in m, position in m."""
    mass: float
    radius: float
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    name: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ConfigurationError(f"Central body mass must be > 0, got {self.mass}")
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ConfigurationError(f"Central body radius must be > 0, got {self.radius}")
        if len(self.position) != 3 or not all(math.isfinite(c) for c in self.position):
            raise ConfigurationError(f"Central body position must be 3 finite values, got {self.position}")
        object.__setattr__(self, "position", tuple(float(c) for c in self.position))

    @property
    def mu(self) -> float:
        """Standard gravitational parameter μ = m·G (m³/s²)."""
        return self.mass * PhysicalConstants.G
