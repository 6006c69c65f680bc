# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for system configuration input and trajectory export.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from keplerian.domain.orbit import Vector3
from keplerian.domain.simulation import Simulation, TickResult


@runtime_checkable
class SystemReader(Protocol):
    """Port for loading a configured system of bodies and orbits."""

    def read_system(self, path: str, clamp: bool = False) -> Simulation:
        """
        Read a system description and build a ready-to-tick Simulation.

        Named references are resolved to object handles here, once.
        With clamp=True, out-of-range values are repaired (and logged)
        before the core objects are constructed.
        """
        ...


@runtime_checkable
class TickExporter(Protocol):
    """Port for exporting per-tick positions."""

    def export(self, ticks: list[TickResult], path: str) -> int:
        """Write positions of every orbit per tick. Returns rows written."""
        ...


@runtime_checkable
class PathExporter(Protocol):
    """Port for exporting sampled orbit paths."""

    def export(self, paths: dict[str, list[Vector3]], path: str) -> int:
        """Write sampled path points per orbit. Returns rows written."""
        ...
