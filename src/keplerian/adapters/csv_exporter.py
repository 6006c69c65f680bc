# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporters.

Exports per-tick positions and sampled orbit paths as CSV.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from keplerian.ports import PathExporter, TickExporter
from keplerian.domain.orbit import Vector3
from keplerian.domain.simulation import TickResult

logger = logging.getLogger(__name__)

_TICK_HEADER = ['tick', 'time_s', 'orbit', 'x_m', 'y_m', 'z_m']
_PATH_HEADER = ['orbit', 'point', 'x_m', 'y_m', 'z_m']


class CsvTickExporter(TickExporter):
    """One row per orbit per tick."""

    def export(self, ticks: list[TickResult], path: str) -> int:
        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_TICK_HEADER)
            for tick in ticks:
                if not tick.positions:
                    logger.warning("Tick %d at t=%g has no orbits, skipped", tick.index, tick.time)
                    continue
                for name, (x, y, z) in tick.positions.items():
                    writer.writerow([
                        tick.index,
                        f'{tick.time:.6f}',
                        name,
                        f'{x:.3f}',
                        f'{y:.3f}',
                        f'{z:.3f}',
                    ])
                    rows += 1
        return rows


class CsvPathExporter(PathExporter):
    """One row per sampled path point; the closing point is included."""

    def export(self, paths: dict[str, list[Vector3]], path: str) -> int:
        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_PATH_HEADER)
            for name, points in paths.items():
                for k, (x, y, z) in enumerate(points):
                    writer.writerow([name, k, f'{x:.3f}', f'{y:.3f}', f'{z:.3f}'])
                    rows += 1
        return rows
