# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for Keplerian orbit propagation.

Usage:
    # Built-in Earth system, 600 ticks of 1/60 s at 60x time scale
    keplerian --ticks 600 --dt 0.0166667 --time-scale 60

    # System from a JSON file, clamping out-of-range values
    keplerian -i system.json --clamp --ticks 100

    # Export per-tick positions and sampled orbit paths
    keplerian -i system.json --export-csv ticks.csv
    keplerian -i system.json --export-path paths.csv --samples 128

    # Period and apsides of every orbit
    keplerian -i system.json --describe

    # Pace ticks against the wall clock
    keplerian -i system.json --realtime --fps 30 --ticks 300
"""
import argparse
import logging
import sys

from keplerian.adapters.csv_exporter import CsvPathExporter, CsvTickExporter
from keplerian.adapters.json_io import JsonSystemReader
from keplerian.domain.central_body import CentralBody
from keplerian.domain.clock import SimulationClock
from keplerian.domain.orbit import OrbitElements, OrbitPropagator
from keplerian.domain.orbital_mechanics import PhysicalConstants
from keplerian.domain.simulation import (
    Simulation,
    TickResult,
    apsis_labels,
    sample_orbit_path,
)


def get_default_system(time_scale: float = 1.0) -> Simulation:
    """
    Default system: Earth with a low, slightly eccentric orbit and a
    Molniya-like highly eccentric orbit.
    """
    earth = CentralBody(
        mass=PhysicalConstants.MASS_EARTH,
        radius=PhysicalConstants.R_EARTH,
        name="Earth",
    )
    orbits = {
        "LEO": OrbitPropagator(
            OrbitElements(semi_major_axis_m=7.0e6, eccentricity=0.01),
            earth,
        ),
        "Molniya": OrbitPropagator(
            OrbitElements(
                semi_major_axis_m=26_562_000.0, eccentricity=0.74,
                inclination_deg=63.4, raan_deg=30.0,
                arg_periapsis_deg=270.0, epoch_phase_deg=0.0,
            ),
            earth,
        ),
    }
    return Simulation(SimulationClock(scale=time_scale), orbits)


def load_system(
    input_path: str | None,
    time_scale: float | None = None,
    clamp: bool = False,
) -> Simulation:
    """Read a system file, or build the default system when no path is given."""
    if input_path is None:
        sim = get_default_system()
    else:
        sim = JsonSystemReader().read_system(input_path, clamp=clamp)
    if time_scale is not None:
        sim.clock.set_scale(time_scale)
    return sim


def run(
    sim: Simulation,
    ticks: int,
    dt: float,
    realtime: bool = False,
    fps: float = 60.0,
) -> list[TickResult]:
    """
    Drive the simulation and collect every tick.

    With realtime=False each tick advances by a fixed wall delta dt;
    otherwise the driver measures real elapsed time and paces to fps.
    """
    results: list[TickResult] = []
    if realtime:
        sim.run(ticks, target_fps=fps, on_tick=results.append)
    else:
        for _ in range(ticks):
            results.append(sim.tick(dt))
    return results


def describe(sim: Simulation) -> list[str]:
    """Period, apsis distances and apsis positions of every orbit."""
    lines = []
    for name, orbit in sim.orbits.items():
        labels = apsis_labels(orbit, sim.clock.now())
        px, py, pz = labels.periapsis_position
        ax, ay, az = labels.apoapsis_position
        lines.append(
            f"{name}: period {orbit.period():.3f} s, "
            f"periapsis {labels.periapsis_m:.1f} m at ({px:.1f}, {py:.1f}, {pz:.1f}), "
            f"apoapsis {labels.apoapsis_m:.1f} m at ({ax:.1f}, {ay:.1f}, {az:.1f})"
        )
    return lines


def main():
    parser = argparse.ArgumentParser(
        description="Propagate bodies on fixed Keplerian orbits"
    )
    parser.add_argument(
        '--input', '-i',
        help="Path to system JSON (bodies, orbits, clock); built-in Earth system if omitted"
    )
    parser.add_argument(
        '--ticks', type=int, default=60,
        help="Number of ticks to run (default: 60)"
    )
    parser.add_argument(
        '--dt', type=float, default=1.0 / 60.0,
        help="Wall-clock seconds per tick (default: 1/60)"
    )
    parser.add_argument(
        '--time-scale', type=float, default=None,
        help="Simulated seconds per wall second; negative runs backward (default: from file, else 1)"
    )
    parser.add_argument(
        '--realtime', action='store_true', default=False,
        help="Measure real elapsed time between ticks instead of a fixed --dt"
    )
    parser.add_argument(
        '--fps', type=float, default=60.0,
        help="Target frame rate with --realtime (default: 60, 0 = unpaced)"
    )
    parser.add_argument(
        '--clamp', action='store_true', default=False,
        help="Clamp out-of-range values in the system file instead of failing"
    )
    parser.add_argument(
        '--describe', action='store_true', default=False,
        help="Print period and apsides of every orbit and exit"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export per-tick positions to CSV"
    )
    export_group.add_argument(
        '--export-path',
        help="Export one sampled period of every orbit to CSV"
    )
    export_group.add_argument(
        '--samples', type=int, default=64,
        help="Points per orbit path for --export-path (default: 64)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.ticks < 0:
        parser.error("--ticks must be >= 0")
    if args.samples < 1:
        parser.error("--samples must be >= 1")

    try:
        sim = load_system(args.input, time_scale=args.time_scale, clamp=args.clamp)

        if args.describe:
            for line in describe(sim):
                print(line)
            return

        if args.export_path:
            start = sim.clock.now()
            paths = {
                name: sample_orbit_path(orbit, args.samples, start)
                for name, orbit in sim.orbits.items()
            }
            n = CsvPathExporter().export(paths, args.export_path)
            print(f"Exported {n} path points to {args.export_path}")

        results = run(sim, args.ticks, args.dt, realtime=args.realtime, fps=args.fps)
        if results:
            last = results[-1]
            print(f"t = {last.time:.3f} s after {last.index} ticks")
            for name, (x, y, z) in last.positions.items():
                print(f"  {name}: ({x:.1f}, {y:.1f}, {z:.1f})")

        if args.export_csv:
            n = CsvTickExporter().export(results, args.export_csv)
            print(f"Exported {n} positions to {args.export_csv}")

    except FileNotFoundError:
        print(
            f"Error: Input file not found: {args.input}\n"
            f"Expected a system JSON file with 'bodies' and 'orbits'.",
            file=sys.stderr,
        )
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
