# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Keplerian

Propagate bodies on fixed Keplerian orbits for real-time visualization.
Converts six classical orbital elements and a simulated time into a
Cartesian position (mean → eccentric → true anomaly, fixed two-step
Newton solve, 3-1-3 frame rotation), driven by a scalable simulation
clock. Includes orbit path sampling, apsis labels, an optional
editor-style clamping layer, JSON system files and CSV export.
"""

from keplerian.domain.errors import (
    ConfigurationError,
    PreconditionViolation,
)
from keplerian.domain.orbital_mechanics import (
    PhysicalConstants,
    KEPLER_ITERATIONS,
    mean_motion,
    mean_anomaly,
    eccentric_anomaly,
    kepler_residual,
    true_anomaly,
    radial_distance,
    perifocal_position,
    perifocal_to_inertial_matrix,
    perifocal_to_inertial,
    orbital_period,
    apoapsis_distance,
    periapsis_distance,
)
from keplerian.domain.central_body import CentralBody
from keplerian.domain.clock import SimulationClock
from keplerian.domain.orbit import (
    OrbitElements,
    OrbitPropagator,
    OrbitSnapshot,
)
from keplerian.domain.validation import (
    clamp_orbit_config,
    clamp_body_config,
)
from keplerian.domain.simulation import (
    Simulation,
    TickResult,
    ApsisLabels,
    sample_orbit_path,
    apsis_labels,
)
from keplerian.adapters.json_io import JsonSystemReader
from keplerian.adapters.csv_exporter import (
    CsvTickExporter,
    CsvPathExporter,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "PreconditionViolation",
    "PhysicalConstants",
    "KEPLER_ITERATIONS",
    "mean_motion",
    "mean_anomaly",
    "eccentric_anomaly",
    "kepler_residual",
    "true_anomaly",
    "radial_distance",
    "perifocal_position",
    "perifocal_to_inertial_matrix",
    "perifocal_to_inertial",
    "orbital_period",
    "apoapsis_distance",
    "periapsis_distance",
    "CentralBody",
    "SimulationClock",
    "OrbitElements",
    "OrbitPropagator",
    "OrbitSnapshot",
    "clamp_orbit_config",
    "clamp_body_config",
    "Simulation",
    "TickResult",
    "ApsisLabels",
    "sample_orbit_path",
    "apsis_labels",
    "JsonSystemReader",
    "CsvTickExporter",
    "CsvPathExporter",
]
