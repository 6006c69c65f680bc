# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON system file adapter.

Reads a system description and wires it into domain objects. Bodies and
orbits refer to each other by name in the file; names are resolved to
object handles here, once, so the core never performs lookups.

Example document::

    {
      "clock": {"scale": 60.0, "start_time": 0.0},
      "bodies": [
        {"name": "Earth", "mass": 5.972e24, "radius": 6.371e6}
      ],
      "orbits": [
        {"name": "Station", "central_body": "Earth",
         "semi_major_axis_m": 7.0e6, "eccentricity": 0.01,
         "inclination_deg": 51.6, "raan_deg": 0, "arg_periapsis_deg": 0,
         "epoch_phase_deg": 0}
      ]
    }

An orbit may also name a "primary": another orbit whose position moves
the central body (a moon's satellite, for instance).
"""
import json
import logging
from typing import Any

from keplerian.ports import SystemReader
from keplerian.domain.central_body import CentralBody
from keplerian.domain.clock import SimulationClock
from keplerian.domain.errors import ConfigurationError
from keplerian.domain.orbit import OrbitElements, OrbitPropagator
from keplerian.domain.simulation import Simulation
from keplerian.domain.validation import clamp_body_config, clamp_orbit_config

logger = logging.getLogger(__name__)

_ELEMENT_KEYS = (
    "semi_major_axis_m",
    "eccentricity",
    "inclination_deg",
    "raan_deg",
    "arg_periapsis_deg",
    "epoch_phase_deg",
)

_KNOWN_SECTIONS = {"clock", "bodies", "orbits"}


class JsonSystemReader(SystemReader):
    """Reads a system of central bodies and orbits from a JSON file."""

    def read_document(self, path: str) -> dict[str, Any]:
        with open(path, encoding='utf-8') as f:
            doc = json.load(f)
        if not isinstance(doc, dict):
            raise ConfigurationError(f"System file must contain a JSON object: {path}")
        return doc

    def read_system(self, path: str, clamp: bool = False) -> Simulation:
        return self.build_system(self.read_document(path), clamp=clamp)

    def build_system(self, doc: dict[str, Any], clamp: bool = False) -> Simulation:
        for key in doc:
            if key not in _KNOWN_SECTIONS:
                logger.warning("Ignoring unknown section '%s' in system file", key)

        clock_cfg = doc.get('clock', {})
        if not isinstance(clock_cfg, dict):
            raise ConfigurationError(f"'clock' must be a JSON object, got {clock_cfg!r}")
        clock = SimulationClock(
            scale=_number(clock_cfg.get('scale', 1.0), 'clock', 'scale'),
            start_time=_number(clock_cfg.get('start_time', 0.0), 'clock', 'start_time'),
        )

        bodies = self.extract_bodies(doc, clamp=clamp)
        orbits = self.extract_orbits(doc, bodies, clamp=clamp)
        return Simulation(clock, orbits)

    def extract_bodies(self, doc: dict[str, Any], clamp: bool = False) -> dict[str, CentralBody]:
        bodies: dict[str, CentralBody] = {}
        for entry in _section(doc, 'bodies'):
            name = _require_name(entry, 'body')
            if name in bodies:
                raise ConfigurationError(f"Duplicate body name '{name}'")
            raw = {k: _number(entry[k], name, k) for k in ('mass', 'radius') if k in entry}
            cfg = clamp_body_config(raw, name) if clamp else raw

            position = entry.get('position', (0.0, 0.0, 0.0))
            if not isinstance(position, (list, tuple)):
                raise ConfigurationError(
                    f"Body '{name}': 'position' must be a list of 3 numbers, got {position!r}"
                )
            try:
                bodies[name] = CentralBody(
                    mass=cfg['mass'],
                    radius=cfg['radius'],
                    position=tuple(_number(c, name, 'position') for c in position),
                    name=name,
                )
            except KeyError as exc:
                raise ConfigurationError(f"Body '{name}' is missing {exc.args[0]!r}") from exc
        return bodies

    def extract_orbits(
        self,
        doc: dict[str, Any],
        bodies: dict[str, CentralBody],
        clamp: bool = False,
    ) -> dict[str, OrbitPropagator]:
        """
        Build propagators in dependency order.

        An orbit that names a primary is built after that primary; a
        reference to an unknown name or a cycle raises ConfigurationError.
        """
        entries: dict[str, dict[str, Any]] = {}
        for entry in _section(doc, 'orbits'):
            name = _require_name(entry, 'orbit')
            if name in entries:
                raise ConfigurationError(f"Duplicate orbit name '{name}'")
            entries[name] = entry

        built: dict[str, OrbitPropagator] = {}
        resolving: set[str] = set()

        def build(name: str) -> OrbitPropagator:
            if name in built:
                return built[name]
            if name in resolving:
                raise ConfigurationError(f"Primary reference cycle through orbit '{name}'")
            resolving.add(name)
            entry = entries[name]

            body_name = entry.get('central_body')
            if not isinstance(body_name, str) or body_name not in bodies:
                raise ConfigurationError(
                    f"Orbit '{name}' references unknown central body {body_name!r}"
                )

            primary = None
            primary_name = entry.get('primary')
            if primary_name is not None:
                if not isinstance(primary_name, str) or primary_name not in entries:
                    raise ConfigurationError(
                        f"Orbit '{name}' references unknown primary orbit {primary_name!r}"
                    )
                primary = build(primary_name)

            raw = {k: _number(entry[k], name, k) for k in _ELEMENT_KEYS if k in entry}
            if 'semi_major_axis_m' not in raw or 'eccentricity' not in raw:
                raise ConfigurationError(
                    f"Orbit '{name}' requires semi_major_axis_m and eccentricity"
                )
            cfg = clamp_orbit_config(raw, name) if clamp else raw
            elements = OrbitElements(**cfg)

            built[name] = OrbitPropagator(elements, bodies[body_name], primary=primary)
            resolving.discard(name)
            return built[name]

        for name in entries:
            build(name)
        # Keep file order
        return {name: built[name] for name in entries}


def _section(doc: dict[str, Any], key: str) -> list[Any]:
    entries = doc.get(key, [])
    if not isinstance(entries, list):
        raise ConfigurationError(f"'{key}' must be a JSON array, got {entries!r}")
    return entries


def _number(value: Any, owner: str, field: str) -> float:
    # JSON booleans are ints in Python; reject them along with strings and null
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{owner}: '{field}' must be a number, got {value!r}")
    return float(value)


def _require_name(entry: Any, kind: str) -> str:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Each {kind} must be a JSON object, got {entry!r}")
    name = entry.get('name')
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"Each {kind} requires a non-empty 'name'")
    return name
