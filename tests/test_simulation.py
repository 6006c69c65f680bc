# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the tick driver, path sampling and apsis labels."""
import math

import pytest

from keplerian.domain.central_body import CentralBody
from keplerian.domain.clock import SimulationClock
from keplerian.domain.errors import ConfigurationError, PreconditionViolation
from keplerian.domain.orbit import OrbitElements, OrbitPropagator
from keplerian.domain.simulation import (
    ApsisLabels,
    Simulation,
    TickResult,
    apsis_labels,
    sample_orbit_path,
)


# ── Helpers ──────────────────────────────────────────────────────────

_EARTH = CentralBody(mass=5.972e24, radius=6.371e6, name="Earth")


def _orbit(a=7.0e6, e=0.01, **kwargs):
    return OrbitPropagator(OrbitElements(semi_major_axis_m=a, eccentricity=e, **kwargs), _EARTH)


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


class _FakeWallClock:
    """Deterministic wall clock; sleep() advances it."""

    def __init__(self, step=0.0):
        self.now = 0.0
        self.step = step
        self.sleeps = []

    def __call__(self):
        self.now += self.step
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


# ── Tick ordering ────────────────────────────────────────────────────

class TestTick:

    def test_positions_use_post_advance_time(self):
        orbit = _orbit()
        sim = Simulation(SimulationClock(scale=10.0), {"LEO": orbit})
        result = sim.tick(1.0)
        assert isinstance(result, TickResult)
        assert result.time == 10.0
        assert result.positions["LEO"] == orbit.position_at_time(10.0)

    def test_all_orbits_see_same_time(self):
        orbits = {"a": _orbit(), "b": _orbit(a=2.0e7, e=0.5), "c": _orbit(e=0.0)}
        sim = Simulation(SimulationClock(scale=60.0), orbits)
        result = sim.tick(2.5)
        for name, orbit in orbits.items():
            assert result.positions[name] == orbit.position_at_time(150.0)

    def test_tick_index_counts(self):
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        sim.tick(0.1)
        second = sim.tick(0.1)
        assert second.index == 2
        assert sim.tick_count == 2

    def test_positions_matches_current_clock(self):
        orbit = _orbit()
        sim = Simulation(SimulationClock(start_time=42.0), {"LEO": orbit})
        assert sim.positions()["LEO"] == orbit.position_at_time(42.0)

    def test_running_backward_past_epoch_fails(self):
        sim = Simulation(SimulationClock(scale=-1.0), {"LEO": _orbit()})
        with pytest.raises(PreconditionViolation):
            sim.tick(1.0)

    def test_failed_tick_keeps_clock_time_but_not_count(self):
        sim = Simulation(SimulationClock(scale=-1.0), {"LEO": _orbit()})
        with pytest.raises(PreconditionViolation):
            sim.tick(1.0)
        assert sim.clock.now() == -1.0
        assert sim.tick_count == 0

    def test_negative_wall_delta_fails(self):
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        with pytest.raises(PreconditionViolation):
            sim.tick(-1.0)

    def test_duplicate_orbit_name_rejected(self):
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        with pytest.raises(ConfigurationError, match="Duplicate"):
            sim.add_orbit("LEO", _orbit())

    def test_orbits_property_is_a_copy(self):
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        sim.orbits["other"] = _orbit()
        assert list(sim.orbits) == ["LEO"]

    def test_no_orbits(self):
        sim = Simulation(SimulationClock())
        result = sim.tick(1.0)
        assert result.positions == {}
        assert result.time == 1.0


# ── Driver loop ──────────────────────────────────────────────────────

class TestRun:

    def test_unpaced_loop_uses_measured_wall_time(self):
        wall = _FakeWallClock(step=0.5)
        sim = Simulation(SimulationClock(scale=2.0), {"LEO": _orbit()})
        seen = []
        n = sim.run(3, target_fps=0, on_tick=seen.append, wall_clock=wall, sleep=wall.sleep)
        assert n == 3
        assert [r.index for r in seen] == [1, 2, 3]
        assert sim.clock.now() == 3.0
        assert wall.sleeps == []

    def test_paced_loop_sleeps_to_frame_time(self):
        wall = _FakeWallClock(step=0.0)
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        sim.run(3, target_fps=10.0, wall_clock=wall, sleep=wall.sleep)
        assert len(wall.sleeps) == 3
        assert all(s == pytest.approx(0.1) for s in wall.sleeps)
        assert sim.clock.now() == pytest.approx(0.3)

    def test_zero_ticks(self):
        sim = Simulation(SimulationClock(), {"LEO": _orbit()})
        assert sim.run(0, target_fps=0) == 0
        assert sim.clock.now() == 0.0

    def test_negative_ticks_rejected(self):
        sim = Simulation(SimulationClock())
        with pytest.raises(PreconditionViolation):
            sim.run(-1)


# ── Path sampling ────────────────────────────────────────────────────

class TestSampleOrbitPath:

    def test_point_count_closes_loop(self):
        path = sample_orbit_path(_orbit(), 16)
        assert len(path) == 17

    def test_first_and_last_coincide(self):
        path = sample_orbit_path(_orbit(e=0.3, inclination_deg=45.0), 32)
        gap = math.dist(path[0], path[-1])
        assert gap < 1e-3, f"Closing point should repeat the first, gap {gap} m"

    def test_points_between_apsides(self):
        orbit = _orbit(a=2.0e7, e=0.6)
        for p in sample_orbit_path(orbit, 50):
            r = _norm(p)
            assert orbit.periapsis() * (1 - 1e-12) <= r <= orbit.apoapsis() * (1 + 1e-12)

    def test_equal_time_samples_cluster_near_apoapsis(self):
        """Equal time steps are not equal arc length."""
        orbit = _orbit(a=2.0e7, e=0.5)
        a = orbit.elements.semi_major_axis_m
        path = sample_orbit_path(orbit, 64)[:-1]
        far = sum(1 for p in path if _norm(p) > a)
        near = len(path) - far
        assert far > near + 10, f"Expected clustering near apoapsis, far={far} near={near}"

    def test_start_time_offsets_samples(self):
        orbit = _orbit(e=0.2)
        path = sample_orbit_path(orbit, 8, start_time=100.0)
        assert path[0] == orbit.position_at_time(100.0)

    def test_needs_at_least_one_point(self):
        with pytest.raises(PreconditionViolation):
            sample_orbit_path(_orbit(), 0)


# ── Apsis labels ─────────────────────────────────────────────────────

class TestApsisLabels:

    def test_labels(self):
        orbit = _orbit(a=2.6562e7, e=0.74, inclination_deg=63.4, arg_periapsis_deg=270.0)
        labels = apsis_labels(orbit)
        assert isinstance(labels, ApsisLabels)
        assert labels.periapsis_m == orbit.periapsis()
        assert labels.apoapsis_m == orbit.apoapsis()
        assert _norm(labels.periapsis_position) == pytest.approx(orbit.periapsis(), rel=1e-12)
        assert _norm(labels.apoapsis_position) == pytest.approx(orbit.apoapsis(), rel=1e-12)

    def test_apsides_opposite(self):
        labels = apsis_labels(_orbit(e=0.1, raan_deg=40.0, inclination_deg=20.0))
        dot = sum(p * q for p, q in zip(labels.periapsis_position, labels.apoapsis_position))
        assert dot < 0
