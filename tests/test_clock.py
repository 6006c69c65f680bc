# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the simulation clock."""
import pytest

from keplerian.domain.clock import SimulationClock
from keplerian.domain.errors import ConfigurationError, PreconditionViolation


class TestSimulationClockDefaults:

    def test_starts_at_epoch(self):
        clock = SimulationClock()
        assert clock.now() == 0.0
        assert clock.time == 0.0

    def test_default_scale_is_real_time(self):
        assert SimulationClock().scale == 1.0

    def test_custom_start_time(self):
        assert SimulationClock(start_time=120.0).now() == 120.0

    def test_time_is_read_only(self):
        clock = SimulationClock()
        with pytest.raises(AttributeError):
            clock.time = 10.0


class TestAdvance:

    def test_advance_scales_wall_delta(self):
        clock = SimulationClock(scale=2.0)
        delta = clock.advance(0.5)
        assert delta == 1.0
        assert clock.now() == 1.0

    def test_two_advances_equal_one_summed(self):
        a = SimulationClock(scale=4.0)
        a.advance(0.25)
        a.advance(0.5)
        b = SimulationClock(scale=4.0)
        b.advance(0.75)
        assert a.now() == b.now() == 3.0

    def test_zero_scale_freezes(self):
        clock = SimulationClock(scale=0.0)
        clock.advance(10.0)
        assert clock.now() == 0.0

    def test_negative_scale_runs_backward(self):
        clock = SimulationClock(scale=-2.0, start_time=10.0)
        clock.advance(1.0)
        assert clock.now() == 8.0

    def test_negative_scale_can_pass_epoch(self):
        clock = SimulationClock(scale=-1.0)
        clock.advance(1.0)
        assert clock.now() == -1.0

    def test_zero_delta_is_noop(self):
        clock = SimulationClock(scale=100.0, start_time=5.0)
        clock.advance(0.0)
        assert clock.now() == 5.0

    def test_negative_delta_rejected(self):
        clock = SimulationClock()
        with pytest.raises(PreconditionViolation):
            clock.advance(-0.1)
        assert clock.now() == 0.0

    def test_nan_delta_rejected(self):
        with pytest.raises(PreconditionViolation):
            SimulationClock().advance(float("nan"))


class TestSetScale:

    def test_replaces_scale(self):
        clock = SimulationClock()
        clock.set_scale(3600.0)
        clock.advance(1.0)
        assert clock.now() == 3600.0

    def test_scale_change_mid_run(self):
        clock = SimulationClock(scale=1.0)
        clock.advance(1.0)
        clock.set_scale(10.0)
        clock.advance(1.0)
        assert clock.now() == 11.0

    @pytest.mark.parametrize("scale", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_scale_rejected(self, scale):
        clock = SimulationClock()
        with pytest.raises(ConfigurationError):
            clock.set_scale(scale)
        assert clock.scale == 1.0

    def test_non_finite_start_rejected(self):
        with pytest.raises(ConfigurationError):
            SimulationClock(start_time=float("inf"))
