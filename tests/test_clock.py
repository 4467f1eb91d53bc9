"""Tests for the fixed-timestep accumulator."""

import pytest

from toroid_snake.clock import FixedTimestep


class TestFixedTimestep:
    def test_invalid_period(self):
        with pytest.raises(ValueError, match="positive"):
            FixedTimestep(0)

    def test_negative_dt(self):
        with pytest.raises(ValueError, match="non-negative"):
            FixedTimestep(0.5).accumulate(-0.1)

    def test_fires_once_per_period(self):
        step = FixedTimestep(0.5)
        assert step.accumulate(0.25) == 0
        assert step.accumulate(0.25) == 1
        assert step.steps == 1

    def test_multiple_fires_in_one_frame(self):
        step = FixedTimestep(0.25)
        assert step.accumulate(1.0) == 4

    def test_remainder_carries_over(self):
        step = FixedTimestep(0.5)
        assert step.accumulate(0.75) == 1
        assert step.overstep == pytest.approx(0.5)
        assert step.accumulate(0.25) == 1
        assert step.overstep == pytest.approx(0.0)

    def test_long_run_accuracy(self):
        step = FixedTimestep(0.15)
        for _ in range(600):
            step.accumulate(1 / 60)
        assert step.steps in (66, 67)

    def test_reset(self):
        step = FixedTimestep(0.5)
        step.accumulate(0.75)
        step.reset()
        assert step.steps == 0
        assert step.overstep == 0.0
