"""Fixed-timestep accumulator for multi-rate scheduling."""

from __future__ import annotations


class FixedTimestep:
    """Turns variable frame durations into a whole number of fixed steps.

    Elapsed time is accumulated and one step fires for every full
    *period* it contains. The period is subtracted rather than the
    accumulator zeroed, so leftover time carries into the next frame.
    """

    def __init__(self, period: float) -> None:
        if period <= 0:
            raise ValueError("period must be positive.")
        self._period = period
        self._accumulator = 0.0
        self._steps = 0

    @property
    def period(self) -> float:
        return self._period

    @property
    def steps(self) -> int:
        """Total number of steps fired so far."""
        return self._steps

    @property
    def overstep(self) -> float:
        """Fraction of a period accumulated but not yet consumed."""
        return self._accumulator / self._period

    def accumulate(self, dt: float) -> int:
        """Add *dt* seconds and return how many steps are now due."""
        if dt < 0:
            raise ValueError("dt must be non-negative.")
        self._accumulator += dt
        fired = 0
        while self._accumulator >= self._period:
            self._accumulator -= self._period
            fired += 1
        self._steps += fired
        return fired

    def reset(self) -> None:
        self._accumulator = 0.0
        self._steps = 0
