"""Linear parameter ramping for click-free gain changes."""

from __future__ import annotations


class ParameterSmoother:
    """Moves a value linearly towards a target over a number of samples."""

    def __init__(self, value: float = 0.0) -> None:
        self._current = value
        self._target = value
        self._remaining = 0

    @property
    def current_value(self) -> float:
        return self._current

    @property
    def target_value(self) -> float:
        return self._target

    @property
    def remaining_samples(self) -> int:
        return self._remaining

    def reset(self, value: float) -> None:
        """Jump immediately to ``value`` with no ramp."""
        self._current = value
        self._target = value
        self._remaining = 0

    def set_target(self, target_value: float, ramp_samples: int) -> None:
        """Ramp to ``target_value`` over ``ramp_samples`` samples; zero jumps at once."""
        self._target = target_value
        if ramp_samples <= 0:
            self._current = target_value
            self._remaining = 0
            return
        self._remaining = ramp_samples

    def advance(self, consumed_samples: int) -> float:
        """Move forward by ``consumed_samples`` and return the new current value."""
        if self._remaining == 0:
            return self._current
        if consumed_samples >= self._remaining:
            self._current = self._target
            self._remaining = 0
            return self._current
        delta = self._target - self._current
        self._current += delta * (consumed_samples / self._remaining)
        self._remaining -= consumed_samples
        return self._current