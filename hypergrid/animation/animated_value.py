"""
Animated Value

A single number that eases from its current value toward a goal over time.
"""

from __future__ import annotations
import time
from typing import Callable, Optional, Union

from .animation_base import AnimationConfig

Number = Union[int, float]


class AnimatedValue:
    """
    A scalar animated by explicit per-frame ticks.

    When not animating, value, start and goal are always equal. Integral values
    truncate toward zero while interpolating but always land exactly on the goal.
    """

    def __init__(
        self,
        initial: Number = 0,
        config: Optional[AnimationConfig] = None,
        integral: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize animated value.

        Args:
            initial: Starting value
            config: Curve and duration to animate with
            integral: Whether the value is an integer quantity
            clock: Function returning the current time in seconds
        """
        self.integral = integral
        initial = self._coerce(initial)
        self._value = initial
        self._start = initial
        self._goal = initial
        self._animating = False
        self._start_time = 0.0
        self._config = config or AnimationConfig()
        self._clock = clock

    @property
    def value(self) -> Number:
        return self._value

    @property
    def goal(self) -> Number:
        return self._goal

    @property
    def start(self) -> Number:
        return self._start

    @property
    def config(self) -> AnimationConfig:
        return self._config

    def is_animating(self) -> bool:
        return self._animating

    def set_config(self, config: AnimationConfig):
        """Use a different curve and duration for future ticks."""
        self._config = config

    def set(self, goal: Number, animate: bool = True):
        """
        Animate toward a new goal.

        Retargeting while animating starts from the current interpolated
        value, not the previous goal.

        Args:
            goal: Value to animate to
            animate: False to snap immediately
        """
        goal = self._coerce(goal)
        if not animate or self._config.effective_duration <= 0:
            self.warp(goal)
            return

        self._start = self._value
        self._goal = goal
        self._start_time = self._clock()
        self._animating = True

    def warp(self, value: Number):
        """Jump to value with no transition."""
        value = self._coerce(value)
        self._value = value
        self._start = value
        self._goal = value
        self._animating = False

    def tick(self) -> bool:
        """
        Advance the animation to the current time.

        Returns:
            True while still animating, False once finished (or idle)
        """
        if not self._animating:
            return False

        duration = self._config.effective_duration
        if duration <= 0:
            self.warp(self._goal)
            return False

        elapsed = (self._clock() - self._start_time) * 1000.0
        progress = min(max(elapsed / duration, 0.0), 1.0)

        eased = self._config.curve.evaluate(progress)
        self._value = self._lerp(self._start, self._goal, eased)

        if progress >= 1.0:
            self.warp(self._goal)
            return False

        return True

    def _lerp(self, a: Number, b: Number, t: float) -> Number:
        result = a + (b - a) * t
        if self.integral:
            return int(result)
        return result

    def _coerce(self, value: Number) -> Number:
        if self.integral:
            return int(value)
        return float(value)

    def __repr__(self):
        state = "animating" if self._animating else "idle"
        return f"AnimatedValue({self._value!r} -> {self._goal!r}, {state})"
