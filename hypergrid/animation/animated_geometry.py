"""
Animated Geometry

A window's animated rectangle plus the scale and opacity used for pop-in and
pop-out effects.
"""

from __future__ import annotations
import time
from typing import Callable, List, Optional

from .animated_value import AnimatedValue
from .animation_base import AnimationSettings
from ..geometry import Area

DEFAULT_POP_SCALE = 0.8


class AnimatedGeometry:
    """Six animated values: x, y, width, height, scale and alpha."""

    def __init__(
        self,
        settings: Optional[AnimationSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or AnimationSettings()

        self.x = AnimatedValue(0, self.settings.move, integral=True, clock=clock)
        self.y = AnimatedValue(0, self.settings.move, integral=True, clock=clock)
        self.width = AnimatedValue(100, self.settings.move, integral=True, clock=clock)
        self.height = AnimatedValue(
            100, self.settings.move, integral=True, clock=clock
        )

        # Pop-in / pop-out
        self.scale = AnimatedValue(1.0, self.settings.window_in, clock=clock)
        self.alpha = AnimatedValue(1.0, self.settings.window_in, clock=clock)
        self.popping_out = False

    def _positional(self) -> List[AnimatedValue]:
        return [self.x, self.y, self.width, self.height]

    def _values(self) -> List[AnimatedValue]:
        return self._positional() + [self.scale, self.alpha]

    def configure(self, settings: AnimationSettings):
        """Apply new per-type animation settings."""
        self.settings = settings
        for value in self._positional():
            value.set_config(settings.move)
        pop = settings.window_out if self.popping_out else settings.window_in
        self.scale.set_config(pop)
        self.alpha.set_config(pop)

    def set_goal(self, area: Area, animate: bool = True):
        """Animate the rectangle toward area."""
        self.x.set(area.x, animate)
        self.y.set(area.y, animate)
        self.width.set(area.width, animate)
        self.height.set(area.height, animate)

    def warp(self, area: Area):
        """Place the rectangle at area immediately. Scale and alpha are untouched."""
        self.x.warp(area.x)
        self.y.warp(area.y)
        self.width.warp(area.width)
        self.height.warp(area.height)

    def start_popin(self, from_scale: float = DEFAULT_POP_SCALE):
        """Grow and fade in from from_scale, used for new windows."""
        self.popping_out = False
        self.scale.set_config(self.settings.window_in)
        self.alpha.set_config(self.settings.window_in)
        self.scale.warp(from_scale)
        self.scale.set(1.0)
        self.alpha.warp(0.0)
        self.alpha.set(1.0)

    def start_popout(self, to_scale: float = DEFAULT_POP_SCALE):
        """Shrink to to_scale and fade out, used for closing windows."""
        self.popping_out = True
        self.scale.set_config(self.settings.window_out)
        self.alpha.set_config(self.settings.window_out)
        self.scale.set(to_scale)
        self.alpha.set(0.0)

    def tick(self) -> bool:
        """Advance all six values; True if any is still animating."""
        # Every value must advance, so no short-circuiting any()
        results = [value.tick() for value in self._values()]
        return any(results)

    def current(self) -> Area:
        return Area(self.x.value, self.y.value, self.width.value, self.height.value)

    def goal(self) -> Area:
        return Area(self.x.goal, self.y.goal, self.width.goal, self.height.goal)

    def is_animating(self) -> bool:
        return any(value.is_animating() for value in self._values())

    @property
    def current_scale(self) -> float:
        return self.scale.value

    @property
    def current_alpha(self) -> float:
        return self.alpha.value
