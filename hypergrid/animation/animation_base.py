"""
Animation Configuration

Per-type animation settings (window in, window out, window move).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto

from .bezier import BezierCurve, LINEAR


class AnimationType(Enum):
    """Kind of animation a value is playing."""

    WINDOW_IN = auto()  # New window appearing
    WINDOW_OUT = auto()  # Window closing
    WINDOW_MOVE = auto()  # Layout change, resize, reposition


@dataclass
class AnimationConfig:
    """Curve and duration for one animation type."""

    curve: BezierCurve = LINEAR
    duration_ms: float = 300.0
    enabled: bool = True

    @property
    def effective_duration(self) -> float:
        """Duration to animate with; 0 means snap immediately."""
        if not self.enabled:
            return 0.0
        return self.duration_ms


@dataclass
class AnimationSettings:
    """Animation configs for every animation type."""

    move: AnimationConfig = field(default_factory=AnimationConfig)
    window_in: AnimationConfig = field(default_factory=AnimationConfig)
    window_out: AnimationConfig = field(default_factory=AnimationConfig)

    def for_type(self, anim_type: AnimationType) -> AnimationConfig:
        if anim_type == AnimationType.WINDOW_IN:
            return self.window_in
        if anim_type == AnimationType.WINDOW_OUT:
            return self.window_out
        return self.move
