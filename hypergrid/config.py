"""
Configuration

Already-resolved scalar settings for the tiling layout and its animations.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Tuple, Union

from .animation import (
    AnimationConfig,
    AnimationSettings,
    AnimationType,
    BezierCurve,
)

BezierPoints = Tuple[float, float, float, float]


class ForceSplit(IntEnum):
    """Where a newly inserted window goes within its new split."""

    MOUSE = 0  # Second child, or the cursor's side with smart split
    LEFT_TOP = 1  # First child
    RIGHT_BOTTOM = 2  # Second child


_FORCE_SPLIT_NAMES = {
    "mouse": ForceSplit.MOUSE,
    "left": ForceSplit.LEFT_TOP,
    "top": ForceSplit.LEFT_TOP,
    "left-top": ForceSplit.LEFT_TOP,
    "right": ForceSplit.RIGHT_BOTTOM,
    "bottom": ForceSplit.RIGHT_BOTTOM,
    "right-bottom": ForceSplit.RIGHT_BOTTOM,
}


def parse_force_split(value: Union[ForceSplit, int, str]) -> ForceSplit:
    """
    Parse a force-split setting.

    Accepts:
    - ForceSplit member
    - Integer 0 (mouse), 1 (left/top) or 2 (right/bottom)
    - Name: "mouse", "left-top", "right-bottom" (also "left", "top", "right", "bottom")
    """
    if isinstance(value, ForceSplit):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("_", "-")
        if key in _FORCE_SPLIT_NAMES:
            return _FORCE_SPLIT_NAMES[key]
        raise ValueError(
            f"Invalid force_split: {value}. Use mouse, left-top or right-bottom"
        )
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return ForceSplit(value)
        except ValueError:
            raise ValueError(f"Invalid force_split: {value}. Use 0, 1 or 2") from None
    raise ValueError(f"Invalid force_split type: {type(value)}. Use int or str")


def parse_bezier(points: Sequence[float]) -> BezierPoints:
    """
    Parse bezier control points into a (p1x, p1y, p2x, p2y) tuple.

    Raises:
        ValueError: If points is not four numbers
    """
    if isinstance(points, str) or len(points) != 4:
        raise ValueError(f"Invalid bezier: {points}. Use (p1x, p1y, p2x, p2y)")
    try:
        p1x, p1y, p2x, p2y = (float(p) for p in points)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid bezier: {points}. Values must be numbers") from None
    return (p1x, p1y, p2x, p2y)


def is_unset_bezier(points: BezierPoints) -> bool:
    """An all-zero quadruple means "use the default curve"."""
    return all(p == 0.0 for p in points)


@dataclass
class HypergridConfig:
    """Tiling layout and animation configuration."""

    # Default animation
    duration: int = 300
    bezier: BezierPoints = (0.25, 0.1, 0.25, 1.0)

    # Per-type overrides (<= 0 duration or all-zero bezier falls back to default)
    duration_in: int = 0
    duration_out: int = 0
    duration_move: int = 0
    bezier_in: BezierPoints = (0.0, 0.0, 0.0, 0.0)
    bezier_out: BezierPoints = (0.0, 0.0, 0.0, 0.0)
    bezier_move: BezierPoints = (0.0, 0.0, 0.0, 0.0)

    # Pop-in starts at this fraction of full size
    popin_percent: float = 0.8

    # Layout settings
    gaps_in: int = 5
    gaps_out: int = 10
    preserve_split: bool = False
    split_width_multiplier: float = 1.0
    force_split: Union[ForceSplit, int, str] = ForceSplit.MOUSE
    smart_split: bool = False

    # Tile newly opened windows automatically
    tile_by_default: bool = True

    # Print debug messages
    debug: bool = False

    def __post_init__(self):
        """Normalize bezier quadruples and force_split."""
        self.bezier = parse_bezier(self.bezier)
        self.bezier_in = parse_bezier(self.bezier_in)
        self.bezier_out = parse_bezier(self.bezier_out)
        self.bezier_move = parse_bezier(self.bezier_move)
        self.force_split = parse_force_split(self.force_split)

    def animation_config(self, anim_type: AnimationType) -> AnimationConfig:
        """Resolve the curve and duration for an animation type."""
        if anim_type == AnimationType.WINDOW_IN:
            duration, bezier = self.duration_in, self.bezier_in
        elif anim_type == AnimationType.WINDOW_OUT:
            duration, bezier = self.duration_out, self.bezier_out
        else:
            duration, bezier = self.duration_move, self.bezier_move

        if duration <= 0:
            duration = self.duration
        if is_unset_bezier(bezier):
            bezier = self.bezier

        return AnimationConfig(
            curve=BezierCurve.from_points(bezier), duration_ms=float(duration)
        )

    def animation_settings(self) -> AnimationSettings:
        """Resolve configs for all animation types."""
        return AnimationSettings(
            move=self.animation_config(AnimationType.WINDOW_MOVE),
            window_in=self.animation_config(AnimationType.WINDOW_IN),
            window_out=self.animation_config(AnimationType.WINDOW_OUT),
        )
