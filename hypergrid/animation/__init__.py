"""
Animation System

Easing curves and time-based animated values.
"""

from .bezier import BezierCurve, LINEAR
from .animation_base import AnimationType, AnimationConfig, AnimationSettings
from .animated_value import AnimatedValue
from .animated_geometry import AnimatedGeometry, DEFAULT_POP_SCALE

__all__ = [
    # Easing
    "BezierCurve",
    "LINEAR",
    # Configuration
    "AnimationType",
    "AnimationConfig",
    "AnimationSettings",
    # Animated values
    "AnimatedValue",
    "AnimatedGeometry",
    "DEFAULT_POP_SCALE",
]
