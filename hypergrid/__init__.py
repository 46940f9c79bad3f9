"""
hypergrid

Animated dwindle tiling layout: a binary split tree per workspace whose
windows ease smoothly toward their tiles.

This package provides:
- Cubic bezier easing and time-based animated values
- Animated window geometry with pop-in/pop-out scale and opacity
- The binary split tree and its insertion, removal and split policies
- A per-frame animation driver reporting geometry for a renderer
- Event-bus glue mapping workspaces to trees

Example usage:
    from pubsub import pub
    from hypergrid import TileManager, HypergridConfig, Area, topics

    manager = TileManager(bus=pub, config=HypergridConfig(gaps_out=10))
    pub.sendMessage(topics.BOUNDS_CHANGED, area=Area(0, 0, 2560, 1440))
    pub.sendMessage(topics.WINDOW_OPENED, window="terminal")

    # Once per rendered frame while manager.driver.active:
    frame = manager.driver.tick()
    for window_frame in frame.windows:
        transform = window_frame.transform()
"""

__version__ = "0.1.0"

from .geometry import Area, Position

from .animation import (
    BezierCurve,
    AnimationType,
    AnimationConfig,
    AnimationSettings,
    AnimatedValue,
    AnimatedGeometry,
)

from .config import HypergridConfig, ForceSplit

from .tiling import (
    TileNode,
    LeafNode,
    SplitNode,
    SplitDirection,
    TileTree,
)

from .driver import AnimationDriver, Frame, WindowFrame, WindowTransform

from .manager import TileManager

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "Position",
    # Animation
    "BezierCurve",
    "AnimationType",
    "AnimationConfig",
    "AnimationSettings",
    "AnimatedValue",
    "AnimatedGeometry",
    # Configuration
    "HypergridConfig",
    "ForceSplit",
    # Tiling
    "TileNode",
    "LeafNode",
    "SplitNode",
    "SplitDirection",
    "TileTree",
    # Driver
    "AnimationDriver",
    "Frame",
    "WindowFrame",
    "WindowTransform",
    # Manager
    "TileManager",
    # Event topics
    "topics",
]
