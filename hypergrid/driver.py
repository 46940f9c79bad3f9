"""
Animation Driver

Ticks every tile tree once per frame and reports the geometry a renderer
should apply to each window of the visible workspace.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional

from .geometry import Area

if TYPE_CHECKING:
    from .tiling import LeafNode, TileTree

MIN_TRANSFORM_SCALE = 0.1
MAX_TRANSFORM_SCALE = 10.0


@dataclass
class WindowTransform:
    """Offset, scale and opacity to draw a window placed at its goal rectangle."""

    translation_x: float = 0.0
    translation_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    alpha: float = 1.0


@dataclass
class WindowFrame:
    """Per-window animation state for one frame."""

    window: Any
    current: Area
    goal: Area
    scale: float = 1.0
    alpha: float = 1.0
    closing: bool = False
    pseudotiled: bool = False
    preferred_size: Optional[Area] = None

    def transform(self) -> WindowTransform:
        """
        Transform that makes a window sized to its goal look like current.

        The size ratio is clamped to [0.1, 10] and multiplied by the pop
        scale; the translation moves the goal center onto the current center.
        """
        scale_x = self.current.width / self.goal.width
        scale_y = self.current.height / self.goal.height
        scale_x = min(max(scale_x, MIN_TRANSFORM_SCALE), MAX_TRANSFORM_SCALE)
        scale_y = min(max(scale_y, MIN_TRANSFORM_SCALE), MAX_TRANSFORM_SCALE)

        goal_x, goal_y = self.goal.center
        current_x, current_y = self.current.center

        return WindowTransform(
            translation_x=current_x - goal_x,
            translation_y=current_y - goal_y,
            scale_x=scale_x * self.scale,
            scale_y=scale_y * self.scale,
            alpha=self.alpha,
        )

    def placement(self) -> Area:
        """Rectangle to give the window: the goal, or its preferred size centered in it."""
        if not self.pseudotiled or self.preferred_size is None:
            return self.goal

        width = min(self.preferred_size.width, self.goal.width)
        height = min(self.preferred_size.height, self.goal.height)
        return Area(
            self.goal.x + (self.goal.width - width) // 2,
            self.goal.y + (self.goal.height - height) // 2,
            width,
            height,
        )


@dataclass
class Frame:
    """Result of one animation tick."""

    windows: List[WindowFrame] = field(default_factory=list)
    animating: bool = False
    # Exact goal geometry after the last animation finished
    final: bool = False

    def get(self, window: Any) -> Optional[WindowFrame]:
        for window_frame in self.windows:
            if window_frame.window == window:
                return window_frame
        return None


class AnimationDriver:
    """
    Drives tile tree animations once per frame.

    The loop is edge-triggered: start() arms it after a structural change,
    and it disarms itself once a tick finds nothing animating.

    Publishes ANIMATION_STARTED, ANIMATION_FINISHED and FRAME_READY.
    """

    def __init__(
        self,
        get_trees_fn: Callable[[], Iterable["TileTree"]],
        get_active_tree_fn: Callable[[], Optional["TileTree"]],
    ):
        """Initialize animation driver.

        Args:
            get_trees_fn: Function returning every tile tree
            get_active_tree_fn: Function returning the visible workspace's tree
        """
        self._get_trees = get_trees_fn
        self._get_active_tree = get_active_tree_fn
        self.active = False

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Let the host drive ticks through the bus."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_frame, topics.FRAME)

    def _on_frame(self):
        """Handle FRAME event."""
        if self.active:
            self.tick()

    def start(self) -> bool:
        """
        Arm the per-frame loop.

        Returns:
            True if the loop was not running before
        """
        if self.active:
            return False

        from pubsub import pub
        from . import topics

        self.active = True
        pub.sendMessage(topics.ANIMATION_STARTED)
        return True

    def stop(self):
        """Disarm the per-frame loop."""
        if not self.active:
            return

        from pubsub import pub
        from . import topics

        self.active = False
        pub.sendMessage(topics.ANIMATION_FINISHED)

    def tick(self) -> Frame:
        """
        Advance all animations by one frame.

        Every tree is ticked so off-screen workspaces keep progressing, but
        only the active tree's windows are reported. Once nothing animates,
        the returned frame carries exact goal geometry and the loop stops.
        """
        from pubsub import pub
        from . import topics

        still_animating = False
        for tree in list(self._get_trees()):
            if tree.tick_animations():
                still_animating = True

        tree = self._get_active_tree()
        if still_animating:
            frame = Frame(self.snapshot(tree), animating=True)
        else:
            frame = self.settle(tree)
            self.stop()

        pub.sendMessage(topics.FRAME_READY, frame=frame)
        return frame

    def snapshot(self, tree: Optional["TileTree"]) -> List[WindowFrame]:
        """Current animation state of every window in tree."""
        if tree is None:
            return []

        frames = []
        leaves: List["LeafNode"] = []
        if tree.root is not None:
            leaves.extend(tree.root.leaves())

        for leaf in leaves:
            frame = self._window_frame(leaf, closing=False)
            if frame is not None:
                frames.append(frame)
        for leaf in tree.closing:
            frame = self._window_frame(leaf, closing=True)
            if frame is not None:
                frames.append(frame)
        return frames

    def settle(self, tree: Optional["TileTree"]) -> Frame:
        """Exact goal geometry for every window in tree, with no transform."""
        frame = Frame(final=True)
        if tree is None or tree.root is None:
            return frame

        for leaf in tree.root.leaves():
            goal = leaf.geometry.goal()
            if not goal.has_positive_size:
                continue
            frame.windows.append(
                WindowFrame(
                    window=leaf.window,
                    current=goal,
                    goal=goal,
                    pseudotiled=leaf.pseudotiled,
                    preferred_size=leaf.preferred_size,
                )
            )
        return frame

    @staticmethod
    def _window_frame(leaf: "LeafNode", closing: bool) -> Optional[WindowFrame]:
        goal = leaf.geometry.goal()
        # Consumers divide by the goal size
        if not goal.has_positive_size:
            return None

        return WindowFrame(
            window=leaf.window,
            current=leaf.geometry.current(),
            goal=goal,
            scale=leaf.geometry.current_scale,
            alpha=leaf.geometry.current_alpha,
            closing=closing,
            pseudotiled=leaf.pseudotiled,
            preferred_size=leaf.preferred_size,
        )
