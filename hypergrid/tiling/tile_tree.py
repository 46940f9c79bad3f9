"""
Tile Tree

Per-workspace dwindle layout tree: where new windows attach, how closing
windows collapse the tree, and layout messages.
"""

from __future__ import annotations
import time
from typing import Any, Callable, List, Optional, Tuple

from ..config import ForceSplit, HypergridConfig
from ..geometry import Area, Position
from .tile_node import (
    LeafNode,
    SplitDirection,
    SplitNode,
    TileNode,
    direction_for_area,
)

LAYOUT_MESSAGES = ("togglesplit", "swapnext", "swapprev", "pseudo")


class TileTree:
    """
    Layout tree for one workspace.

    Owns the root node (None when empty) plus copies of the layout settings.
    Windows are opaque, hashable identifiers.
    """

    def __init__(
        self,
        config: Optional[HypergridConfig] = None,
        bounds: Optional[Area] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize tile tree.

        Args:
            config: Layout and animation settings
            bounds: Workspace area before outer gaps
            clock: Function returning the current time in seconds
        """
        self.root: Optional[TileNode] = None
        self.bounds = bounds or Area(0, 0, 1920, 1080)
        self._clock = clock

        # Removed leaves still playing their pop-out
        self.closing: List[LeafNode] = []

        self.focused_window: Any = None
        self.cursor_position: Optional[Position] = None

        self.set_config(config or HypergridConfig())

    def set_config(self, config: HypergridConfig):
        """Copy settings from config and apply them to existing nodes."""
        self.gap_in = config.gaps_in
        self.gap_out = config.gaps_out
        self.preserve_split = config.preserve_split
        self.split_width_multiplier = config.split_width_multiplier
        self.force_split = ForceSplit(config.force_split)
        self.smart_split = config.smart_split
        self.popin_scale = config.popin_percent
        self.animations = config.animation_settings()

        if self.root is not None:
            self.root.configure(self.animations)
        for leaf in self.closing:
            leaf.configure(self.animations)

    def set_bounds(self, bounds: Area):
        """Set the workspace area. Call recalculate_layout() to apply it."""
        self.bounds = bounds

    def set_focused_view(self, window: Any):
        self.focused_window = window

    def set_cursor_position(self, position: Optional[Position]):
        self.cursor_position = position

    @property
    def effective_bounds(self) -> Area:
        """Workspace area minus outer gaps."""
        return self.bounds.shrink(self.gap_out)

    def _create_leaf(self, window: Any) -> LeafNode:
        return LeafNode(window, self.animations, self._clock)

    def _create_split(
        self, direction: SplitDirection, first: TileNode, second: TileNode
    ) -> SplitNode:
        return SplitNode(
            direction, first, second, settings=self.animations, clock=self._clock
        )

    def add_view(self, window: Any, animate: bool = True) -> Optional[LeafNode]:
        """
        Insert a window into the tree.

        The first window becomes the root. Later windows split the focused
        window's leaf, or the deepest second-child leaf when nothing in the
        tree is focused.

        Args:
            window: Window to insert
            animate: False to snap the rest of the layout

        Returns:
            The new leaf, or None if the window was already tiled
        """
        if self.has_view(window):
            return None

        # Reopened while its previous leaf is still fading out
        self.closing = [leaf for leaf in self.closing if leaf.window != window]

        new_leaf = self._create_leaf(window)

        if self.root is None:
            self.root = new_leaf
            new_leaf.geometry.warp(self.effective_bounds)
        else:
            target = None
            if self.focused_window is not None:
                target = self.root.find_view(self.focused_window)
            if target is None:
                target = self._find_last_leaf(self.root)
            self._insert_at_leaf(target, new_leaf)

        new_leaf.geometry.start_popin(self.popin_scale)
        self.recalculate_layout(animate)
        return new_leaf

    def remove_view(self, window: Any, animate: bool = True) -> bool:
        """
        Remove a window, collapsing its parent split.

        The sibling takes the parent's place, so exactly one split level
        disappears. The removed leaf keeps playing its pop-out from
        self.closing until it finishes.

        Returns:
            True if the window was in the tree
        """
        if self.root is None:
            return False

        node = self.root.find_view(window)
        if node is None:
            return False

        node.geometry.start_popout(self.popin_scale)
        if animate and node.geometry.is_animating():
            self.closing.append(node)

        parent = node.parent
        if parent is None:
            self.root = None
            return True

        sibling = node.sibling()
        grandparent = parent.parent
        if grandparent is None:
            self.root = sibling
            sibling.parent = None
        else:
            grandparent.set_child(parent.child_index(), sibling)
        node.parent = None

        self.recalculate_layout(animate)
        return True

    def recalculate_layout(self, animate: bool = True):
        """Assign goal geometry to every node from the current tree shape."""
        if self.root is None:
            return

        self.root.apply_layout(
            self.effective_bounds,
            self.gap_in,
            self.gap_out,
            self.preserve_split,
            self.split_width_multiplier,
            animate,
        )

    def tick_animations(self) -> bool:
        """Tick every node and closing leaf; True if anything still animates."""
        animating = False
        if self.root is not None:
            animating = self.root.tick_animation()

        still_closing = []
        for leaf in self.closing:
            if leaf.geometry.tick():
                still_closing.append(leaf)
        self.closing = still_closing

        return animating or bool(still_closing)

    def is_animating(self) -> bool:
        if self.closing:
            return True
        return self.root is not None and self.root.is_animating()

    def handle_layout_message(
        self,
        message: str,
        target_window: Any = None,
        window_geometry: Optional[Area] = None,
    ) -> bool:
        """
        Apply a layout message to the target (or focused) window's leaf.

        Messages:
        - togglesplit: flip the parent split's direction and lock it
        - swapnext / swapprev: swap the leaf with its sibling
        - pseudo: toggle pseudotiling, remembering the window's size

        Args:
            message: Message name
            target_window: Window to act on, defaults to the focused window
            window_geometry: The window's current size, used by pseudo

        Returns:
            True if the message changed the tree
        """
        if self.root is None or message not in LAYOUT_MESSAGES:
            return False

        window = target_window if target_window is not None else self.focused_window
        if window is None:
            return False

        target = self.root.find_view(window)
        if target is None:
            return False

        if message == "pseudo":
            target.pseudotiled = not target.pseudotiled
            if target.pseudotiled:
                target.preferred_size = window_geometry or target.geometry.current()
            self.recalculate_layout(True)
            return True

        parent = target.parent
        if parent is None:
            return False

        if message == "togglesplit":
            parent.direction = parent.direction.toggled()
            parent.split_locked = True
        else:
            parent.swap_children()

        self.recalculate_layout(True)
        return True

    def determine_split_direction(self, bounds: Area) -> SplitDirection:
        """
        Choose the direction for splitting bounds.

        Smart split compares the cursor's offset from the center, normalized by
        the half extents; otherwise the aspect ratio decides.
        """
        if self.smart_split and self.cursor_position is not None:
            half_width = bounds.width / 2.0
            half_height = bounds.height / 2.0
            if half_width > 0 and half_height > 0:
                center_x, center_y = bounds.center
                rel_x = abs(self.cursor_position.x - center_x) / half_width
                rel_y = abs(self.cursor_position.y - center_y) / half_height
                if rel_x > rel_y:
                    return SplitDirection.HORIZONTAL
                return SplitDirection.VERTICAL

        return direction_for_area(bounds, self.split_width_multiplier)

    def _new_window_first(self, bounds: Area, direction: SplitDirection) -> bool:
        """Whether the new window takes the first (left/top) child slot."""
        if self.force_split == ForceSplit.LEFT_TOP:
            return True
        if (
            self.force_split == ForceSplit.MOUSE
            and self.smart_split
            and self.cursor_position is not None
        ):
            center_x, center_y = bounds.center
            if direction == SplitDirection.HORIZONTAL:
                return self.cursor_position.x <= center_x
            return self.cursor_position.y <= center_y
        return False

    @staticmethod
    def _new_window_start(
        bounds: Area, direction: SplitDirection, new_first: bool
    ) -> Area:
        """The half of bounds the new window will end up in."""
        if direction == SplitDirection.HORIZONTAL:
            half_width = bounds.width // 2
            if new_first:
                return Area(bounds.x, bounds.y, half_width, bounds.height)
            return Area(bounds.x + half_width, bounds.y, half_width, bounds.height)

        half_height = bounds.height // 2
        if new_first:
            return Area(bounds.x, bounds.y, bounds.width, half_height)
        return Area(bounds.x, bounds.y + half_height, bounds.width, half_height)

    def _leaf_bounds(self, node: TileNode) -> Area:
        if node is self.root:
            return self.effective_bounds
        return node.geometry.goal()

    def _find_last_leaf(self, node: TileNode) -> LeafNode:
        """Deepest leaf reached by always taking the second child."""
        while not node.is_leaf:
            node = node.child(1)
        return node

    def _insert_at_leaf(self, existing: LeafNode, new_leaf: LeafNode):
        """Replace existing with a split holding existing and new_leaf."""
        parent = existing.parent
        idx = existing.child_index()

        bounds = self._leaf_bounds(existing)
        direction = self.determine_split_direction(bounds)
        new_first = self._new_window_first(bounds, direction)

        new_leaf.geometry.warp(self._new_window_start(bounds, direction, new_first))

        if new_first:
            split = self._create_split(direction, new_leaf, existing)
        else:
            split = self._create_split(direction, existing, new_leaf)

        if parent is None:
            self.root = split
        else:
            parent.set_child(idx, split)

    def find_leaf(self, window: Any) -> Optional[LeafNode]:
        if self.root is None:
            return None
        return self.root.find_view(window)

    def has_view(self, window: Any) -> bool:
        return self.find_leaf(window) is not None

    def get_views(self) -> List[Any]:
        """All tiled windows in pre-order."""
        if self.root is None:
            return []
        return self.root.collect_views()

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self):
        if self.root is None:
            return 0
        return self.root.count_leaves()

    def view_geometry(self, window: Any) -> Optional[Area]:
        """Current (interpolated) rectangle for a window."""
        leaf = self.find_leaf(window)
        if leaf is None:
            return None
        return leaf.geometry.current()

    def view_goal_geometry(self, window: Any) -> Optional[Area]:
        """Rectangle a window is animating toward."""
        leaf = self.find_leaf(window)
        if leaf is None:
            return None
        return leaf.geometry.goal()

    def view_scale_alpha(self, window: Any) -> Tuple[float, float]:
        """Pop-in/pop-out scale and alpha; (1.0, 1.0) for unknown windows."""
        leaf = self.find_leaf(window)
        if leaf is None:
            return (1.0, 1.0)
        return (leaf.geometry.current_scale, leaf.geometry.current_alpha)
