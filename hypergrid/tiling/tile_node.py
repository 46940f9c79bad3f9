"""
Tile Nodes

Binary tree nodes for the dwindle layout. A node is either a leaf holding one
window or a split dividing its rectangle between exactly two children.
"""

from __future__ import annotations
import time
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..animation import AnimatedGeometry, AnimationSettings
from ..geometry import Area

MIN_SPLIT_RATIO = 0.1
MAX_SPLIT_RATIO = 0.9


class SplitDirection(Enum):
    """Split direction for split nodes."""

    HORIZONTAL = auto()  # Children side by side (left | right)
    VERTICAL = auto()  # Children stacked (top / bottom)

    def toggled(self) -> "SplitDirection":
        if self == SplitDirection.HORIZONTAL:
            return SplitDirection.VERTICAL
        return SplitDirection.HORIZONTAL


def direction_for_area(area: Area, split_width_multiplier: float = 1.0) -> SplitDirection:
    """Wide areas split side by side, tall (or square) areas top to bottom."""
    if area.width * split_width_multiplier > area.height:
        return SplitDirection.HORIZONTAL
    return SplitDirection.VERTICAL


class TileNode(ABC):
    """Abstract base class for tree nodes."""

    def __init__(
        self,
        settings: Optional[AnimationSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        # Non-owning: only used to walk upward
        self.parent: Optional[SplitNode] = None
        self.geometry = AnimatedGeometry(settings, clock)

    @property
    @abstractmethod
    def is_leaf(self) -> bool:
        pass

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @abstractmethod
    def children(self) -> Tuple["TileNode", ...]:
        pass

    def configure(self, settings: AnimationSettings):
        """Apply animation settings to this node and its descendants."""
        self.geometry.configure(settings)
        for child in self.children():
            child.configure(settings)

    def apply_layout(
        self,
        bounds: Area,
        gap_in: int,
        gap_out: int,
        preserve_split: bool,
        split_width_multiplier: float,
        animate: bool = True,
    ):
        """
        Assign goal geometry to this node and everything below it.

        Args:
            bounds: Rectangle this node occupies
            gap_in: Spacing between sibling tiles
            gap_out: Outer spacing (already applied to the root's bounds)
            preserve_split: Keep existing split directions
            split_width_multiplier: Width weighting for direction re-derivation
            animate: False to snap to the new geometry
        """
        self.geometry.set_goal(bounds, animate)

    def tick_animation(self) -> bool:
        """Tick this node and all descendants; True if any still animates."""
        animating = self.geometry.tick()
        for child in self.children():
            if child.tick_animation():
                animating = True
        return animating

    def is_animating(self) -> bool:
        return self.geometry.is_animating() or any(
            child.is_animating() for child in self.children()
        )

    def find_view(self, window: Any) -> Optional["LeafNode"]:
        """Find the leaf holding window."""
        for child in self.children():
            found = child.find_view(window)
            if found is not None:
                return found
        return None

    def leaves(self) -> Iterator["LeafNode"]:
        """Iterate over leaves in pre-order, first child before second."""
        for child in self.children():
            yield from child.leaves()

    def collect_views(self, out: Optional[List[Any]] = None) -> List[Any]:
        """Collect all windows in pre-order."""
        if out is None:
            out = []
        out.extend(leaf.window for leaf in self.leaves())
        return out

    def count_leaves(self) -> int:
        return sum(1 for _ in self.leaves())

    def child_index(self) -> int:
        """Index of this node in its parent (0 or 1), or -1 without a parent."""
        if self.parent is None:
            return -1
        if self.parent.child(0) is self:
            return 0
        if self.parent.child(1) is self:
            return 1
        return -1

    def sibling(self) -> Optional["TileNode"]:
        """The other child of this node's parent."""
        idx = self.child_index()
        if idx < 0:
            return None
        return self.parent.child(1 - idx)

    def ancestors(self) -> Iterator["SplitNode"]:
        """Walk up the parent chain, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


class LeafNode(TileNode):
    """A node holding exactly one window."""

    def __init__(
        self,
        window: Any,
        settings: Optional[AnimationSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(settings, clock)
        self.window = window

        # Pseudotile: window keeps its preferred size within the tile
        self.pseudotiled = False
        self.preferred_size: Optional[Area] = None

    @property
    def is_leaf(self) -> bool:
        return True

    def children(self) -> Tuple[TileNode, ...]:
        return ()

    def find_view(self, window: Any) -> Optional["LeafNode"]:
        return self if self.window == window else None

    def leaves(self) -> Iterator["LeafNode"]:
        yield self

    def __repr__(self):
        return f"LeafNode({self.window!r})"


class SplitNode(TileNode):
    """A node dividing its rectangle between exactly two children."""

    def __init__(
        self,
        direction: SplitDirection,
        first: TileNode,
        second: TileNode,
        ratio: float = 0.5,
        settings: Optional[AnimationSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(settings, clock)
        self.direction = direction
        self.split_locked = False
        self._ratio = 0.5
        self.ratio = ratio

        self._children: List[TileNode] = [first, second]
        first.parent = self
        second.parent = self

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def ratio(self) -> float:
        """Fraction of the available span given to the first child."""
        return self._ratio

    @ratio.setter
    def ratio(self, value: float):
        self._ratio = min(max(value, MIN_SPLIT_RATIO), MAX_SPLIT_RATIO)

    def children(self) -> Tuple[TileNode, ...]:
        return (self._children[0], self._children[1])

    def child(self, idx: int) -> Optional[TileNode]:
        if idx in (0, 1):
            return self._children[idx]
        return None

    def set_child(self, idx: int, node: TileNode):
        """Replace the child at idx, keeping parent links consistent."""
        if idx not in (0, 1):
            return

        old = self._children[idx]
        if old is not node and old.parent is self and old is not self._children[1 - idx]:
            old.parent = None

        self._children[idx] = node
        node.parent = self

    def swap_children(self):
        """Exchange the positions of the two children."""
        self._children.reverse()

    def partition(self, bounds: Area, gap_in: int) -> Tuple[Area, Area]:
        """Split bounds into the two child rectangles along this node's direction."""
        if self.direction == SplitDirection.HORIZONTAL:
            available = bounds.width - gap_in
            width1 = int(available * self._ratio)
            width2 = available - width1
            return (
                Area(bounds.x, bounds.y, width1, bounds.height),
                Area(bounds.x + width1 + gap_in, bounds.y, width2, bounds.height),
            )

        available = bounds.height - gap_in
        height1 = int(available * self._ratio)
        height2 = available - height1
        return (
            Area(bounds.x, bounds.y, bounds.width, height1),
            Area(bounds.x, bounds.y + height1 + gap_in, bounds.width, height2),
        )

    def apply_layout(
        self,
        bounds: Area,
        gap_in: int,
        gap_out: int,
        preserve_split: bool,
        split_width_multiplier: float,
        animate: bool = True,
    ):
        super().apply_layout(
            bounds, gap_in, gap_out, preserve_split, split_width_multiplier, animate
        )

        # Direction follows the aspect ratio unless preserved or manually toggled
        if not preserve_split and not self.split_locked:
            self.direction = direction_for_area(bounds, split_width_multiplier)

        first_bounds, second_bounds = self.partition(bounds, gap_in)
        self._children[0].apply_layout(
            first_bounds, gap_in, gap_out, preserve_split, split_width_multiplier, animate
        )
        self._children[1].apply_layout(
            second_bounds, gap_in, gap_out, preserve_split, split_width_multiplier, animate
        )

    def __repr__(self):
        return (
            f"SplitNode({self.direction.name}, {self._ratio:.2f}, "
            f"{self._children[0]!r}, {self._children[1]!r})"
        )
