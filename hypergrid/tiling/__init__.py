"""
Tiling System

Binary split tree and per-workspace dwindle layout.
"""

from .tile_node import (
    TileNode,
    LeafNode,
    SplitNode,
    SplitDirection,
    direction_for_area,
    MIN_SPLIT_RATIO,
    MAX_SPLIT_RATIO,
)
from .tile_tree import TileTree, LAYOUT_MESSAGES

__all__ = [
    # Nodes
    "TileNode",
    "LeafNode",
    "SplitNode",
    "SplitDirection",
    "direction_for_area",
    "MIN_SPLIT_RATIO",
    "MAX_SPLIT_RATIO",
    # Tree
    "TileTree",
    "LAYOUT_MESSAGES",
]
