"""
Tile Manager

Maps workspaces to tile trees and feeds window, focus, pointer and bounds
events into them.
"""

from __future__ import annotations
import os
import time
from typing import Any, Callable, Dict, Hashable, Optional

from pubsub import pub

from . import topics
from .config import HypergridConfig
from .driver import AnimationDriver, Frame
from .geometry import Area, Position
from .tiling import TileTree


class TileManager:
    """
    Manages one tile tree per workspace.

    This component subscribes to window lifecycle, focus, pointer, bounds,
    workspace and layout command events. Its AnimationDriver publishes the
    resulting frames.

    Responsibilities:
    - Create a tree per workspace on first use
    - Tile new windows on the active workspace, untile closed windows
    - Keep focus, cursor and bounds in sync with every tree
    - CMD_LAYOUT_MESSAGE: togglesplit, swapnext, swapprev, pseudo
    - Re-arm the animation loop after every structural change
    """

    def __init__(
        self,
        bus,
        config: Optional[HypergridConfig] = None,
        bounds: Optional[Area] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize tile manager.

        Args:
            bus: Event bus instance (Pypubsub)
            config: Layout and animation settings
            bounds: Initial workspace area
            clock: Function returning the current time in seconds
        """
        self.bus = bus
        self.config = config or HypergridConfig()
        self.bounds = bounds or Area(0, 0, 1920, 1080)
        self._clock = clock

        self.trees: Dict[Hashable, TileTree] = {}
        self.window_workspace: Dict[Any, Hashable] = {}  # window -> workspace id
        self.active_workspace: Hashable = 1

        self.focused_window: Any = None
        self.cursor_position: Optional[Position] = None

        self.driver = AnimationDriver(
            get_trees_fn=lambda: self.trees.values(),
            get_active_tree_fn=self.get_active_tree,
        )

        # Setup debug event logging if enabled
        if os.getenv("HYPERGRID_DEBUG"):
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self._setup_subscriptions()

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def _debug(self, message: str):
        if self.config.debug:
            print(f"DEBUG: {message}")

    def _setup_subscriptions(self):
        """Subscribe to events TileManager cares about."""
        # Notification events
        pub.subscribe(self._on_window_opened, topics.WINDOW_OPENED)
        pub.subscribe(self._on_window_closed, topics.WINDOW_CLOSED)
        pub.subscribe(self._on_focus_changed, topics.FOCUS_CHANGED)
        pub.subscribe(self._on_pointer_moved, topics.POINTER_MOVED)
        pub.subscribe(self._on_bounds_changed, topics.BOUNDS_CHANGED)
        pub.subscribe(self._on_workspace_switched, topics.WORKSPACE_SWITCHED)

        # Layout command events
        pub.subscribe(self._on_layout_message, topics.CMD_LAYOUT_MESSAGE)

    def get_tree(self, workspace: Hashable) -> TileTree:
        """Get or create the tree for a workspace."""
        tree = self.trees.get(workspace)
        if tree is None:
            tree = TileTree(self.config, self.bounds, clock=self._clock)
            tree.set_cursor_position(self.cursor_position)
            self.trees[workspace] = tree
            self._debug(f"Created tree for workspace {workspace}")
        return tree

    def get_active_tree(self) -> Optional[TileTree]:
        return self.trees.get(self.active_workspace)

    def get_window_tree(self, window: Any) -> Optional[TileTree]:
        """Get the tree containing a window."""
        workspace = self.window_workspace.get(window)
        if workspace is None:
            return None
        return self.trees.get(workspace)

    def tile_window(self, window: Any, workspace: Optional[Hashable] = None) -> bool:
        """
        Add a window to a workspace's tree.

        The window splits the tree's focused window and then becomes focused.

        Returns:
            True if the window was added
        """
        if window in self.window_workspace:
            return False

        if workspace is None:
            workspace = self.active_workspace
        tree = self.get_tree(workspace)

        if tree.add_view(window) is None:
            return False

        tree.set_focused_view(window)
        self.window_workspace[window] = workspace
        self._debug(f"Tiled window {window} on workspace {workspace}")
        self.driver.start()
        return True

    def untile_window(self, window: Any) -> bool:
        """Remove a window from its tree."""
        workspace = self.window_workspace.pop(window, None)
        if workspace is None:
            return False

        tree = self.trees.get(workspace)
        if tree is None:
            return False

        tree.remove_view(window)
        if tree.focused_window == window:
            tree.set_focused_view(None)
        if self.focused_window == window:
            self.focused_window = None

        self._debug(f"Untiled window {window} from workspace {workspace}")
        self.driver.start()
        return True

    def set_bounds(self, area: Area):
        """Apply a new workspace area to every tree."""
        self.bounds = area
        for tree in self.trees.values():
            tree.set_bounds(area)
            tree.recalculate_layout(True)
        self.driver.start()

    def set_focused_window(self, window: Any):
        """Track focus; the focused window's tree splits it on the next insert."""
        self.focused_window = window
        tree = self.get_window_tree(window)
        if tree is not None:
            tree.set_focused_view(window)

    def set_cursor_position(self, position: Optional[Position]):
        self.cursor_position = position
        for tree in self.trees.values():
            tree.set_cursor_position(position)

    def switch_workspace(self, workspace: Hashable) -> Frame:
        """
        Make a workspace visible.

        Returns:
            Final frame with exact goal geometry for the new workspace
        """
        self.active_workspace = workspace
        frame = self.driver.settle(self.get_active_tree())
        pub.sendMessage(topics.FRAME_READY, frame=frame)
        return frame

    def layout_message(
        self,
        message: str,
        window: Any = None,
        window_geometry: Optional[Area] = None,
    ) -> bool:
        """Apply a layout message to window (or the focused window)."""
        target = window if window is not None else self.focused_window
        tree = self.get_window_tree(target) if target is not None else None
        if tree is None:
            tree = self.get_active_tree()
        if tree is None:
            return False

        handled = tree.handle_layout_message(message, target, window_geometry)
        if handled:
            self._debug(f"Layout message {message} applied to {target}")
            self.driver.start()
        return handled

    def update_config(self, config: HypergridConfig):
        """Apply new settings to every tree and relayout."""
        self.config = config
        for tree in self.trees.values():
            tree.set_config(config)
            tree.recalculate_layout(True)
        self.driver.start()

    # Event handlers
    def _on_window_opened(self, window, focus=None):
        """Handle WINDOW_OPENED event."""
        if not self.config.tile_by_default:
            return
        if focus is not None:
            self.set_focused_window(focus)
        self.tile_window(window)

    def _on_window_closed(self, window):
        """Handle WINDOW_CLOSED event."""
        self.untile_window(window)

    def _on_focus_changed(self, window):
        """Handle FOCUS_CHANGED event."""
        self.set_focused_window(window)

    def _on_pointer_moved(self, position):
        """Handle POINTER_MOVED event."""
        self.set_cursor_position(position)

    def _on_bounds_changed(self, area):
        """Handle BOUNDS_CHANGED event."""
        self.set_bounds(area)

    def _on_workspace_switched(self, workspace):
        """Handle WORKSPACE_SWITCHED event."""
        self.switch_workspace(workspace)

    def _on_layout_message(self, message, window=None):
        """Handle CMD_LAYOUT_MESSAGE command."""
        self.layout_message(message, window)
