"""
Event Topics for hypergrid

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Arguments listed as optional may be omitted; all others are required.
"""

# Window lifecycle events
WINDOW_OPENED = "window.opened"
"""Published when a window appears.
Params: window, focus (optional: window to split instead of the current focus)"""

WINDOW_CLOSED = "window.closed"
"""Published when a window disappears. Params: window"""

# Focus and pointer state
FOCUS_CHANGED = "focus.changed"
"""Published when window focus changes. Params: window (or None)"""

POINTER_MOVED = "pointer.moved"
"""Published when the cursor moves. Params: position (Position)"""

# Output events
BOUNDS_CHANGED = "output.bounds_changed"
"""Published when the usable workspace area changes. Params: area (Area)"""

# Workspace events
WORKSPACE_SWITCHED = "workspace.switched"
"""Published when switching the visible workspace. Params: workspace"""

# Command events (imperative - tell components to do something)
CMD_LAYOUT_MESSAGE = "cmd.layout_message"
"""Command: Apply a layout message (togglesplit, swapnext, swapprev, pseudo).
Params: message, window (optional: target window, defaults to the focused window)"""

# Render loop
FRAME = "render.frame"
"""Published by the host once per rendered frame while animations run."""

FRAME_READY = "render.frame_ready"
"""Published after each animation tick. Params: frame (Frame)"""

ANIMATION_STARTED = "animation.started"
"""Published when the per-frame animation loop is armed."""

ANIMATION_FINISHED = "animation.finished"
"""Published when no animation is running anymore and the loop stops."""
