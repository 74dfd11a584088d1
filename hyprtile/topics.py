"""
Event Topics for hyprtile

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Host adapters publish the desktop events; hyprtile components subscribe to
them and never publish desktop events themselves.
"""

# Workspace events
WORKSPACE_CHANGED = "workspace.changed"
"""Published when the active workspace changes. No parameters."""

# Window lifecycle events
WINDOW_ENTERED_MONITOR = "window.entered_monitor"
"""Published once a window is shown on a monitor. Params: window"""

WINDOW_LEFT_MONITOR = "window.left_monitor"
"""Published when a window leaves a monitor. Params: window"""

# Grab operation events (interactive move/resize by the user)
GRAB_OP_BEGIN = "grab.begin"
"""Published when the user starts dragging a window. Params: window"""

GRAB_OP_END = "grab.end"
"""Published when the user releases a dragged window. Params: window"""

# Settings events
SETTINGS_CHANGED = "settings.changed"
"""Published when a user setting changes. Params: key"""
