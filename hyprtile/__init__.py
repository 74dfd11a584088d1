"""
hyprtile

Automatic tiling of desktop windows into a binary tree per workspace and
monitor.

This package provides:
- Geometry primitives and the work-area resolver
- The tiling tree and its mutation (insert, delete, initial construction)
- The layout fitter that moves windows to their tiles with a transition
- A desktop manager that reacts to window and workspace events

Example usage:
    from hyprtile import App, TileConfig, UserPreferences

    config = TileConfig(spacing=8, inset_top=32)
    app = App(desktop, UserPreferences(config))
    ...
    app.release()

`desktop` is a host adapter implementing `hyprtile.host.Desktop` that
publishes the events in `hyprtile.topics` on the pubsub bus.
"""

__version__ = "0.1.0"

from .geometry import Rectangle, Orientation, split, contains_point, shrink

from .tree import (
    Tile,
    Container,
    Node,
    InvariantViolation,
    check_invariants,
    tiles,
    window_ids,
    is_empty,
)

from .workarea import Inset, resolve_work_area

from .host import (
    Desktop,
    WindowHandle,
    CompositorActor,
    PreferencesProvider,
    FrameType,
    WindowType,
    AnimationMode,
)

from .tiling import (
    insert,
    delete,
    exists,
    init_tree,
    LayoutFitter,
    Transition,
    eligible_windows,
)

from .config import TileConfig, UserPreferences
from .disposal import Disposer
from .desktop_manager import DesktopManager
from .app import App

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Rectangle",
    "Orientation",
    "split",
    "contains_point",
    "shrink",
    "Inset",
    "resolve_work_area",
    # Tree
    "Tile",
    "Container",
    "Node",
    "InvariantViolation",
    "check_invariants",
    "tiles",
    "window_ids",
    "is_empty",
    # Host interfaces
    "Desktop",
    "WindowHandle",
    "CompositorActor",
    "PreferencesProvider",
    "FrameType",
    "WindowType",
    "AnimationMode",
    # Tiling
    "insert",
    "delete",
    "exists",
    "init_tree",
    "LayoutFitter",
    "Transition",
    "eligible_windows",
    # Components
    "TileConfig",
    "UserPreferences",
    "Disposer",
    "DesktopManager",
    "App",
    # Event topics
    "topics",
]
