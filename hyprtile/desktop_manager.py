"""
Desktop Manager

Owns one tiling tree per (workspace, monitor) pair and keeps the windows of
the active desktop tiled as they come and go.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from pubsub import pub

from . import topics
from .config import TileConfig
from .disposal import Disposer
from .geometry import Rectangle
from .host import WindowType
from .tiling import LayoutFitter, delete, eligible_windows, exists, init_tree, insert
from .tree import Node, Tile, check_invariants
from .workarea import resolve_work_area

if TYPE_CHECKING:
    from .host import Desktop, PreferencesProvider, WindowHandle

logger = logging.getLogger(__name__)

DesktopKey = Tuple[int, int]  # (workspace index, monitor index)


class DesktopManager:
    """
    Tiles the windows of every desktop.

    This component subscribes to workspace, window and grab events. It does
    not publish anything.

    Responsibilities:
    - WORKSPACE_CHANGED: Track the active desktop, build its tree on first visit
    - WINDOW_ENTERED_MONITOR / GRAB_OP_END: Insert the window where the pointer is
    - WINDOW_LEFT_MONITOR / GRAB_OP_BEGIN: Remove the window from its tree
    - Retile the active desktop after every change
    """

    def __init__(
        self,
        desktop: "Desktop",
        preferences: "PreferencesProvider",
        bus=pub,
        config: Optional[TileConfig] = None,
    ):
        """Initialize desktop manager.

        Args:
            desktop: Host workspace, monitor and pointer queries
            preferences: Source of spacing and inset
            bus: Event bus instance (Pypubsub)
            config: Title blacklist and animation settings
        """
        self.desktop = desktop
        self.preferences = preferences
        self.bus = bus
        self.config = config or TileConfig()
        self.fitter = LayoutFitter(
            preferences,
            animation_duration=self.config.animation_duration,
            animation_mode=self.config.animation_mode,
        )
        self._disposer = Disposer()

        self.active: DesktopKey = self._current_key()
        self.trees: Dict[DesktopKey, Node] = {self.active: self._init_tree()}

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to desktop events and defer the matching unsubscribes."""
        listeners = [
            (self._on_workspace_changed, topics.WORKSPACE_CHANGED),
            (self._on_window_entered, topics.WINDOW_ENTERED_MONITOR),
            (self._on_window_entered, topics.GRAB_OP_END),
            (self._on_window_left, topics.WINDOW_LEFT_MONITOR),
            (self._on_window_left, topics.GRAB_OP_BEGIN),
        ]
        for listener, topic in listeners:
            self.bus.subscribe(listener, topic)
            self._disposer.defer(
                lambda listener=listener, topic=topic: self.bus.unsubscribe(
                    listener, topic
                )
            )

    def release(self):
        """
        Unsubscribe from all events.

        Must be called before the instance is dropped; the instance must not
        be used afterwards. Calling it twice is harmless.
        """
        self._disposer.release()

    def autotile(
        self, specific: Optional[DesktopKey] = None, all_desktops: bool = False
    ):
        """
        Move the windows of a desktop to their tiles.

        Args:
            specific: Retile this (workspace, monitor) pair instead of the
                active one
            all_desktops: Retile every desktop that has a tree, e.g. after the
                spacing changed
        """
        saved = self.active
        if specific is not None:
            self.active = specific

        try:
            if all_desktops:
                for key in list(self.trees):
                    self.autotile(specific=key)
            else:
                self._autotile()
        finally:
            self.active = saved

    def _autotile(self):
        tree = self._tree()
        self.fitter.fit(tree, self._work_area(), self._live_windows())

    def _current_key(self) -> DesktopKey:
        return (
            self.desktop.get_active_workspace_index(),
            self.desktop.get_current_monitor(),
        )

    def _work_area(self) -> Rectangle:
        workspace_index, monitor_index = self.active
        return resolve_work_area(
            self.desktop.get_work_area(workspace_index, monitor_index),
            self.preferences.get_inset(),
            self.preferences.get_spacing(),
        )

    def _live_windows(self) -> List["WindowHandle"]:
        workspace_index, monitor_index = self.active
        return eligible_windows(
            self.desktop.list_windows(workspace_index),
            monitor_index,
            self.config.title_blacklist,
        )

    def _init_tree(self) -> Node:
        window_ids = [window.id for window in self._live_windows()]
        return init_tree(window_ids, self._work_area())

    def _tree(self) -> Node:
        """Tree of the active desktop, built on first use."""
        if self.active not in self.trees:
            self.trees[self.active] = self._init_tree()
            logger.debug("Created tree for desktop %s", self.active)
        return self.trees[self.active]

    def _set_tree(self, tree: Node):
        check_invariants(tree)
        self.trees[self.active] = tree

    def _on_workspace_changed(self):
        """Handle WORKSPACE_CHANGED event."""
        self.active = self._current_key()
        self._tree()

    def _on_window_entered(self, window: "WindowHandle"):
        """Handle WINDOW_ENTERED_MONITOR and GRAB_OP_END events."""
        if window.window_type != WindowType.NORMAL:
            return

        self.active = self._current_key()
        _, monitor_index = self.active
        if not eligible_windows([window], monitor_index, self.config.title_blacklist):
            logger.debug("Window %s is not tiled on desktop %s", window.id, self.active)
            return

        tree = self._tree()
        if exists(tree, window.id):
            return

        tree = insert(tree, Tile(window.id), self._work_area(), self.desktop.get_pointer())
        self._set_tree(tree)
        if not exists(tree, window.id):
            logger.debug(
                "Pointer outside of desktop %s, window %s not tiled",
                self.active,
                window.id,
            )

        self.autotile()

    def _on_window_left(self, window: "WindowHandle"):
        """Handle WINDOW_LEFT_MONITOR and GRAB_OP_BEGIN events."""
        if window.window_type != WindowType.NORMAL:
            return

        self.active = self._current_key()
        self._set_tree(delete(self._tree(), window.id))

        self.autotile()
