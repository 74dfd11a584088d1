"""
hyprtile Application

Top-level object a host adapter creates once the desktop is ready and
releases when tiling is turned off.
"""

from __future__ import annotations
import logging
import os
from typing import Optional, TYPE_CHECKING

from pubsub import pub

from . import topics
from .config import TileConfig, UserPreferences
from .desktop_manager import DesktopManager
from .disposal import Disposer

if TYPE_CHECKING:
    from .host import Desktop, PreferencesProvider

logger = logging.getLogger(__name__)


class App:
    """
    Wires the desktop manager to the user's settings.

    Architecture:
    1. Create components; they subscribe to the event bus themselves
    2. Reflow every desktop when a general setting changes
    3. `release` tears down the desktop manager, then the own subscriptions

    Unlike a global singleton, any number of App instances can exist; each
    must be released by whoever created it.
    """

    def __init__(
        self,
        desktop: "Desktop",
        preferences: Optional["PreferencesProvider"] = None,
        bus=pub,
        config: Optional[TileConfig] = None,
    ):
        """Initialize the app.

        Args:
            desktop: Host workspace, monitor and pointer queries
            preferences: Source of spacing and inset, a UserPreferences over
                `config` if omitted
            bus: Event bus instance (Pypubsub)
            config: Tiling configuration
        """
        if config is None:
            config = getattr(preferences, "config", None) or TileConfig()
        self.config = config
        self.preferences = preferences or UserPreferences(config, bus=bus)
        self.bus = bus
        self._disposer = Disposer()

        self.desktop_manager = DesktopManager(
            desktop, self.preferences, bus=bus, config=config
        )
        self._disposer.defer(self.desktop_manager.release)

        # Setup debug event logging if enabled
        if os.getenv("HYPRTILE_DEBUG"):
            self.bus.subscribe(self.debug_event_logger, self.bus.ALL_TOPICS)
            self._disposer.defer(
                lambda: self.bus.unsubscribe(
                    self.debug_event_logger, self.bus.ALL_TOPICS
                )
            )

        self.bus.subscribe(self._on_settings_changed, topics.SETTINGS_CHANGED)
        self._disposer.defer(
            lambda: self.bus.unsubscribe(
                self._on_settings_changed, topics.SETTINGS_CHANGED
            )
        )

    def release(self):
        """Release all resources. The instance must not be used afterwards."""
        self._disposer.release()

    def autotile(self, specific=None, all_desktops: bool = False):
        """Retile a desktop; see DesktopManager.autotile."""
        self.desktop_manager.autotile(specific=specific, all_desktops=all_desktops)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        logger.debug("EVENT: %s | %s", topic.getName(), data_str)

    def _on_settings_changed(self, key: str):
        """Handle SETTINGS_CHANGED event."""
        if key.startswith("general-"):
            self.desktop_manager.autotile(all_desktops=True)
