"""
Configuration

User settings for hyprtile and the preferences provider built on top of
them.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from re import Pattern
from typing import List, Optional, Union

from pubsub import pub

from . import topics
from .host import AnimationMode, PreferencesProvider
from .workarea import Inset

logger = logging.getLogger(__name__)


def compile_patterns(patterns: List[Union[str, Pattern]]) -> List[Pattern]:
    """
    Compile window title patterns.

    Accepts regular expression strings or already compiled patterns.

    Raises:
        ValueError: If a pattern is not a valid regular expression
    """
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid title pattern {pattern!r}: {e}") from e
        compiled.append(pattern)
    return compiled


@dataclass
class TileConfig:
    """Tiling configuration."""

    # Gap between windows, and between windows and the monitor edge
    spacing: int = 0

    # Space reserved on each monitor edge
    inset_top: int = 0
    inset_bottom: int = 0
    inset_left: int = 0
    inset_right: int = 0

    # Windows whose title matches one of these are never tiled
    title_blacklist: List[Union[str, Pattern]] = field(default_factory=list)

    # Transition played when a window is moved (milliseconds)
    animation_duration: int = 700
    animation_mode: AnimationMode = AnimationMode.EASE_OUT_EXPO

    def __post_init__(self):
        """Validate values and compile title patterns."""
        if self.spacing < 0:
            raise ValueError(f"Spacing must not be negative: {self.spacing}")
        if self.animation_duration < 0:
            raise ValueError(
                f"Animation duration must not be negative: {self.animation_duration}"
            )
        self.title_blacklist = compile_patterns(self.title_blacklist)

    @property
    def inset(self) -> Inset:
        return Inset(
            top=self.inset_top,
            bottom=self.inset_bottom,
            left=self.inset_left,
            right=self.inset_right,
        )


# Settings key -> TileConfig attribute
SETTING_KEYS = {
    "general-gaps-in": "spacing",
    "general-inset-top": "inset_top",
    "general-inset-bottom": "inset_bottom",
    "general-inset-left": "inset_left",
    "general-inset-right": "inset_right",
}


class UserPreferences(PreferencesProvider):
    """
    Preferences provider backed by a TileConfig.

    Changing a setting through `set` publishes SETTINGS_CHANGED with the
    settings key, which makes the App reflow every desktop.
    """

    def __init__(self, config: Optional[TileConfig] = None, bus=pub):
        self.config = config or TileConfig()
        self.bus = bus

    def get_spacing(self) -> int:
        return self.config.spacing

    def get_inset(self) -> Inset:
        return self.config.inset

    def get(self, key: str) -> int:
        """Read a setting by its settings key, e.g. for a settings UI."""
        return getattr(self.config, SETTING_KEYS[key])

    def set(self, key: str, value: int):
        """
        Change a setting by its settings key.

        Args:
            key: One of SETTING_KEYS, e.g. "general-gaps-in"
            value: New value in pixels

        Raises:
            KeyError: If the key is unknown
            ValueError: If a negative spacing is given
        """
        attribute = SETTING_KEYS[key]
        if attribute == "spacing" and value < 0:
            raise ValueError(f"Spacing must not be negative: {value}")

        setattr(self.config, attribute, value)
        logger.debug("Setting %s changed to %s", key, value)
        self.bus.sendMessage(topics.SETTINGS_CHANGED, key=key)
