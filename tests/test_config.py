"""
Unit tests for configuration and user preferences.
"""

import re

import pytest
from pubsub import pub

from hyprtile import topics
from hyprtile.config import TileConfig, UserPreferences, compile_patterns
from hyprtile.host import AnimationMode
from hyprtile.workarea import Inset


@pytest.mark.unit
class TestTileConfig:
    def test_defaults(self):
        """Default config has no spacing, no inset and the default animation."""
        config = TileConfig()

        assert config.spacing == 0
        assert config.inset == Inset(0, 0, 0, 0)
        assert config.title_blacklist == []
        assert config.animation_duration == 700
        assert config.animation_mode == AnimationMode.EASE_OUT_EXPO

    def test_patterns_compiled(self):
        """Title patterns are compiled on construction."""
        config = TileConfig(title_blacklist=[";BDHF$", re.compile("^conky")])

        assert all(isinstance(p, re.Pattern) for p in config.title_blacklist)
        assert config.title_blacklist[0].search("Desktop;BDHF")

    def test_invalid_pattern(self):
        """An invalid title pattern is rejected."""
        with pytest.raises(ValueError, match="Invalid title pattern"):
            TileConfig(title_blacklist=["("])

    def test_negative_spacing(self):
        """Negative spacing is rejected."""
        with pytest.raises(ValueError):
            TileConfig(spacing=-1)

    def test_negative_duration(self):
        """Negative animation duration is rejected."""
        with pytest.raises(ValueError):
            TileConfig(animation_duration=-10)

    def test_inset(self):
        """Inset fields are combined into an Inset."""
        config = TileConfig(inset_top=1, inset_bottom=2, inset_left=3, inset_right=4)
        assert config.inset == Inset(top=1, bottom=2, left=3, right=4)


@pytest.mark.unit
class TestUserPreferences:
    def test_getters(self):
        """Preferences expose spacing, inset and settings keys."""
        preferences = UserPreferences(TileConfig(spacing=6, inset_top=20))

        assert preferences.get_spacing() == 6
        assert preferences.get_inset() == Inset(top=20)
        assert preferences.get("general-gaps-in") == 6

    def test_set_publishes_change(self):
        """Setting a value publishes the settings key."""
        received = []

        def listener(key):
            received.append(key)

        pub.subscribe(listener, topics.SETTINGS_CHANGED)
        preferences = UserPreferences()

        preferences.set("general-inset-bottom", 30)

        assert preferences.get_inset().bottom == 30
        assert received == ["general-inset-bottom"]

    def test_unknown_key(self):
        """Unknown settings keys raise KeyError."""
        with pytest.raises(KeyError):
            UserPreferences().set("general-unknown", 1)

    def test_negative_spacing_rejected(self):
        """Negative spacing is rejected without publishing."""
        preferences = UserPreferences()
        with pytest.raises(ValueError):
            preferences.set("general-gaps-in", -4)
        assert preferences.get_spacing() == 0


@pytest.mark.unit
def test_compile_patterns_keeps_order():
    """Compiled patterns keep their order."""
    patterns = compile_patterns(["a", "b"])
    assert [p.pattern for p in patterns] == ["a", "b"]
