"""
Host Interfaces

Abstract views on the desktop environment that hyprtile runs inside. A host
adapter implements these classes and publishes the lifecycle events listed
in `hyprtile.topics` on the event bus.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .geometry import Rectangle
    from .workarea import Inset


class FrameType(Enum):
    """Window frame type as reported by the compositor."""

    NORMAL = auto()
    DIALOG = auto()
    MODAL_DIALOG = auto()
    UTILITY = auto()
    BORDER = auto()
    ATTACHED = auto()


class WindowType(Enum):
    """Window type as reported by the compositor."""

    NORMAL = auto()
    DESKTOP = auto()
    DOCK = auto()
    DIALOG = auto()
    MODAL_DIALOG = auto()
    TOOLBAR = auto()
    MENU = auto()
    UTILITY = auto()
    SPLASHSCREEN = auto()


class AnimationMode(Enum):
    """Easing curve of a compositor transition."""

    LINEAR = auto()
    EASE_OUT_QUAD = auto()
    EASE_OUT_CUBIC = auto()
    EASE_OUT_EXPO = auto()


class CompositorActor(ABC):
    """The composited image of a window.

    Scale and translation are plain attributes; `ease` animates them from
    their current value to the given one and returns immediately.
    """

    width: int
    height: int
    scale_x: float = 1.0
    scale_y: float = 1.0
    translation_x: float = 0.0
    translation_y: float = 0.0

    @abstractmethod
    def ease(self, *, duration: int, mode: AnimationMode, **properties):
        """Start animating `properties` towards the given values."""
        pass


class WindowHandle(ABC):
    """A top-level application window."""

    id: int
    title: str
    minimized: bool
    monitor_index: int
    frame_type: FrameType
    window_type: WindowType

    @abstractmethod
    def get_frame_rect(self) -> "Rectangle":
        """Current outer frame rectangle."""
        pass

    @abstractmethod
    def get_compositor_actor(self) -> CompositorActor:
        pass

    @abstractmethod
    def unmaximize(self):
        pass

    @abstractmethod
    def move_frame(self, x: int, y: int):
        pass

    @abstractmethod
    def move_resize_frame(self, x: int, y: int, width: int, height: int):
        pass


class Desktop(ABC):
    """Workspace, monitor and pointer queries."""

    @abstractmethod
    def get_active_workspace_index(self) -> int:
        pass

    @abstractmethod
    def get_current_monitor(self) -> int:
        pass

    @abstractmethod
    def list_windows(self, workspace_index: int) -> List[WindowHandle]:
        """All windows of a workspace, on every monitor."""
        pass

    @abstractmethod
    def get_work_area(self, workspace_index: int, monitor_index: int) -> "Rectangle":
        """Work area of a monitor on a workspace, panels excluded."""
        pass

    @abstractmethod
    def get_pointer(self) -> Tuple[int, int]:
        pass


class PreferencesProvider(ABC):
    """Source of the user's tiling preferences."""

    @abstractmethod
    def get_spacing(self) -> int:
        pass

    @abstractmethod
    def get_inset(self) -> "Inset":
        pass
