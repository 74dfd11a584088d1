"""
Layout Fitter

Projects a tiling tree onto rectangles and moves the windows there.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from re import Pattern
from typing import Dict, Iterable, List, TYPE_CHECKING

from ..geometry import Rectangle, shrink, split
from ..host import AnimationMode, FrameType
from ..tree import Container, InvariantViolation, Node, Tile

if TYPE_CHECKING:
    from ..host import CompositorActor, PreferencesProvider, WindowHandle

logger = logging.getLogger(__name__)


def eligible_windows(
    windows: Iterable["WindowHandle"],
    monitor_index: int,
    title_blacklist: Iterable[Pattern] = (),
) -> List["WindowHandle"]:
    """
    Filter the windows of a workspace down to the ones that are tiled.

    Minimized windows, windows on other monitors, windows without a normal
    frame and windows whose title matches a blacklist pattern are dropped.
    """
    title_blacklist = list(title_blacklist)
    return [
        window
        for window in windows
        if not (
            window.minimized
            or window.monitor_index != monitor_index
            or window.frame_type != FrameType.NORMAL
            or any(p.search(window.title or "") for p in title_blacklist)
        )
    ]


@dataclass
class Transition:
    """Actor transform that makes a moved window appear at its old place."""

    scale_x: float = 1.0
    scale_y: float = 1.0
    translation_x: float = 0.0
    translation_y: float = 0.0

    @classmethod
    def between(
        cls, old: Rectangle, new: Rectangle, actor: "CompositorActor"
    ) -> "Transition":
        """
        Compute the starting transform for a move from `old` to `new`.

        The actor can be larger than the frame (shadows, invisible borders);
        that margin is kept centered while the actor is scaled.
        """
        margin_width = actor.width - old.width
        margin_height = actor.height - old.height
        scale_x = old.width / new.width if new.width else 1.0
        scale_y = old.height / new.height if new.height else 1.0
        return cls(
            scale_x=scale_x,
            scale_y=scale_y,
            translation_x=(old.x - new.x) + (1 - scale_x) * margin_width / 2,
            translation_y=(old.y - new.y) + (1 - scale_y) * margin_height / 2,
        )

    def start(self, actor: "CompositorActor", duration: int, mode: AnimationMode):
        """Apply the transform and ease the actor back to identity.

        Returns immediately; the compositor runs the animation.
        """
        actor.scale_x = self.scale_x
        actor.scale_y = self.scale_y
        actor.translation_x = self.translation_x
        actor.translation_y = self.translation_y
        actor.ease(
            translation_x=0,
            translation_y=0,
            scale_x=1,
            scale_y=1,
            mode=mode,
            duration=duration,
        )


class LayoutFitter:
    """
    Moves and resizes windows according to a tiling tree.

    All geometry is computed on the work area expanded by the spacing (see
    `resolve_work_area`); the spacing is deducted from every cell right
    before a window is moved.
    """

    def __init__(
        self,
        preferences: "PreferencesProvider",
        animation_duration: int = 700,
        animation_mode: AnimationMode = AnimationMode.EASE_OUT_EXPO,
    ):
        self.preferences = preferences
        self.animation_duration = animation_duration
        self.animation_mode = animation_mode

    def fit(self, tree: Node, area: Rectangle, windows: Iterable["WindowHandle"]):
        """
        Place every window of a tree.

        Args:
            tree: Root of the tiling tree
            area: Resolved work area of the desktop
            windows: Live windows of the desktop

        Raises:
            InvariantViolation: If the tree contains a half-populated container
        """
        by_id = {window.id: window for window in windows}
        self._fit_node(tree, area, by_id, self.preferences.get_spacing())

    def _fit_node(
        self,
        node: Node,
        area: Rectangle,
        windows: Dict[int, "WindowHandle"],
        spacing: int,
    ):
        if isinstance(node, Container) and node.is_empty:
            return

        if isinstance(node, Tile):
            window = windows.get(node.window_id)
            if window is None:
                # Window went away between the event and this fit
                logger.warning(
                    "No live window for tile %s, skipping it", node.window_id
                )
                return
            self.place(window, shrink(area, spacing))
            return

        if isinstance(node, Container) and node.is_split:
            primary, secondary = split(area, node.orientation, node.constraint)
            self._fit_node(node.left, primary, windows, spacing)
            self._fit_node(node.right, secondary, windows, spacing)
            return

        raise InvariantViolation(f"Cannot fit {node!r}")

    def place(self, window: "WindowHandle", target: Rectangle) -> bool:
        """
        Move a window to a rectangle and animate the move.

        Returns:
            True if the window was moved, False if it already was in place
        """
        current = window.get_frame_rect()
        if current == target:
            return False

        actor = window.get_compositor_actor()
        transition = Transition.between(current, target, actor)

        window.unmaximize()
        # Some clients ignore the position of a combined move and resize, the
        # extra move makes them end up at the right place.
        window.move_frame(target.x, target.y)
        window.move_resize_frame(target.x, target.y, target.width, target.height)
        logger.debug("Moved window %s from %s to %s", window.id, current, target)

        transition.start(actor, self.animation_duration, self.animation_mode)
        return True
