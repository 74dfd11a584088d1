"""
Geometry Primitives

Rectangles and the axis-aligned split arithmetic shared by tree insertion
and layout fitting.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


@dataclass
class Rectangle:
    """Axis-aligned rectangle in pixels, top-left origin."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        """Size in square pixels, for host adapters and diagnostics."""
        return self.width * self.height

    def copy(self) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width, self.height)


class Orientation(Enum):
    """Split orientation of a container."""

    HORIZONTAL = auto()  # Children stacked top-to-bottom
    VERTICAL = auto()  # Children arranged left-to-right

    @classmethod
    def for_area(cls, area: Rectangle) -> "Orientation":
        """Pick the orientation that splits the longer side of an area."""
        if area.height > area.width:
            return cls.HORIZONTAL
        return cls.VERTICAL


def split(
    area: Rectangle,
    orientation: Orientation,
    constraint: Optional[int] = None,
) -> Tuple[Rectangle, Rectangle]:
    """
    Split an area into a primary and a secondary rectangle.

    Args:
        area: Rectangle to divide
        orientation: HORIZONTAL divides the height, VERTICAL the width
        constraint: Fixed size of the primary part along the split axis,
            None for an even split

    Returns:
        (primary, secondary) tuple; primary is the top or left part
    """
    primary = area.copy()
    secondary = area.copy()

    if orientation == Orientation.HORIZONTAL:
        size = constraint if constraint is not None else area.height // 2
        primary.height = size
        secondary.height = area.height - size
        secondary.y = area.y + size
    else:
        size = constraint if constraint is not None else area.width // 2
        primary.width = size
        secondary.width = area.width - size
        secondary.x = area.x + size

    return primary, secondary


def contains_point(area: Rectangle, x: int, y: int) -> bool:
    """Check whether a point lies inside an area, edges included."""
    return (
        area.x <= x <= area.x + area.width
        and area.y <= y <= area.y + area.height
    )


def shrink(area: Rectangle, amount: int) -> Rectangle:
    """Deduct `amount` pixels on every side of an area."""
    return Rectangle(
        area.x + amount,
        area.y + amount,
        area.width - 2 * amount,
        area.height - 2 * amount,
    )
