"""
Work-Area Resolver

Computes the rectangle a tree is laid out in from the monitor's work area,
the configured insets and the window spacing.
"""

from __future__ import annotations
from dataclasses import dataclass

from .geometry import Rectangle


@dataclass
class Inset:
    """Margin reserved on each side of a monitor."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def clamp_inset(inset: Inset, area: Rectangle) -> Inset:
    """Limit every side of an inset to half the matching dimension of an area."""
    half_height = area.height // 2
    half_width = area.width // 2
    return Inset(
        top=_clamp(inset.top, 0, half_height),
        bottom=_clamp(inset.bottom, 0, half_height),
        left=_clamp(inset.left, 0, half_width),
        right=_clamp(inset.right, 0, half_width),
    )


def resolve_work_area(monitor_area: Rectangle, inset: Inset, spacing: int) -> Rectangle:
    """
    Resolve the area used to subdivide a tree.

    The inset is removed from the monitor area, then the result is expanded
    by `spacing` on every side. Windows get `spacing` deducted again when
    they are placed, so they sit flush with the monitor edges that have no
    inset.

    Args:
        monitor_area: Work area reported for the workspace and monitor
        inset: User configured inset, clamped before use
        spacing: User configured gap between windows

    Returns:
        New rectangle; `monitor_area` is left untouched
    """
    inset = clamp_inset(inset, monitor_area)

    return Rectangle(
        x=monitor_area.x + inset.left - spacing,
        y=monitor_area.y + inset.top - spacing,
        width=monitor_area.width - (inset.left + inset.right) + spacing * 2,
        height=monitor_area.height - (inset.top + inset.bottom) + spacing * 2,
    )
