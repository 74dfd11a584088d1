"""
Tiling Engine

Tree mutation and layout fitting.
"""

from .mutator import insert, delete, exists, init_tree
from .fitter import LayoutFitter, Transition, eligible_windows

__all__ = [
    # Tree mutation
    "insert",
    "delete",
    "exists",
    "init_tree",
    # Layout fitting
    "LayoutFitter",
    "Transition",
    "eligible_windows",
]
