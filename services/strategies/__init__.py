"""Preset selection strategies used by the selector."""

from .base import SelectionStrategy
from .keyword import KeywordStrategy
from .layout_heuristic import LayoutHeuristicStrategy

__all__ = [
    "SelectionStrategy",
    "KeywordStrategy",
    "LayoutHeuristicStrategy",
]
