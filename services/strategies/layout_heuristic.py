from __future__ import annotations

from typing import Callable, Optional

from services.layout_planner import auto_social_layout_id

from .base import SelectionStrategy


class LayoutHeuristicStrategy(SelectionStrategy):
    """Structural-cue layout selection (comparisons, steps, lists)."""

    def __init__(self, heuristic: Callable[[str], str] = auto_social_layout_id):
        self._heuristic = heuristic

    def select(self, text: str) -> Optional[str]:
        return self._heuristic(text)
