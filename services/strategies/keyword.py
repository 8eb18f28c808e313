from __future__ import annotations

from typing import Optional, Tuple

from models.rule import KeywordRule
from utils.rules_engine import RulesEngine

from .base import SelectionStrategy


class KeywordStrategy(SelectionStrategy):
    """Keyword-overlap selection backed by a domain rule table."""

    def __init__(self, rules_engine: RulesEngine):
        self._rules_engine = rules_engine

    @property
    def fallback_id(self) -> str:
        return self._rules_engine.fallback_id

    @property
    def rules(self) -> Tuple[KeywordRule, ...]:
        return self._rules_engine.rules

    def select(self, text: str) -> Optional[str]:
        return self._rules_engine.match(text)
