from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True, slots=True)
class KeywordRule:
    """Keyword list that votes for one preset id."""

    category_id: str
    keywords: Tuple[str, ...]

    def normalized_keywords(self) -> Tuple[str, ...]:
        return tuple(kw.lower() for kw in self.keywords if kw and kw.strip())


RuleTable = Sequence[KeywordRule]
