from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Tuple

from models.rule import KeywordRule, RuleTable

LOGGER = logging.getLogger(__name__)


def select_best_category(text: str, rules: RuleTable, fallback_id: str) -> str:
    """Return the id of the rule with the most keyword hits in ``text``.

    Keywords match as case-insensitive substrings, so ``"art"`` also hits
    ``"article"``. A rule has to beat the running best score strictly, which
    makes the earliest rule win a tie. Blank text, an empty table or a text
    with no hits yields ``fallback_id``.
    """

    normalized = (text or "").strip().lower()
    if not normalized:
        return fallback_id

    best_id = fallback_id
    best_score = 0
    for rule in rules:
        score = sum(1 for kw in rule.normalized_keywords() if kw in normalized)
        if score > best_score:
            best_id = rule.category_id
            best_score = score
    LOGGER.debug("Best category %s with score %s", best_id, best_score)
    return best_id


class RulesEngine:
    """Keyword rule table for one domain, loaded from JSON."""

    def __init__(self, rules_file: Path):
        self.rules_file = rules_file
        self._rules: Tuple[KeywordRule, ...] = ()
        self._fallback_id = ""
        self.reload()

    @property
    def rules(self) -> Tuple[KeywordRule, ...]:
        return self._rules

    @property
    def fallback_id(self) -> str:
        return self._fallback_id

    def reload(self) -> None:
        if not self.rules_file.exists():
            raise FileNotFoundError(f"Missing rules file: {self.rules_file}")
        data = json.loads(self.rules_file.read_text(encoding="utf-8"))
        fallback = data.get("fallback")
        if not fallback:
            raise ValueError(f"Rules file {self.rules_file} does not define a fallback id")
        items: Iterable[dict] = data.get("rules", [])
        try:
            rules = tuple(self._build_rule(item) for item in items)
        except KeyError as exc:
            raise ValueError(f"Rules file {self.rules_file} has a rule without {exc}") from exc
        self._rules = rules
        self._fallback_id = fallback
        LOGGER.debug("Loaded %s keyword rules from %s", len(self._rules), self.rules_file)

    def _build_rule(self, item: dict) -> KeywordRule:
        category_id = item["id"]
        keywords = item.get("keywords", [])
        if not isinstance(keywords, list) or not all(isinstance(kw, str) for kw in keywords):
            raise ValueError(f"Rules file {self.rules_file}: keywords of '{category_id}' must be a list of strings")
        return KeywordRule(category_id=category_id, keywords=tuple(keywords))

    def match(self, text: str) -> str:
        return select_best_category(text, self._rules, self._fallback_id)
