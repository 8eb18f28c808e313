from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from models.preset import Domain, InfographicStylePreset, LayoutPreset, StylePreset
from services.layout_planner import resolve_body_count
from services.preset_catalog import (
    DEFAULT_LAYOUTS,
    PresetCatalog,
    load_layout_catalog,
    load_style_catalog,
)
from services.strategies import KeywordStrategy, LayoutHeuristicStrategy, SelectionStrategy
from utils.rules_engine import RulesEngine

LOGGER = logging.getLogger(__name__)
AUTO = "auto"


@dataclass(frozen=True, slots=True)
class PresetPlan:
    """Resolved presets for one piece of content."""

    domain: Domain
    style: Union[StylePreset, InfographicStylePreset]
    style_auto: bool
    layout: Optional[LayoutPreset]
    layout_auto: bool
    body_count: int


def _is_auto(choice: Optional[str]) -> bool:
    return not choice or choice.strip().lower() == AUTO


class PresetSelector:
    """Turn content plus user choices into presets of one domain."""

    def __init__(
        self,
        domain: Domain,
        style_strategy: KeywordStrategy,
        styles: PresetCatalog,
        layouts: Optional[PresetCatalog[LayoutPreset]] = None,
        layout_strategy: Optional[SelectionStrategy] = None,
        default_layout_id: Optional[str] = None,
    ):
        self.domain = domain
        self.style_strategy = style_strategy
        self.styles = styles
        self.layouts = layouts
        self.layout_strategy = layout_strategy
        self.default_layout_id = default_layout_id

    @property
    def fallback_style_id(self) -> str:
        return self.style_strategy.fallback_id

    def auto_style_id(self, text: str) -> str:
        return self.style_strategy.select(text) or self.fallback_style_id

    def select_style(self, text: str, choice: Optional[str] = AUTO) -> Union[StylePreset, InfographicStylePreset]:
        style_id = self.auto_style_id(text) if _is_auto(choice) else choice.strip()
        style = self.styles.resolve(style_id, self.fallback_style_id)
        if style.id != style_id:
            LOGGER.warning("Style %s is not in the %s catalog, using %s", style_id, self.domain.value, style.id)
        LOGGER.info("Selected %s style %s", self.domain.value, style.id)
        return style

    def auto_layout_id(self, text: str) -> Optional[str]:
        if self.layouts is None:
            return None
        if self.layout_strategy is not None:
            selected = self.layout_strategy.select(text)
            if selected:
                return selected
        return self.default_layout_id

    def select_layout(self, text: str, choice: Optional[str] = AUTO) -> Optional[LayoutPreset]:
        if self.layouts is None:
            return None
        layout_id = self.auto_layout_id(text) if _is_auto(choice) else choice.strip()
        layout = self.layouts.resolve(layout_id, self.default_layout_id)
        if layout.id != layout_id:
            LOGGER.warning("Layout %s is not in the %s catalog, using %s", layout_id, self.domain.value, layout.id)
        return layout

    def plan(
        self,
        text: str,
        style_choice: Optional[str] = AUTO,
        layout_choice: Optional[str] = AUTO,
        body_count: Union[str, int] = AUTO,
    ) -> PresetPlan:
        return PresetPlan(
            domain=self.domain,
            style=self.select_style(text, style_choice),
            style_auto=_is_auto(style_choice),
            layout=self.select_layout(text, layout_choice),
            layout_auto=self.layouts is not None and _is_auto(layout_choice),
            body_count=resolve_body_count(body_count, text),
        )

    def validate(self) -> List[str]:
        """Report rule ids and defaults that the catalogs do not know."""

        problems: List[str] = []
        if self.fallback_style_id not in self.styles:
            problems.append(f"fallback style '{self.fallback_style_id}' is not in {self.styles.name}")
        for rule in self.style_strategy.rules:
            if rule.category_id not in self.styles:
                problems.append(f"rule '{rule.category_id}' is not in {self.styles.name}")
        if self.layouts is not None and self.default_layout_id not in self.layouts:
            problems.append(f"default layout '{self.default_layout_id}' is not in {self.layouts.name}")
        for problem in problems:
            LOGGER.warning("%s: %s", self.domain.value, problem)
        return problems


def build_selector(domain: Domain, presets_dir: Path, rules_dir: Path) -> PresetSelector:
    rules_engine = RulesEngine(rules_dir / f"{domain.value}.json")
    layouts = load_layout_catalog(presets_dir, domain)
    layout_strategy = LayoutHeuristicStrategy() if domain is Domain.SOCIAL else None
    return PresetSelector(
        domain=domain,
        style_strategy=KeywordStrategy(rules_engine),
        styles=load_style_catalog(presets_dir, domain),
        layouts=layouts,
        layout_strategy=layout_strategy,
        default_layout_id=DEFAULT_LAYOUTS.get(domain),
    )
