from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar

from models.preset import Domain, InfographicStylePreset, LayoutPreset, StylePreset

LOGGER = logging.getLogger(__name__)

PresetT = TypeVar("PresetT", StylePreset, InfographicStylePreset, LayoutPreset)

STYLE_FILES: Dict[Domain, str] = {
    Domain.ARTICLE: "article_styles.json",
    Domain.INFOGRAPHIC: "infographic_styles.json",
    Domain.SOCIAL: "social_styles.json",
}
LAYOUT_FILES: Dict[Domain, str] = {
    Domain.INFOGRAPHIC: "infographic_layouts.json",
    Domain.SOCIAL: "social_layouts.json",
}
DEFAULT_LAYOUTS: Dict[Domain, str] = {
    Domain.INFOGRAPHIC: "bento-grid",
    Domain.SOCIAL: "balanced",
}


class PresetCatalog(Generic[PresetT]):
    """Ordered, read-only collection of presets keyed by id."""

    def __init__(self, name: str, presets: List[PresetT]):
        if not presets:
            raise ValueError(f"Preset catalog '{name}' is empty")
        self.name = name
        self._presets: Tuple[PresetT, ...] = tuple(presets)
        self._by_id: Dict[str, PresetT] = {}
        for preset in self._presets:
            if preset.id in self._by_id:
                raise ValueError(f"Duplicate preset id '{preset.id}' in catalog '{name}'")
            self._by_id[preset.id] = preset

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._by_id

    def __iter__(self) -> Iterator[PresetT]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)

    def ids(self) -> List[str]:
        return [preset.id for preset in self._presets]

    def find(self, preset_id: Optional[str]) -> Optional[PresetT]:
        if not preset_id:
            return None
        return self._by_id.get(preset_id)

    def get(self, preset_id: str) -> PresetT:
        preset = self.find(preset_id)
        if preset is None:
            available = ", ".join(self.ids())
            raise KeyError(f"Unknown preset '{preset_id}' in {self.name}. Available presets: {available}")
        return preset

    def resolve(self, preset_id: Optional[str], default_id: Optional[str] = None) -> PresetT:
        """Return ``preset_id``, else ``default_id``, else the first preset."""

        preset = self.find(preset_id)
        if preset is not None:
            return preset
        LOGGER.debug("Preset %s not in %s, falling back to %s", preset_id, self.name, default_id)
        return self.find(default_id) or self._presets[0]


def _load_json(path: Path, key: str) -> List[Mapping[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Missing preset file: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    items = data.get(key)
    if not isinstance(items, list):
        raise ValueError(f"Preset file {path} has no '{key}' list")
    return items


def _build(name: str, path: Path, key: str, factory: Callable[[Mapping[str, Any]], PresetT]) -> PresetCatalog[PresetT]:
    items = _load_json(path, key)
    try:
        presets = [factory(item) for item in items]
    except KeyError as exc:
        raise ValueError(f"Preset file {path} has an entry without {exc}") from exc
    LOGGER.debug("Loaded %s presets from %s", len(presets), path)
    return PresetCatalog(name, presets)


def load_style_catalog(presets_dir: Path, domain: Domain) -> PresetCatalog:
    factory = InfographicStylePreset.from_dict if domain is Domain.INFOGRAPHIC else StylePreset.from_dict
    return _build(f"{domain.value} styles", presets_dir / STYLE_FILES[domain], "styles", factory)


def load_layout_catalog(presets_dir: Path, domain: Domain) -> Optional[PresetCatalog[LayoutPreset]]:
    filename = LAYOUT_FILES.get(domain)
    if filename is None:
        return None
    return _build(f"{domain.value} layouts", presets_dir / filename, "layouts", LayoutPreset.from_dict)
