from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Tuple


class Domain(str, Enum):
    """Families of generated imagery that carry their own presets."""

    ARTICLE = "article"
    INFOGRAPHIC = "infographic"
    SOCIAL = "social"


def _strings(values: Any) -> Tuple[str, ...]:
    return tuple(str(value) for value in values or ())


@dataclass(frozen=True, slots=True)
class StyleReference:
    colors: Tuple[str, ...]
    background: Tuple[str, ...]
    accents: Tuple[str, ...]
    elements: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Palette:
    primary: str
    background: str
    accent: str


@dataclass(frozen=True, slots=True)
class StylePreset:
    """Illustration style used for article images and social cards."""

    id: str
    name: str
    description: str
    best_for: str
    reference: StyleReference
    palette: Palette
    preview: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StylePreset":
        reference = data.get("reference", {})
        palette = data.get("palette", {})
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("desc", ""),
            best_for=data.get("bestFor", ""),
            reference=StyleReference(
                colors=_strings(reference.get("colors")),
                background=_strings(reference.get("background")),
                accents=_strings(reference.get("accents")),
                elements=_strings(reference.get("elements")),
            ),
            palette=Palette(
                primary=palette.get("primary", ""),
                background=palette.get("background", ""),
                accent=palette.get("accent", ""),
            ),
            preview=data.get("previewBg", ""),
        )

    def summary(self) -> Dict[str, str]:
        return {"Description": self.description, "Best for": self.best_for}


@dataclass(frozen=True, slots=True)
class InfographicStylePreset:
    """Infographic look described as prompt fragments."""

    id: str
    name: str
    tags: Tuple[str, ...]
    preview: str
    background: str
    visual_style: str
    word_style: str
    content_principle: str
    negative_space: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InfographicStylePreset":
        tags = tuple(tag.strip() for tag in data.get("tag", "").split(",") if tag.strip())
        return cls(
            id=data["id"],
            name=data["name"],
            tags=tags,
            preview=data.get("preview", ""),
            background=data.get("background", ""),
            visual_style=data.get("visual_style", ""),
            word_style=data.get("word_style", ""),
            content_principle=data.get("content_principle", ""),
            negative_space=data.get("negative_space", ""),
        )

    @property
    def description(self) -> str:
        return ", ".join(self.tags)

    def summary(self) -> Dict[str, str]:
        return {
            "Tags": self.description,
            "Background": self.background,
            "Visual style": self.visual_style,
            "Typography": self.word_style,
            "Content": self.content_principle,
            "Negative space": self.negative_space,
        }


@dataclass(frozen=True, slots=True)
class LayoutPreset:
    """Composition template for an infographic or a social card."""

    id: str
    name: str
    description: str
    best_for: str
    key_points: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LayoutPreset":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("desc", ""),
            best_for=data.get("bestFor", ""),
            key_points=_strings(data.get("keyPoints")),
        )

    def summary(self) -> Dict[str, str]:
        return {
            "Description": self.description,
            "Best for": self.best_for,
            "Key points": ", ".join(self.key_points),
        }
