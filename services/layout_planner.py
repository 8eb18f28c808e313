from __future__ import annotations

import re
from typing import Tuple, Union

ALLOWED_BODY_COUNTS: Tuple[int, ...] = (1, 2, 3, 4, 6, 8, 10)
DEFAULT_BODY_COUNT = 4

_COMPARISON_CUES = re.compile(r"(vs|对比|比较|优缺点|差异)", re.IGNORECASE)
_STEP_CUES = re.compile(r"(步骤|step\s*\d|\d+\s*[\.、]\s*|流程)", re.IGNORECASE)
_LIST_CUES = re.compile(r"(top\s*\d|清单|列表|排名|工具|推荐|必备)", re.IGNORECASE)
_HEADING = re.compile(r"^#{1,6}\s+\S.+$", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")

# (minimum sections, body images), checked top-down
_SECTION_STEPS = ((8, 10), (6, 8), (4, 6), (3, 4), (2, 3))
# (maximum visible characters, body images), checked top-down
_LENGTH_STEPS = ((800, 1), (2000, 2), (4000, 3), (7000, 4), (12000, 6))


def _visible_length(text: str) -> int:
    return len(_WHITESPACE.sub("", text))


def auto_social_layout_id(text: str) -> str:
    """Pick a social-card layout from structural cues in the text."""

    normalized = (text or "").strip().lower()
    if not normalized:
        return "balanced"

    length = _visible_length(normalized)
    if _COMPARISON_CUES.search(normalized):
        return "comparison"
    if _STEP_CUES.search(normalized):
        return "flow"
    if _LIST_CUES.search(normalized):
        return "dense" if length > 1500 else "list"
    if length > 3000:
        return "dense"
    return "balanced"


def auto_body_count(text: str) -> int:
    """Suggest how many body illustrations an article needs.

    Markdown headings drive the count when there are enough sections (the
    first heading is taken as the title); otherwise the amount of visible
    text does.
    """

    stripped = (text or "").strip()
    if not stripped:
        return DEFAULT_BODY_COUNT

    sections = max(0, len(_HEADING.findall(stripped)) - 1)
    for minimum, count in _SECTION_STEPS:
        if sections >= minimum:
            return count

    length = _visible_length(stripped)
    for maximum, count in _LENGTH_STEPS:
        if length <= maximum:
            return count
    return 8


def resolve_body_count(choice: Union[str, int], text: str) -> int:
    if isinstance(choice, str):
        value = choice.strip().lower()
        if value in ("", "auto"):
            return auto_body_count(text)
        try:
            choice = int(value)
        except ValueError as exc:
            raise ValueError(f"Invalid body count '{value}'") from exc
    if isinstance(choice, bool) or choice not in ALLOWED_BODY_COUNTS:
        allowed = ", ".join(str(count) for count in ALLOWED_BODY_COUNTS)
        raise ValueError(f"Body count must be 'auto' or one of {allowed}, got {choice}")
    return choice
