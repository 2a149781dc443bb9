"""Regex scan of an SVG for the ids a caller can target with text./color. parameters."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TAG_RE = re.compile(r"<(\w+)\b[^>]*\bid=\"([^\"]+)\"[^>]*>")
_FILL_RE = re.compile(r'(?<![\w-])fill="([^"]*)"')
_TEXT_BODY_RE = re.compile(r"<text\b[^>]*\bid=\"([^\"]+)\"[^>]*>(.*?)</text>", re.DOTALL)
_MARKUP_RE = re.compile(r"<[^>]+>")

# Tags that render a fill but may not declare one
_FILLABLE_TAGS = {"rect", "path", "circle", "ellipse", "polygon", "g"}


@dataclass
class ElementInfo:
    id: str
    tag: str
    text: str = ""
    fill: str | None = None

    @property
    def fillable(self) -> bool:
        return self.fill is not None or self.tag in _FILLABLE_TAGS


def text_elements(svg_text: str) -> list[ElementInfo]:
    """``<text>`` elements with an id, in document order, with their visible text."""
    found = []
    for m in _TEXT_BODY_RE.finditer(svg_text):
        content = " ".join(_MARKUP_RE.sub(" ", m.group(2)).split())
        found.append(ElementInfo(id=m.group(1), tag="text", text=content))
    return found


def color_elements(svg_text: str) -> list[ElementInfo]:
    """Elements with an id that either carry a fill or are shapes that could."""
    found = []
    for m in _TAG_RE.finditer(svg_text):
        fill_match = _FILL_RE.search(m.group(0))
        info = ElementInfo(
            id=m.group(2),
            tag=m.group(1),
            fill=fill_match.group(1) if fill_match else None,
        )
        if info.fillable:
            found.append(info)
    return found
