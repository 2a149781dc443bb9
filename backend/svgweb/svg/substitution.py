"""SVG parameter substitution — rewrites text, fill colors and dimensions in raw markup.

No DOM is built. Every stage is a regex pass over the document string, run in a
fixed order because earlier stages change what later patterns see:

    namespace -> geometry -> dimensions -> text -> colors -> aspect ratio

Nothing here raises for malformed markup: unparsable numbers fall back to
defaults and unmatched ids are logged and skipped.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from typing import NamedTuple, Union

from svgweb.models.requests import EditRequest

logger = logging.getLogger(__name__)

Logger = Union[logging.Logger, logging.LoggerAdapter]

SVG_NAMESPACE_ATTR = 'xmlns="http://www.w3.org/2000/svg"'
ASPECT_RATIO_ATTR = 'preserveAspectRatio="xMidYMid meet"'

DEFAULT_WIDTH = "809"
DEFAULT_HEIGHT = "370"
FALLBACK_REQUESTED_WIDTH = 400.0
FALLBACK_REQUESTED_HEIGHT = 200.0
FALLBACK_ORIGINAL_WIDTH = 809.0
FALLBACK_ORIGINAL_HEIGHT = 370.0

# Lookbehind keeps stroke-width / data-height style attributes out of the match
_WIDTH_RE = re.compile(r'(?<![\w:-])width="([^"]*)"')
_HEIGHT_RE = re.compile(r'(?<![\w:-])height="([^"]*)"')
_VIEWBOX_RE = re.compile(r'viewBox="([^"]*)"')
_FILL_RE = re.compile(r'fill="[^"]*"')
_TSPAN_RE = re.compile(r"<tspan[^>]*>(.*?)</tspan>", re.DOTALL)

_PREVIEW_CHARS = 100


class Geometry(NamedTuple):
    """Width, height and viewBox as first declared in the document."""

    width: str
    height: str
    view_box: str


class ResolvedDimensions(NamedTuple):
    width: str
    height: str
    view_box: str


class TextStrategy(str, enum.Enum):
    TSPAN = "tspan"
    DIRECT = "direct"
    NESTED = "nested"


def transform(document: str, request: EditRequest, log: Logger | None = None) -> str:
    """Apply every substitution in ``request`` to ``document`` and return the new markup."""
    log = log or logger

    svg = normalize_namespace(document)
    geometry = extract_geometry(svg)

    resolved = resolve_dimensions(request.width, request.height, geometry, log)
    if resolved is not None:
        log.debug(
            "Scaling %sx%s -> %sx%s (viewBox %s)",
            geometry.width, geometry.height, resolved.width, resolved.height, resolved.view_box,
        )
        svg = apply_dimensions(svg, resolved)

    for element_id, new_text in request.text_replacements.items():
        log.info("Replacing text for element ID: %s with: %s", element_id, new_text)
        svg, strategy = substitute_text(svg, element_id, new_text, log)
        if strategy is None:
            log.warning("No pattern matched for %s", element_id)

    for element_id, new_color in request.color_replacements.items():
        svg = substitute_color(svg, element_id, new_color)

    if request.has_dimensions:
        svg = ensure_aspect_ratio(svg)

    svg = svg.strip()
    log.debug("Final SVG preview (first %d chars): %s", _PREVIEW_CHARS, svg[:_PREVIEW_CHARS])
    return svg


# ---------------------------------------------------------------------------
# Namespace / geometry
# ---------------------------------------------------------------------------

def normalize_namespace(document: str) -> str:
    """Collapse duplicated SVG namespace declarations into a single one on the root."""
    if document.count(SVG_NAMESPACE_ATTR) < 2:
        return document
    stripped = document.replace(SVG_NAMESPACE_ATTR, "")
    return _insert_root_attr(stripped, SVG_NAMESPACE_ATTR)


def extract_geometry(document: str) -> Geometry:
    width_match = _WIDTH_RE.search(document)
    height_match = _HEIGHT_RE.search(document)
    width = width_match.group(1) if width_match else DEFAULT_WIDTH
    height = height_match.group(1) if height_match else DEFAULT_HEIGHT

    vb_match = _VIEWBOX_RE.search(document)
    view_box = vb_match.group(1) if vb_match else f"0 0 {width} {height}"
    return Geometry(width, height, view_box)


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------

def resolve_dimensions(
    width: str | None,
    height: str | None,
    geometry: Geometry,
    log: Logger | None = None,
) -> ResolvedDimensions | None:
    """Work out the final width/height/viewBox, or None when no size was requested.

    With a single dimension the other one follows the original aspect ratio and
    the viewBox keeps the original coordinate space.
    """
    log = log or logger
    if not width and not height:
        return None

    if width and height:
        # Passed through unparsed, so non-numeric pairs reach the viewBox as given
        return ResolvedDimensions(width, height, f"0 0 {width} {height}")

    # Zero or unparsable originals fall back too, so the ratio is always defined
    orig_w = _parse_number(geometry.width, "original width", log) or FALLBACK_ORIGINAL_WIDTH
    orig_h = _parse_number(geometry.height, "original height", log) or FALLBACK_ORIGINAL_HEIGHT

    if width:
        width_val = _parse_number(width, "width parameter", log)
        if width_val is None:
            width_val = FALLBACK_REQUESTED_WIDTH
            width = _format_int(width_val)
        return ResolvedDimensions(width, _format_int(width_val * orig_h / orig_w), geometry.view_box)

    height_val = _parse_number(height, "height parameter", log)
    if height_val is None:
        height_val = FALLBACK_REQUESTED_HEIGHT
        height = _format_int(height_val)
    return ResolvedDimensions(_format_int(height_val * orig_w / orig_h), height, geometry.view_box)


def apply_dimensions(document: str, resolved: ResolvedDimensions) -> str:
    """Write resolved dimensions into the document.

    width/height are rewritten everywhere they occur, not only on the root tag.
    Attributes missing from the document are added to the root.
    """
    svg = document
    for pattern, name, value in (
        (_VIEWBOX_RE, "viewBox", resolved.view_box),
        (_HEIGHT_RE, "height", resolved.height),
        (_WIDTH_RE, "width", resolved.width),
    ):
        attr = f'{name}="{value}"'
        if pattern.search(svg):
            svg = pattern.sub(lambda _m, a=attr: a, svg)
        else:
            svg = _insert_root_attr(svg, attr)
    return svg


def _insert_root_attr(document: str, attr: str) -> str:
    return document.replace("<svg", f"<svg {attr}", 1)


def _parse_number(value: str, label: str, log: Logger) -> float | None:
    try:
        number = float(value.strip().removesuffix("px"))
    except ValueError as e:
        log.warning("Error parsing %s %r: %s", label, value, e)
        return None
    if not math.isfinite(number):
        log.warning("Error parsing %s %r: not a finite number", label, value)
        return None
    return number


def _format_int(value: float) -> str:
    """Round half-up and format without a decimal point."""
    return str(int(math.floor(value + 0.5)))


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def substitute_text(
    document: str,
    element_id: str,
    new_text: str,
    log: Logger | None = None,
) -> tuple[str, TextStrategy | None]:
    """Replace the rendered text of the ``<text>`` element with the given id.

    Tries the tspan-nested, direct and general patterns in turn; the first one
    whose replacement changes the document wins. Returns the new document and
    the strategy used, or the unchanged document and None.
    """
    log = log or logger
    eid = re.escape(element_id)

    tspan_re = re.compile(r'(<text id="' + eid + r'"[^>]*(?<!/)>[ \t\n\r]*<tspan[^>]*>)[^<]*(</tspan>)')
    if tspan_re.search(document):
        replaced = tspan_re.sub(lambda m: m.group(1) + new_text + m.group(2), document)
        if replaced != document:
            log.debug("Text replacement for %s succeeded with tspan pattern", element_id)
            return replaced, TextStrategy.TSPAN

    direct_re = re.compile(r'(<text id="' + eid + r'"[^>]*(?<!/)>)([^<]*)(</text>)')
    if direct_re.search(document):
        replaced = direct_re.sub(lambda m: m.group(1) + new_text + m.group(3), document)
        if replaced != document:
            log.debug("Text replacement for %s succeeded with direct pattern", element_id)
            return replaced, TextStrategy.DIRECT

    replaced = _substitute_nested(document, eid, new_text)
    if replaced is not None and replaced != document:
        log.debug("Text replacement for %s succeeded with nested pattern", element_id)
        return replaced, TextStrategy.NESTED

    return document, None


def _substitute_nested(document: str, eid: str, new_text: str) -> str | None:
    match = re.search(r'<text[^>]*id="' + eid + r'"[^>]*(?<!/)>(.*?)</text>', document, re.DOTALL)
    if match is None:
        return None

    element = match.group(0)
    inner_start = match.start(1) - match.start()
    inner_end = match.end(1) - match.start()

    tspan = _TSPAN_RE.search(match.group(1))
    if tspan is not None:
        start = inner_start + tspan.start(1)
        end = inner_start + tspan.end(1)
    else:
        start, end = inner_start, inner_end

    new_element = element[:start] + new_text + element[end:]
    return document[: match.start()] + new_element + document[match.end():]


# ---------------------------------------------------------------------------
# Colors / aspect ratio
# ---------------------------------------------------------------------------

def substitute_color(document: str, element_id: str, new_color: str) -> str:
    """Replace the fill of every tag carrying ``id="element_id"`` and a fill attribute.

    Tags without a fill attribute are left alone; no attribute is added.
    """
    pattern = re.compile(r'id="' + re.escape(element_id) + r'"[^>]*fill="[^"]*"')
    fill = f'fill="{new_color}"'
    return pattern.sub(lambda m: _FILL_RE.sub(lambda _f: fill, m.group(0)), document)


def ensure_aspect_ratio(document: str) -> str:
    if "preserveAspectRatio" in document:
        return document
    return _insert_root_attr(document, ASPECT_RATIO_ATTR)
