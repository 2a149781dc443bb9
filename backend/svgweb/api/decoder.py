"""Query string -> EditRequest."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from svgweb.errors import InvalidRequestEncoding
from svgweb.models.requests import EditRequest

logger = logging.getLogger(__name__)

TEXT_PREFIX = "text."
COLOR_PREFIX = "color."
URL_TEXT_ID = "text-url"

_FORBIDDEN_CHARS = ('"', "<", ">")


def decode_edit_request(query: Iterable[tuple[str, str]]) -> EditRequest:
    """Build an EditRequest from (key, value) query pairs.

    Recognised keys: ``width``, ``height``, ``text.<id>``, ``color.<id>`` and
    ``url`` (HTML-escaped, shown in the ``text-url`` element). The first value
    given for a key wins; unknown keys are ignored. Values bound for attributes
    (width, height, colors) may not contain quotes or angle brackets.
    """
    width: str | None = None
    height: str | None = None
    url: str | None = None
    texts: dict[str, str] = {}
    colors: dict[str, str] = {}

    for key, value in query:
        if key == "width":
            width = width or _attribute_value(key, value) or None
        elif key == "height":
            height = height or _attribute_value(key, value) or None
        elif key == "url":
            url = url or value or None
        elif key.startswith(TEXT_PREFIX):
            texts.setdefault(_element_id(key, TEXT_PREFIX), value)
        elif key.startswith(COLOR_PREFIX):
            colors.setdefault(_element_id(key, COLOR_PREFIX), _attribute_value(key, value))

    if url:
        texts[URL_TEXT_ID] = escape_url(url)

    return EditRequest(
        width=width,
        height=height,
        text_replacements=texts,
        color_replacements=colors,
    )


def escape_url(url: str) -> str:
    """HTML-escape a URL for insertion as SVG text."""
    return (
        url.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _element_id(key: str, prefix: str) -> str:
    element_id = key[len(prefix):]
    if not element_id:
        raise InvalidRequestEncoding(f"missing element id in parameter {key!r}")
    if any(ch in element_id for ch in _FORBIDDEN_CHARS):
        raise InvalidRequestEncoding(f"invalid element id in parameter {key!r}")
    return element_id


def _attribute_value(key: str, value: str) -> str:
    # Written verbatim into an attribute; a quote or bracket would end it
    if any(ch in value for ch in _FORBIDDEN_CHARS):
        raise InvalidRequestEncoding(f"invalid value in parameter {key!r}")
    return value
